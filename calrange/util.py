"""Utility constants for calrange.

Interval patterns contain the placeholders `{0}` (start) and `{1}` (end);
infinite boundaries are written with the glyphs below.
"""

START_PLACEHOLDER = "{0}"
END_PLACEHOLDER = "{1}"

# Used when neither the caller nor the point format supplies a pattern
DEFAULT_INTERVAL_PATTERN = "{0}/{1}"

# Separates alternatives in an or-pattern such as "{0}/{1}|{0} - {1}"
OR_SEPARATOR = "|"

INFINITE_PAST_GLYPH = "-∞"
INFINITE_FUTURE_GLYPH = "+∞"
