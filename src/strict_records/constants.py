"""Constants shared across strict_records."""

# Relation hops the field-path generator follows when no depth is configured
DEFAULT_MAX_DEPTH = 2

# Segment that selects every direct attribute of a record type
WILDCARD = "*"

PATH_SEPARATOR = "."
