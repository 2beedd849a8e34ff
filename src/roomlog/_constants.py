"""Internal constants shared across the library."""

# Shared bound for the room registry, the entry store and every room index.
DEFAULT_CAPACITY = 64

# Longest accepted room name, in bytes of its UTF-8 encoding.
DEFAULT_MAX_NAME_LENGTH = 31

# ------------------------------------------------------------------
# Report layout
# ------------------------------------------------------------------

ROOM_COLUMN_WIDTH = 15
TIMESTAMP_COLUMN_WIDTH = 10
TYPE_COLUMN_WIDTH = 10

TABLE_HEADER = (
    f"{'ROOM':<{ROOM_COLUMN_WIDTH}} {'TIMESTAMP':>{TIMESTAMP_COLUMN_WIDTH}}  {'TYPE':<{TYPE_COLUMN_WIDTH}}  VALUE"
)
TABLE_RULE = "--------------- ----------  ----------  ---------------"
NO_ENTRIES = "  (No entries)"
NO_ROOMS = "  (No rooms)"
