GRID_ROWS = 5
GRID_COLS = 6
CATS_PER_COLOR = 5  # matches GRID_ROWS so a finished stack fills a column
RESERVED_COLUMNS = 2  # columns left empty at deal time for maneuvering
GENERATION_RETRY_CAP = 100
MAX_RUN_LENGTH = 2  # longest same-color run allowed in a freshly dealt column

# Palette order drives supply construction; colors are display RGB only.
CAT_COLORS = {
    'white': (236, 236, 228),
    'black': (46, 46, 52),
    'brown': (139, 94, 60),
    'gray':  (150, 150, 158),
}
UNKNOWN_CAT_COLOR = (200, 60, 200)

TILE_SIZE = 72
BOTTOM_MARGIN = 40
TOP_MARGIN = 80  # room for the message line above the board

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.80
BOARD_MAX_HEIGHT_PCT = 0.80

# Seconds a "Cat X is complete!" message stays up before it is dropped.
CLEAR_MESSAGE_SECONDS = 1.0
