"""Board dimensions shared by the engine modules."""

PLAYABLE_WIDTH = 10
PLAYABLE_HEIGHT = 20

SENTINEL_MARGIN_TOP = 2
SENTINEL_MARGIN_BOTTOM = 2
SENTINEL_MARGIN_LEFT = 2
SENTINEL_MARGIN_RIGHT = 2

TOTAL_WIDTH = PLAYABLE_WIDTH + SENTINEL_MARGIN_LEFT + SENTINEL_MARGIN_RIGHT
TOTAL_HEIGHT = PLAYABLE_HEIGHT + SENTINEL_MARGIN_TOP + SENTINEL_MARGIN_BOTTOM