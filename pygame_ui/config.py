"""Configuration constants for the PyGame table UI."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Colors:
    """Color palette for the table."""

    # Felt and background
    FELT_GREEN: Tuple[int, int, int] = (10, 90, 40)

    # Card colors
    CARD_WHITE: Tuple[int, int, int] = (245, 243, 238)
    CARD_RED: Tuple[int, int, int] = (192, 57, 57)
    CARD_BLACK: Tuple[int, int, int] = (28, 28, 32)
    CARD_BACK: Tuple[int, int, int] = (30, 30, 120)
    CARD_BACK_PATTERN: Tuple[int, int, int] = (85, 105, 150)

    # UI accents
    GOLD: Tuple[int, int, int] = (255, 200, 87)

    # Text
    TEXT_WHITE: Tuple[int, int, int] = (240, 240, 240)
    TEXT_MUTED: Tuple[int, int, int] = (190, 190, 200)


@dataclass(frozen=True)
class Dimensions:
    """Dimension constants for layout and sizing."""

    # Screen
    SCREEN_WIDTH: int = 1280
    SCREEN_HEIGHT: int = 720
    TARGET_FPS: int = 60

    # Cards
    CARD_WIDTH: int = 80
    CARD_HEIGHT: int = 120
    CARD_CORNER_RADIUS: int = 10
    CARD_GAP: int = 24

    # Layout
    HUD_X: int = 20
    HUD_Y: int = 20
    HUD_LINE_HEIGHT: int = 28
    HAND_X: int = 100
    DEALER_LABEL_Y: int = 170
    DEALER_HAND_Y: int = 200
    PLAYER_LABEL_Y: int = 380
    PLAYER_HAND_Y: int = 410
    OUTCOME_Y: int = 580

    # Fonts
    HUD_FONT_SIZE: int = 28
    LABEL_FONT_SIZE: int = 26
    RANK_FONT_SIZE: int = 32
    BIG_FONT_SIZE: int = 48


# Global instances for easy import
COLORS = Colors()
DIMENSIONS = Dimensions()
