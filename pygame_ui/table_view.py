"""Renders the table: HUD, hands and the round outcome."""

import pygame

from blackjack.cards import Card
from blackjack.game import Phase
from blackjack.hand import Hand
from pygame_ui.config import COLORS, DIMENSIONS
from pygame_ui.core.table_director import TableDirector

KEY_HELP = "Keys: N=new/next  H=hit  S=stand  D=double  +/- bet  P=pause  R=restart"


class TableView:
    """Draws the current table state onto a surface.

    Requires ``pygame.font`` to be initialized.
    """

    def __init__(self):
        self._hud = pygame.font.Font(None, DIMENSIONS.HUD_FONT_SIZE)
        self._label = pygame.font.Font(None, DIMENSIONS.LABEL_FONT_SIZE)
        self._rank = pygame.font.Font(None, DIMENSIONS.RANK_FONT_SIZE)
        self._big = pygame.font.Font(None, DIMENSIONS.BIG_FONT_SIZE)

    def draw(self, surface: pygame.Surface, director: TableDirector) -> None:
        game = director.game
        surface.fill(COLORS.FELT_GREEN)

        # HUD
        hud_lines = [
            (f"Bankroll: ${game.bankroll}", COLORS.TEXT_WHITE),
            (f"Bet: ${game.bet}", COLORS.TEXT_WHITE),
            (f"High score: ${game.high_score}", COLORS.GOLD),
            (f"Phase: {game.phase}" + ("  (paused)" if director.paused else ""), COLORS.TEXT_WHITE),
            (KEY_HELP, COLORS.TEXT_MUTED),
        ]
        for i, (text, color) in enumerate(hud_lines):
            self._text(surface, text, self._hud, color,
                       (DIMENSIONS.HUD_X, DIMENSIONS.HUD_Y + i * DIMENSIONS.HUD_LINE_HEIGHT))

        # Dealer area
        self._text(surface, "Dealer", self._label, COLORS.TEXT_WHITE,
                   (DIMENSIONS.HAND_X, DIMENSIONS.DEALER_LABEL_Y))
        self._draw_hand(
            surface,
            game.dealer,
            director.visible_dealer_cards,
            DIMENSIONS.DEALER_HAND_Y,
            hide_hole_card=director.hole_card_hidden,
        )

        # Player area
        shown = director.visible_player_cards
        player_value = Hand(game.player.cards[:shown]).value
        self._text(surface, f"Player ({player_value})", self._label, COLORS.TEXT_WHITE,
                   (DIMENSIONS.HAND_X, DIMENSIONS.PLAYER_LABEL_Y))
        self._draw_hand(surface, game.player, shown, DIMENSIONS.PLAYER_HAND_Y)

        # Round outcome
        if director.outcome_visible and game.last_outcome:
            self._text(surface, game.last_outcome, self._big, COLORS.GOLD,
                       (DIMENSIONS.HAND_X, DIMENSIONS.OUTCOME_Y))
            hint = "Press R to restart" if game.bankroll <= 0 else "Press N for next hand"
            self._text(surface, hint, self._label, COLORS.TEXT_WHITE,
                       (DIMENSIONS.HAND_X, DIMENSIONS.OUTCOME_Y + 44))
        elif game.phase is Phase.BETTING:
            self._text(surface, "Press N to deal", self._label, COLORS.TEXT_WHITE,
                       (DIMENSIONS.HAND_X, DIMENSIONS.OUTCOME_Y))

    def _draw_hand(
        self,
        surface: pygame.Surface,
        hand: Hand,
        visible: int,
        y: int,
        hide_hole_card: bool = False,
    ) -> None:
        x = DIMENSIONS.HAND_X
        for i, card in enumerate(hand.cards[:visible]):
            rect = pygame.Rect(x, y, DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT)
            if hide_hole_card and i == 1:
                self._draw_card_back(surface, rect)
            else:
                self._draw_card_face(surface, card, rect)
            x += DIMENSIONS.CARD_WIDTH + DIMENSIONS.CARD_GAP

    def _draw_card_face(self, surface: pygame.Surface, card: Card, rect: pygame.Rect) -> None:
        radius = DIMENSIONS.CARD_CORNER_RADIUS
        pygame.draw.rect(surface, COLORS.CARD_WHITE, rect, border_radius=radius)
        pygame.draw.rect(surface, COLORS.CARD_BLACK, rect, width=2, border_radius=radius)

        ink = COLORS.CARD_RED if card.suit.is_red else COLORS.CARD_BLACK
        self._text(surface, card.label, self._rank, ink, (rect.x + 8, rect.y + 6))
        self._text(surface, str(card.suit), self._rank, ink, (rect.x + 8, rect.y + 32))

        big = self._big.render(str(card.suit), True, ink)
        surface.blit(big, big.get_rect(center=rect.center))

    def _draw_card_back(self, surface: pygame.Surface, rect: pygame.Rect) -> None:
        radius = DIMENSIONS.CARD_CORNER_RADIUS
        pygame.draw.rect(surface, COLORS.CARD_BACK, rect, border_radius=radius)
        pygame.draw.rect(surface, COLORS.TEXT_WHITE, rect, width=2, border_radius=radius)
        # Simple hatch
        for x in range(rect.x + 6, rect.right - 6, 10):
            pygame.draw.line(
                surface, COLORS.CARD_BACK_PATTERN, (x, rect.y + 6), (x, rect.bottom - 6)
            )

    @staticmethod
    def _text(
        surface: pygame.Surface,
        text: str,
        font: pygame.font.Font,
        color: tuple,
        pos: tuple[int, int],
    ) -> None:
        surface.blit(font.render(text, True, color), pos)
