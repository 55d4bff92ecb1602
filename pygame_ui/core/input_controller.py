"""Keyboard bindings for the table."""

from typing import Callable

import pygame

from pygame_ui.core.table_director import TableDirector


class InputController:
    """Translate key presses into table commands.

    Bindings:
        N            next hand after a round, otherwise deal
        H / S / D    hit / stand / double
        Up, +        raise the bet
        Down, -      lower the bet
        P            pause or resume dealer play
        R            restart the session
    """

    def __init__(self, director: TableDirector, bet_step: int = 10):
        self.director = director
        self.bet_step = bet_step
        self.bindings: dict[int, Callable[[], object]] = {
            pygame.K_n: director.advance,
            pygame.K_h: director.hit,
            pygame.K_s: director.stand,
            pygame.K_d: director.double,
            pygame.K_UP: self.raise_bet,
            pygame.K_PLUS: self.raise_bet,
            pygame.K_EQUALS: self.raise_bet,
            pygame.K_KP_PLUS: self.raise_bet,
            pygame.K_DOWN: self.lower_bet,
            pygame.K_MINUS: self.lower_bet,
            pygame.K_KP_MINUS: self.lower_bet,
            pygame.K_p: director.toggle_pause,
            pygame.K_r: director.restart,
        }

    def raise_bet(self) -> bool:
        return self.director.adjust_bet(self.bet_step)

    def lower_bet(self) -> bool:
        return self.director.adjust_bet(-self.bet_step)

    def handle_key(self, key: int) -> bool:
        """Run the command bound to ``key``.

        Returns:
            True if the key is bound
        """
        action = self.bindings.get(key)
        if action is None:
            return False
        action()
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle a pygame event; only key presses are consumed."""
        if event.type != pygame.KEYDOWN:
            return False
        return self.handle_key(event.key)
