"""Main entry point for the PyGame blackjack table."""

import logging
import sys

import pygame

from blackjack.game import BlackjackGame, GameEvent
from blackjack.scores import FileHighScoreStore
from config import config
from pygame_ui.config import DIMENSIONS
from pygame_ui.core.input_controller import InputController
from pygame_ui.core.table_director import TableDirector
from pygame_ui.table_view import TableView

logger = logging.getLogger(__name__)


class Application:
    """Main application class managing the game loop."""

    def __init__(self):
        """Initialize the application."""
        pygame.init()
        pygame.display.set_caption("Blackjack")

        self.screen = pygame.display.set_mode(
            (DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT)
        )
        self.clock = pygame.time.Clock()
        self.running = True

        scores = FileHighScoreStore(
            config.scores.path,
            default_high_score=config.scores.default_high_score,
        )
        self.game = BlackjackGame(
            starting_bankroll=config.game.starting_bankroll,
            starting_bet=config.game.starting_bet,
            scores=scores,
        )
        self.director = TableDirector(self.game, reveal_delay=config.game.reveal_delay)
        self.input = InputController(self.director, bet_step=config.game.bet_step)
        self.view = TableView()
        self.game.subscribe(self._log_event)

        # Start a new player session and deal the first round
        self.game.start_session()
        self.director.deal()

    def _log_event(self, event: GameEvent) -> None:
        logger.debug("%s", event)

    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                continue

            self.input.handle_event(event)

    def update(self, dt: float) -> None:
        """Update application state.

        Args:
            dt: Delta time in seconds
        """
        self.director.update(dt)

    def draw(self) -> None:
        """Render the application."""
        self.view.draw(self.screen, self.director)
        pygame.display.flip()

    def run(self) -> None:
        """Main application loop."""
        while self.running:
            dt = self.clock.tick(DIMENSIONS.TARGET_FPS) / 1000.0

            self.handle_events()
            self.update(dt)
            self.draw()

        pygame.quit()
        sys.exit()


def main() -> None:
    """Entry point for the pygame UI."""
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    app = Application()
    app.run()


if __name__ == "__main__":
    main()
