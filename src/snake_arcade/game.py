from __future__ import annotations

import logging
import random

import pygame

from . import config
from .controller import GameController
from .render import draw_state
from .state import Direction

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

KEY_MAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}
RESET_KEYS = (pygame.K_r, pygame.K_n, pygame.K_SPACE)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class TickTimer:
    """Posts TICK_EVENT every ``period_ms`` while armed."""

    def __init__(self, period_ms: int = config.TICK_MS):
        if period_ms <= 0:
            raise ValueError(f"tick period must be positive, got {period_ms}")
        self.period_ms = period_ms
        self.armed = False

    def start(self) -> None:
        pygame.time.set_timer(TICK_EVENT, self.period_ms)
        self.armed = True

    def stop(self) -> None:
        pygame.time.set_timer(TICK_EVENT, 0)
        # Drop ticks that were queued before the timer was disarmed.
        pygame.event.clear(TICK_EVENT)
        self.armed = False


def handle_events(controller: GameController, events) -> bool:
    """Feed pygame events to the controller. Returns False when the player quits."""
    reset_seen = False
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == TICK_EVENT:
            # Ticks fetched in the same batch as a reset were posted by the old timer.
            if not reset_seen:
                controller.tick()
        elif event.type == pygame.KEYDOWN:
            if event.key in QUIT_KEYS:
                return False
            if event.key in RESET_KEYS:
                controller.reset()
                reset_seen = True
            elif event.key in KEY_MAP:
                controller.request_direction(KEY_MAP[event.key])
    return True


def main(
    grid_size: int = config.GRID_SIZE,
    cell_size: int = config.CELL_SIZE,
    tick_ms: int = config.TICK_MS,
    seed: int | None = None,
) -> int:
    pygame.init()
    screen = pygame.display.set_mode((grid_size * cell_size, grid_size * cell_size))
    pygame.display.set_caption("Snake")
    font = pygame.font.Font(None, max(18, cell_size + 4))
    clock = pygame.time.Clock()

    controller = GameController(grid_size, rng=random.Random(seed), timer=TickTimer(tick_ms))
    dirty = True

    def mark_dirty(_state) -> None:
        nonlocal dirty
        dirty = True

    controller.subscribe(mark_dirty)
    controller.start()
    logger.info("started %dx%d game, tick every %d ms", grid_size, grid_size, tick_ms)

    running = True
    while running:
        running = handle_events(controller, pygame.event.get())
        if dirty:
            draw_state(screen, controller.state, font, cell_size)
            dirty = False
        clock.tick(config.FPS)

    controller.stop()
    pygame.quit()
    print("Game Over! Score:", controller.state.score)
    return controller.state.score
