from __future__ import annotations

import logging
import random
from typing import Callable

from . import config
from .logic import step
from .state import Direction, State, initial_state

logger = logging.getLogger(__name__)

Listener = Callable[[State], None]


class GameController:
    """Owns the current game state and drives it one tick at a time.

    ``timer`` is any object with ``start()`` and ``stop()``; the controller
    stops it when the game ends and re-arms it on reset. Listeners are
    called with the new state after every tick that changed it and after
    every reset.
    """

    def __init__(self, grid_size: int = config.GRID_SIZE, rng: random.Random | None = None, timer=None):
        self.grid_size = grid_size
        self.rng = rng if rng is not None else random.Random()
        self.timer = timer
        self._state = initial_state(grid_size)
        self._listeners: list[Listener] = []

    @property
    def state(self) -> State:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)

    def start(self) -> None:
        if self.timer is not None:
            self.timer.start()

    def stop(self) -> None:
        if self.timer is not None:
            self.timer.stop()

    def request_direction(self, direction) -> None:
        new_dir = Direction.parse(direction)
        if new_dir is None:
            logger.debug("ignoring unknown direction %r", direction)
            return
        if self._state.terminal:
            return
        if new_dir.is_opposite(self._state.active_direction):
            logger.debug("ignoring reversal %s while moving %s", new_dir.name, self._state.active_direction.name)
            return
        self._state = self._state._replace(pending_direction=new_dir)

    def tick(self) -> None:
        if self._state.terminal:
            return
        self._state = step(self._state, self.rng)
        if self._state.terminal:
            self.stop()
        self._notify()

    def reset(self) -> None:
        self.stop()
        self._state = initial_state(self.grid_size)
        logger.info("game reset on a %dx%d grid", self.grid_size, self.grid_size)
        self._notify()
        self.start()
