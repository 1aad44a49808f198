from __future__ import annotations

import logging
import random

import numpy as np

from . import config
from .state import Cell, Functor, State, add_vectors, in_bounds

logger = logging.getLogger(__name__)


def place_food(snake, grid_size: int, rng=random, attempts: int = config.FOOD_ATTEMPTS) -> Cell | None:
    """Pick a cell for the next food, never one the snake occupies.

    Draws up to ``attempts`` uniform cells first. When all of them land on
    the snake, the first free cell in row-major order is used instead.
    Returns None when the snake covers the whole grid.
    """
    occupied = set(snake)
    for _ in range(attempts):
        cell = (rng.randint(0, grid_size - 1), rng.randint(0, grid_size - 1))
        if cell not in occupied:
            return cell

    logger.debug("food placement fell back to a grid scan after %d attempts", attempts)
    taken = np.zeros((grid_size, grid_size), dtype=bool)
    xs, ys = zip(*occupied)
    taken[list(ys), list(xs)] = True
    free = np.flatnonzero(~taken)
    if free.size == 0:
        return None
    y, x = divmod(int(free[0]), grid_size)
    return (x, y)


def commit_direction(state: State) -> State:
    return state._replace(active_direction=state.pending_direction)


def next_head(state: State) -> Cell:
    return add_vectors(state.snake[0], state.active_direction.value)


def end_game(state: State, reason: str) -> State:
    logger.info("game over (%s) with score %d, length %d", reason, state.score, len(state.snake))
    return state._replace(terminal=True, end_reason=reason)


def check_collisions(state: State) -> State:
    head = next_head(state)
    if not in_bounds(head, state.grid_size):
        return end_game(state, "wall")
    # The tail still counts as occupied even though it would move away this tick.
    if head in state.snake:
        return end_game(state, "self")
    return state


def move_snake(state: State) -> State:
    head = next_head(state)
    if head == state.food:
        new_snake = (head,) + state.snake
    else:
        new_snake = (head,) + state.snake[:-1]
    return state._replace(snake=new_snake)


def update_food_and_score(state: State, rng=random) -> State:
    if state.snake[0] != state.food:
        return state
    food = place_food(state.snake, state.grid_size, rng)
    state = state._replace(food=food, score=state.score + config.FOOD_REWARD)
    if food is None:
        return end_game(state, "grid_full")
    return state


def step(state: State, rng: random.Random | None = None) -> State:
    """Advance ``state`` by one tick. Terminal states are returned unchanged."""
    if state.terminal:
        return state
    rand = random if rng is None else rng
    return (
        Functor(state)
        .map(commit_direction)
        .map(check_collisions)
        .map(lambda s: move_snake(s) if not s.terminal else s)
        .map(lambda s: update_food_and_score(s, rand) if not s.terminal else s)
        .get()
    )
