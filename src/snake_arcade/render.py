from __future__ import annotations

import pygame

from . import config
from .state import State


def cell_rect(cell, block: int) -> pygame.Rect:
    x, y = cell
    return pygame.Rect(x * block, y * block, block, block)


def draw_overlay(screen: pygame.Surface, state: State, font: pygame.font.Font) -> None:
    shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    shade.fill(config.OVERLAY)
    screen.blit(shade, (0, 0))

    title = "You Win!" if state.end_reason == "grid_full" else "Game Over!"
    lines = [title, f"Final Score: {state.score}", "Press R to play again"]
    cx, cy = screen.get_width() // 2, screen.get_height() // 2
    line_h = font.get_linesize()
    top = cy - line_h * len(lines) // 2
    for i, line in enumerate(lines):
        text = font.render(line, True, config.WHITE)
        screen.blit(text, text.get_rect(center=(cx, top + i * line_h + line_h // 2)))


def draw_state(screen: pygame.Surface, state: State, font: pygame.font.Font, block: int = config.CELL_SIZE) -> None:
    screen.fill(config.BLACK)

    for i, cell in enumerate(state.snake):
        color = config.GREEN if i == 0 else config.DARK_GREEN
        pygame.draw.rect(screen, color, cell_rect(cell, block))

    if state.food is not None:
        pygame.draw.rect(screen, config.RED, cell_rect(state.food, block))

    screen.blit(font.render(f"Score: {state.score}", True, config.WHITE), (4, 4))

    if state.terminal:
        draw_overlay(screen, state, font)

    pygame.display.flip()
