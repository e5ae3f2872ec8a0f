"""Info panel (sidebar) and bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import (
    EASING_NAMES,
    LABEL_COLOR,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    WHEEL_AREA,
    WIN_COLOR,
)


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    indicated: str,
    last_prize: str | None,
    spins_done: int,
    clicks: int,
    duration: int,
    duration_s: float,
    selected_easing: str,
    spinning: bool,
) -> None:
    """Draw right-side info panel."""
    x = SCREEN_W - SIDEBAR_W
    h = WHEEL_AREA

    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, h))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, h))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render("WHEEL", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4

    state = "spinning" if spinning else "idle"
    surface.blit(font.render(f"State: {state}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"At: {indicated}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Clicks: {clicks}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Spins: {spins_done}", True, TEXT_COLOR), (cx, cy))
    cy += line_h + 8

    if last_prize is not None:
        surface.blit(font.render("Won:", True, TEXT_DIM), (cx, cy))
        cy += line_h
        surface.blit(font.render(last_prize, True, WIN_COLOR), (cx, cy))
        cy += line_h + 8

    surface.blit(font.render(f"Dur: {duration}f ({duration_s:.1f}s)", True, TEXT_COLOR), (cx, cy))
    cy += line_h + 8

    surface.blit(font.render("Easing:", True, TEXT_DIM), (cx, cy))
    cy += line_h
    for i, name in enumerate(EASING_NAMES):
        color = WIN_COLOR if name == selected_easing else TEXT_DIM
        prefix = "> " if name == selected_easing else "  "
        surface.blit(font.render(f"{prefix}{i + 1}:{name}", True, color), (cx, cy))
        cy += line_h - 2


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = WHEEL_AREA
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    text = "[Space] Spin  [S] Stop  [1-4] Easing  [+/-] Duration  [I] Add  [D] Remove  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
