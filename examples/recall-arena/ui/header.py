"""Header bar: title, count input, Go button, and status line."""
from __future__ import annotations

import pygame

from ui.constants import (
    ERROR_COLOR,
    GO_BG,
    GO_W,
    HEADER_BG,
    HEADER_BORDER,
    HEADER_H,
    INPUT_BG,
    INPUT_BORDER,
    INPUT_FOCUS,
    INPUT_H,
    INPUT_W,
    SCREEN_W,
    SUCCESS_COLOR,
    TEXT_COLOR,
    TEXT_DIM,
    TITLE_COLOR,
)
from ui.messages import BTN_GO, LABEL_HOW_MANY, PLACEHOLDER_RANGE, TITLE

_ROW_Y = 36


class CountInput:
    """Single-line text field for the round size. Digits and '.' only."""

    max_len = 4

    def __init__(self, x: int, y: int) -> None:
        self.rect = pygame.Rect(x, y, INPUT_W, INPUT_H)
        self.go_rect = pygame.Rect(x + INPUT_W + 8, y, GO_W, INPUT_H)
        self.text = ""
        self.focused = True

    def handle_key(self, event: pygame.event.Event) -> bool:
        """Apply a key press. Returns True when the player submits."""
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            return True
        if event.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]
        elif event.unicode and (event.unicode.isdigit() or event.unicode in ".-"):
            if len(self.text) < self.max_len:
                self.text += event.unicode
        return False

    def handle_click(self, pos: tuple[int, int]) -> bool:
        """Focus on click. Returns True when Go was pressed."""
        self.focused = self.rect.collidepoint(pos)
        return self.go_rect.collidepoint(pos)


def draw_header(
    screen: pygame.Surface,
    font: pygame.font.Font,
    title_font: pygame.font.Font,
    field: CountInput,
    status: str,
    tone: str = "normal",
) -> None:
    pygame.draw.rect(screen, HEADER_BG, (0, 0, SCREEN_W, HEADER_H))
    pygame.draw.line(screen, HEADER_BORDER, (0, HEADER_H - 1), (SCREEN_W, HEADER_H - 1))

    screen.blit(title_font.render(TITLE, True, TITLE_COLOR), (12, 6))

    label = font.render(LABEL_HOW_MANY, True, TEXT_COLOR)
    screen.blit(label, (12, _ROW_Y + INPUT_H // 2 - label.get_height() // 2))

    pygame.draw.rect(screen, INPUT_BG, field.rect)
    border = INPUT_FOCUS if field.focused else INPUT_BORDER
    pygame.draw.rect(screen, border, field.rect, 1)
    if field.text:
        text = font.render(field.text, True, TEXT_COLOR)
    else:
        text = font.render(PLACEHOLDER_RANGE, True, TEXT_DIM)
    screen.blit(text, (field.rect.x + 6, field.rect.centery - text.get_height() // 2))

    pygame.draw.rect(screen, GO_BG, field.go_rect, border_radius=4)
    go = font.render(BTN_GO, True, TITLE_COLOR)
    screen.blit(go, go.get_rect(center=field.go_rect.center))

    color = {"error": ERROR_COLOR, "success": SUCCESS_COLOR}.get(tone, TEXT_COLOR)
    line = font.render(status, True, color)
    screen.blit(line, (12, HEADER_H - line.get_height() - 6))
