"""Recall Arena - memorize the tile order, watch the scramble, click it back.

Exercises tick-recall with a pygame front end.

Controls:
  0-9     Type the number of tiles (3-7)
  Enter   Start a round (same as the Go! button)
  Click   Press a tile during recall
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from tick_recall import GameController, RecallConfig, SignalBus, Status

from ui.arena import ArenaSurface
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W, TPS
from ui.header import CountInput, draw_header
from ui.messages import LABEL_HOW_MANY, format_status

logger = logging.getLogger("recall_arena")

_TONES = {
    Status.INVALID_COUNT: "error",
    Status.WRONG_ORDER: "error",
    Status.SUCCESS: "success",
}


class StatusLine:
    """Status sink: keeps the latest formatted status for drawing."""

    def __init__(self, bus: SignalBus) -> None:
        self.text = ""
        self.tone = "normal"
        bus.subscribe_all(Status.ALL, self._on_status)

    def _on_status(self, signal: str, data: dict) -> None:
        self.text = format_status(signal, data)
        self.tone = _TONES.get(signal, "normal")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Recall Arena - tick-recall demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 16)
    title_font = pygame.font.SysFont("monospace", 22, bold=True)
    tile_font = pygame.font.SysFont("monospace", 28, bold=True)

    config = RecallConfig(tps=TPS)
    arena = ArenaSurface(tile_font, gap=config.flow_gap)
    bus = SignalBus()
    status = StatusLine(bus)
    controller = GameController(arena, bus, config=config)
    field = CountInput(x=12 + font.size(LABEL_HOW_MANY)[0] + 12, y=36)

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif field.focused and field.handle_key(event):
                    controller.start(field.text)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if field.handle_click(event.pos):
                    controller.start(field.text)
                    continue
                tile = arena.tile_at(event.pos)
                if tile is not None:
                    controller.click(tile.order)

        # --- Tick ---
        while accumulator >= tick_interval:
            controller.advance()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        arena.draw(screen)
        draw_header(screen, font, title_font, field, status.text, status.tone)
        pygame.display.flip()

    logger.info("quit in phase %s", controller.phase.value)
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
