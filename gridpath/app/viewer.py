# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Grid Pathfinding Viewer

- Keyboard:
    [SPACE]      -> run/pause
    [N]          -> single update
    [R]          -> new random world
    [C]          -> clear and search the same world again
    [Q]/[ESC]    -> quit

Config: see gridpath/app/config.py (GRIDPATH_* env vars, --key=value args).
With --headless no window is opened: the search runs to completion and the
grid is printed as text.
"""

import logging
import sys
import time
from typing import Dict, Tuple

import pygame

from gridpath.app.config import resolve_config
from gridpath.app.driver import SearchSession
from gridpath.app.world import render_ascii
from gridpath.core.types import START, END, PATH, WALL, BACKGROUND, FOUND

logger = logging.getLogger(__name__)

PANEL_W = 220
GRID_MARGIN = 16
CELL_SIZE_MAX = 24
CELL_SIZE_MIN = 4
FONT_NAME = None  # default pygame font

# Colors
BLACK      = (  0,   0,   0)
PANEL_BG   = ( 24,  28,  36)
TEXT_LIGHT = (230, 235, 240)
OPEN_A     = (  0, 150, 255, 110)

KIND_COLORS: Dict[str, Tuple[int, int, int]] = {
    BACKGROUND: (200, 200, 200),
    WALL:       ( 40,  40,  40),
    PATH:       (  0, 255, 200),
    START:      ( 70, 130, 180),
    END:        (220,  50,  47),
}


class Viewer:
    def __init__(self, session: SearchSession):
        pygame.init()
        self.session = session
        self.config = session.config
        self.font = pygame.font.Font(FONT_NAME, 18)

        self.cell_size = self._auto_cell_size()
        grid = session.grid
        win_w = GRID_MARGIN * 2 + grid.columns * self.cell_size + PANEL_W
        win_h = max(GRID_MARGIN * 2 + grid.rows * self.cell_size, 320)
        self.screen = pygame.display.set_mode((win_w, win_h))
        pygame.display.set_caption("Grid Pathfinding")

        self.clock = pygame.time.Clock()
        self.running = False
        self._last_update_t = 0.0

    def _auto_cell_size(self) -> int:
        grid = self.session.grid
        target = 720 - GRID_MARGIN * 2
        return max(CELL_SIZE_MIN, min(CELL_SIZE_MAX, target // max(grid.columns, grid.rows)))

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_session()
            self._draw()
            self.clock.tick(self.config.fps)

    def _tick_session(self):
        now = time.time()
        if now - self._last_update_t >= 1.0 / self.config.tick_rate:
            self._last_update_t = now
            self._do_update()

    def _do_update(self):
        res = self.session.update()
        if res.finished:
            self.running = False

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    if not self.session.finished:
                        self.running = not self.running
                elif e.key == pygame.K_n:
                    self._do_update()
                elif e.key == pygame.K_r:
                    self.running = False
                    self.session.restart()
                elif e.key == pygame.K_c:
                    self.running = False
                    self.session.restart(regenerate=False)

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BLACK)
        self._draw_grid()
        self._draw_panel()
        pygame.display.flip()

    def _draw_grid(self):
        cs = self.cell_size
        grid = self.session.grid
        for c in grid.cells:
            rect = pygame.Rect(GRID_MARGIN + c.x * cs, GRID_MARGIN + c.y * cs, cs, cs)
            pygame.draw.rect(self.screen, KIND_COLORS[c.kind], rect)

        # frontier overlay while the search is in progress
        if not self.session.finished and self.session.traversal:
            overlay = pygame.Surface((cs, cs), pygame.SRCALPHA); overlay.fill(OPEN_A)
            for entry in self.session.traversal.open:
                x, y = grid.coords(entry[-1])
                self.screen.blit(overlay, (GRID_MARGIN + x * cs, GRID_MARGIN + y * cs))

    def _draw_panel(self):
        x0 = self.screen.get_width() - PANEL_W + 12
        y0 = GRID_MARGIN
        pygame.draw.rect(self.screen, PANEL_BG,
                         pygame.Rect(x0 - 12, 0, PANEL_W, self.screen.get_height()))

        m = self.session.last.metrics
        lines = [
            f"Status: {self.session.status}",
            f"Updates: {self.session.updates}",
            f"Popped: {m.get('popped', 0)}",
            f"Open: {m.get('open_size', 0)}",
            f"Expanded: {m.get('closed_count', 0)}",
            f"Path Len: {m.get('path_len', 0)}",
            f"Budget: {self.config.budget or 'all'}",
            f"FPS: {self.clock.get_fps():.0f}",
        ]
        for text in lines:
            surf = self.font.render(text, True, TEXT_LIGHT)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6


def run_headless(session: SearchSession) -> int:
    res = session.run()
    print(render_ascii(session.grid))
    print(f"{res.status}: {res.metrics}")
    return 0 if res.status == FOUND else 1


# ---------- main ----------
def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        config = resolve_config()
    except ValueError as ex:
        logger.error("bad configuration: %s", ex)
        sys.exit(2)

    try:
        session = SearchSession(config)
    except (OSError, ValueError) as ex:
        logger.error("failed to build world: %s", ex)
        sys.exit(1)

    if config.headless:
        sys.exit(run_headless(session))
    Viewer(session).run()


if __name__ == "__main__":
    main()
