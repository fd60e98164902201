# gridpath/app/driver.py
#!/usr/bin/env python3
"""
SearchSession — owns one world and one traversal and advances the search
once per logical update. Front ends (viewer, headless runner) only call
restart() / update() and read cell kinds between calls.
"""

import logging
import random
from typing import List, Optional

from gridpath.app.config import DriverConfig
from gridpath.app.world import World, build_world
from gridpath.core.astar import tick
from gridpath.core.heuristics import get_heuristic
from gridpath.core.traversal import Traversal, begin
from gridpath.core.types import Coord, StepResult, IDLE, FOUND

logger = logging.getLogger(__name__)


class SearchSession:
    def __init__(self, config: DriverConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.heuristic = get_heuristic(config.heuristic)
        self.world: Optional[World] = None
        self.traversal: Optional[Traversal] = None
        self.last: StepResult = StepResult(status=IDLE)
        self.updates = 0
        self.restart()

    @property
    def grid(self):
        return self.world.grid

    @property
    def status(self) -> str:
        return self.traversal.status if self.traversal else IDLE

    @property
    def finished(self) -> bool:
        return self.last.finished

    def restart(self, regenerate: bool = True) -> None:
        """Seed a fresh search; with regenerate, build a new world first."""
        if regenerate or self.world is None:
            self.world = build_world(self.config, self.rng)
        self.traversal = begin(self.grid, self.world.start, self.world.end, self.heuristic)
        self.last = StepResult(status=self.traversal.status)
        self.updates = 0

    def update(self) -> StepResult:
        """One logical update: one tick with the configured budget."""
        was_finished = self.last.finished
        self.last = tick(self.grid, self.traversal, self.config.budget)
        self.updates += 1
        if self.last.finished and not was_finished:
            logger.info("search %s after %d update(s): %s",
                        self.last.status, self.updates, self.last.metrics)
        return self.last

    def run(self, max_updates: Optional[int] = None) -> StepResult:
        while not self.last.finished:
            if max_updates is not None and self.updates >= max_updates:
                break
            self.update()
        return self.last

    def path(self) -> List[Coord]:
        if self.last.status != FOUND:
            return []
        return [self.grid.coords(i) for i in self.last.path]
