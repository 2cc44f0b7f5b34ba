"""
world.py - World: วงจรกลางวัน/กลางคืน และการสร้าง resource nodes
"""
import logging
import random

from config import SW, SH, TILE, DAY_FRAMES, NIGHT_FRAMES, RESOURCE_COUNT, RESOURCE_AMOUNT, Res
from entities import ResourceNode

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────
#  WORLD CLASS
# ─────────────────────────────────────────────────────
class World:
    def __init__(self, day_frames=DAY_FRAMES, night_frames=NIGHT_FRAMES, seed=None):
        self.seed = seed if seed is not None else random.randint(1, 99999)
        self.rng  = random.Random(self.seed)
        self.day_frames   = day_frames
        self.night_frames = night_frames
        self.frame = 0
        self.night = False
        self.day   = 1

    def update(self):
        self.frame += 1
        if not self.night and self.frame >= self.day_frames:
            self.night = True; self.frame = 0
            logger.info("It is now night time!")
        elif self.night and self.frame >= self.night_frames:
            self.night = False; self.frame = 0
            self.day += 1
            logger.info("It is now day time! (day %d)", self.day)

    def progress(self):
        """Fraction of the current phase already elapsed."""
        total = self.night_frames if self.night else self.day_frames
        return min(1.0, self.frame / max(1, total))

    def generate_resources(self, nodes, count=RESOURCE_COUNT):
        lo, hi = RESOURCE_AMOUNT
        kinds = list(Res)
        for _ in range(count):
            x = self.rng.random() * (SW - TILE)
            y = self.rng.random() * (SH - TILE)
            res = kinds[int(self.rng.random() * len(kinds))]
            nodes.append(ResourceNode(x, y, res, self.rng.randint(lo, hi)))
        logger.debug("Generated %d resource nodes (seed %s)", count, self.seed)
        return nodes
