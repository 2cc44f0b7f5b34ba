"""
session.py - Session: state ทั้งหมดของเกมหนึ่งรอบ (world, player, nodes, structures)

Everything the game loop mutates lives here and is handed to the update
functions explicitly; nothing is shared through module globals.
"""
import logging
import random

from config import SW, SH, DAY_FRAMES, NIGHT_FRAMES, HARVEST_RANGE, NOTE_FRAMES, Recipe
from entities import Player, dist
from world import World

logger = logging.getLogger(__name__)

GAME_OVER_MSG = "Game Over! You died of hunger or cold."


class Session:
    def __init__(self, seed=None, day_frames=DAY_FRAMES, night_frames=NIGHT_FRAMES):
        self.world = World(day_frames, night_frames, seed)
        self.rng   = random.Random(self.world.seed)
        self.player = Player(SW / 2, SH / 2, on_dead=self.game_over)
        self.nodes      = []
        self.structures = []
        self.world.generate_resources(self.nodes)

        self.over   = False
        self.frame  = 0
        self.notifs = []   # [msg, remaining, total]

    # ── Notify ──
    def note(self, msg, frames=NOTE_FRAMES):
        if self.notifs and self.notifs[-1][0] == msg:
            self.notifs[-1][1] = frames; return
        self.notifs.append([msg, frames, frames])
        if len(self.notifs) > 5:
            self.notifs = self.notifs[-5:]

    # ── Tick ──
    def tick(self, ctl):
        """World, then player. Returns False once the game is over."""
        if self.over: return False
        was_night = self.world.night
        self.world.update()
        if self.world.night != was_night:
            self.note("Night falls, stay near a fire!" if self.world.night else f"Day {self.world.day}")
        self.player.update(self.world, self.structures, ctl)
        self.notifs = [[m, t - 1, mt] for m, t, mt in self.notifs if t > 1]
        self.frame += 1
        return not self.over

    def game_over(self):
        if self.over: return
        self.over = True
        logger.info("Game Over! (day %d, frame %d)", self.world.day, self.frame)
        self.note(GAME_OVER_MSG)

    # ── Actions (between frames) ──
    def harvest(self):
        if self.over: return None
        p = self.player
        for node in self.nodes:
            if node.depleted or dist(p, node) >= HARVEST_RANGE: continue
            got = node.take(1)
            p.harvest(node.res, got)
            self.note(f"+{got} {node.res}")
            return node.res
        return None

    def craft(self, recipe):
        if self.over: return False
        recipe = Recipe(recipe)
        ok = self.player.craft(recipe, self.structures)
        self.note(f"Crafted {recipe}!" if ok else f"Cannot craft {recipe}. Missing materials.")
        return ok

    def craft_random(self):
        return self.craft(self.rng.choice(list(Recipe)))
