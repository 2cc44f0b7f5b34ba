"""
entities.py - ResourceNode, Structure, Player
"""
import logging
import math

from config import (
    SW, SH, TILE, PAL, PLAYER_SPEED, PLAYER_SIZE,
    MAX_HEALTH, MAX_HUNGER, MAX_WARMTH,
    HUNGER_DRAIN, COLD_DRAIN, NIGHT_COLD_MULT,
    REGEN_THRESHOLD, HEALTH_REGEN, HEALTH_DRAIN, FIRE_RANGE,
    Res, Kind, Recipe,
)

logger = logging.getLogger(__name__)


def _center(e):
    return e.x + e.size / 2, e.y + e.size / 2

def dist(a, b):
    """Distance between the centres of two sized entities."""
    (ax, ay), (bx, by) = _center(a), _center(b)
    return math.hypot(ax - bx, ay - by)


# ─────────────────────────────────────────────────────
#  RESOURCE NODES / STRUCTURES
# ─────────────────────────────────────────────────────
class ResourceNode:
    __slots__ = ("x", "y", "res", "amount", "size", "depleted")

    def __init__(self, x, y, res, amount):
        self.x = float(x); self.y = float(y)
        self.res = Res(res)
        self.amount = amount
        self.size = TILE
        self.depleted = False

    @property
    def col(self):
        return self.res.col

    def deplete(self):
        self.depleted = True

    def take(self, n=1):
        """Remove up to n units; returns how many were actually taken."""
        if self.depleted: return 0
        got = min(n, self.amount)
        self.amount -= got
        if self.amount <= 0:
            self.deplete()
        return got


class Structure:
    __slots__ = ("x", "y", "recipe", "heat", "size")

    def __init__(self, x, y, recipe):
        self.x = float(x); self.y = float(y)
        self.recipe = Recipe(recipe)
        self.heat = self.recipe.heat
        self.size = TILE

    @property
    def col(self):
        return PAL["yellow"] if self.heat else PAL["grey"]


# ─────────────────────────────────────────────────────
#  PLAYER
# ─────────────────────────────────────────────────────
class Player:
    def __init__(self, x, y, on_dead=None):
        self.x = float(x); self.y = float(y)
        self.size  = PLAYER_SIZE
        self.speed = PLAYER_SPEED

        self.health = MAX_HEALTH
        self.hunger = MAX_HUNGER
        self.warmth = MAX_WARMTH

        self.inv = {r: 0 for r in Res}   # Res → qty
        self.selected  = None
        self.near_fire = False
        self.dead      = False
        self.on_dead   = on_dead

    # ── Update ──
    def update(self, world, structures, ctl):
        if self.dead: return

        # Movement (ไม่ normalize แนวทแยง)
        if ctl.up:    self.y -= self.speed
        if ctl.down:  self.y += self.speed
        if ctl.left:  self.x -= self.speed
        if ctl.right: self.x += self.speed
        self.x = max(0, min(SW - self.size, self.x))
        self.y = max(0, min(SH - self.size, self.y))

        # Decay
        self.hunger = max(0, self.hunger - HUNGER_DRAIN)

        rate = COLD_DRAIN * (NIGHT_COLD_MULT if world.night else 1)
        self.near_fire = self.check_fire(structures)
        if self.near_fire:
            self.warmth += rate * 2
        self.warmth = max(0, min(MAX_WARMTH, self.warmth - rate))

        if self.hunger > REGEN_THRESHOLD and self.warmth > REGEN_THRESHOLD:
            self.health += HEALTH_REGEN
        else:
            self.health -= HEALTH_DRAIN
        self.health = max(0, min(MAX_HEALTH, self.health))

        if self.health == 0:
            self.dead = True
            if self.on_dead: self.on_dead()

    def check_fire(self, structures):
        return any(s.heat and dist(self, s) < FIRE_RANGE for s in structures)

    # ── Inventory ──
    def harvest(self, res, amount):
        self.inv[res] = self.inv.get(res, 0) + amount
        logger.info("Harvested %d %s. Total: %d", amount, res, self.inv[res])

    def has(self, needs):
        return all(self.inv.get(k, 0) >= v for k, v in needs.items())

    def craft(self, recipe, structures):
        recipe = Recipe(recipe)
        if not self.has(recipe.needs):
            logger.info("Cannot craft %s. Missing materials.", recipe)
            return False
        for k, v in recipe.needs.items():
            self.inv[k] -= v
        logger.info("Crafted %s!", recipe)
        if recipe.kind == Kind.STRUCTURE:
            structures.append(Structure(self.x + TILE, self.y + TILE, recipe))
        elif recipe.kind in (Kind.TOOL, Kind.WEAPON):
            self.selected = recipe
        return True
