"""
config.py - ค่าคงที่และข้อมูลเกม (screen, rates, resources, recipes)
"""
from enum import Enum

SW, SH = 1000, 700
TILE   = 50
FPS    = 60
TITLE  = "Campfire Survival"
PANEL_W = 260     # HUD column to the right of the play field

PAL = {
    "white":       (255, 255, 255),
    "black":       (0, 0, 0),
    "green":       (0, 150, 0),
    "light_green": (0, 200, 0),
    "brown":       (139, 69, 19),
    "grey":        (100, 100, 100),
    "blue":        (0, 0, 255),
    "red":         (255, 0, 0),
    "yellow":      (255, 255, 0),
    "cyan":        (0, 255, 255),
    "night":       (0, 0, 50, 102),   # rgba(0,0,50,0.4)
    "ui_bg":       (14, 22, 12),
    "ui_border":   (70, 110, 60),
    "ui_text":     (225, 225, 210),
    "ui_dim":      (130, 140, 125),
    "ui_gold":     (235, 200, 80),
    "bar_bg":      (25, 35, 22),
}

# ─────────────────────────────────────────────────────
#  SURVIVAL
# ─────────────────────────────────────────────────────
PLAYER_SPEED = 5
PLAYER_SIZE  = TILE * 0.8

MAX_HEALTH = 100
MAX_HUNGER = 100
MAX_WARMTH = 100

HUNGER_DRAIN    = 0.005   # per frame
COLD_DRAIN      = 0.01    # per frame
NIGHT_COLD_MULT = 2.0
REGEN_THRESHOLD = 35
HEALTH_REGEN    = 0.01
HEALTH_DRAIN    = 0.005

FIRE_RANGE    = TILE * 2
HARVEST_RANGE = TILE * 1.5

# ─────────────────────────────────────────────────────
#  WORLD
# ─────────────────────────────────────────────────────
DAY_FRAMES      = 2400    # ≈ 40s ที่ 60fps
NIGHT_FRAMES    = 2400
RESOURCE_COUNT  = 50
RESOURCE_AMOUNT = (5, 19)
NOTE_FRAMES     = 150


class Res(str, Enum):
    WOOD    = "wood"
    STONE   = "stone"
    BERRIES = "berries"

    def __str__(self):
        return self.value

    @property
    def col(self):
        return RES_DATA[self]["col"]

    @property
    def harvest_time(self):
        return RES_DATA[self]["harvest_time"]


RES_DATA = {
    Res.WOOD:    {"col": PAL["brown"], "harvest_time": 2},
    Res.STONE:   {"col": PAL["grey"],  "harvest_time": 3},
    Res.BERRIES: {"col": PAL["red"],   "harvest_time": 1},
}


class Kind(str, Enum):
    STRUCTURE = "structure"
    TOOL      = "tool"
    WEAPON    = "weapon"


class Recipe(str, Enum):
    CAMPFIRE       = "campfire"
    WOODEN_PICKAXE = "wooden_pickaxe"
    WOODEN_SWORD   = "wooden_sword"

    def __str__(self):
        return self.value

    @property
    def needs(self):
        return RECIPE_DATA[self]["needs"]

    @property
    def kind(self):
        return RECIPE_DATA[self]["kind"]

    @property
    def heat(self):
        return RECIPE_DATA[self]["heat"]


RECIPE_DATA = {
    Recipe.CAMPFIRE:       {"needs": {Res.WOOD: 10}, "kind": Kind.STRUCTURE, "heat": True},
    Recipe.WOODEN_PICKAXE: {"needs": {Res.WOOD: 10}, "kind": Kind.TOOL,      "heat": False},
    Recipe.WOODEN_SWORD:   {"needs": {Res.WOOD: 10}, "kind": Kind.WEAPON,    "heat": False},
}
