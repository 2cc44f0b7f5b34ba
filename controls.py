"""
controls.py - input snapshot ต่อเฟรม (WASD / ลูกศร) และปุ่ม action
"""
from collections import namedtuple

import pygame

UP_KEYS    = (pygame.K_w, pygame.K_UP)
DOWN_KEYS  = (pygame.K_s, pygame.K_DOWN)
LEFT_KEYS  = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)

HARVEST_KEY = pygame.K_h
CRAFT_KEY   = pygame.K_c
QUIT_KEY    = pygame.K_ESCAPE


class Controls(namedtuple("Controls", "up down left right", defaults=(False,) * 4)):
    """Direction flags captured once per tick."""
    __slots__ = ()

    @classmethod
    def from_keys(cls, keys):
        """Build from pygame.key.get_pressed() (or any key-indexable mapping)."""
        def held(ks): return any(keys[k] for k in ks)
        return cls(held(UP_KEYS), held(DOWN_KEYS), held(LEFT_KEYS), held(RIGHT_KEYS))


IDLE = Controls()
