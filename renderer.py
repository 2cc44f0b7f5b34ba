"""
renderer.py - วาด objects ในโลก (resource nodes, structures, player, กลางคืน)
"""
import pygame

from config import PAL, SW, SH, TILE


def _rect(e):
    return pygame.Rect(int(e.x), int(e.y), int(e.size), int(e.size))

def draw_node(surf, node):
    if node.depleted: return
    pygame.draw.rect(surf, node.col, _rect(node))

def draw_structure(surf, s, glow=None):
    r = _rect(s)
    if s.heat:
        if glow is None:
            glow = make_glow()
        surf.blit(glow, (r.centerx - TILE * 2, r.centery - TILE * 2), special_flags=pygame.BLEND_ADD)
    pygame.draw.rect(surf, s.col, r)

def make_glow():
    """Warm halo the size of the fire range, built once and reused."""
    g = pygame.Surface((TILE * 4, TILE * 4))
    g.set_colorkey((0, 0, 0)); g.fill((0, 0, 0))
    g.set_alpha(30)
    pygame.draw.circle(g, (255, 140, 40), (TILE * 2, TILE * 2), TILE * 2 - 2)
    return g

def draw_player(surf, p):
    pygame.draw.rect(surf, PAL["blue"], _rect(p))

def draw_night(surf, world, night_surf=None):
    if not world.night: return
    if night_surf is None:
        night_surf = pygame.Surface((SW, SH), pygame.SRCALPHA)
    night_surf.fill(PAL["night"])
    surf.blit(night_surf, (0, 0))

def draw_scene(surf, session, night_surf=None, glow=None):
    """Clear and redraw the world for one frame."""
    surf.fill(PAL["light_green"])
    draw_night(surf, session.world, night_surf)
    for node in session.nodes:
        draw_node(surf, node)
    for s in session.structures:
        draw_structure(surf, s, glow)
    draw_player(surf, session.player)
