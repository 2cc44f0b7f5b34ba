"""
ui.py - HUD panels (stats, inventory, crafting), notifications, game-over screen
"""
import math
import pygame

from config import (
    PAL, SW, SH, PANEL_W,
    MAX_HEALTH, MAX_HUNGER, MAX_WARMTH, REGEN_THRESHOLD, Res, Recipe,
)

CRAFT_HINT = "(Press C for random craft)"
HINTS = "WASD/Arrows=move  H=harvest  C=craft  ESC=quit"


# ─────────────────────────────────────────────────────
#  PANEL CONTENT
# ─────────────────────────────────────────────────────
def _pick(value, mx, good, bad):
    return good if value / mx * 100 > REGEN_THRESHOLD else bad

def stat_rows(p):
    """(label, value, max, colour) for each survival bar."""
    return [
        ("Health", p.health, MAX_HEALTH, _pick(p.health, MAX_HEALTH, PAL["green"],  PAL["red"])),
        ("Hunger", p.hunger, MAX_HUNGER, _pick(p.hunger, MAX_HUNGER, PAL["yellow"], PAL["brown"])),
        ("Warmth", p.warmth, MAX_WARMTH, _pick(p.warmth, MAX_WARMTH, PAL["white"],  PAL["blue"])),
    ]

def inventory_rows(p):
    rows = [f"{k}: {v}" for k, v in p.inv.items() if v > 0]
    if p.selected:
        rows.append(f"Selected: {p.selected}")
    return rows

def craft_rows(p):
    """(recipe, cost text, affordable) for every recipe."""
    return [(r, "  ".join(f"{k} x{v}" for k, v in r.needs.items()), p.has(r.needs))
            for r in Recipe]


# ─────────────────────────────────────────────────────
#  UI HELPERS
# ─────────────────────────────────────────────────────
def _panel(surf, x, y, w, h, alpha=200):
    s = pygame.Surface((w, h), pygame.SRCALPHA)
    s.fill((*PAL["ui_bg"], alpha)); surf.blit(s, (x, y))
    pygame.draw.rect(surf, PAL["ui_border"], (x, y, w, h), 1, border_radius=8)

def _bar(surf, x, y, w, h, val, mx, col, label, font):
    pygame.draw.rect(surf, PAL["bar_bg"], (x, y, w, h), border_radius=4)
    fw = max(0, int(w * min(1, val / max(1, mx))))
    if fw > 0:
        pygame.draw.rect(surf, col, (x, y, fw, h), border_radius=4)
    pygame.draw.rect(surf, PAL["ui_border"], (x, y, w, h), 1, border_radius=4)
    t = font.render(f"{label}: {int(val)}", True, PAL["ui_text"])
    surf.blit(t, (x, y + h + 2))

def _title(surf, font, text, x, y):
    t = font.render(text, True, PAL["ui_gold"])
    surf.blit(t, (x, y))


# ─────────────────────────────────────────────────────
#  PANELS
# ─────────────────────────────────────────────────────
def draw_stats(surf, fonts, p, x, y, w):
    F, Fm, Fs = fonts
    h = 40 + len(stat_rows(p)) * 40
    _panel(surf, x, y, w, h)
    _title(surf, F, "Stats", x + 10, y + 8)
    for i, (label, val, mx, col) in enumerate(stat_rows(p)):
        _bar(surf, x + 10, y + 38 + i * 40, w - 20, 12, val, mx, col, label, Fs)
    return h

def draw_inventory(surf, fonts, p, x, y, w):
    F, Fm, Fs = fonts
    rows = inventory_rows(p) or ["(empty)"]
    h = 40 + len(rows) * 20
    _panel(surf, x, y, w, h)
    _title(surf, F, "Inventory", x + 10, y + 8)
    for i, row in enumerate(rows):
        col = PAL["ui_gold"] if row.startswith("Selected") else PAL["ui_text"]
        surf.blit(Fs.render(row, True, col), (x + 14, y + 36 + i * 20))
    return h

def draw_craft(surf, fonts, p, x, y, w):
    F, Fm, Fs = fonts
    rows = craft_rows(p)
    h = 56 + len(rows) * 40
    _panel(surf, x, y, w, h)
    _title(surf, F, "Crafting", x + 10, y + 8)
    surf.blit(Fs.render(CRAFT_HINT, True, PAL["ui_dim"]), (x + 10, y + 30))
    for i, (r, cost, can) in enumerate(rows):
        ry = y + 52 + i * 40
        surf.blit(Fs.render(str(r), True, PAL["ui_text"] if can else PAL["ui_dim"]), (x + 14, ry))
        mc = (80, 180, 80) if can else (180, 60, 60)
        surf.blit(Fs.render(cost, True, mc), (x + 24, ry + 18))
    return h

def draw_phase(surf, fonts, world, x, y, w):
    F, Fm, Fs = fonts
    _panel(surf, x, y, w, 52)
    lbl = f"Night  (day {world.day})" if world.night else f"Day {world.day}"
    surf.blit(Fs.render(lbl, True, (120, 150, 220) if world.night else PAL["ui_gold"]), (x + 10, y + 8))
    bw = w - 20
    pygame.draw.rect(surf, PAL["bar_bg"], (x + 10, y + 30, bw, 10), border_radius=5)
    fill = int(bw * world.progress())
    if fill > 0:
        col = (60, 80, 160) if world.night else (220, 190, 60)
        pygame.draw.rect(surf, col, (x + 10, y + 30, fill, 10), border_radius=5)
    pygame.draw.rect(surf, PAL["ui_border"], (x + 10, y + 30, bw, 10), 1, border_radius=5)
    return 52

def draw_panels(surf, fonts, session):
    """HUD column to the right of the play field."""
    F, Fm, Fs = fonts
    x, w = SW + 8, PANEL_W - 16
    pygame.draw.rect(surf, PAL["black"], (SW, 0, PANEL_W, SH))
    y = 8
    y += draw_phase(surf, fonts, session.world, x, y, w) + 8
    y += draw_stats(surf, fonts, session.player, x, y, w) + 8
    y += draw_inventory(surf, fonts, session.player, x, y, w) + 8
    draw_craft(surf, fonts, session.player, x, y, w)
    if session.player.near_fire:
        t = Fs.render("Warm by the fire", True, PAL["ui_gold"])
        surf.blit(t, (x + 4, SH - 44))
    hints = Fs.render(HINTS, True, PAL["ui_dim"])
    surf.blit(hints, (SW // 2 - hints.get_width() // 2, SH - 20))

def draw_notifs(surf, fonts, notifs):
    F, Fm, Fs = fonts
    for i, (msg, rem, tot) in enumerate(notifs[-4:]):
        alpha = min(200, int(rem / tot * 255 * 2.5))
        t = Fs.render(msg, True, PAL["ui_gold"])
        nb = pygame.Surface((t.get_width() + 20, t.get_height() + 8))
        nb.set_alpha(alpha); nb.fill(PAL["ui_bg"])
        surf.blit(nb, (SW // 2 - nb.get_width() // 2, 40 + i * 30))
        surf.blit(t,  (SW // 2 - t.get_width() // 2, 44 + i * 30))

def draw_fps(surf, font, fps):
    t = font.render(f"FPS {int(fps)}", True, PAL["ui_dim"])
    surf.blit(t, (SW + PANEL_W - t.get_width() - 6, SH - 18))


# ─────────────────────────────────────────────────────
def draw_gameover(surf, fonts, session, frame):
    """Blocks the screen until the window is closed."""
    F, Fm, Fs = fonts
    ov = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
    ov.fill((10, 4, 4, 215)); surf.blit(ov, (0, 0))
    cx = surf.get_width() // 2

    rv = int(155 + 80 * math.sin(frame * 0.055))
    ti = Fm.render("Game Over!", True, (rv, 18, 18))
    surf.blit(ti, (cx - ti.get_width() // 2, 150))
    sub = F.render("You died of hunger or cold.", True, PAL["ui_text"])
    surf.blit(sub, (cx - sub.get_width() // 2, 215))

    p = session.player
    stats = [
        ("Days survived", str(session.world.day)),
        ("Frames", str(session.frame)),
        ("Structures", str(len(session.structures))),
        ("Selected", str(p.selected) if p.selected else "-"),
    ] + [(str(r).capitalize(), str(p.inv.get(r, 0))) for r in Res]
    _panel(surf, cx - 180, 260, 360, 24 + len(stats) * 30, 210)
    for i, (k, v) in enumerate(stats):
        surf.blit(F.render(k, True, PAL["ui_dim"]),  (cx - 160, 272 + i * 30))
        surf.blit(F.render(v, True, PAL["ui_text"]), (cx + 60,  272 + i * 30))

    q = Fs.render("Close the window or press ESC", True, PAL["ui_dim"])
    surf.blit(q, (cx - q.get_width() // 2, SH - 60))
