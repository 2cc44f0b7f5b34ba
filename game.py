"""
game.py - คลาส Game หลัก: loop, events, update, draw
"""
import logging
import pygame

from config import SW, SH, FPS, TITLE, PANEL_W
from controls import Controls, HARVEST_KEY, CRAFT_KEY, QUIT_KEY
from renderer import draw_scene, make_glow
from session import Session
from ui import draw_panels, draw_notifs, draw_fps, draw_gameover

logger = logging.getLogger(__name__)


def make_font(size, bold=False):
    for fn in ["DejaVu Sans", "FreeSans", "Arial", None]:
        try: return pygame.font.SysFont(fn, size, bold=bold)
        except (OSError, pygame.error): pass
    return pygame.font.Font(None, size)


class Game:
    def __init__(self, session=None):
        pygame.init()
        self.screen = pygame.display.set_mode((SW + PANEL_W, SH))
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.fonts = (make_font(20, True), make_font(44, True), make_font(15))

        self.session = session or Session()

        # Pre-allocate reusable surfaces (ไม่ต้องสร้างใหม่ทุกเฟรม)
        self._night_surf = pygame.Surface((SW, SH), pygame.SRCALPHA)
        self._glow = make_glow()

        self.frame   = 0
        self.running = True

    # ── Main loop ──
    def run(self):
        logger.info("Starting %s (seed %s)", TITLE, self.session.world.seed)
        while self.running:
            self._events()
            if not self.running: break
            self.step(Controls.from_keys(pygame.key.get_pressed()))
            self.clock.tick(FPS)
        pygame.quit()

    def step(self, ctl):
        """One frame: world → player → scene → UI."""
        self.session.tick(ctl)
        self._draw()
        self.frame += 1

    # ── Events ──
    def _events(self):
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.running = False; return
            if ev.type == pygame.KEYDOWN:
                self.on_key(ev.key)

    def on_key(self, key):
        if key == QUIT_KEY:
            self.running = False
        elif key == HARVEST_KEY:
            self.session.harvest()
        elif key == CRAFT_KEY:
            self.session.craft_random()

    # ── Draw ──
    def _draw(self):
        try:
            self._draw_inner()
        except Exception:
            logger.exception("draw failed at frame %d", self.frame)

    def _draw_inner(self):
        surf, s = self.screen, self.session
        if s.over:
            draw_gameover(surf, self.fonts, s, self.frame)
        else:
            draw_scene(surf, s, self._night_surf, self._glow)
            draw_panels(surf, self.fonts, s)
            draw_notifs(surf, self.fonts, s.notifs)
            draw_fps(surf, self.fonts[2], self.clock.get_fps())
        pygame.display.flip()
