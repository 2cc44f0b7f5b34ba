"""Tests for the per-tick input snapshot."""
from __future__ import annotations

from collections import defaultdict

import pygame

from controls import IDLE, Controls


def keys(*pressed: int) -> defaultdict:
    return defaultdict(bool, {k: True for k in pressed})


class TestControls:
    def test_idle(self) -> None:
        assert IDLE == Controls(False, False, False, False)
        assert Controls.from_keys(keys()) == IDLE

    def test_wasd(self) -> None:
        ctl = Controls.from_keys(keys(pygame.K_w, pygame.K_d))
        assert ctl == Controls(up=True, right=True)

    def test_arrows(self) -> None:
        ctl = Controls.from_keys(keys(pygame.K_DOWN, pygame.K_LEFT))
        assert ctl == Controls(down=True, left=True)

    def test_mixed_bindings(self) -> None:
        ctl = Controls.from_keys(keys(pygame.K_UP, pygame.K_s, pygame.K_a, pygame.K_RIGHT))
        assert ctl == Controls(True, True, True, True)
