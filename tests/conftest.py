"""Shared fixtures; pygame runs headless."""
from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from entities import Player
from session import Session
from world import World


@pytest.fixture
def world() -> World:
    return World(seed=7)


@pytest.fixture
def player() -> Player:
    return Player(100, 100)


@pytest.fixture
def session() -> Session:
    s = Session(seed=42)
    s.nodes.clear()
    return s


@pytest.fixture
def fonts():
    pygame.font.init()
    return (pygame.font.Font(None, 20), pygame.font.Font(None, 44), pygame.font.Font(None, 15))
