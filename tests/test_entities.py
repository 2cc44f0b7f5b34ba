"""Tests for Player, ResourceNode and Structure."""
from __future__ import annotations

import math

import pytest

from config import SW, SH, TILE, PLAYER_SIZE, Res, Recipe
from controls import Controls, IDLE
from entities import Player, ResourceNode, Structure
from world import World


def night_world() -> World:
    w = World(day_frames=1)
    w.update()
    assert w.night
    return w


class TestMovement:
    def test_single_direction(self, player: Player, world: World) -> None:
        player.update(world, [], Controls(right=True))
        assert (player.x, player.y) == (105, 100)
        player.update(world, [], Controls(up=True))
        assert (player.x, player.y) == (105, 95)

    def test_diagonal_is_not_normalised(self, player: Player, world: World) -> None:
        player.update(world, [], Controls(down=True, left=True))
        assert (player.x, player.y) == (95, 105)
        assert math.hypot(5, 5) > player.speed

    def test_opposite_keys_cancel(self, player: Player, world: World) -> None:
        player.update(world, [], Controls(True, True, True, True))
        assert (player.x, player.y) == (100, 100)

    def test_clamped_to_bounds(self, world: World) -> None:
        p = Player(SW - PLAYER_SIZE - 2, 1)
        p.update(world, [], Controls(up=True, right=True))
        assert p.x == SW - PLAYER_SIZE
        assert p.y == 0
        p = Player(0, SH - PLAYER_SIZE)
        p.update(world, [], Controls(down=True, left=True))
        assert (p.x, p.y) == (0, SH - PLAYER_SIZE)


class TestSurvivalStats:
    def test_hunger_drains_and_floors(self, player: Player, world: World) -> None:
        player.update(world, [], IDLE)
        assert player.hunger == pytest.approx(99.995)
        player.hunger = 0.001
        player.update(world, [], IDLE)
        assert player.hunger == 0

    def test_warmth_drains_faster_at_night(self, player: Player, world: World) -> None:
        player.warmth = 50
        player.update(world, [], IDLE)
        assert player.warmth == pytest.approx(49.99)
        player.warmth = 50
        player.update(night_world(), [], IDLE)
        assert player.warmth == pytest.approx(49.98)

    def test_fire_gives_net_warmth(self, player: Player, world: World) -> None:
        fire = Structure(player.x + TILE, player.y + TILE, Recipe.CAMPFIRE)
        player.warmth = 50
        player.update(world, [fire], IDLE)
        assert player.near_fire is True
        assert player.warmth == pytest.approx(50.01)
        player.warmth = 50
        player.update(night_world(), [fire], IDLE)
        assert player.warmth == pytest.approx(50.02)

    def test_warmth_capped_near_fire(self, player: Player, world: World) -> None:
        fire = Structure(player.x, player.y, Recipe.CAMPFIRE)
        player.update(world, [fire], IDLE)
        assert player.warmth == 100

    def test_warmth_floors_at_zero(self, player: Player) -> None:
        player.warmth = 0.005
        player.update(night_world(), [], IDLE)
        assert player.warmth == 0

    def test_health_regenerates_when_fed_and_warm(self, player: Player, world: World) -> None:
        player.health = 50
        player.update(world, [], IDLE)
        assert player.health == pytest.approx(50.01)

    def test_health_drains_when_hungry(self, player: Player, world: World) -> None:
        player.health = 50
        player.hunger = 30
        player.update(world, [], IDLE)
        assert player.health == pytest.approx(49.995)

    def test_health_drains_when_cold(self, player: Player, world: World) -> None:
        player.health = 50
        player.warmth = 20
        player.update(world, [], IDLE)
        assert player.health == pytest.approx(49.995)

    def test_health_capped(self, player: Player, world: World) -> None:
        player.update(world, [], IDLE)
        assert player.health == 100


class TestDeath:
    def test_callback_fires_once(self, world: World) -> None:
        calls = []
        p = Player(100, 100, on_dead=lambda: calls.append(1))
        p.health = 0.004
        p.hunger = 0
        p.update(world, [], IDLE)
        assert p.health == 0
        assert p.dead is True
        p.update(world, [], IDLE)
        p.update(world, [], Controls(right=True))
        assert calls == [1]

    def test_dead_player_is_frozen(self, player: Player, world: World) -> None:
        player.dead = True
        player.update(world, [], Controls(right=True))
        assert player.x == 100
        assert player.hunger == 100

    def test_no_callback_above_zero(self, world: World) -> None:
        calls = []
        p = Player(100, 100, on_dead=lambda: calls.append(1))
        p.health = 0.5
        p.hunger = 0
        p.update(world, [], IDLE)
        assert calls == []


class TestFireProximity:
    def test_near_heat_structure(self, player: Player) -> None:
        assert player.check_fire([Structure(150, 150, Recipe.CAMPFIRE)]) is True

    def test_far_heat_structure(self, player: Player) -> None:
        assert player.check_fire([Structure(400, 400, Recipe.CAMPFIRE)]) is False

    def test_exact_range_is_outside(self) -> None:
        p = Player(0, 0)
        # centres (20, 20) and (120, 20): exactly 2 tiles apart
        assert p.check_fire([Structure(95, -5, Recipe.CAMPFIRE)]) is False
        assert p.check_fire([Structure(94, -5, Recipe.CAMPFIRE)]) is True

    def test_cold_structure_ignored(self, player: Player) -> None:
        assert player.check_fire([Structure(110, 110, Recipe.WOODEN_PICKAXE)]) is False

    def test_any_structure_counts(self, player: Player) -> None:
        structs = [Structure(800, 600, Recipe.CAMPFIRE), Structure(120, 100, Recipe.CAMPFIRE)]
        assert player.check_fire(structs) is True

    def test_flag_cleared_when_walking_away(self, player: Player, world: World) -> None:
        fire = Structure(150, 150, Recipe.CAMPFIRE)
        player.update(world, [fire], IDLE)
        assert player.near_fire is True
        player.x = 600
        player.update(world, [fire], IDLE)
        assert player.near_fire is False


class TestInventory:
    def test_starts_empty(self, player: Player) -> None:
        assert player.inv == {"wood": 0, "stone": 0, "berries": 0}
        assert player.selected is None

    def test_harvest_adds(self, player: Player) -> None:
        player.harvest(Res.WOOD, 3)
        player.harvest("wood", 2)
        assert player.inv[Res.WOOD] == 5

    def test_harvest_creates_missing_entry(self, player: Player) -> None:
        player.inv = {}
        player.harvest(Res.STONE, 2)
        assert player.inv == {Res.STONE: 2}


class TestCraft:
    def test_campfire_consumes_wood_and_places_structure(self, player: Player) -> None:
        player.inv = {Res.WOOD: 10}
        structures = []
        assert player.craft(Recipe.CAMPFIRE, structures) is True
        assert player.inv == {Res.WOOD: 0}
        assert len(structures) == 1
        s = structures[0]
        assert s.heat is True
        assert (s.x, s.y) == (player.x + TILE, player.y + TILE)
        assert player.selected is None

    def test_insufficient_materials_changes_nothing(self, player: Player) -> None:
        player.inv = {Res.WOOD: 9, Res.STONE: 4}
        structures = []
        for r in Recipe:
            assert player.craft(r, structures) is False
        assert player.inv == {Res.WOOD: 9, Res.STONE: 4}
        assert structures == []
        assert player.selected is None

    def test_missing_material_entry(self, player: Player) -> None:
        player.inv = {}
        assert player.craft("campfire", []) is False
        assert player.inv == {}

    def test_tool_and_weapon_selection_overwrites(self, player: Player) -> None:
        player.inv[Res.WOOD] = 25
        structures = []
        assert player.craft("wooden_pickaxe", structures) is True
        assert player.selected == Recipe.WOODEN_PICKAXE
        assert player.craft(Recipe.WOODEN_SWORD, structures) is True
        assert player.selected == "wooden_sword"
        assert player.inv[Res.WOOD] == 5
        assert structures == []

    def test_unknown_recipe(self, player: Player) -> None:
        with pytest.raises(ValueError):
            player.craft("stone_axe", [])


class TestResourceNode:
    def test_last_unit_depletes(self) -> None:
        node = ResourceNode(0, 0, Res.BERRIES, 1)
        assert node.take() == 1
        assert node.amount == 0
        assert node.depleted is True

    def test_depleted_node_yields_nothing(self) -> None:
        node = ResourceNode(0, 0, "stone", 1)
        node.take()
        assert node.take() == 0
        assert node.amount == 0

    def test_take_more_than_left(self) -> None:
        node = ResourceNode(0, 0, Res.WOOD, 2)
        assert node.take(5) == 2
        assert node.depleted is True

    def test_colour_follows_type(self) -> None:
        assert ResourceNode(0, 0, Res.WOOD, 1).col == Res.WOOD.col

    def test_harvest_time_metadata(self) -> None:
        assert [r.harvest_time for r in Res] == [2, 3, 1]


class TestStructure:
    def test_heat_from_recipe(self) -> None:
        assert Structure(0, 0, "campfire").heat is True
        assert Structure(0, 0, Recipe.WOODEN_SWORD).heat is False

    def test_size_is_one_tile(self) -> None:
        assert Structure(0, 0, Recipe.CAMPFIRE).size == TILE
