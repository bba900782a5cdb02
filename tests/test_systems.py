from collections import defaultdict

import pygame
import pytest

from smilegame.actor import GameActor
from smilegame.state import GameState
from smilegame.systems import (
    Controls,
    System,
    SystemFlag,
    apply_collision,
    apply_gravity,
    apply_movement,
    get_game_systems,
)
from smilegame.vector import Vector


def make_state(pressed=()):
    keys = defaultdict(bool)
    for key in pressed:
        keys[key] = True
    state = GameState(screen=None, keyboard=lambda: keys, texture_loader=lambda p: p)
    return state, keys


def make_actor(flags, x=0.0, y=0.0, width=10, height=10):
    actor = GameActor(texture=None, position=Vector(x, y), width=width, height=height)
    actor.apply_systems(flags)
    return actor


def test_gravity_adds_downward_step():
    state, _ = make_state()
    actor = make_actor(SystemFlag.GRAVITY)
    apply_gravity(state, actor)
    assert actor.velocity.x == 0.0
    assert actor.velocity.y == pytest.approx(0.1)


def test_gravity_ignores_actor_without_flag():
    state, _ = make_state()
    actor = make_actor(SystemFlag.MOVEMENT)
    apply_gravity(state, actor)
    assert actor.velocity == Vector(0.0, 0.0)


def test_movement_adds_velocity_to_position():
    state, _ = make_state()
    actor = make_actor(SystemFlag.MOVEMENT, x=3.0, y=7.0)
    actor.velocity = Vector(1.5, -2.0)
    apply_movement(state, actor)
    assert actor.position == Vector(4.5, 5.0)


def test_movement_ignores_actor_without_flag():
    state, _ = make_state()
    actor = make_actor(SystemFlag.GRAVITY, x=3.0, y=7.0)
    actor.velocity = Vector(1.5, -2.0)
    apply_movement(state, actor)
    assert actor.position == Vector(3.0, 7.0)


def test_controls_left_and_right():
    controls = Controls()
    state, _ = make_state([pygame.K_a])
    actor = make_actor(SystemFlag.CONTROL)
    controls(state, actor)
    assert actor.velocity.x == pytest.approx(-0.5)

    state, _ = make_state([pygame.K_d])
    other = make_actor(SystemFlag.CONTROL)
    controls(state, other)
    assert other.velocity.x == pytest.approx(0.5)


def test_controls_both_directions_cancel():
    controls = Controls()
    state, _ = make_state([pygame.K_a, pygame.K_d])
    actor = make_actor(SystemFlag.CONTROL)
    controls(state, actor)
    assert actor.velocity.x == pytest.approx(0.0)


def test_jump_only_once_per_press():
    controls = Controls()
    state, keys = make_state([pygame.K_SPACE])
    actor = make_actor(SystemFlag.CONTROL)
    controls(state, actor)
    assert actor.velocity.y == pytest.approx(-5.0)
    assert controls.jump_held is True

    actor.velocity.y = 0.0
    controls(state, actor)
    assert actor.velocity.y == 0.0

    keys[pygame.K_SPACE] = False
    controls(state, actor)
    assert controls.jump_held is False

    keys[pygame.K_SPACE] = True
    controls(state, actor)
    assert actor.velocity.y == pytest.approx(-5.0)


def test_controls_ignore_actor_without_flag():
    controls = Controls()
    state, _ = make_state([pygame.K_a, pygame.K_SPACE])
    actor = make_actor(SystemFlag.GRAVITY)
    controls(state, actor)
    assert actor.velocity == Vector(0.0, 0.0)
    assert controls.jump_held is False


def test_collision_finds_overlapping_others():
    state, _ = make_state()
    subject = make_actor(SystemFlag.COLLISION, x=0, y=0)
    touching = make_actor(0, x=5, y=5)
    far = make_actor(0, x=100, y=100)
    for actor in (subject, touching, far):
        state.add_object(actor)
    assert apply_collision(state, subject) == [touching]


def test_collision_without_flag_finds_nothing():
    state, _ = make_state()
    subject = make_actor(SystemFlag.GRAVITY, x=0, y=0)
    touching = make_actor(0, x=5, y=5)
    state.add_object(subject)
    state.add_object(touching)
    assert apply_collision(state, subject) == []


def test_collision_edges_touching_do_not_overlap():
    state, _ = make_state()
    subject = make_actor(SystemFlag.COLLISION, x=0, y=0)
    neighbour = make_actor(0, x=10, y=0)
    state.add_object(subject)
    state.add_object(neighbour)
    assert apply_collision(state, subject) == []


def test_system_call_delegates():
    calls = []
    system = System(SystemFlag.GRAVITY, lambda state, obj: calls.append((state, obj)))
    state, _ = make_state()
    actor = make_actor(SystemFlag.GRAVITY)
    system(state, actor)
    assert calls == [(state, actor)]


def test_game_systems_order():
    systems = get_game_systems()
    assert [s.system_id for s in systems] == [
        SystemFlag.GRAVITY,
        SystemFlag.CONTROL,
        SystemFlag.MOVEMENT,
    ]


def test_flags_combine_as_bits():
    state, _ = make_state()
    combined = SystemFlag.MOVEMENT | SystemFlag.CONTROL | SystemFlag.GRAVITY
    subject = make_actor(combined, x=0, y=0)
    overlapping = make_actor(0, x=5, y=5)
    state.add_object(subject)
    state.add_object(overlapping)

    apply_gravity(state, subject)
    assert subject.velocity.y == pytest.approx(0.1)
    assert apply_collision(state, subject) == []