"""Systems that update game actors every frame, selected by flag bits."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable

import pygame

from smilegame.actor import GameActor
from smilegame.vector import Vector

_GRAVITY_STEP = Vector(0.0, 0.1)
_LEFT_STEP = Vector(-0.5, 0.0)
_RIGHT_STEP = Vector(0.5, 0.0)
_JUMP_VELOCITY = -5.0


class SystemFlag(enum.IntFlag):
    """Bits that select which systems act on an actor."""

    GRAVITY = 1
    MOVEMENT = 2
    CONTROL = 4
    COLLISION = 8


def _has_flag(obj: GameActor | None, flag: SystemFlag) -> bool:
    return obj is not None and (obj.system & flag) == flag


@dataclass(frozen=True)
class System:
    """A system identified by its flag, applied to one actor at a time."""

    system_id: SystemFlag
    apply: Callable[[Any, GameActor | None], Any]

    def __call__(self, state: Any, obj: GameActor | None) -> Any:
        return self.apply(state, obj)


class Controls:
    """Keyboard control: A and D steer sideways, space jumps once per press."""

    def __init__(self) -> None:
        self.jump_held = False

    def __call__(self, state: Any, obj: GameActor | None) -> None:
        if not _has_flag(obj, SystemFlag.CONTROL):
            return
        keys = state.keyboard_state
        if keys[pygame.K_a]:
            obj.velocity += _LEFT_STEP
        if keys[pygame.K_d]:
            obj.velocity += _RIGHT_STEP
        space = bool(keys[pygame.K_SPACE])
        if space and not self.jump_held:
            obj.velocity.y = _JUMP_VELOCITY
            self.jump_held = True
        elif not space and self.jump_held:
            self.jump_held = False


def apply_gravity(state: Any, obj: GameActor | None) -> None:
    """Pull the actor's velocity downwards by a fixed step."""
    if not _has_flag(obj, SystemFlag.GRAVITY):
        return
    obj.velocity += _GRAVITY_STEP


def apply_movement(state: Any, obj: GameActor | None) -> None:
    """Move the actor by its velocity."""
    if not _has_flag(obj, SystemFlag.MOVEMENT):
        return
    obj.position += obj.velocity


def _overlaps(first: GameActor, second: GameActor) -> bool:
    return (
        first.position.x < second.position.x + second.width
        and first.position.x + first.width > second.position.x
        and first.position.y < second.position.y + second.height
        and first.position.y + first.height > second.position.y
    )


def apply_collision(state: Any, obj: GameActor | None) -> list[GameActor]:
    """Return the other actors whose boxes overlap the actor's box."""
    if not _has_flag(obj, SystemFlag.COLLISION):
        return []
    return [
        other
        for other in state.objects
        if other is not obj and _overlaps(other, obj)
    ]


gravity_system = System(SystemFlag.GRAVITY, apply_gravity)
controls_system = System(SystemFlag.CONTROL, Controls())
movement_system = System(SystemFlag.MOVEMENT, apply_movement)
collision_system = System(SystemFlag.COLLISION, apply_collision)


def get_game_systems() -> list[System]:
    """Systems run each frame, in the order they are applied."""
    return [gravity_system, controls_system, movement_system]