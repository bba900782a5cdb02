"""Game actors: textured, positioned objects that systems act on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pygame

from smilegame.vector import Vector


@dataclass(eq=False)
class GameActor:
    """A drawable object with a position, a size, a velocity and system flags."""

    texture: Any
    position: Vector
    width: int
    height: int
    velocity: Vector = field(default_factory=Vector)
    system: int = 0

    def apply_systems(self, systems: int) -> None:
        """Set the flags of the systems that act on this actor."""
        self.system = systems

    def rect(self) -> pygame.Rect:
        """Screen rectangle of the actor, position truncated to whole pixels."""
        return pygame.Rect(
            int(self.position.x), int(self.position.y), self.width, self.height
        )


@dataclass(eq=False)
class Player:
    """A player entity wrapping its on-screen actor."""

    graphic: GameActor
    systems: int = 0


def create_game_actor(
    state: Any, texture_path: str, position: Vector, width: int, height: int
) -> GameActor:
    """Create an actor whose texture is loaded through the state's loader."""
    texture = state.texture_loader(texture_path)
    return GameActor(
        texture=texture,
        position=Vector(position.x, position.y),
        width=width,
        height=height,
    )