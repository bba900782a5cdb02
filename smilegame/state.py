"""Game state: the list of actors, the screen and the keyboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

import pygame

from smilegame.actor import GameActor
from smilegame.graphics import load_texture

_CLEAR_COLOUR = (0, 0, 0)


@dataclass(eq=False)
class GameState:
    """Everything a frame needs: screen, actors, keyboard and texture loader."""

    screen: pygame.Surface | None
    objects: list[GameActor] = field(default_factory=list)
    keyboard: Callable[[], Sequence[bool]] = pygame.key.get_pressed
    texture_loader: Callable[[str], Any] = load_texture

    @property
    def keyboard_state(self) -> Sequence[bool]:
        """Current pressed state of every key."""
        return self.keyboard()

    def render_frame(self) -> None:
        """Clear the screen, draw every actor and present the frame."""
        if self.screen is None:
            return
        self.screen.fill(_CLEAR_COLOUR)
        if not self.objects:
            return
        for obj in self.objects:
            if obj.texture is None:
                continue
            rect = obj.rect()
            if rect.width <= 0 or rect.height <= 0:
                continue
            scaled = pygame.transform.scale(obj.texture, rect.size)
            self.screen.blit(scaled, rect.topleft)
        if pygame.display.get_init() and pygame.display.get_surface() is self.screen:
            pygame.display.flip()

    def add_object(self, obj: GameActor) -> None:
        """Append an actor to the scene."""
        self.objects.append(obj)

    def remove_object(self, obj: GameActor) -> None:
        """Remove an actor from the scene; unknown actors are ignored."""
        for position, candidate in enumerate(self.objects):
            if candidate is obj:
                del self.objects[position]
                candidate.texture = None
                return

    def close(self) -> None:
        """Remove every actor and release the screen."""
        for obj in list(self.objects):
            self.remove_object(obj)
        self.screen = None

    def __enter__(self) -> GameState:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()