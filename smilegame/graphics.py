"""Window, display and texture helpers built on pygame."""

from __future__ import annotations

import os

import pygame


class GraphicsError(RuntimeError):
    """Raised when the display or an image cannot be set up."""


def init() -> None:
    """Start the video subsystem and make sure PNG loading is available."""
    try:
        pygame.display.init()
    except pygame.error as exc:
        raise GraphicsError(f"display init failed: {exc}") from exc
    if not pygame.image.get_extended():
        raise GraphicsError("image init failed: PNG loading is not available")


def create_window(title: str, width: int, height: int) -> pygame.Surface:
    """Open a centred window of the given size and return its surface."""
    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    try:
        screen = pygame.display.set_mode((width, height))
    except pygame.error as exc:
        raise GraphicsError(f"window creation failed: {exc}") from exc
    pygame.display.set_caption(title)
    return screen


def load_texture(path: str | os.PathLike[str]) -> pygame.Surface:
    """Load an image file into a surface."""
    try:
        return pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as exc:
        raise GraphicsError(f"could not load texture {path!s}: {exc}") from exc


def cleanup() -> None:
    """Close the window and shut pygame down."""
    pygame.display.quit()
    pygame.quit()