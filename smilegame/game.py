"""The game itself: scene setup, the per-frame loop and the entry point."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterable, Sequence

import pygame

from smilegame.actor import GameActor, create_game_actor
from smilegame.graphics import GraphicsError, cleanup, create_window, init
from smilegame.state import GameState
from smilegame.systems import System, SystemFlag, get_game_systems
from smilegame.vector import Vector

SMILE_TEXTURE = "assets/smile.jpg"
WINDOW_TITLE = "Test"
WINDOW_SIZE = (640, 480)
FRAME_DELAY = 0.01


def init_game(state: GameState) -> GameActor:
    """Place the smile actor in the scene and return it."""
    smile = create_game_actor(state, SMILE_TEXTURE, Vector(250, 0), 50, 50)
    smile.apply_systems(SystemFlag.MOVEMENT | SystemFlag.CONTROL | SystemFlag.GRAVITY)
    state.add_object(smile)
    return smile


def loop(state: GameState, systems: Iterable[System]) -> None:
    """Run one frame: apply every system to every actor, then draw."""
    systems = list(systems)
    for obj in list(state.objects):
        for system in systems:
            system(state, obj)
    state.render_frame()
    time.sleep(FRAME_DELAY)


def _quit_requested() -> bool:
    return any(event.type == pygame.QUIT for event in pygame.event.get())


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="smilegame", description="Run the game.")
    parser.parse_args(argv)

    try:
        init()
    except GraphicsError as exc:
        print(exc, file=sys.stderr)
        print("Error occurred during init. Exiting.")
        return 1

    try:
        try:
            screen = create_window(WINDOW_TITLE, *WINDOW_SIZE)
        except GraphicsError as exc:
            print(exc, file=sys.stderr)
            print("Window failed to allocate. Exiting.")
            return 1

        with GameState(screen) as state:
            try:
                init_game(state)
            except GraphicsError as exc:
                print(exc, file=sys.stderr)
                print("Game failed to start. Exiting.")
                return 1

            systems = get_game_systems()
            finished = False
            while not finished:
                finished = _quit_requested()
                loop(state, systems)
    finally:
        cleanup()
    return 0