# smilegame

A small game built on an entity-system core. It opens a 640×480 window titled
"Test" that shows a 50×50 smiley face. Gravity pulls the face down. You can
push it sideways and make it jump.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Playing

```
smilegame
```

The game loads its picture from `assets/smile.jpg`, relative to the current
directory. The package does not include that file. Start the game from a
directory that holds it. If the picture cannot be loaded, the game prints
`Game failed to start. Exiting.` and stops. The display must also support
extended image formats, or start-up fails with `Error occurred during init.`

Controls:

| Key   | Action                                     |
|-------|--------------------------------------------|
| A     | accelerate left (velocity −0.5 per frame)  |
| D     | accelerate right (velocity +0.5 per frame) |
| Space | jump (release and press again to re-jump)  |

To quit, close the window. Each frame is followed by a 10 ms pause.

## Building your own scene

The pieces that run the game can also be used from code.

- `smilegame.vector.Vector` is a mutable 2-D vector of floats. It supports
  `+` and `+=`.
- `smilegame.actor.GameActor` holds a texture, a position, a size, a velocity
  and a set of system flags. `apply_systems(flags)` sets the flags. `rect()`
  returns its screen rectangle as a `pygame.Rect`.
- `smilegame.actor.create_game_actor(state, texture_path, position, width, height)`
  builds an actor. It loads the texture through `state.texture_loader`.
- `smilegame.actor.Player` pairs an actor with its own system flags.
- `smilegame.state.GameState(screen)` holds the actors. It has these parts:
  - `add_object` and `remove_object` add and remove actors. Removing an
    unknown actor does nothing.
  - `render_frame()` clears the screen to black and draws each actor scaled
    to its size.
  - `keyboard_state` reports the pressed keys.
  - `close()` removes every actor and releases the screen. The state is also a
    context manager, and leaving the `with` block calls `close()`.
  - The `keyboard` and `texture_loader` fields can be replaced, for example to
    run without a display.
- `smilegame.systems` provides the systems:
  - `SystemFlag` has the flags `GRAVITY`, `MOVEMENT`, `CONTROL` and
    `COLLISION`.
  - The functions `apply_gravity`, `apply_movement` and `apply_collision`
    act on one actor, and so does a `Controls` instance.
  - `System` pairs a flag with one of these functions and can be called as
    `system(state, actor)`.
  - `get_game_systems()` returns the gravity, controls and movement systems,
    in the order they run on each frame.
- `smilegame.game.init_game(state)` adds the smiley actor and returns it.
  `smilegame.game.loop(state, systems)` runs one frame: it applies every
  system to every actor, renders, then pauses.
- `smilegame.graphics` has the display helpers `init`, `create_window`,
  `load_texture` and `cleanup`. Each raises `GraphicsError` when it fails.

## What it does not do

- There is no floor and no screen edge. The face falls out of the window
  unless you keep it up by jumping.
- `apply_collision` only returns the other actors whose boxes overlap the
  given one. It is not among the systems run each frame, and nothing reacts
  to collisions.
- There is no scoring, no levels and no frame-rate control beyond the fixed
  pause after each frame.

## Running the tests

```
pytest
```