# spritewalk

A small pygame program that loads a spritesheet and lets you walk the
character around a window with the keyboard. The animation frame advances
while the character walks and goes back to the first frame when it stops.

## Installing

```
pip install .
```

## Running

```
spritewalk
```

A window titled "Animacao de Sprite" opens with the character in the middle.
Once it is running, the title is replaced by the frame rate
(`opengl @ fps: ...`), refreshed every quarter of a second.

Options:

```
spritewalk [SPRITESHEET] [--animations N] [--frames N]
           [--width W] [--height H] [--log PATH] [--max-frames N]
```

- `SPRITESHEET`: image to load, `sully.png` by default.
- `--animations`: rows in the sheet, 4 by default.
- `--frames`: columns in the sheet, 4 by default.
- `--width`, `--height`: window size, 800 by 600 by default. The window can
  be resized; each resize prints the new size.
- `--log`: log file, `gl.log` by default. Start-up messages (pygame version
  and display driver) are appended to it.
- `--max-frames`: stop after this many frames.

If the image cannot be loaded, `Failed to load texture` is printed and the
window stays empty.

Each row of the sheet is one walking direction. Counting from the bottom row:

| Row | Direction |
|-----|-----------|
| 0   | south (down) |
| 1   | east (right) |
| 2   | west (left) |
| 3   | north (up) |

### Controls

- `W` / `Up`: walk up
- `S` / `Down`: walk down
- `A` / `Left`: walk left
- `D` / `Right`: walk right
- `Escape` or closing the window: quit

Diagonal movement is normalised, so it is no faster than walking straight.
When a horizontal and a vertical key are held together, the horizontal
direction's row is shown.

## Using it as a library

- `spritewalk.sprite.Sprite` slices a spritesheet into frames
  (`frame_offset`, `frame_rect`), picks a row with `set_animation`, advances
  the frame with `update` while `is_moving` is set, and draws the current
  frame onto a surface with `draw`. Positions run from -1 to 1 on both axes,
  with y pointing up. A `clock` callable can be passed in to control timing.
- `spritewalk.character.CharacterController` is a `Sprite` whose
  `handle_input` takes a key-state lookup such as
  `pygame.key.get_pressed()` and sets its velocity and row
  (`spritewalk.character.Direction`); `update` moves it at a speed of 0.5
  units per second.
- `spritewalk.gllog.GLLog` appends printf-style messages to a log file
  (`log`, `log_err`, which also writes to stderr) and can truncate it with a
  timestamped header (`restart`). `read_shader_source` reads a text file,
  logging a complaint when it grows past a length limit.
- `spritewalk.app.FpsCounter` counts frames and returns a new title string
  from `tick` when one is due. `spritewalk.app.main` is the command above.

## Tests

```
pip install .[test]
pytest
```