# minigin

A small 2D game engine on top of pygame. It has these parts:

- `minigin.engine.Minigin`, the engine. It opens a 640×480 window titled
  "Programming 4 assignment". `run(load)` first calls `load()` and then runs
  frames at about 60 per second until a quit request arrives. Each frame it
  makes as many `fixed_update(0.02)` calls as the time that has built up
  allows, then one `update(delta_time)` and one render. The engine is a
  context manager, and `close()` shuts the window and pygame down.
- `minigin.scene_manager.SceneManager` creates scenes with
  `create_scene(name)`. It passes `update`, `fixed_update` and `render` calls
  to every scene in the order they were created.
- `minigin.scene.Scene` holds game objects in the order they were added, with
  `add`, `remove` and `remove_all`. It can be iterated and has a length.
- `minigin.game_object.GameObject` has a `Transform` position and an optional
  texture. `set_texture(filename)` loads the texture through the resource
  manager, and `render()` draws it at the object's position.
- `minigin.text_object.TextObject` is a `GameObject` that draws white text in
  a given `Font`. The text texture is rebuilt on the next `update` after
  `set_text` (or assigning `text`) changes the text.
- `minigin.resource_manager.ResourceManager` loads textures
  (`load_texture(file)`) and fonts (`load_font(file, size)`, with size from 0
  to 255) relative to its data directory. Each one is cached. The cache key is
  the file name alone for textures, and the file name plus the size for fonts.
- `minigin.renderer.Renderer` fills its window surface with
  `background_color`, renders every scene and flips the display.
  `render_texture(texture, x, y, width=None, height=None)` draws a texture,
  scaled if both width and height are given.
- `minigin.input_manager.InputManager` empties the event queue.
  `process_input()` returns `False` when it finds a quit event.
- `minigin.texture.Texture2D` wraps a pygame surface. `Texture2D.from_file`
  loads one from an image file, and `size` gives its width and height.
- `minigin.font.Font` is a pygame font loaded from a file at a given size.

`SceneManager`, `ResourceManager`, `Renderer` and `InputManager` are
singletons. Use `get_instance()` to get the shared instance.

Errors when loading a texture, font or window are raised as `RuntimeError`.

## Installation

```
pip install .
```

## Running the demo

```
minigin
```

The demo uses the `Data` directory under the current directory. If that
directory does not exist, it uses `../Data` instead. It loads these files
from there:

- `background.tga`
- `logo.tga`
- the font `Lingua.otf`

It shows the background, the logo at (216, 180) and the text
"Programming 4 Assignment" at (80, 20). Close the window to quit.

While it runs, the engine prints the leftover lag and the frame time on every
frame. `GameObject.fixed_update` prints the step length on every fixed step,
so expect a lot of console output.

## Using the engine

```python
from minigin.engine import Minigin
from minigin.game_object import GameObject
from minigin.resource_manager import ResourceManager
from minigin.scene_manager import SceneManager
from minigin.text_object import TextObject


def load():
    scene = SceneManager.get_instance().create_scene("Demo")

    background = GameObject()
    background.set_texture("background.tga")
    scene.add(background)

    font = ResourceManager.get_instance().load_font("Lingua.otf", 36)
    title = TextObject("Hello", font)
    title.set_position(80, 20)
    scene.add(title)


with Minigin("./Data/") as engine:
    engine.run(load)
```

`minigin.main.find_data_path(base)` picks the data directory the way the
demo does.

## What it does not do

- Keyboard and mouse events are read and thrown away. The only input the
  engine acts on is the request to close the window.
- Text is always drawn in white.
- Scenes cannot be switched or removed. Every scene that has been created is
  updated and rendered on every frame.

## Tests

```
pip install .[test]
pytest
```