# refprism

The game logic of RefPrism, a top-down arcade game. A laser cannon sits in
the middle of the field and fires a beam at a crystal that you steer. The
crystal either reflects or refracts the beam, and the bent beam destroys the
enemies that close in on the cannon. Every enemy that reaches the cannon
costs one point of health; every enemy the beam hits adds a random 10 to 50
points to your score. When health runs out the game fades to the result
screen.

The package holds everything that decides how the game plays, with no
window or graphics device attached, so it can be driven frame by frame from
your own code, a test, or any front end you choose.

## What is inside

- `refprism.vector` – `Vector2`, `Vector3`, `Vector4` and `Color`, with dot
  and cross products, normalisation, and the `reflect` / `refract` rules the
  beam follows (refraction uses a 1 : 1.5 index ratio and falls back to
  reflection on total internal reflection). `rotation_rows` and
  `look_at_lh` build the rotation and view bases used for facing and camera.
- `refprism.gameobject` – `GameObject`, the base of every entity, with its
  position, rotation, scale, radius, component list and direction vectors
  (`up`, `forward`, `right`); `Component`; and `Quad` / `make_quad` for
  screen-space rectangles.
- `refprism.input` – `Keyboard`, which tracks which `Key`s are held and
  which were pressed this frame.
- `refprism.scene` – `Scene`, with its `Layer`s of game objects, and
  `Manager`, which runs the current scene, switches scenes and owns the
  random number generator.
- `refprism.model` – `load_obj` and `load_material` read Wavefront OBJ and
  MTL files into `Model`, `Subset`, `Vertex` and `Material` values;
  `ModelCache` keeps each file loaded once.
- `refprism.laser`, `refprism.player`, `refprism.obstacle`,
  `refprism.particles`, `refprism.camera`, `refprism.score`,
  `refprism.health`, `refprism.fade`, `refprism.prism` – the entities of
  the game.
- `refprism.scenes` – `TitleScene`, `GameScene`, `ResultScene`, and
  `new_game`, which returns a manager running the title scene.

## Playing a game from code

```python
from refprism.scenes import new_game
from refprism.input import Key

manager = new_game(seed=1)

# One frame: feed in the keys held down, then advance and draw.
manager.update({Key.W})
manager.draw()
```

`Manager.update` takes the set of keys held during the frame; a key counts
as triggered on the first frame it appears. Scene changes requested during
an update take effect at the end of the following `draw`.

The crystal moves with `Key.W`, `Key.A`, `Key.S` and `Key.D`, turns with
`Key.LEFT` and `Key.RIGHT`, and `Key.SPACE` switches the bent beam between
reflection and refraction. `Key.RETURN` starts the game from the title
screen, ends a game early, and returns to the title from the results.

## Using the vector maths on its own

```python
from refprism.vector import Vector3

beam = Vector3(1.0, 0.0, -1.0)
face = Vector3(0.0, 0.0, 1.0)

bounced = beam.reflect(face)   # unit vector mirrored about the face
bent = beam.refract(face)      # unit vector bent into the crystal
```

## Loading a model

```python
from refprism.model import ModelCache

cache = ModelCache()
model = cache.load("path/to/cylinder.obj")
```

Quads in the OBJ file are split into two triangles, texture coordinates are
flipped (`1 - u`, `1 - v`), and each `usemtl` starts a new subset with the
material of that name from the file's `mtllib`. A subset's
`texture_enable` is set when its texture file exists.

## What it does not do

- It opens no window, draws nothing on screen and reads no real keyboard.
  `draw` methods only compute what would be drawn: the camera's view
  matrix, the score's digit quads, the health bars and so on.
- It plays no sound. `Prism.set_bgm` only records which music file should
  loop.
- It ships no models, textures or music; paths such as
  `Obstacle.MODEL_PATH` name files you must supply yourself.
- There is no command to run; the game is driven from Python code.