# sceneforge

sceneforge describes a 3D game scene as data. You write the scene as JSON-style
dictionaries and sceneforge builds a world of entities and components from it.
It does the matrix maths for transforms, cameras and lights, loads Wavefront OBJ
meshes, and keeps named registries of shaders, textures, samplers, meshes and
materials.

## Installation

```
pip install sceneforge
```

With the test dependencies:

```
pip install "sceneforge[test]"
```

## Core ideas

- **World** (`sceneforge.ecs.World`): holds entities. `World.add()` creates an
  entity. `World.mark_for_removal(entity)` marks an entity and all its
  descendants, and `World.delete_marked_entities()` removes what was marked.
  `World.clear()` removes everything. A world supports `len()`, iteration and
  `in`.
- **Entity** (`sceneforge.ecs.Entity`): has a `name`, an optional `parent` and a
  `local_transform`. `local_to_world_matrix()` combines its transform with those
  of all its ancestors; `world_translation()` sums the positions along the chain.
- **Transform**: `position`, `rotation` (Euler angles in radians: x pitch, y yaw,
  z roll) and `scale`. `to_mat4()` applies scale, then rotation, then
  translation.
- **Component**: data attached to an entity. Use `add_component(cls)`,
  `get_component(cls)`, `component_at(index)`, `delete_component(cls)`,
  `delete_component_at(index)` and `remove_component(component)`.
  Each component class has a string `type_id`; the `"type"` key in a
  component's JSON picks the class. Classes become known to scene loading
  through `sceneforge.ecs.register_component`, and `component_type(type_id)`
  looks one up.

## Loading a scene

```python
from sceneforge.scene import load_scene
from sceneforge.camera import CameraComponent

config = {
    "world": [
        {
            "name": "camera",
            "position": [0, 2, 5],
            "rotation": [-15, 0, 0],
            "components": [
                {"type": "Camera", "fovY": 60, "near": 0.1, "far": 200}
            ],
        }
    ]
}

world = load_scene(config)
camera_entity = next(e for e in world.entities if e.name == "camera")
camera = camera_entity.get_component(CameraComponent)
view = camera.view_matrix()
projection = camera.projection_matrix((1280, 720))
```

`load_scene` loads `config["assets"]` (if present) into the asset registries and
builds a world from `config["world"]` (if present). Entities may hold a
`"children"` list, which is loaded with the entity as parent.

Angles in the JSON (`rotation`, `fovY`, `angularVelocity`,
`angularAcceleration`, `maxAngularVelocityComponent`, spot-light cone angles)
are given in degrees and stored in radians.

`CameraComponent.projection_matrix` uses the whole-number quotient of width by
height as the aspect ratio, so `(1280, 720)` gives an aspect of 1.

## Components

| Type id                      | Class                               | Module                     |
|------------------------------|-------------------------------------|----------------------------|
| `Camera`                     | `CameraComponent`                   | `sceneforge.camera`        |
| `Free Camera Controller`     | `FreeCameraControllerComponent`     | `sceneforge.gameplay`      |
| `Movement`                   | `MovementComponent`                 | `sceneforge.gameplay`      |
| `Mesh Renderer`              | `MeshRendererComponent`             | `sceneforge.mesh_renderer` |
| `Light`                      | `LightComponent`                    | `sceneforge.light`         |
| `LightSpectrum`              | `LightSpectrumComponent`            | `sceneforge.light`         |
| `Player`                     | `PlayerComponent`                   | `sceneforge.gameplay`      |
| `Player Movement Controller` | `PlayerMovementControllerComponent` | `sceneforge.gameplay`      |
| `Coin`                       | `CoinComponent`                     | `sceneforge.gameplay`      |
| `Collision`                  | `CollisionComponent`                | `sceneforge.gameplay`      |
| `PostProcess`                | `PostProcessComponent`              | `sceneforge.gameplay`      |
| `ObstacleTag`                | `ObstacleTagComponent`              | `sceneforge.gameplay`      |
| `powerupTag`                 | `PowerupTagComponent`               | `sceneforge.gameplay`      |
| `HeartTag`                   | `HeartTagComponent`                 | `sceneforge.gameplay`      |
| `BlurTag`                    | `BlurTagComponent`                  | `sceneforge.gameplay`      |
| `WarnTag`                    | `WarnTagComponent`                  | `sceneforge.gameplay`      |

`sceneforge.scene.component_types()` returns this mapping. Importing
`sceneforge.scene` registers all of them. A component whose type is not
registered is skipped. `GeneratedComponent` and `ObstacleComponent` exist in
`sceneforge.gameplay` but are not registered, so scene files cannot create them.

A `Light` component must have `"typeLight"` set to `"directional"`, `"point"`,
`"spot"` or `"sky"`; any other value raises `ValueError`.
`LightSpectrumComponent.color_at(time)` returns the light colour rotated in hue
by `time` radians.

## Assets

Each kind of asset lives in a named `AssetLoader` registry in
`sceneforge.assets`: `shaders`, `textures`, `samplers`, `meshes` and
`materials`. `get(name)` returns the asset or `None`.

```python
from sceneforge import assets
from sceneforge.catalog import deserialize_all_assets, clear_all_assets

deserialize_all_assets({
    "shaders": {"tinted": {"vs": "shaders/tinted.vert", "fs": "shaders/tinted.frag"}},
    "textures": {"white": "textures/white.png"},
    "samplers": {"default": {"MAG_FILTER": "GL_NEAREST"}},
    "materials": {"red": {"type": "tinted", "shader": "tinted", "tint": [1, 0, 0, 1]}},
})

red = assets.materials.get("red")
clear_all_assets()
```

Shaders are stored as `ShaderSpec(vertex_shader, fragment_shader)`, textures as
their path strings, and samplers as dictionaries of their parameters. Meshes
are read from OBJ files with `load_obj`. Materials are loaded last since they
refer to shaders, textures and samplers by name.

## Meshes

```python
from sceneforge.mesh_utils import load_obj, sphere

ball = sphere((32, 16))          # (longitude, latitude) segments
model = load_obj("models/house.obj")
```

A `Mesh` holds a tuple of `Vertex` objects and a tuple of element indices;
`Mesh.triangles()` yields each triangle as three vertices. `load_obj` splits
polygons into triangle fans, merges identical vertices, and raises
`MeshLoadError` if the file cannot be read or parsed.

## Materials and pipeline state

`create_material_from_type` in `sceneforge.material` creates a
`TintedMaterial`, `TexturedMaterial` or `LitMaterial` for `"tinted"`,
`"textured"` or `"lit"`; any other name gives a plain `Material`. A material's
`"shader"` key is required.

Each material has a `PipelineState` (`sceneforge.pipeline_state`) holding face
culling, depth testing, blending, the colour mask and the depth mask, read from
the material's `"pipelineState"` object. Enum values are given by their GL
names, for example:

```python
{"faceCulling": {"enabled": True, "culledFace": "GL_FRONT"},
 "blending": {"enabled": True, "sourceFactor": "GL_ONE"}}
```

Unknown names keep the current setting.

## Matrix helpers

`sceneforge.glmath` has `translate`, `scale`, `yaw_pitch_roll`, `look_at`,
`perspective`, `ortho`, `transform_point` and `transform_direction`, all
working on 4x4 `numpy` arrays with column vectors.

## What it does not do

sceneforge only models the scene. It opens no window, draws nothing, compiles
no shaders and decodes no images: shader and texture entries record file paths
for a renderer to use. It has no game loop, input handling or systems that move
entities; components only hold data.

## Running the tests

```
pytest
```