# anvil_engine

The backend-independent core of a small rendering engine. It keeps
geometry, cameras, pipeline descriptions and textures in registries,
orders render passes by their dependencies, drives a pluggable backend
through each frame, and measures frame pacing. It has no dependencies
outside the standard library.

## Installing

    pip install .

For the tests:

    pip install .[test]
    pytest

## What is inside

- `anvil_engine.mesh` — vertex layouts (`Vertex2D`, `Vertex3D`,
  `VertexFormat`, `VertexAttributeDesc`, `VertexLayoutDesc`), index
  buffers (`Indices.u16`, `Indices.u32`, with `IndexFormat`) and
  `MeshData`, built with `MeshData.from_vertices`, `MeshData.make_square`
  or `MeshData.make_cube`. Vertices and indices pack to little-endian
  bytes.
- `anvil_engine.camera` — `Camera` with a `Perspective` or `Ortho`
  projection (`Camera.new_persp()`, `Camera.new_ortho()`), its `view()`
  and `projection()` matrices, and `Camera.build_uniform()`, which gives a
  `CameraUniform` holding the combined view-projection matrix. Matrices
  are column-major; `CameraUniform.to_bytes()` packs them as 16 floats.
- `anvil_engine.descriptors` — the integer id aliases, `PipelineDesc`,
  `ShaderDesc` and `TextureData`.
- `anvil_engine.registry` — a generic `Registry` handing out sequential
  ids from 0 (unknown ids raise `KeyError`), plus `RenderTargetDesc` and
  `RenderTargetFormat`.
- `anvil_engine.manager` — `ResourcesManager`, which owns the mesh,
  pipeline, texture and camera registries and tracks which resources are
  in use (`mark_*_used`, `unmark_*_used`, `collect_used_resources`).
- `anvil_engine.framegraph` — `RenderPassDesc`, `RenderPass`, `DrawItem`,
  `LoadAction` and `FrameGraph`. `FrameGraph.build()` sorts passes
  topologically by `depends_on` names, ignoring unknown names, and raises
  `DependencyCycleError` on a cycle; `ordered()` yields them in that order
  and `passes()` returns them in insertion order.
- `anvil_engine.backend` — the abstract `Backend` interface, `BackendOptions`
  and the `FrameCtx` frame context (`FrameCtx.new`, `FrameCtx.skip`,
  `get`, `into_inner`, which raises `FrameCtxError`).
- `anvil_engine.renderer` — `Renderer`. `render(backend, resources)`
  ensures the used meshes, pipelines and textures, begins a frame, uploads
  the used cameras' view-projection matrices, passes the frame graph's
  passes in insertion order to `draw_passes` and ends the frame. It
  returns `False` if the backend skipped the frame, `True` otherwise.
- `anvil_engine.frames` — `FrameManager` with a sliding window of FPS
  samples, `FrameManagerDesc`, `FpsStats`, `compute_stats` and
  `format_stats`. `FrameManager.run()` (or using it as a context manager)
  starts a background thread that reports the statistics every
  `report_interval` seconds; `stop()` ends it.

## Example

```python
from anvil_engine.camera import Camera
from anvil_engine.mesh import MeshData
from anvil_engine.manager import ResourcesManager

resources = ResourcesManager()
mesh_id = resources.register_mesh(MeshData.make_square(1.0, (255, 0, 0, 255)))
camera_id = resources.register_camera(Camera.new_ortho())
resources.mark_mesh_used(mesh_id)
resources.mark_camera_used(camera_id)

uniform = resources.get_camera(camera_id).build_uniform()
print(uniform.view_proj)
```

Frame pacing:

```python
from anvil_engine.frames import FrameManager, FrameManagerDesc, format_stats

frames = FrameManager(FrameManagerDesc(target_fps=60.0))
for _ in range(10):
    frames.add_frame(1 / 60)
print(format_stats(frames.stats()))
```

## What it does not do

The package opens no window, runs no event loop and talks to no GPU.
`Backend` is only an interface: to draw anything you supply a subclass
that creates buffers, pipelines and textures and presents frames. There
is no command-line program.