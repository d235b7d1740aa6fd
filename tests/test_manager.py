import pytest

from anvil_engine.camera import Camera
from anvil_engine.descriptors import PipelineDesc, TextureData
from anvil_engine.manager import ResourcesManager
from anvil_engine.mesh import MeshData


def _pipeline():
    return PipelineDesc("vs src", "fs src", "vs_main", "fs_main", False, False)


def test_register_mesh_assigns_sequential_ids():
    manager = ResourcesManager()
    square = MeshData.make_square(1.0, (255, 0, 0, 255))
    cube = MeshData.make_cube(1.0, (0, 255, 0, 255))
    first = manager.register_mesh(square)
    second = manager.register_mesh(cube)
    assert (first, second) == (0, 1)
    assert manager.get_mesh(first) is square
    assert manager.get_mesh(second) is cube


def test_registries_are_independent():
    manager = ResourcesManager()
    pid = manager.register_pipeline(_pipeline())
    tid = manager.register_texture(TextureData(1, 1, b"\x00\x00\x00\x00"))
    cid = manager.register_camera(Camera.new_persp())
    assert pid == tid == cid == 0


def test_get_returns_registered_items():
    manager = ResourcesManager()
    desc = _pipeline()
    texture = TextureData(2, 1, bytes(8))
    camera = Camera.new_ortho()
    assert manager.get_pipeline(manager.register_pipeline(desc)) is desc
    assert manager.get_texture(manager.register_texture(texture)) is texture
    assert manager.get_camera(manager.register_camera(camera)) is camera


def test_get_unknown_mesh_raises():
    manager = ResourcesManager()
    with pytest.raises(KeyError) as info:
        manager.get_mesh(5)
    assert "5" in str(info.value)


def test_get_unknown_pipeline_raises():
    manager = ResourcesManager()
    with pytest.raises(KeyError) as info:
        manager.get_pipeline(5)
    assert "5" in str(info.value)


def test_get_unknown_texture_raises():
    manager = ResourcesManager()
    with pytest.raises(KeyError) as info:
        manager.get_texture(5)
    assert "5" in str(info.value)


def test_get_unknown_camera_raises():
    manager = ResourcesManager()
    with pytest.raises(KeyError) as info:
        manager.get_camera(5)
    assert "5" in str(info.value)


def test_fresh_manager_uses_nothing():
    assert ResourcesManager().collect_used_resources() == ((), (), (), ())


def test_mark_keeps_order_and_ignores_duplicates():
    manager = ResourcesManager()
    manager.mark_mesh_used(3)
    manager.mark_mesh_used(1)
    manager.mark_mesh_used(3)
    manager.mark_camera_used(0)
    meshes, pipelines, textures, cameras = manager.collect_used_resources()
    assert meshes == (3, 1)
    assert pipelines == ()
    assert textures == ()
    assert cameras == (0,)


@pytest.mark.parametrize("kind", ["mesh", "pipeline", "texture", "camera"])
def test_unmark_removes_only_that_id(kind):
    manager = ResourcesManager()
    mark = getattr(manager, f"mark_{kind}_used")
    unmark = getattr(manager, f"unmark_{kind}_used")
    mark(1)
    mark(2)
    unmark(1)
    unmark(9)
    used = dict(
        zip(["mesh", "pipeline", "texture", "camera"], manager.collect_used_resources())
    )
    assert used[kind] == (2,)


def test_collected_ids_are_a_snapshot():
    manager = ResourcesManager()
    manager.mark_texture_used(4)
    snapshot = manager.collect_used_resources()
    manager.mark_texture_used(5)
    assert snapshot[2] == (4,)
    assert manager.collect_used_resources()[2] == (4, 5)