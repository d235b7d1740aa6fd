import math
import struct

import pytest

from anvil_engine.camera import Camera, CameraUniform, Ortho, Perspective


def _apply(matrix, vec):
    return [sum(matrix[c][r] * vec[c] for c in range(4)) for r in range(4)]


def test_uniform_defaults_to_zero():
    uniform = CameraUniform()
    assert all(v == 0.0 for column in uniform.view_proj for v in column)
    assert uniform.to_bytes() == bytes(64)


def test_update_from_matrix_round_trip():
    uniform = CameraUniform()
    matrix = [[float(c * 4 + r) for r in range(4)] for c in range(4)]
    uniform.update_from_matrix(matrix)
    assert [list(col) for col in uniform.view_proj] == matrix
    values = struct.unpack("<16f", uniform.to_bytes())
    assert list(values) == [v for col in matrix for v in col]


def test_update_from_matrix_rejects_bad_shape():
    uniform = CameraUniform()
    with pytest.raises(ValueError):
        uniform.update_from_matrix([[1.0, 2.0], [3.0, 4.0]])


def test_view_moves_eye_to_origin():
    cam = Camera.new_persp()
    view = cam.view()
    assert _apply(view, [*cam.position, 1.0]) == pytest.approx([0.0, 0.0, 0.0, 1.0])


def test_view_looks_down_negative_z():
    cam = Camera((1.0, 2.0, 5.0), (1.0, 2.0, 1.0), (0.0, 1.0, 0.0), Camera.new_persp().proj)
    target = _apply(cam.view(), [*cam.target, 1.0])
    assert target[0] == pytest.approx(0.0)
    assert target[1] == pytest.approx(0.0)
    assert target[2] == pytest.approx(-4.0)


def test_view_is_rigid():
    cam = Camera((2.0, -1.0, 4.0), (0.5, 0.5, 0.0), (0.0, 1.0, 0.0), Camera.new_ortho().proj)
    view = cam.view()
    a = _apply(view, [1.0, 2.0, 3.0, 1.0])
    b = _apply(view, [-2.0, 0.0, 1.0, 1.0])
    original = math.dist((1.0, 2.0, 3.0), (-2.0, 0.0, 1.0))
    assert math.dist(a[:3], b[:3]) == pytest.approx(original)


def test_view_rejects_degenerate_direction():
    cam = Camera((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0), Camera.new_persp().proj)
    with pytest.raises(ValueError):
        cam.view()


def test_view_rejects_up_parallel_to_direction():
    cam = Camera((0.0, 3.0, 0.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0), Camera.new_persp().proj)
    with pytest.raises(ValueError):
        cam.view()


@pytest.mark.parametrize("depth, ndc", [(0.1, -1.0), (100.0, 1.0)])
def test_perspective_maps_planes_to_ndc(depth, ndc):
    proj = Camera.new_persp().projection()
    clip = _apply(proj, [0.0, 0.0, -depth, 1.0])
    assert clip[2] / clip[3] == pytest.approx(ndc)


def test_perspective_defaults():
    cam = Camera.new_persp()
    assert cam.proj == Perspective(math.radians(60.0), 1.0, 0.1, 100.0)


@pytest.mark.parametrize(
    "proj",
    [
        Perspective(0.0, 1.0, 0.1, 10.0),
        Perspective(math.pi, 1.0, 0.1, 10.0),
        Perspective(1.0, 0.0, 0.1, 10.0),
        Perspective(1.0, 1.0, 1.0, 1.0),
        Perspective(1.0, 1.0, -1.0, 10.0),
    ],
)
def test_invalid_perspective_rejected(proj):
    cam = Camera.new_persp()
    cam.proj = proj
    with pytest.raises(ValueError):
        cam.projection()


def test_ortho_last_column_and_scale():
    proj = Camera.new_ortho().projection()
    assert proj[3] == (0.0, 0.0, 0.0, 1.0)
    assert proj[0][0] == pytest.approx(1.0)
    assert proj[1][1] == pytest.approx(1.0)


def test_ortho_degenerate_bounds_rejected():
    cam = Camera.new_ortho()
    cam.proj = Ortho(1.0, 1.0, -1.0, 1.0, 0.1, 100.0)
    with pytest.raises(ValueError):
        cam.projection()


@pytest.mark.parametrize("factory", [Camera.new_persp, Camera.new_ortho])
def test_build_uniform_combines_projection_and_view(factory):
    cam = factory()
    uniform = cam.build_uniform()
    point = [0.3, -0.7, 1.2, 1.0]
    expected = _apply(cam.projection(), _apply(cam.view(), point))
    assert _apply(uniform.view_proj, point) == pytest.approx(expected)