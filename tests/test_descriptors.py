import dataclasses

import pytest

from anvil_engine.descriptors import PipelineDesc, ShaderDesc, TextureData


def _pipeline(**overrides):
    fields = dict(
        vertex_shader="vs source",
        fragment_shader="fs source",
        vs_entry="vs_main",
        fs_entry="fs_main",
        depth=True,
        is_tridimensional=False,
    )
    fields.update(overrides)
    return PipelineDesc(**fields)


def test_pipeline_desc_equality_and_hash():
    assert _pipeline() == _pipeline()
    assert hash(_pipeline()) == hash(_pipeline())
    assert _pipeline(depth=False) != _pipeline()


def test_pipeline_desc_replace():
    changed = dataclasses.replace(_pipeline(), is_tridimensional=True)
    assert changed.is_tridimensional is True
    assert changed.vs_entry == "vs_main"


def test_pipeline_desc_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        _pipeline().depth = False


def test_shader_desc_defines_become_tuples():
    desc = ShaderDesc("a.wgsl", "b.wgsl", "vs", "fs", [["LIGHTS", "4"], ("FOG", "1")])
    assert desc.defines == (("LIGHTS", "4"), ("FOG", "1"))


def test_shader_desc_default_defines_empty():
    desc = ShaderDesc("a.wgsl", "b.wgsl", "vs", "fs")
    assert desc.defines == ()


def test_texture_data_copies_bytes():
    raw = bytearray(b"abcd")
    tex = TextureData(2, 1, raw)
    raw[0] = ord("z")
    assert tex.data == b"abcd"
    assert (tex.width, tex.height) == (2, 1)


def test_texture_data_is_frozen():
    tex = TextureData(1, 1, b"\x00\x00\x00\x00")
    with pytest.raises(dataclasses.FrozenInstanceError):
        tex.width = 2
    assert tex.width == 1