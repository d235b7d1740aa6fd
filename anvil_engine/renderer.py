"""Drives a backend through one frame using the frame graph and resources."""

from __future__ import annotations

from .backend import Backend
from .framegraph import FrameGraph, RenderPass
from .manager import ResourcesManager


class Renderer:
    """Owns the frame graph and renders it with a backend."""

    def __init__(self) -> None:
        self.framegraph = FrameGraph()

    def add_pass(self, render_pass: RenderPass) -> None:
        self.framegraph.add_pass(render_pass)

    def build_graph(self) -> None:
        self.framegraph.build()

    def render(self, backend: Backend, resources: ResourcesManager) -> bool:
        """Render one frame; returns False if the backend skipped it."""
        meshes, pipelines, textures, cameras = resources.collect_used_resources()

        for mesh_id in meshes:
            backend.ensure_mesh(mesh_id, resources.get_mesh(mesh_id))
        for pipeline_id in pipelines:
            backend.ensure_pipeline(pipeline_id, resources.get_pipeline(pipeline_id))
        for texture_id in textures:
            backend.ensure_texture(texture_id, resources.get_texture(texture_id))

        frame = backend.begin_frame()
        if frame.skipped:
            return False

        for camera_id in cameras:
            uniform = resources.get_camera(camera_id).build_uniform()
            backend.update_camera(camera_id, uniform.view_proj)

        backend.draw_passes(frame, self.framegraph.passes())
        backend.end_frame(frame)
        return True