"""Central store of registered resources and of those in use each frame."""

from __future__ import annotations

from .camera import Camera
from .descriptors import (
    GlobalCameraId,
    GlobalMeshId,
    GlobalPipelineId,
    GlobalTextureId,
    PipelineDesc,
    TextureData,
)
from .mesh import MeshData
from .registry import Registry


def _mark(used: list[int], item_id: int) -> None:
    if item_id not in used:
        used.append(item_id)


def _unmark(used: list[int], item_id: int) -> None:
    used[:] = [x for x in used if x != item_id]


class ResourcesManager:
    """Owns the mesh, pipeline, texture and camera registries."""

    def __init__(self) -> None:
        self.mesh_registry: Registry[MeshData] = Registry("mesh")
        self.pipeline_registry: Registry[PipelineDesc] = Registry("pipeline")
        self.texture_registry: Registry[TextureData] = Registry("texture")
        self.camera_registry: Registry[Camera] = Registry("camera")

        self._used_meshes: list[GlobalMeshId] = []
        self._used_pipelines: list[GlobalPipelineId] = []
        self._used_textures: list[GlobalTextureId] = []
        self._used_cameras: list[GlobalCameraId] = []

    def collect_used_resources(
        self,
    ) -> tuple[
        tuple[GlobalMeshId, ...],
        tuple[GlobalPipelineId, ...],
        tuple[GlobalTextureId, ...],
        tuple[GlobalCameraId, ...],
    ]:
        """Ids of used meshes, pipelines, textures and cameras, in marking order."""
        return (
            tuple(self._used_meshes),
            tuple(self._used_pipelines),
            tuple(self._used_textures),
            tuple(self._used_cameras),
        )

    def get_mesh(self, mesh_id: GlobalMeshId) -> MeshData:
        return self.mesh_registry.get(mesh_id)

    def get_pipeline(self, pipeline_id: GlobalPipelineId) -> PipelineDesc:
        return self.pipeline_registry.get(pipeline_id)

    def get_texture(self, texture_id: GlobalTextureId) -> TextureData:
        return self.texture_registry.get(texture_id)

    def get_camera(self, camera_id: GlobalCameraId) -> Camera:
        return self.camera_registry.get(camera_id)

    def register_mesh(self, mesh_data: MeshData) -> GlobalMeshId:
        return self.mesh_registry.register(mesh_data)

    def register_pipeline(self, pipeline_desc: PipelineDesc) -> GlobalPipelineId:
        return self.pipeline_registry.register(pipeline_desc)

    def register_texture(self, texture_data: TextureData) -> GlobalTextureId:
        return self.texture_registry.register(texture_data)

    def register_camera(self, camera: Camera) -> GlobalCameraId:
        return self.camera_registry.register(camera)

    def mark_mesh_used(self, mesh_id: GlobalMeshId) -> None:
        _mark(self._used_meshes, mesh_id)

    def mark_pipeline_used(self, pipeline_id: GlobalPipelineId) -> None:
        _mark(self._used_pipelines, pipeline_id)

    def mark_texture_used(self, texture_id: GlobalTextureId) -> None:
        _mark(self._used_textures, texture_id)

    def mark_camera_used(self, camera_id: GlobalCameraId) -> None:
        _mark(self._used_cameras, camera_id)

    def unmark_mesh_used(self, mesh_id: GlobalMeshId) -> None:
        _unmark(self._used_meshes, mesh_id)

    def unmark_pipeline_used(self, pipeline_id: GlobalPipelineId) -> None:
        _unmark(self._used_pipelines, pipeline_id)

    def unmark_texture_used(self, texture_id: GlobalTextureId) -> None:
        _unmark(self._used_textures, texture_id)

    def unmark_camera_used(self, camera_id: GlobalCameraId) -> None:
        _unmark(self._used_cameras, camera_id)