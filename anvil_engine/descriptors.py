"""Resource identifiers and plain resource descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

GlobalPipelineId = int
GlobalCameraId = int
GlobalMaterialId = int
GlobalRenderTargetId = int
GlobalTextureId = int
GlobalMeshId = int


@dataclass(frozen=True)
class PipelineDesc:
    """Shader sources and fixed-function state of a render pipeline."""

    vertex_shader: str
    fragment_shader: str
    vs_entry: str
    fs_entry: str
    depth: bool
    is_tridimensional: bool


@dataclass(frozen=True)
class ShaderDesc:
    """Shader file paths, entry points and preprocessor defines."""

    vertex_path: str
    fragment_path: str
    vs_entry: str
    fs_entry: str
    defines: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        defines: Iterable[tuple[str, str]] = self.defines
        object.__setattr__(
            self, "defines", tuple((str(name), str(value)) for name, value in defines)
        )


@dataclass(frozen=True)
class TextureData:
    """Raw texel bytes of a texture."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))