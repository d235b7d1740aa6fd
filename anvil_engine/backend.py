"""The interface a rendering backend implements and its per-frame context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Sequence, TypeVar

from .camera import Camera
from .descriptors import (
    GlobalCameraId,
    GlobalMeshId,
    GlobalPipelineId,
    GlobalTextureId,
    PipelineDesc,
    TextureData,
)
from .framegraph import RenderPass
from .mesh import MeshData

T = TypeVar("T")


@dataclass
class BackendOptions:
    """Backend-specific settings, opaque to the renderer."""

    power: Any = None
    features: Any = None
    limits: Any = None
    present_mode: Any = None


class FrameCtxError(Exception):
    """Raised when a frame context does not hold a value of the requested type."""

    def __init__(self, frame: FrameCtx, message: str) -> None:
        super().__init__(message)
        self.frame = frame


class FrameCtx:
    """Backend data for one frame, or a marker that the frame was skipped."""

    __slots__ = ("_value", "_skipped")

    def __init__(self, value: Any = None, *, skipped: bool = False) -> None:
        self._value = value
        self._skipped = skipped

    @classmethod
    def new(cls, value: Any) -> FrameCtx:
        return cls(value)

    @classmethod
    def skip(cls) -> FrameCtx:
        return cls(skipped=True)

    @property
    def skipped(self) -> bool:
        return self._skipped

    def get(self, kind: type[T]) -> Optional[T]:
        """The held value if it is an instance of kind, otherwise None."""
        if self._skipped or not isinstance(self._value, kind):
            return None
        return self._value

    def into_inner(self, kind: type[T]) -> T:
        """The held value; raises FrameCtxError if skipped or of another type."""
        if self._skipped:
            raise FrameCtxError(self, "frame was skipped")
        if not isinstance(self._value, kind):
            raise FrameCtxError(
                self, f"frame holds {type(self._value).__name__}, not {kind.__name__}"
            )
        return self._value

    def __repr__(self) -> str:
        if self._skipped:
            return "FrameCtx.skip()"
        return f"FrameCtx.new({self._value!r})"


class Backend(ABC):
    """Operations the renderer needs from a GPU backend."""

    @abstractmethod
    def begin_frame(self) -> FrameCtx:
        """Start a frame; return a skipped context if nothing can be drawn."""

    @abstractmethod
    def update_camera(self, camera_id: GlobalCameraId, matrix) -> None:
        """Upload a camera's view-projection matrix."""

    @abstractmethod
    def draw_passes(self, frame: FrameCtx, passes: Sequence[RenderPass]) -> None:
        """Record the given passes into the frame."""

    @abstractmethod
    def end_frame(self, frame: FrameCtx) -> None:
        """Submit and present the frame."""

    @abstractmethod
    def ensure_mesh(self, mesh_id: GlobalMeshId, data: MeshData) -> None:
        """Create GPU buffers for a mesh if they do not exist yet."""

    @abstractmethod
    def ensure_pipeline(self, pipeline_id: GlobalPipelineId, desc: PipelineDesc) -> None:
        """Create a pipeline if it does not exist yet."""

    @abstractmethod
    def ensure_texture(self, texture_id: GlobalTextureId, data: TextureData) -> None:
        """Create a texture if it does not exist yet."""

    @abstractmethod
    def ensure_camera(self, camera_id: GlobalCameraId, camera: Camera) -> None:
        """Create GPU resources for a camera if they do not exist yet."""

    @abstractmethod
    def resize(self, width: int, height: int) -> None:
        """Resize the presentation surface."""