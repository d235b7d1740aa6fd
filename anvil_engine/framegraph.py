"""Render passes, draw items and dependency ordering of passes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Sequence

from .descriptors import (
    GlobalCameraId,
    GlobalMaterialId,
    GlobalMeshId,
    GlobalPipelineId,
    GlobalRenderTargetId,
)

_IDENTITY = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


class LoadAction(Enum):
    """What happens to an attachment at the start of a pass."""

    CLEAR = "clear"
    LOAD = "load"


@dataclass(frozen=True)
class DrawItem:
    """A mesh drawn with a material and a model transform."""

    mesh: GlobalMeshId
    material: GlobalMaterialId
    transform: tuple[tuple[float, ...], ...] = _IDENTITY

    def __post_init__(self) -> None:
        columns = tuple(tuple(float(v) for v in column) for column in self.transform)
        if len(columns) != 4 or any(len(column) != 4 for column in columns):
            raise ValueError("transform must be a 4x4 matrix")
        object.__setattr__(self, "transform", columns)


@dataclass(frozen=True)
class RenderPassDesc:
    """Static description of a render pass; a target of None is the backbuffer."""

    name: str
    pipeline: GlobalPipelineId
    camera: GlobalCameraId
    target: Optional[GlobalRenderTargetId] = None
    inputs: tuple[GlobalRenderTargetId, ...] = ()
    outputs: tuple[GlobalRenderTargetId, ...] = ()
    clear_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    clear_depth: Optional[float] = None
    load_color: LoadAction = LoadAction.CLEAR
    load_depth: LoadAction = LoadAction.CLEAR
    depends_on: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))
        object.__setattr__(self, "depends_on", tuple(self.depends_on))
        color = tuple(float(c) for c in self.clear_color)
        if len(color) != 4:
            raise ValueError("clear_color needs 4 components")
        object.__setattr__(self, "clear_color", color)


@dataclass
class RenderPass:
    """A render pass and the items drawn in it."""

    desc: RenderPassDesc
    items: list[DrawItem] = field(default_factory=list)

    def add(self, item: DrawItem) -> None:
        self.items.append(item)


class DependencyCycleError(ValueError):
    """Raised when render pass dependencies form a cycle."""


class FrameGraph:
    """Collects render passes and orders them by their named dependencies."""

    def __init__(self) -> None:
        self._passes: list[RenderPass] = []
        self._order: list[int] = []

    def add_pass(self, render_pass: RenderPass) -> None:
        self._passes.append(render_pass)

    def build(self) -> None:
        """Topologically sort the passes; unknown dependency names are ignored."""
        self._order = []
        name_to_index = {p.desc.name: i for i, p in enumerate(self._passes)}
        visited: set[int] = set()
        in_progress: set[int] = set()
        order: list[int] = []

        def visit(index: int) -> None:
            if index in visited:
                return
            if index in in_progress:
                raise DependencyCycleError(
                    f"render pass dependency cycle at {self._passes[index].desc.name!r}"
                )
            in_progress.add(index)
            for dep in self._passes[index].desc.depends_on:
                dep_index = name_to_index.get(dep)
                if dep_index is not None:
                    visit(dep_index)
            in_progress.discard(index)
            visited.add(index)
            order.append(index)

        for index in range(len(self._passes)):
            visit(index)
        self._order = order

    def ordered(self) -> Iterator[RenderPass]:
        """Passes in the order computed by the last build()."""
        return (self._passes[i] for i in self._order)

    def passes(self) -> Sequence[RenderPass]:
        """All passes in insertion order."""
        return self._passes