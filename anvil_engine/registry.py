"""Registries that hand out sequential ids for resources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Registry(Generic[T]):
    """Stores items under ids assigned in registration order, starting at 0."""

    def __init__(self, kind: str = "resource") -> None:
        self.kind = kind
        self._next = 0
        self._items: dict[int, T] = {}

    def register(self, item: T) -> int:
        item_id = self._next
        self._next += 1
        self._items[item_id] = item
        return item_id

    def get(self, item_id: int) -> T:
        try:
            return self._items[item_id]
        except KeyError:
            raise KeyError(f"{self.kind} not found: {item_id}") from None

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items


class RenderTargetFormat(Enum):
    RGBA8 = "rgba8"
    RGBA16F = "rgba16f"
    DEPTH32 = "depth32"


@dataclass(frozen=True)
class RenderTargetDesc:
    """Size and format of an offscreen render target."""

    width: int
    height: int
    format: RenderTargetFormat
    has_depth: bool
    sampled: bool