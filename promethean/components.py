"""Entity components and the dense pool that stores them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

__all__ = [
    "Position",
    "Velocity",
    "Renderable",
    "NavComponent",
    "ComponentPool",
]

Cell = Tuple[int, int]
C = TypeVar("C")


@dataclass
class Position:
    """World position of an entity."""

    x: float = 0.0
    y: float = 0.0

    def to_json(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Position":
        return cls(x=float(data.get("x", 0.0)), y=float(data.get("y", 0.0)))


@dataclass
class Velocity:
    """Velocity of an entity."""

    x: float = 0.0
    y: float = 0.0

    def to_json(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Velocity":
        return cls(x=float(data.get("x", 0.0)), y=float(data.get("y", 0.0)))


@dataclass
class Renderable:
    """Texture region and depth used to draw an entity."""

    texture_id: int = 0
    u: float = 0.0
    v: float = 0.0
    w: float = 1.0
    h: float = 1.0
    z: float = 0.0

    def to_json(self) -> Dict[str, Any]:
        return {
            "texture_id": self.texture_id,
            "u": self.u,
            "v": self.v,
            "w": self.w,
            "h": self.h,
            "z": self.z,
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Renderable":
        return cls(
            texture_id=int(data.get("texture_id", 0)),
            u=float(data.get("u", 0.0)),
            v=float(data.get("v", 0.0)),
            w=float(data.get("w", 1.0)),
            h=float(data.get("h", 1.0)),
            z=float(data.get("z", 0.0)),
        )


def _cell_to_json(cell: Cell) -> Dict[str, int]:
    return {"x": cell[0], "y": cell[1]}


def _cell_from_json(data: Dict[str, Any]) -> Cell:
    return (int(data.get("x", 0)), int(data.get("y", 0)))


@dataclass
class NavComponent:
    """Grid navigation state: current cell, goal and the path between them."""

    position: Cell = (0, 0)
    destination: Cell = (0, 0)
    path: List[Cell] = field(default_factory=list)
    current: int = 0

    def to_json(self) -> Dict[str, Any]:
        return {
            "position": _cell_to_json(self.position),
            "destination": _cell_to_json(self.destination),
            "current": self.current,
            "path": [_cell_to_json(step) for step in self.path],
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "NavComponent":
        """Build from JSON; ``position`` and ``destination`` are required."""
        return cls(
            position=_cell_from_json(data["position"]),
            destination=_cell_from_json(data["destination"]),
            path=[_cell_from_json(step) for step in data.get("path", [])],
            current=int(data.get("current", 0)),
        )


class ComponentPool(Generic[C]):
    """Densely packed components keyed by entity id."""

    def __init__(self) -> None:
        self._data: List[C] = []
        self._entities: List[int] = []
        self._lookup: Dict[int, int] = {}

    def emplace(self, entity_id: int, component: C) -> C:
        """Store ``component`` for the entity; return the existing one if present."""
        idx = self._lookup.get(entity_id)
        if idx is not None:
            return self._data[idx]
        self._lookup[entity_id] = len(self._data)
        self._data.append(component)
        self._entities.append(entity_id)
        return component

    def remove(self, entity_id: int) -> None:
        """Drop the entity's component, moving the last one into its slot."""
        idx = self._lookup.pop(entity_id, None)
        if idx is None:
            return
        last_data = self._data.pop()
        last_entity = self._entities.pop()
        if idx < len(self._data):
            self._data[idx] = last_data
            self._entities[idx] = last_entity
            self._lookup[last_entity] = idx

    def get(self, entity_id: int) -> Optional[C]:
        """Return the entity's component, or None."""
        idx = self._lookup.get(entity_id)
        return None if idx is None else self._data[idx]

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._lookup

    def __len__(self) -> int:
        return len(self._data)

    def entities(self) -> List[int]:
        """Entity ids in storage order."""
        return list(self._entities)