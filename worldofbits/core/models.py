"""Core data models: CellCoord, Token, Cell, Inventory, views and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from worldofbits.core.enums import Direction, InteractionKind

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


@dataclass(frozen=True, slots=True, order=True)
class CellCoord:
    """Immutable grid address. ``i`` grows northward, ``j`` grows eastward."""

    i: int = 0
    j: int = 0

    def __add__(self, other: CellCoord) -> CellCoord:
        return CellCoord(self.i + other.i, self.j + other.j)

    def __sub__(self, other: CellCoord) -> CellCoord:
        return CellCoord(self.i - other.i, self.j - other.j)

    def chebyshev(self, other: CellCoord) -> int:
        return max(abs(self.i - other.i), abs(self.j - other.j))

    def in_int32(self) -> bool:
        return INT32_MIN <= self.i <= INT32_MAX and INT32_MIN <= self.j <= INT32_MAX

    def __repr__(self) -> str:
        return f"({self.i}, {self.j})"


# Direction offsets mapped to Direction enum values
DIRECTION_OFFSETS: dict[Direction, CellCoord] = {
    Direction.NORTH: CellCoord(1, 0),
    Direction.EAST: CellCoord(0, 1),
    Direction.SOUTH: CellCoord(-1, 0),
    Direction.WEST: CellCoord(0, -1),
}


@dataclass(frozen=True, slots=True)
class Token:
    """A power-of-two valued collectible."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1 or self.value & (self.value - 1):
            raise ValueError(f"token value must be a power of two, got {self.value}")

    def doubled(self) -> Token:
        return Token(self.value * 2)


@dataclass(slots=True)
class Cell:
    """One materialized grid square. Owned by the WorldGrid store."""

    coord: CellCoord
    token: Token | None = None
    modified: bool = False     # set once a player action changed the token

    @property
    def has_token(self) -> bool:
        return self.token is not None

    def copy(self) -> Cell:
        return Cell(coord=self.coord, token=self.token, modified=self.modified)


@dataclass(frozen=True, slots=True)
class CellRect:
    """Inclusive rectangle of cell coordinates."""

    min_i: int
    min_j: int
    max_i: int
    max_j: int

    @classmethod
    def spanning(cls, a: CellCoord, b: CellCoord) -> CellRect:
        return cls(min(a.i, b.i), min(a.j, b.j), max(a.i, b.i), max(a.j, b.j))

    @classmethod
    def around(cls, center: CellCoord, radius: int) -> CellRect:
        return cls(center.i - radius, center.j - radius, center.i + radius, center.j + radius)

    @property
    def height(self) -> int:
        return self.max_i - self.min_i + 1

    @property
    def width(self) -> int:
        return self.max_j - self.min_j + 1

    @property
    def area(self) -> int:
        return self.height * self.width

    def contains(self, coord: CellCoord) -> bool:
        return self.min_i <= coord.i <= self.max_i and self.min_j <= coord.j <= self.max_j

    def __contains__(self, coord: object) -> bool:
        return isinstance(coord, CellCoord) and self.contains(coord)

    def coords(self) -> Iterator[CellCoord]:
        """Yield every coordinate, north row first, west to east."""
        for i in range(self.max_i, self.min_i - 1, -1):
            for j in range(self.min_j, self.max_j + 1):
                yield CellCoord(i, j)


@dataclass(frozen=True, slots=True)
class CellView:
    """Renderable projection of a Cell for the view layer.

    ``value`` is only revealed for cells inside the player's neighborhood.
    """

    coord: CellCoord
    has_token: bool
    value: int | None
    in_neighborhood: bool


@dataclass(frozen=True, slots=True)
class InteractionResult:
    """Outcome of one ``interact`` call."""

    kind: InteractionKind
    value: int | None = None
    reason: str = ""

    @classmethod
    def rejected(cls, reason: str) -> InteractionResult:
        return cls(InteractionKind.REJECTED, None, reason)

    @property
    def mutated(self) -> bool:
        return self.kind in (InteractionKind.COLLECTED, InteractionKind.PLACED, InteractionKind.CRAFTED)

    def __repr__(self) -> str:
        if self.value is not None:
            return f"{self.kind.value}({self.value})"
        if self.reason:
            return f"{self.kind.value}[{self.reason}]"
        return self.kind.value


class Inventory:
    """The player's hand: holds zero or one token."""

    __slots__ = ("_held",)

    def __init__(self) -> None:
        self._held: Token | None = None

    @property
    def held(self) -> Token | None:
        return self._held

    @property
    def is_empty(self) -> bool:
        return self._held is None

    def hold(self, token: Token) -> None:
        if self._held is not None:
            raise ValueError("inventory already holds a token")
        self._held = token

    def take(self) -> Token | None:
        """Remove and return the held token, if any."""
        token = self._held
        self._held = None
        return token

    def clear(self) -> None:
        self._held = None


@dataclass(slots=True)
class SessionState:
    """Player position and the terminal win flag."""

    player: CellCoord = field(default_factory=CellCoord)
    won: bool = False
