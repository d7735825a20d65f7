from dataclasses import dataclass, field
from typing import List, Optional, Tuple

Position = Tuple[int, int]


@dataclass(slots=True)
class Trail:
    """Ordered cells the player is currently connecting. May repeat a cell (a loop)."""
    positions: List[Position] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.positions)

    def head(self) -> Optional[Position]:
        return self.positions[-1] if self.positions else None

    def contains(self, x: int, y: int) -> bool:
        return (x, y) in self.positions

    def append(self, x: int, y: int) -> None:
        self.positions.append((x, y))

    def clear(self) -> None:
        self.positions.clear()
