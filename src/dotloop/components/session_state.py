from dataclasses import dataclass

from dotloop.constants import MOVE_LIMIT


@dataclass
class SessionState:
    """Singleton component holding score and the remaining move budget."""
    score: int = 0
    moves_left: int = MOVE_LIMIT
    move_limit: int = MOVE_LIMIT

    @property
    def terminal(self) -> bool:
        return self.moves_left == 0

    def restart(self) -> None:
        self.score = 0
        self.moves_left = self.move_limit
