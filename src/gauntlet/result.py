from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Outcome(str, Enum):
    WIN = "win"
    LOSS = "loss"


@dataclass(frozen=True)
class GameResult:
    """Final result of a run.

    ``progress`` is the number of dungeons completed: every stage on a win,
    the index of the dungeon the last life was lost in on a loss.
    """

    outcome: Outcome
    progress: int

    @classmethod
    def win(cls, total_stages: int) -> "GameResult":
        return cls(Outcome.WIN, total_stages)

    @classmethod
    def loss(cls, dungeons_completed: int) -> "GameResult":
        return cls(Outcome.LOSS, dungeons_completed)

    @property
    def is_win(self) -> bool:
        return self.outcome is Outcome.WIN

    def __str__(self) -> str:
        if self.is_win:
            return "Win"
        return f"Loss({self.progress})"
