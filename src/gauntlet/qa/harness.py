from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

from ..config import DEFAULT_CONFIG, SimulationConfig
from ..core.random import RandomSource
from ..game import Game
from ..result import GameResult

T = TypeVar("T")

Draw = Dict[str, Any]


def draw_digest(events: Sequence[Draw]) -> str:
    """SHA-256 over the canonical JSON form of a draw log."""
    blob = json.dumps(list(events), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()


@dataclass
class QATrace:
    seed: int
    events: List[Draw]
    checksum: str

    def to_json(self) -> str:
        return json.dumps({"seed": self.seed, "events": self.events, "checksum": self.checksum})

    @classmethod
    def from_json(cls, data: str) -> "QATrace":
        obj = json.loads(data)
        return cls(seed=obj["seed"], events=obj["events"], checksum=obj["checksum"])


@dataclass(frozen=True)
class Divergence:
    """Where a replay stopped matching its trace."""

    index: int
    op: str
    expected: Any
    got: Any


class RecordingRandomSource(RandomSource):
    """RandomSource that keeps an ordered log of every draw it serves."""

    def __post_init__(self) -> None:
        super().__post_init__()
        self.events: List[Draw] = []

    def _record(self, op: str, args: Dict[str, Any], result: Any) -> None:
        self.events.append({"op": op, "args": args, "result": result})

    def next_u64(self) -> int:
        val = super().next_u64()
        self._record("next_u64", {}, val)
        return val

    def uniform(self, a: float, b: float) -> float:
        val = super().uniform(a, b)
        self._record("uniform", {"a": a, "b": b}, val)
        return val

    def choice(self, seq: Sequence[T]) -> T:
        val = super().choice(seq)
        self._record("choice", {"seq": list(seq)}, val)
        return val


# How to re-issue each recorded draw against a fresh source.
_REPLAY: Dict[str, Callable[[RandomSource, Dict[str, Any]], Any]] = {
    "next_u64": lambda src, args: src.next_u64(),
    "uniform": lambda src, args: src.uniform(args["a"], args["b"]),
    "choice": lambda src, args: src.choice(args["seq"]),
}


class QAHarness:
    """
    Records the draw sequence of a run and verifies that it reproduces.

    Replaying re-issues every recorded draw, with its recorded arguments, on a
    fresh source built from the trace's seed; the first draw whose result
    differs is reported.
    """

    def __init__(self, source: RecordingRandomSource):
        self.source = source

    def snapshot(self) -> QATrace:
        events = list(self.source.events)
        return QATrace(seed=self.source.seed, events=events, checksum=draw_digest(events))

    def reproduce(self, trace: QATrace) -> Optional[Divergence]:
        """Replay ``trace``; None when every draw and the checksum match."""
        fresh = RandomSource(trace.seed)
        for index, event in enumerate(trace.events):
            op = event["op"]
            replay = _REPLAY.get(op)
            if replay is None:
                return Divergence(index, op, event["result"], None)
            got = replay(fresh, event["args"])
            if got != event["result"]:
                return Divergence(index, op, event["result"], got)

        digest = draw_digest(trace.events)
        if digest != trace.checksum:
            return Divergence(len(trace.events), "checksum", trace.checksum, digest)
        return None


def trace_game(
    name: str,
    seed: int,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> Tuple[GameResult, QATrace]:
    """Run a full game on a recording source and return its result and draw trace."""
    harness = QAHarness(RecordingRandomSource(seed))
    result = Game(name, harness.source, config).run()
    return result, harness.snapshot()
