from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, TextIO, Union

from .config import DEFAULT_CONFIG, SimulationConfig
from .errors import IOFailure
from .game import RunReport, simulate

logger = logging.getLogger(__name__)

CSV_HEADER = ["name", "total_stages", "progress", "result", "greeting"]


def read_names(path: Union[str, Path]) -> List[str]:
    """Read one player name per line, skipping blank lines."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as exc:
        raise IOFailure(path, "Unable to read batch file") from exc
    names = [line.strip() for line in lines if line.strip()]
    logger.debug("Read %d names from %s", len(names), path)
    return names


def write_batch(
    names: Iterable[str],
    out: TextIO,
    config: SimulationConfig = DEFAULT_CONFIG,
    header: bool = False,
) -> List[RunReport]:
    """Simulate every name and write one CSV row per run to ``out``.

    Non-numeric fields are quoted, so the greeting is always double quoted.
    Runs are independent; each builds its own random source from the name.
    """
    writer = csv.writer(out, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    if header:
        writer.writerow(CSV_HEADER)

    reports: List[RunReport] = []
    for name in names:
        report = simulate(name, config=config)
        writer.writerow(report.to_row())
        reports.append(report)

    wins = sum(1 for r in reports if r.result.is_win)
    logger.info("Batch complete: %d runs, %d wins", len(reports), wins)
    return reports


def run_batch(
    path: Union[str, Path],
    out: TextIO,
    config: SimulationConfig = DEFAULT_CONFIG,
    header: bool = False,
) -> List[RunReport]:
    """Read the names in ``path`` and write their results to ``out``."""
    return write_batch(read_names(path), out, config, header=header)
