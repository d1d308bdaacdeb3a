import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from gauntlet.combat.engine import FightResult  # noqa: E402


@pytest.fixture
def scripted_fights(monkeypatch):
    """Replace combat with a fixed sequence of outcomes ("W"/"L")."""

    def install(script: str):
        outcomes = iter(FightResult.WIN if c == "W" else FightResult.LOSS for c in script)
        calls = []

        def _fight(player, enemy):
            calls.append(enemy.name)
            return next(outcomes)

        monkeypatch.setattr("gauntlet.game.fight", _fight)
        return calls

    return install
