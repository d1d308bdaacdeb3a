from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .combat.creature import Creature, create_player
from .combat.engine import FightResult, fight
from .config import DEFAULT_CONFIG, SimulationConfig
from .core.random import RandomSource
from .core.seed import resolve_seed
from .dungeon.generation import Dungeon, generate_dungeons
from .greeting import choose_template, render_greeting, template_parts
from .progression.leveling import LevelingSystem
from .result import GameResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncounterRecord:
    """One resolved encounter attempt, in the order it happened."""

    dungeon_index: int
    encounter_index: int
    dungeon: str
    enemy: str
    enemy_stats: Dict[str, int]
    outcome: FightResult
    lives: int
    player_level: int


class Game:
    """Drives one player through the gauntlet.

    Setup draws, in order: the greeting template (its part count fixes the
    number of dungeons), the player's pattern and stats, then one hash per
    dungeon. During the run every encounter attempt draws a creature type and
    its stats; combat itself draws nothing.

    Run state is the cursor ``(dungeon_index, encounter_index)`` plus the
    player's lives and HP. A loss costs a life and restarts the dungeon at
    encounter 0, except that losing the first encounter of any dungeon past the
    first steps back one dungeon. Losing with no lives left ends the run.
    """

    def __init__(self, name: str, rng: RandomSource, config: SimulationConfig = DEFAULT_CONFIG) -> None:
        self.name = name
        self.rng = rng
        self.config = config
        self.leveling = LevelingSystem(config)

        self.template = choose_template(rng)
        self.player: Creature = create_player(name, rng, config)
        self.dungeons: List[Dungeon] = generate_dungeons(len(template_parts(self.template)), rng)

        self.dungeon_index = 0
        self.encounter_index = 0
        self.history: List[EncounterRecord] = []
        self.result: Optional[GameResult] = None
        logger.debug(
            "New game for %s: %d dungeons, player=%s",
            name,
            len(self.dungeons),
            self.player.stat_block(),
        )

    @classmethod
    def from_seed(
        cls,
        name: str,
        seed: Union[int, str, None] = None,
        config: SimulationConfig = DEFAULT_CONFIG,
    ) -> "Game":
        """Build a game seeded from ``seed``, or from the player's name if omitted."""
        effective = resolve_seed(name if seed is None else seed)
        return cls(name, RandomSource(effective), config)

    @property
    def total_stages(self) -> int:
        return len(self.dungeons)

    def run(self) -> GameResult:
        if self.result is not None:
            return self.result

        player = self.player
        while self.dungeon_index < len(self.dungeons):
            dungeon = self.dungeons[self.dungeon_index]
            self._enter_dungeon(dungeon)

            while self.encounter_index < self.config.encounters_per_dungeon:
                enemy = dungeon.spawn_enemy(self.encounter_index, self.rng, self.config)
                outcome = fight(player, enemy)

                if outcome is FightResult.WIN:
                    self.leveling.award_win(player, dungeon.level)
                    self._record(dungeon, enemy, outcome)
                    self.encounter_index += 1
                    continue

                if player.lives == 0:
                    self._record(dungeon, enemy, outcome)
                    self.result = GameResult.loss(self.dungeon_index)
                    logger.info("%s fell in %s: %s", self.name, dungeon.display_name(), self.result)
                    return self.result

                player.lives -= 1
                player.full_heal()
                self._record(dungeon, enemy, outcome)
                if self.encounter_index == 0 and self.dungeon_index > 0:
                    self.dungeon_index -= 1
                    logger.debug("Backtracking to dungeon %d", self.dungeon_index)
                else:
                    logger.debug("Retrying dungeon %d", self.dungeon_index)
                break
            else:
                logger.debug("Cleared %s", dungeon.display_name())
                self.dungeon_index += 1

        self.result = GameResult.win(self.total_stages)
        logger.info("%s cleared all %d dungeons", self.name, self.total_stages)
        return self.result

    def greeting(self) -> str:
        if self.result is None:
            raise RuntimeError("Game has not been run yet")
        return render_greeting(self.template, self.name, self.result)

    def _enter_dungeon(self, dungeon: Dungeon) -> None:
        self.encounter_index = 0
        self.player.full_heal()
        logger.debug(
            "Entering %s with %d lives (L%d)",
            dungeon.display_name(),
            self.player.lives,
            self.player.level,
        )

    def _record(self, dungeon: Dungeon, enemy: Creature, outcome: FightResult) -> None:
        self.history.append(
            EncounterRecord(
                dungeon_index=self.dungeon_index,
                encounter_index=self.encounter_index,
                dungeon=dungeon.display_name(),
                enemy=enemy.name,
                enemy_stats=enemy.stat_block(),
                outcome=outcome,
                lives=self.player.lives,
                player_level=self.player.level,
            )
        )


@dataclass
class RunReport:
    name: str
    seed: int
    total_stages: int
    result: GameResult
    greeting: str
    dungeons: List[str] = field(default_factory=list)
    player: Dict[str, int] = field(default_factory=dict)

    def to_row(self) -> List[Any]:
        return [self.name, self.total_stages, self.result.progress, self.result.outcome.value, self.greeting]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "seed": self.seed,
            "total_stages": self.total_stages,
            "result": self.result.outcome.value,
            "progress": self.result.progress,
            "greeting": self.greeting,
            "dungeons": list(self.dungeons),
            "player": dict(self.player),
        }


def simulate(
    name: str,
    seed: Union[int, str, None] = None,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> RunReport:
    """Run a full game and summarize it."""
    game = Game.from_seed(name, seed, config)
    result = game.run()
    player_summary = game.player.stat_block()
    player_summary.update(level=game.player.level, lives=game.player.lives, exp=game.player.exp)
    return RunReport(
        name=name,
        seed=game.rng.seed,
        total_stages=game.total_stages,
        result=result,
        greeting=game.greeting(),
        dungeons=[d.display_name() for d in game.dungeons],
        player=player_summary,
    )
