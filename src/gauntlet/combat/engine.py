from __future__ import annotations

import logging
from enum import Enum

from .creature import Creature

logger = logging.getLogger(__name__)


class FightResult(str, Enum):
    WIN = "win"
    LOSS = "loss"


class Turn(str, Enum):
    PLAYER = "player"
    ENEMY = "enemy"


def compute_damage(attacker: Creature, defender: Creature) -> int:
    """Better of the physical and magical exchange, never below 1."""
    physical = max(attacker.attack - defender.defense, 1)
    magical = max(attacker.magic - defender.wisdom, 1)
    return max(physical, magical)


def strike(attacker: Creature, defender: Creature) -> int:
    damage = compute_damage(attacker, defender)
    before = defender.current_hp
    defender.current_hp -= damage
    logger.debug(
        "%s does %d damage to %s (%d -> %d)",
        attacker.name,
        damage,
        defender.name,
        before,
        defender.current_hp,
    )
    return damage


def fight(player: Creature, enemy: Creature) -> FightResult:
    """Resolve a duel by strictly alternating strikes.

    The faster side opens; ties go to ``player``. Defeat (HP at or below zero)
    is checked before every strike, so the result is relative to ``player``.
    Terminates because every strike deals at least 1 damage.
    """
    turn = Turn.PLAYER if player.speed >= enemy.speed else Turn.ENEMY
    strikes = 0

    while True:
        if player.is_defeated:
            logger.debug("%s is out of health after %d strikes", player.name, strikes)
            return FightResult.LOSS
        if enemy.is_defeated:
            logger.debug("%s is out of health after %d strikes", enemy.name, strikes)
            return FightResult.WIN

        if turn is Turn.PLAYER:
            strike(player, enemy)
            turn = Turn.ENEMY
        else:
            strike(enemy, player)
            turn = Turn.PLAYER
        strikes += 1
