from gauntlet.combat.creature import Creature
from gauntlet.combat.engine import FightResult, compute_damage, fight
from gauntlet.core.stats import StatPattern

PATTERN = StatPattern(hp=1, attack=1, defense=1, magic=1, wisdom=1, speed=1)


def make(name="X", hp=10, atk=1, df=1, mag=1, wis=1, spd=1) -> Creature:
    return Creature(
        name=name,
        max_hp=hp,
        current_hp=hp,
        attack=atk,
        defense=df,
        magic=mag,
        wisdom=wis,
        speed=spd,
        pattern=PATTERN,
    )


def test_damage_takes_the_better_channel():
    assert compute_damage(make(atk=10, mag=3), make(df=4, wis=5)) == 6
    assert compute_damage(make(atk=2, mag=9), make(df=10, wis=2)) == 7


def test_damage_is_at_least_one():
    assert compute_damage(make(atk=1, mag=1), make(df=50, wis=50)) == 1


def test_speed_tie_goes_to_player():
    player = make("P", hp=10, atk=10, df=0, spd=5)
    enemy = make("E", hp=10, atk=10, df=0, spd=5)
    assert fight(player, enemy) is FightResult.WIN
    assert player.current_hp == 10
    assert enemy.current_hp == 0


def test_faster_enemy_strikes_first():
    player = make("P", hp=10, atk=10, df=0, spd=4)
    enemy = make("E", hp=10, atk=10, df=0, spd=5)
    assert fight(player, enemy) is FightResult.LOSS
    assert enemy.current_hp == 10


def test_hp_is_not_clamped_at_zero():
    player = make("P", hp=10, atk=10, df=0, spd=9)
    enemy = make("E", hp=3, df=0, spd=1)
    fight(player, enemy)
    assert enemy.current_hp == -7


def test_player_defeat_checked_first():
    player = make("P", hp=10)
    enemy = make("E", hp=10)
    player.current_hp = 0
    enemy.current_hp = 0
    assert fight(player, enemy) is FightResult.LOSS


def test_minimum_damage_duel_terminates():
    player = make("P", hp=50, atk=1, df=1, spd=1)
    enemy = make("E", hp=50, atk=1, df=1, spd=1)
    assert fight(player, enemy) is FightResult.WIN
    assert player.current_hp == 1
    assert enemy.current_hp == 0
