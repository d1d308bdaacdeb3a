import pytest

from gauntlet.combat.engine import FightResult
from gauntlet.config import SimulationConfig
from gauntlet.core.random import RandomSource
from gauntlet.game import Game, simulate
from gauntlet.result import GameResult, Outcome

FOUR_PARTS = "Good job, brave {name}!"
# Keeps scripted runs free of level-ups so lives only move on losses.
NO_LEVELING = SimulationConfig(exp_per_level=10**9)


@pytest.fixture
def four_dungeon_game(monkeypatch):
    monkeypatch.setattr("gauntlet.game.choose_template", lambda rng: FOUR_PARTS)

    def build(config=NO_LEVELING):
        return Game("Tester", RandomSource(1234), config)

    return build


def visited(game):
    return [(r.dungeon_index, r.encounter_index) for r in game.history]


def test_clearing_every_encounter_wins(four_dungeon_game, scripted_fights):
    calls = scripted_fights("W" * 20)
    game = four_dungeon_game()

    assert game.total_stages == 4
    assert [d.level for d in game.dungeons] == [1, 2, 3, 4]
    assert game.run() == GameResult.win(4)
    assert len(calls) == 20
    assert game.greeting() == "Good job, brave Tester!"
    assert game.player.lives == 3


def test_losing_last_life_mid_dungeon(four_dungeon_game, scripted_fights):
    script = "W" * 10 + "WWWL" * 4
    scripted_fights(script)
    game = four_dungeon_game()

    result = game.run()

    assert result == GameResult.loss(2)
    assert game.greeting() == "Good job,"
    assert visited(game)[-1] == (2, 3)
    assert game.player.lives == 0
    assert [r.lives for r in game.history if r.outcome is FightResult.LOSS] == [2, 1, 0, 0]


def test_first_encounter_loss_backtracks_one_dungeon(four_dungeon_game, scripted_fights):
    scripted_fights("WWWWW" + "L" + "W" * 20)
    game = four_dungeon_game()

    assert game.run().outcome is Outcome.WIN
    trail = visited(game)
    loss_at = trail.index((1, 0))
    assert game.history[loss_at].outcome is FightResult.LOSS
    assert trail[loss_at + 1] == (0, 0)
    assert game.player.lives == 2


def test_first_dungeon_never_backtracks(four_dungeon_game, scripted_fights):
    scripted_fights("L" + "W" * 20)
    game = four_dungeon_game()
    game.run()
    assert visited(game)[:2] == [(0, 0), (0, 0)]


def test_later_encounter_loss_retries_same_dungeon(four_dungeon_game, scripted_fights):
    scripted_fights("WWWWW" + "WWL" + "W" * 15)
    game = four_dungeon_game()
    game.run()
    trail = visited(game)
    loss_at = trail.index((1, 2))
    assert trail[loss_at + 1] == (1, 0)


def test_four_straight_losses_end_in_first_dungeon(four_dungeon_game, scripted_fights):
    calls = scripted_fights("LLLL")
    game = four_dungeon_game()
    assert game.run() == GameResult.loss(0)
    assert len(calls) == 4
    assert game.greeting() == ""


def test_hp_resets_on_dungeon_entry_only(four_dungeon_game, monkeypatch):
    seen = []

    def _fight(player, enemy):
        seen.append(player.current_hp == player.max_hp)
        player.current_hp = 1
        return FightResult.WIN

    monkeypatch.setattr("gauntlet.game.fight", _fight)
    game = four_dungeon_game()
    game.run()
    assert seen == [True, False, False, False, False] * 4


def test_boss_is_fought_last_in_each_dungeon(four_dungeon_game, scripted_fights):
    calls = scripted_fights("W" * 20)
    four_dungeon_game().run()
    for i, name in enumerate(calls):
        assert name.startswith("Boss ") == (i % 5 == 4)


def test_run_is_idempotent(four_dungeon_game, scripted_fights):
    calls = scripted_fights("W" * 20)
    game = four_dungeon_game()
    first = game.run()
    assert game.run() is first
    assert len(calls) == 20


def test_greeting_requires_a_finished_run():
    game = Game.from_seed("Nobody", 1)
    with pytest.raises(RuntimeError):
        game.greeting()


@pytest.mark.parametrize("name", ["Alice", "Bob", "Zed", "Mallory"])
def test_same_seed_same_run(name):
    a = Game.from_seed(name)
    b = Game.from_seed(name)
    assert a.run() == b.run()
    assert a.dungeons == b.dungeons
    assert a.history == b.history
    assert a.player == b.player


def test_explicit_seed_overrides_name():
    a = Game.from_seed("Alice", seed=42)
    b = Game.from_seed("Bob", seed=42)
    assert a.dungeons == b.dungeons
    assert a.player.pattern == b.player.pattern


@pytest.mark.parametrize("seed", range(25))
def test_lives_stay_within_pool(seed):
    game = Game.from_seed("Runner", seed)
    result = game.run()
    assert all(0 <= r.lives <= 3 for r in game.history)
    assert 0 <= game.player.lives <= 3
    if result.outcome is Outcome.LOSS:
        last = game.history[-1]
        assert last.outcome is FightResult.LOSS
        assert last.lives == 0
        assert result.progress == last.dungeon_index
    else:
        assert result.progress == game.total_stages


def test_simulate_report():
    report = simulate("Alice")
    assert report.total_stages == len(report.dungeons)
    row = report.to_row()
    assert row[0] == "Alice"
    assert row[1] == report.total_stages
    assert row[3] in ("win", "loss")
    assert report.to_dict()["greeting"] == report.greeting


def test_unscripted_runs_can_run_out_of_lives():
    lost = []
    for seed in range(200):
        game = Game.from_seed("Runner", seed)
        if game.run().outcome is Outcome.LOSS:
            lost.append(game)
    assert lost

    game = lost[0]
    replay = Game.from_seed("Runner", game.rng.seed)
    assert replay.run() == game.result
    assert replay.history == game.history

    n = game.result.progress
    assert n < game.total_stages
    assert str(game.result) == f"Loss({n})"
    parts = game.template.split()
    assert game.greeting() == " ".join(p.replace("{name}", "Runner") for p in parts[:n])
    assert game.history[-1].lives == 0
