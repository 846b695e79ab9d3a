"""End-to-end rounds driven through the public game state."""
import pytest

from purple_cubes.components import Cube, CubeColor, Direction
from purple_cubes.input import Key
from purple_cubes.rounds import RoundState

_KEY_FOR = {
    Direction.UP: Key.UP,
    Direction.DOWN: Key.DOWN,
    Direction.LEFT: Key.LEFT,
    Direction.RIGHT: Key.RIGHT,
}


def _only_cube(game):
    cubes = list(game.engine.world.query(Cube))
    assert len(cubes) == 1
    return cubes[0]


def test_one_missed_purple_cube_over_a_full_round(make_game):
    game = make_game(skip_menu=True, purple_chance=1.0,
                     spawn_interval_range=(100.0, 100.0))
    assert game.scorer.value == 0

    for _ in range(8):
        game.step(0.25)
    _only_cube(game)

    for _ in range(112):
        game.step(0.25)

    assert game.scorer.value == -5
    assert game.scorer.misses == 1
    assert game.state is RoundState.AFTER_ROUND


def test_hitting_a_purple_cube(make_game):
    game = make_game(skip_menu=True, purple_chance=1.0,
                     spawn_interval_range=(100.0, 100.0))
    for _ in range(8):
        game.step(0.25)
    eid, (cube,) = _only_cube(game)
    assert cube.color is CubeColor.PURPLE

    game.inputs.press(_KEY_FOR[cube.direction])
    game.step(0.25)

    assert not game.engine.world.alive(eid)
    assert game.scorer.value == 1
    for _ in range(8):
        game.step(0.25)
    assert game.scorer.value == 1


def test_hitting_a_non_purple_cube(make_game):
    game = make_game(skip_menu=True, purple_chance=0.0,
                     spawn_interval_range=(100.0, 100.0))
    for _ in range(8):
        game.step(0.25)
    eid, (cube,) = _only_cube(game)
    assert cube.color is CubeColor.NON_PURPLE

    game.inputs.press(_KEY_FOR[cube.direction])
    game.step(0.25)

    assert not game.engine.world.alive(eid)
    assert game.scorer.value == -5
    for _ in range(8):
        game.step(0.25)
    assert game.scorer.value == -5


def test_wrong_arrow_leaves_cube_to_expire(make_game):
    game = make_game(skip_menu=True, purple_chance=1.0,
                     spawn_interval_range=(100.0, 100.0))
    for _ in range(8):
        game.step(0.25)
    eid, (cube,) = _only_cube(game)
    wrong = next(k for d, k in _KEY_FOR.items() if d is not cube.direction)

    game.inputs.press(wrong)
    game.step(0.25)
    assert game.engine.world.alive(eid)
    assert game.scorer.value == 0

    for _ in range(3):
        game.step(0.25)
    assert not game.engine.world.alive(eid)
    assert game.scorer.value == -5


@pytest.mark.parametrize("key, expected", [
    (Key.RESTART, RoundState.DURING_ROUND),
    (Key.MENU, RoundState.MENU),
])
def test_results_screen_inputs(make_game, key, expected):
    game = make_game(skip_menu=True, round_seconds=3.0, purple_chance=1.0)
    while game.state is RoundState.DURING_ROUND:
        game.step(0.25)
    assert game.scorer.value != 0

    game.inputs.press(key)
    game.step(0.25)

    assert game.state is expected
    assert game.engine.world.count(Cube) == 0
    if expected is RoundState.DURING_ROUND:
        assert game.scorer.value == 0


def test_same_seed_replays_identically(make_game):
    def play(seed):
        game = make_game(seed=seed, skip_menu=True, round_seconds=10.0)
        trace = []
        for i in range(40):
            if i % 5 == 4:
                game.inputs.press(Key.UP)
                game.inputs.press(Key.LEFT)
            game.step(0.25)
            game.inputs.release(Key.UP)
            game.inputs.release(Key.LEFT)
            trace.append(game.scorer.value)
        return trace

    assert play(99) == play(99)
