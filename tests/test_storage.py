import json

import pytest

from tetromino_engine.game import (
    Color,
    Command,
    CyclingShapeSource,
    TetrominoGame,
    TetrominoType,
    load_game,
    save_game,
)


def test_save_and_load_restores_session(tmp_path, make_game):
    game = make_game([TetrominoType.O, TetrominoType.L])
    while game.step(Command.MOVE_DOWN):
        pass
    game.step(Command.LOCK)
    game.step(Command.MOVE_DOWN)

    path = tmp_path / "saves" / "game.json"
    save_game(path, game)
    restored = load_game(path, shape_source=CyclingShapeSource([TetrominoType.Z]))

    assert restored.to_dict() == game.to_dict()
    assert restored.grid.cell_at(224) is Color.YELLOW
    assert restored.current_piece.kind is TetrominoType.L
    assert restored.pieces_locked == 1

    restored.step(Command.LOCK)
    assert restored.current_piece.kind is TetrominoType.Z


def test_missing_file_starts_fresh_game(tmp_path):
    game = load_game(tmp_path / "nothing.json", shape_source=CyclingShapeSource([TetrominoType.S]))
    assert game.grid.occupied_indices() == []
    assert game.current_piece.position == (4, 5, 13, 14)


def test_snapshot_without_piece_spawns_one(make_game):
    data = make_game([TetrominoType.O]).to_dict()
    data["piece"] = None
    game = TetrominoGame.from_dict(data, shape_source=CyclingShapeSource([TetrominoType.J]))
    assert game.current_piece.kind is TetrominoType.J


def test_non_default_dimensions_round_trip(make_game):
    game = make_game([TetrominoType.I], width=6, height=8)
    restored = TetrominoGame.from_dict(json.loads(json.dumps(game.to_dict())))
    assert (restored.width, restored.height) == (6, 8)
    assert restored.current_piece.position == (1, 2, 3, 4)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.pop("cells"),
        lambda d: d.update(cells=[0] * 10),
        lambda d: d["piece"].update(kind="Q"),
        lambda d: d["piece"].update(position=[1, 2, 3]),
        lambda d: d["piece"].update(position=[1, 2, 3, 999]),
        lambda d: d.update(width=2),
        lambda d: d["piece"].update(position=[50, 50, 50, 50]),
        lambda d: d["piece"].update(position=[54, 63, 64, 65]),
        lambda d: d["piece"].update(position=[9, 10, 19, 20]),
        lambda d: d.update(width="wide"),
    ],
)
def test_malformed_snapshots_raise_value_error(make_game, mutate):
    data = make_game([TetrominoType.O]).to_dict()
    mutate(data)
    with pytest.raises(ValueError):
        TetrominoGame.from_dict(data)


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_unreadable_save_file_raises(tmp_path, content):
    path = tmp_path / "game.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_game(path)


def test_restored_piece_position_is_sorted(make_game):
    data = make_game([TetrominoType.O]).to_dict()
    data["piece"]["position"] = [15, 14, 5, 4]
    game = TetrominoGame.from_dict(data)
    assert game.current_piece.position == (4, 5, 14, 15)
    assert not game.step(Command.ROTATE)


def test_restored_piece_keeps_its_orientation(make_game):
    data = make_game([TetrominoType.T]).to_dict()
    data["piece"]["position"] = [54, 64, 65, 74]
    game = TetrominoGame.from_dict(data)
    assert game.current_piece.position == (54, 64, 65, 74)
    assert game.step(Command.ROTATE)
    assert game.current_piece.position == (63, 64, 65, 74)
