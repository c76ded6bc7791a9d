import pytest

from tetromino_engine.game import CyclingShapeSource, Piece, RandomShapeSource, TetrominoType
from tetromino_engine.game.pieces import PIECE_COLORS, spawn_position


@pytest.mark.parametrize(
    "kind, expected",
    [
        (TetrominoType.I, (3, 4, 5, 6)),
        (TetrominoType.O, (4, 5, 14, 15)),
        (TetrominoType.T, (4, 13, 14, 15)),
        (TetrominoType.S, (4, 5, 13, 14)),
        (TetrominoType.Z, (3, 4, 14, 15)),
        (TetrominoType.J, (3, 13, 14, 15)),
        (TetrominoType.L, (5, 13, 14, 15)),
    ],
)
def test_spawn_positions_on_default_width(kind, expected):
    assert spawn_position(kind, 10) == expected
    assert Piece.spawn(kind, 10).position == expected


def test_spawn_centres_on_other_widths():
    assert spawn_position(TetrominoType.O, 6) == (2, 3, 8, 9)
    assert spawn_position(TetrominoType.I, 4) == (0, 1, 2, 3)


def test_occupies_cell():
    piece = Piece.spawn(TetrominoType.O, 10)
    assert piece.occupies_cell(14)
    assert not piece.occupies_cell(6)


def test_every_kind_has_its_own_color():
    assert len(set(PIECE_COLORS.values())) == 7
    assert Piece.spawn(TetrominoType.I, 10).color is PIECE_COLORS[TetrominoType.I]


def test_cycling_source_repeats():
    source = CyclingShapeSource([TetrominoType.T, TetrominoType.I])
    drawn = [source.next_shape() for _ in range(5)]
    assert drawn == [TetrominoType.T, TetrominoType.I, TetrominoType.T, TetrominoType.I, TetrominoType.T]


def test_cycling_source_needs_shapes():
    with pytest.raises(ValueError):
        CyclingShapeSource([])


def test_random_source_is_reproducible_and_covers_all_shapes():
    first = RandomShapeSource(seed=7)
    second = RandomShapeSource(seed=7)
    drawn = [first.next_shape() for _ in range(700)]
    assert drawn == [second.next_shape() for _ in range(700)]
    assert set(drawn) == set(TetrominoType)
