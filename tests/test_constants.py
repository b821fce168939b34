"""Tests for constants, enumerations and square names."""

from reversi.constants import (
    BOARD_DIM,
    CENTER_POINTS,
    COMPUTER_PLAYER,
    DIRECTIONS,
    EMPTY,
    START_POINT,
    Direction,
    Player,
    PlayerMode,
    Point,
    RuleVariant,
    point2square,
)


class TestConstants:
    """Test board constants."""

    def test_board_dimensions(self) -> None:
        """Board is 8x8 and EMPTY is 0."""
        assert BOARD_DIM == 8
        assert EMPTY == 0

    def test_directions(self) -> None:
        """Eight distinct compass offsets, no (0, 0)."""
        assert len(DIRECTIONS) == 8
        assert len(set(DIRECTIONS)) == 8
        assert (0, 0) not in DIRECTIONS
        assert all(dc in (-1, 0, 1) and dr in (-1, 0, 1) for dc, dr in DIRECTIONS)

    def test_center_points(self) -> None:
        """The four center cells."""
        assert CENTER_POINTS == {(3, 3), (4, 4), (3, 4), (4, 3)}
        assert START_POINT == (3, 3)

    def test_point_equals_tuple(self) -> None:
        """Point is a (col, row) tuple."""
        p = Point(2, 5)
        assert p == (2, 5)
        assert p.col == 2 and p.row == 5
        assert hash(p) == hash((2, 5))


class TestSquareNames:
    """Test square name mappings."""

    def test_corners(self) -> None:
        """Column letter then row number."""
        assert point2square[(0, 0)] == "a1"
        assert point2square[(7, 0)] == "h1"
        assert point2square[(0, 7)] == "a8"
        assert point2square[(7, 7)] == "h8"
        assert point2square[(3, 2)] == "d3"

    def test_every_point_named(self) -> None:
        """64 points, each with its own name."""
        assert len(point2square) == 64
        assert len(set(point2square.values())) == 64


class TestEnums:
    """Test player, variant, mode and direction enums."""

    def test_player_values(self) -> None:
        """Players are opposite signs, distinct from EMPTY."""
        assert Player.FIRST == -Player.SECOND
        assert EMPTY not in {p.value for p in Player}

    def test_opponent(self) -> None:
        """Opponent flips between the two players."""
        assert Player.FIRST.opponent is Player.SECOND
        assert Player.SECOND.opponent is Player.FIRST

    def test_labels_and_symbols(self) -> None:
        """Every player has a label and symbol."""
        assert Player.FIRST.label == "Dark Player"
        assert Player.SECOND.label == "Light Player"
        assert Player.FIRST.symbol == "X"
        assert Player.SECOND.symbol == "O"
        assert str(Player.FIRST) == "Dark Player"

    def test_toggles(self) -> None:
        """Toggling twice returns to the start."""
        assert RuleVariant.MODERN.toggled() is RuleVariant.HISTORICAL
        assert RuleVariant.HISTORICAL.toggled().toggled() is RuleVariant.HISTORICAL
        assert PlayerMode.TWO_PLAYER.toggled() is PlayerMode.VERSUS_COMPUTER
        assert PlayerMode.VERSUS_COMPUTER.toggled() is PlayerMode.TWO_PLAYER

    def test_computer_player(self) -> None:
        """The computer takes the second seat."""
        assert COMPUTER_PLAYER is Player.SECOND

    def test_directions_are_unit_steps(self) -> None:
        """Cursor directions move one cell."""
        assert Direction.UP.value == (0, -1)
        assert Direction.DOWN.value == (0, 1)
        assert Direction.LEFT.value == (-1, 0)
        assert Direction.RIGHT.value == (1, 0)
