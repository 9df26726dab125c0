import unittest

from battleship_rules.domain.errors import (
    GameError,
    GameErrorReason,
    GameStartError,
    GameStartErrorReason,
    PlaceError,
    PlaceErrorReason,
    ShipTypeError,
    ShipTypeErrorReason,
)
from battleship_rules.domain.game import Game
from battleship_rules.domain.pregame import PreGame
from battleship_rules.domain.types import CellStatus, Orientation, Player, ShipType

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


def _board(pregame, player):
    return [[pregame.get_cell(player, x, y) for x in range(pregame.width)] for y in range(pregame.height)]


class PreGameSetupTests(unittest.TestCase):
    def test_constructor_checks_dimensions(self):
        for width, height in [(0, 0), (0, 5), (5, 0), (3, 1)]:
            with self.subTest(width=width, height=height):
                with self.assertRaises(GameError) as ctx:
                    PreGame(width, height)
                self.assertIs(ctx.exception.reason, GameErrorReason.ILLEGAL_DIMENSIONS)
        self.assertIsInstance(PreGame(2, 2), PreGame)
        self.assertIsInstance(PreGame(1, 2), PreGame)

    def test_returns_dimensions(self):
        pregame = PreGame(2, 3)
        self.assertEqual(pregame.width, 2)
        self.assertEqual(pregame.height, 3)

    def test_add_ship_types(self):
        pregame = PreGame(3, 3)
        self.assertEqual(pregame.ship_types, ())

        corvette = pregame.add_ship_type("Corvette", 2)
        submarine = pregame.add_ship_type("Submarine", 1)
        self.assertEqual(pregame.ship_types, (corvette, submarine))
        self.assertEqual((corvette.id, corvette.name, corvette.length), (0, "Corvette", 2))
        self.assertEqual(submarine.id, 1)

    def test_disallow_zero_length_ship_types(self):
        pregame = PreGame(3, 3)
        with self.assertRaises(ShipTypeError) as ctx:
            pregame.add_ship_type("Jetski", 0)
        self.assertIs(ctx.exception.reason, ShipTypeErrorReason.ILLEGAL_SHIP_LENGTH)
        self.assertEqual(pregame.ship_types, ())

    def test_disallow_too_long_ship_types(self):
        pregame = PreGame(3, 3)
        pregame.add_ship_type("Submarine", 1)
        with self.assertRaises(ShipTypeError) as ctx:
            pregame.add_ship_type("Battleship", 4)
        self.assertIs(ctx.exception.reason, ShipTypeErrorReason.SHIP_TOO_LONG_FOR_BATTLEFIELD)
        self.assertEqual(len(pregame.ship_types), 1)

    def test_ship_length_limited_by_longer_side(self):
        pregame = PreGame(2, 5)
        self.assertEqual(pregame.add_ship_type("Cruiser", 5).length, 5)


class PlaceShipTests(unittest.TestCase):
    def setUp(self):
        self.pregame = PreGame(3, 3)
        self.corvette = self.pregame.add_ship_type("Corvette", 2)

    def assertPlaceError(self, reason, *args):
        with self.assertRaises(PlaceError) as ctx:
            self.pregame.place_ship(*args)
        self.assertIs(ctx.exception.reason, reason)

    def test_place_ships(self):
        self.pregame.place_ship(Player.P1, self.corvette, 0, 0, H)
        self.pregame.place_ship(Player.P2, self.corvette, 0, 0, V)

        self.assertEqual(self.pregame.get_cell(Player.P1, 1, 0), CellStatus.SHIP)
        self.assertEqual(self.pregame.get_cell(Player.P1, 0, 1), CellStatus.EMPTY)
        self.assertEqual(self.pregame.get_cell(Player.P2, 0, 1), CellStatus.SHIP)
        self.assertEqual(self.pregame.get_cell(Player.P2, 1, 0), CellStatus.EMPTY)
        self.assertTrue(self.pregame.is_placed(Player.P1, self.corvette))
        self.assertEqual(self.pregame.placed_count, 2)

    def test_placements_record_cells(self):
        self.pregame.place_ship(Player.P2, self.corvette, 2, 1, V)
        (placement,) = self.pregame.placements(Player.P2)
        self.assertEqual(placement.ship_type_id, self.corvette.id)
        self.assertEqual(placement.cells, ((2, 1), (2, 2)))
        self.assertEqual(self.pregame.placements(Player.P1), [])

    def test_disallow_placing_twice(self):
        self.pregame.place_ship(Player.P1, self.corvette, 0, 0, H)
        for x, y, orientation in [(0, 1, H), (0, 2, H), (2, 0, V)]:
            with self.subTest(x=x, y=y):
                self.assertPlaceError(PlaceErrorReason.ALREADY_PLACED, Player.P1, self.corvette, x, y, orientation)

    def test_unknown_ship_type(self):
        car = ShipType(0, "Car", 1)
        self.assertPlaceError(PlaceErrorReason.UNKNOWN_SHIP_TYPE, Player.P1, car, 0, 0, H)
        self.assertPlaceError(PlaceErrorReason.UNKNOWN_SHIP_TYPE, Player.P1, ShipType(5, "Corvette", 2), 0, 0, H)

    def test_equal_handle_is_known(self):
        fake_corvette = ShipType(0, "Corvette", 2)
        self.pregame.place_ship(Player.P1, fake_corvette, 0, 0, H)
        self.assertTrue(self.pregame.is_placed(Player.P1, self.corvette))

    def test_handle_from_other_pregame_with_different_fields_is_unknown(self):
        other = PreGame(3, 3).add_ship_type("Frigate", 2)
        self.assertPlaceError(PlaceErrorReason.UNKNOWN_SHIP_TYPE, Player.P1, other, 0, 0, H)

    def test_out_of_bounds(self):
        self.assertPlaceError(PlaceErrorReason.OUT_OF_BOUNDS, Player.P1, self.corvette, 2, 0, H)
        self.assertPlaceError(PlaceErrorReason.OUT_OF_BOUNDS, Player.P1, self.corvette, 0, 2, V)
        self.assertPlaceError(PlaceErrorReason.OUT_OF_BOUNDS, Player.P1, self.corvette, 3, 0, V)
        self.assertPlaceError(PlaceErrorReason.OUT_OF_BOUNDS, Player.P1, self.corvette, -1, 0, H)
        self.pregame.place_ship(Player.P1, self.corvette, 1, 0, H)

    def test_span_that_exactly_fits(self):
        pregame = PreGame(10, 10)
        cruiser = pregame.add_ship_type("Corvette", 3)
        with self.assertRaises(PlaceError) as ctx:
            pregame.place_ship(Player.P1, cruiser, 8, 0, H)
        self.assertIs(ctx.exception.reason, PlaceErrorReason.OUT_OF_BOUNDS)
        pregame.place_ship(Player.P1, cruiser, 7, 0, H)
        self.assertEqual(pregame.get_cell(Player.P1, 9, 0), CellStatus.SHIP)

    def test_disallow_overlapping_ships(self):
        frigate = self.pregame.add_ship_type("Frigate", 2)
        self.pregame.place_ship(Player.P2, self.corvette, 0, 0, H)
        self.assertPlaceError(PlaceErrorReason.CELL_OCCUPIED, Player.P2, frigate, 1, 0, V)
        # boards are independent
        self.pregame.place_ship(Player.P1, frigate, 1, 0, V)

    def test_rejected_placement_leaves_board_unchanged(self):
        frigate = self.pregame.add_ship_type("Frigate", 3)
        self.pregame.place_ship(Player.P1, self.corvette, 2, 1, V)
        before = _board(self.pregame, Player.P1)

        # first two cells are free, the third is taken
        self.assertPlaceError(PlaceErrorReason.CELL_OCCUPIED, Player.P1, frigate, 0, 2, H)
        self.assertEqual(_board(self.pregame, Player.P1), before)
        self.assertFalse(self.pregame.is_placed(Player.P1, frigate))
        self.pregame.place_ship(Player.P1, frigate, 0, 0, H)

    def test_checks_run_in_order(self):
        self.pregame.place_ship(Player.P1, self.corvette, 0, 0, H)
        # already placed wins over out of bounds
        self.assertPlaceError(PlaceErrorReason.ALREADY_PLACED, Player.P1, self.corvette, 5, 5, H)
        # out of bounds wins over occupied
        frigate = self.pregame.add_ship_type("Frigate", 3)
        self.assertPlaceError(PlaceErrorReason.OUT_OF_BOUNDS, Player.P1, frigate, 1, 0, H)

    def test_unknown_orientation_leaves_board_unchanged(self):
        before = _board(self.pregame, Player.P1)
        with self.assertRaises(ValueError):
            self.pregame.place_ship(Player.P1, self.corvette, 0, 0, "H")
        self.assertEqual(_board(self.pregame, Player.P1), before)
        self.assertFalse(self.pregame.is_placed(Player.P1, self.corvette))

    def test_get_cell_out_of_bounds(self):
        with self.assertRaises(PlaceError) as ctx:
            self.pregame.get_cell(Player.P1, 3, 0)
        self.assertIs(ctx.exception.reason, PlaceErrorReason.OUT_OF_BOUNDS)


class StartTests(unittest.TestCase):
    def test_not_started_when_no_ships_placed(self):
        pregame = PreGame(2, 2)
        pregame.add_ship_type("Corvette", 1)
        with self.assertRaises(GameStartError) as ctx:
            pregame.start()
        self.assertIs(ctx.exception.reason, GameStartErrorReason.NO_SHIPS_PLACED)
        self.assertIs(ctx.exception.pregame, pregame)

    def test_not_started_when_no_ship_types(self):
        with self.assertRaises(GameStartError) as ctx:
            PreGame(2, 2).start()
        self.assertIs(ctx.exception.reason, GameStartErrorReason.NO_SHIPS_PLACED)

    def test_not_started_when_not_all_ships_placed(self):
        pregame = PreGame(2, 2)
        submarine = pregame.add_ship_type("Submarine", 1)
        corvette = pregame.add_ship_type("Corvette", 2)
        pregame.place_ship(Player.P1, submarine, 0, 0, H)
        pregame.place_ship(Player.P2, submarine, 0, 0, H)
        pregame.place_ship(Player.P1, corvette, 0, 1, H)

        with self.assertRaises(GameStartError) as ctx:
            pregame.start()
        self.assertIs(ctx.exception.reason, GameStartErrorReason.NOT_ALL_SHIPS_PLACED)

        # setup continues with the untouched pregame
        setup = ctx.exception.pregame
        self.assertEqual(setup.get_cell(Player.P1, 0, 1), CellStatus.SHIP)
        setup.place_ship(Player.P2, corvette, 0, 1, H)
        self.assertIsInstance(setup.start(), Game)

    def test_start_game(self):
        pregame = PreGame(2, 2)
        submarine = pregame.add_ship_type("Submarine", 1)
        pregame.place_ship(Player.P1, submarine, 0, 0, H)
        pregame.place_ship(Player.P2, submarine, 1, 1, H)

        game = pregame.start()
        self.assertEqual((game.width, game.height), (2, 2))
        self.assertEqual(game.ship_types, (submarine,))
        self.assertIs(game.current_player, Player.P1)
        self.assertEqual(game.get_cell(Player.P2, 1, 1), CellStatus.SHIP)

    def test_started_pregame_is_consumed(self):
        pregame = PreGame(2, 2)
        submarine = pregame.add_ship_type("Submarine", 1)
        pregame.place_ship(Player.P1, submarine, 0, 0, H)
        pregame.place_ship(Player.P2, submarine, 0, 0, H)
        pregame.start()

        self.assertTrue(pregame.started)
        for call in (
            pregame.start,
            lambda: pregame.add_ship_type("Jetski", 1),
            lambda: pregame.place_ship(Player.P1, submarine, 1, 1, H),
            lambda: pregame.get_cell(Player.P1, 0, 0),
        ):
            with self.assertRaises(GameStartError) as ctx:
                call()
            self.assertIs(ctx.exception.reason, GameStartErrorReason.ALREADY_STARTED)


if __name__ == "__main__":
    unittest.main()
