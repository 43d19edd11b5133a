import unittest

from tictactoe.models.enums import Token
from tictactoe.models.move import Move
from tictactoe.game.board import Board
from tictactoe.players import HumanPlayer, ArtificialPlayer

from tests.helpers import scripted_input


class HumanPlayerTests(unittest.TestCase):
    def make_player(self, answers):
        self.output = []
        self.read = scripted_input(answers)
        return HumanPlayer(Token.PLAYER_A, "Player A", input_fn=self.read, output_fn=self.output.append)

    def test_reads_one_based_coordinates(self) -> None:
        player = self.make_player(["2", "3"])
        self.assertEqual(player.turn(Board()), Move(1, 2))
        self.assertEqual(self.read.prompts, ["Insert row: ", "Insert col: "])
        self.assertEqual(self.output, [])

    def test_occupied_cell_is_rejected_then_valid_cell_accepted(self) -> None:
        board = Board.from_string("X________")
        player = self.make_player(["1", "1", "2", "2"])
        self.assertEqual(player.turn(board), Move(1, 1))
        self.assertEqual(self.output, ["Wrong input! Cell (1, 1) is occupied."])
        self.assertEqual(board.left, 8)

    def test_out_of_range_is_rejected(self) -> None:
        player = self.make_player(["4", "1", "3", "1"])
        self.assertEqual(player.turn(Board()), Move(2, 0))
        self.assertEqual(self.output, ["Wrong input! Cell (4, 1) is out of range."])

    def test_non_numeric_input_is_rejected(self) -> None:
        player = self.make_player(["a", "1", "x", "1", "1"])
        self.assertEqual(player.turn(Board()), Move(0, 0))
        self.assertEqual(self.output, ["Wrong input! Please enter a number."] * 2)

    def test_exhausted_input_propagates(self) -> None:
        player = self.make_player(["1"])
        with self.assertRaises(EOFError):
            player.turn(Board())

    def test_empty_token_is_refused(self) -> None:
        with self.assertRaises(ValueError):
            HumanPlayer(Token.EMPTY, "Nobody")


class ArtificialPlayerTests(unittest.TestCase):
    def test_takes_the_win(self) -> None:
        player = ArtificialPlayer(Token.PLAYER_A, "Computer")
        self.assertEqual(player.turn(Board.from_string("O__|XX_|O__")), Move(1, 2))

    def test_does_not_touch_the_board(self) -> None:
        board = Board.from_string("____X____")
        player = ArtificialPlayer(Token.PLAYER_B, "Computer")
        move = player.turn(board)
        self.assertTrue(board.is_empty(move))
        self.assertEqual(board.left, 8)


if __name__ == "__main__":
    unittest.main()
