"""
Win checker for the TicTacToe engine.
Checks if a move completed a line or filled the board.
"""

from typing import List, Tuple

import numpy as np

from .game_state import GameStatus, Player, EMPTY

Line = List[Tuple[int, int]]


class WinChecker:
    """
    Checks for win conditions on an NxN board.

    Win condition: N marks of the same player in a row
    (horizontally, vertically, or diagonally).
    A win is reported even when the move also filled the board.
    """

    def get_lines(self, size: int) -> List[Line]:
        """
        All lines on a size x size board, in the order they are checked.

        Both diagonals come first, then row i followed by column i
        for each index i.
        """
        lines = [
            [(i, i) for i in range(size)],
            [(i, size - 1 - i) for i in range(size)],
        ]
        for i in range(size):
            lines.append([(i, j) for j in range(size)])
            lines.append([(j, i) for j in range(size)])
        return lines

    def find_winning_lines(self, board: np.ndarray, player: Player) -> List[Line]:
        """
        Get every line fully held by the player.

        Args:
            board: The board array.
            player: Player whose mark to look for.

        Returns:
            Matching lines in check order. Several lines can be completed
            by one move, so all of them are returned.
        """
        owned = board == player.mark
        winning = []
        for line in self.get_lines(board.shape[0]):
            rows, cols = zip(*line)
            if np.all(owned[list(rows), list(cols)]):
                winning.append(line)
        return winning

    def is_board_full(self, board: np.ndarray) -> bool:
        return not np.any(board == EMPTY)

    def evaluate(self, board: np.ndarray, player: Player) -> Tuple[GameStatus, List[Line]]:
        """
        Work out the status after the player has just moved.

        Returns:
            (status, winning_lines). WIN takes precedence over FINISHED.
        """
        lines = self.find_winning_lines(board, player)
        if lines:
            return GameStatus.WIN, lines
        if self.is_board_full(board):
            return GameStatus.FINISHED, []
        return GameStatus.CAN_PLAY, []


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Horizontal win
    board = np.array([
        ["A", "A", "A"],
        ["", "B", ""],
        ["B", "", ""],
    ], dtype="<U1")
    status, lines = checker.evaluate(board, Player.PLAYER1)
    print(f"Horizontal: {status.name} {lines}")
    assert status == GameStatus.WIN

    # Full board, nobody won
    board = np.array([
        ["A", "A", "B"],
        ["B", "B", "A"],
        ["A", "B", "A"],
    ], dtype="<U1")
    status, lines = checker.evaluate(board, Player.PLAYER1)
    print(f"Draw: {status.name}")
    assert status == GameStatus.FINISHED

    print("\nWinChecker test done!")
