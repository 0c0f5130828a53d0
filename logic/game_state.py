"""
Game state for the TicTacToe engine.
Holds the board, the players, and the moves made so far.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np


# Stored in the board array for cells nobody has claimed yet
EMPTY = ""


class Player(Enum):
    """The two players in the game. The value is the mark they place."""
    PLAYER1 = "A"
    PLAYER2 = "B"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.PLAYER2 if self == Player.PLAYER1 else Player.PLAYER1

    @property
    def mark(self) -> str:
        return self.value

    def __str__(self) -> str:
        return f"Player{self.value}"


class GameStatus(Enum):
    """Result of a move. INVALID is never stored as the game's status."""
    CAN_PLAY = "can_play"
    WIN = "win"
    FINISHED = "finished"
    INVALID = "invalid"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.WIN, GameStatus.FINISHED)


@dataclass(frozen=True)
class Move:
    """A cell coordinate on the board."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class PlayedMove:
    """A move that was accepted by the engine."""
    player: Player          # Who made the move
    move: Move              # Where it went
    move_number: int        # 0-based position in the game


def new_board(size: int) -> np.ndarray:
    """Create an empty size x size board."""
    return np.full((size, size), EMPTY, dtype="<U1")


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The NxN board (which mark is where)
    - The player who made the last accepted move
    - The last non-invalid status
    - The lines that won the game, if any
    - Move history for the current game
    """

    size: int = 3

    # Player whose turn it is NOT; seeded so the other player starts
    last_player: Player = Player.PLAYER2

    board: np.ndarray = field(default=None)
    status: GameStatus = GameStatus.CAN_PLAY
    winning_lines: List[List[Tuple[int, int]]] = field(default_factory=list)
    moves: List[PlayedMove] = field(default_factory=list)

    def __post_init__(self):
        if self.board is None:
            self.board = new_board(self.size)

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        if self.status == GameStatus.WIN:
            return self.last_player
        return None

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get_cell(self, row: int, col: int) -> Optional[Player]:
        """
        Get the player occupying a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            The Player on that cell, or None if it is empty.

        Raises:
            IndexError: If the coordinate is off the board.
        """
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) is outside the {self.size}x{self.size} board"
            )
        mark = self.board[row, col]
        return Player(str(mark)) if mark != EMPTY else None

    def place(self, player: Player, move: Move) -> PlayedMove:
        """Put the player's mark on the board and record the move."""
        self.board[move.row, move.col] = player.mark
        played = PlayedMove(player=player, move=move, move_number=len(self.moves))
        self.moves.append(played)
        return played

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, in row-major order.
        """
        rows, cols = np.nonzero(self.board == EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def winning_cells(self) -> frozenset:
        return frozenset(cell for line in self.winning_lines for cell in line)

    def to_lists(self) -> List[List[Optional[Player]]]:
        """Snapshot of the board as nested lists of Player / None."""
        return [
            [self.get_cell(row, col) for col in range(self.size)]
            for row in range(self.size)
        ]


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    state = GameState()
    state.place(Player.PLAYER1, Move(1, 1))
    state.place(Player.PLAYER2, Move(0, 0))

    print(state.board)
    print(f"Cell (1,1): {state.get_cell(1, 1)}")
    print(f"Empty cells: {state.get_empty_cells()}")

    print("\nGameState test done!")
