"""
Game engine for TicTacToe.

Ties together the game state, the move validator and the win checker.
Every call to ``play`` either applies a move completely or leaves the
game untouched, and the outcome is returned as plain data so a presenter
can render it however it likes.
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from .config import GameConfig
from .game_state import GameState, GameStatus, Move, PlayedMove, Player
from .move_validator import MoveValidator, RejectReason
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


@dataclass
class PlayResult:
    """Outcome of a single ``play`` call."""
    status: GameStatus
    player: Optional[Player] = None
    move: Optional[Move] = None
    reason: Optional[RejectReason] = None
    message: str = ""
    winning_line: FrozenSet[Tuple[int, int]] = field(default_factory=frozenset)

    @property
    def is_valid(self) -> bool:
        return self.status != GameStatus.INVALID

    @property
    def summary(self) -> str:
        """One line describing the move and its status, valid or not."""
        return f"{self.player}{self.move} made {self.status.name} move."


class GameEngine:
    """
    Two-player TicTacToe engine.

    Turn order is enforced only by refusing a move from whoever moved last.
    Before the first move the last mover is seeded from the config, so by
    default PLAYER1 opens.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.state = self._new_state()
        self.last_result: Optional[PlayResult] = None

    def _new_state(self) -> GameState:
        return GameState(
            size=self.config.BOARD_SIZE,
            last_player=self.config.seed_player()
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def play(self, player: Player, move: Move) -> GameStatus:
        """
        Try to make a move.

        Args:
            player: Player making the move.
            move: Cell to mark.

        Returns:
            The resulting status. INVALID means nothing changed; the
            reason is available on ``last_result``.
        """
        validation = self.validator.validate_move(self.state, player, move)

        if not validation.is_valid:
            logger.info("Rejected %s %s: %s", player, move, validation.error_message)
            self.last_result = PlayResult(
                status=GameStatus.INVALID,
                player=player,
                move=move,
                reason=validation.reason,
                message=validation.error_message,
                winning_line=self.get_winning_line()
            )
            return GameStatus.INVALID

        self.state.place(player, move)
        status, lines = self.win_checker.evaluate(self.state.board, player)
        self.state.winning_lines.extend(lines)
        self.state.status = status
        self.state.last_player = player

        if status == GameStatus.WIN:
            logger.info("%s wins with %s (lines: %s)", player, move, lines)
        elif status == GameStatus.FINISHED:
            logger.info("Board full after %s %s, game finished", player, move)
        else:
            logger.debug("%s played %s", player, move)

        result = PlayResult(
            status=status,
            player=player,
            move=move,
            winning_line=self.get_winning_line()
        )
        result.message = result.summary
        self.last_result = result
        return status

    def reset(self):
        """Clear the board and start a new game."""
        self.state = self._new_state()
        self.last_result = None
        logger.debug("Game reset (%dx%d)", self.config.BOARD_SIZE, self.config.BOARD_SIZE)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.state.size

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def last_player(self) -> Player:
        return self.state.last_player

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    @property
    def winner(self) -> Optional[Player]:
        return self.state.winner

    @property
    def moves(self) -> List[PlayedMove]:
        return list(self.state.moves)

    @property
    def board(self) -> List[List[Optional[Player]]]:
        return self.state.to_lists()

    def get_cell(self, row: int, col: int) -> Optional[Player]:
        """Player on the cell, or None if empty."""
        return self.state.get_cell(row, col)

    def get_winning_line(self) -> FrozenSet[Tuple[int, int]]:
        """Cells of every completed line since the last reset."""
        return self.state.winning_cells()

    def get_winning_lines(self) -> List[List[Tuple[int, int]]]:
        return [list(line) for line in self.state.winning_lines]

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        return self.state.get_empty_cells()

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        return self.validator.get_valid_moves(self.state)


# Quick test
if __name__ == "__main__":
    print("Testing GameEngine...")

    engine = GameEngine()
    sequence = [
        (Player.PLAYER1, 0, 0),
        (Player.PLAYER2, 1, 1),
        (Player.PLAYER1, 0, 1),
        (Player.PLAYER2, 2, 2),
        (Player.PLAYER1, 0, 2),  # top row
        (Player.PLAYER2, 2, 0),  # game is over
    ]

    for player, row, col in sequence:
        status = engine.play(player, Move(row, col))
        print(f"{player} ({row},{col}) -> {status.name} {engine.last_result.message}")

    print(f"Winning line: {sorted(engine.get_winning_line())}")

    print("\nGameEngine test done!")
