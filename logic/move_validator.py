"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

from enum import Enum
from numbers import Integral
from typing import Optional, Tuple, List
from dataclasses import dataclass
from .game_state import GameState, Player, Move


class RejectReason(Enum):
    """Why a move was refused."""
    GAME_OVER = "game over"
    UNKNOWN_PLAYER = "unknown player"
    CONSECUTIVE_MOVE = "consecutive move by same player"
    ROW_OUT_OF_RANGE = "row out of range"
    COL_OUT_OF_RANGE = "column out of range"
    CELL_OCCUPIED = "cell occupied"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[RejectReason] = None
    error_message: Optional[str] = None


def _is_index(value) -> bool:
    # numpy integers count; bool is an int subclass but never a coordinate
    return isinstance(value, Integral) and not isinstance(value, bool)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order (first failure wins):
    1. Game must not be over
    2. Player must be one of the two players
    3. The same player cannot move twice in a row
    4. Row must be on the board
    5. Column must be on the board
    6. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: GameState,
        player: Player,
        move: Move
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            player: Player attempting the move.
            move: Cell the player wants to mark.

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.GAME_OVER,
                error_message="Game over, cannot make this move."
            )

        if not isinstance(player, Player):
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.UNKNOWN_PLAYER,
                error_message=f"Unknown player {player!r}."
            )

        if player == game_state.last_player:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.CONSECUTIVE_MOVE,
                error_message=f"{player} cannot make consecutive moves."
            )

        row = getattr(move, "row", None)
        col = getattr(move, "col", None)
        max_index = game_state.size - 1

        if not _is_index(row) or not 0 <= row <= max_index:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.ROW_OUT_OF_RANGE,
                error_message=f"Game row '{row}' must be between 0 and '{max_index}'."
            )

        if not _is_index(col) or not 0 <= col <= max_index:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.COL_OUT_OF_RANGE,
                error_message=f"Game column '{col}' must be between 0 and '{max_index}'."
            )

        occupant = game_state.get_cell(row, col)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.CELL_OCCUPIED,
                error_message=f"Move ({row},{col}) already made by {occupant}."
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all cells the next player could mark.

        Args:
            game_state: Current game state.

        Returns:
            List of (row, col) positions, empty once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    game = GameState()
    validator = MoveValidator()

    result = validator.validate_move(game, Player.PLAYER1, Move(1, 1))
    print(f"PlayerA (1,1): valid={result.is_valid}, error={result.error_message}")

    game.place(Player.PLAYER1, Move(1, 1))
    game.last_player = Player.PLAYER1

    result = validator.validate_move(game, Player.PLAYER1, Move(0, 0))
    print(f"PlayerA again: valid={result.is_valid}, error={result.error_message}")

    result = validator.validate_move(game, Player.PLAYER2, Move(1, 1))
    print(f"PlayerB (1,1): valid={result.is_valid}, error={result.error_message}")

    result = validator.validate_move(game, Player.PLAYER2, Move(5, 5))
    print(f"PlayerB (5,5): valid={result.is_valid}, error={result.error_message}")

    print(f"Valid moves: {validator.get_valid_moves(game)}")

    print("\nMoveValidator test done!")
