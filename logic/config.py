"""
Game configuration for the TicTacToe engine.
Board dimension and who gets to move first.
"""

from typing import Optional

from .game_state import Player


class GameConfig:
    """
    Configuration class for game settings.
    Class attributes are the defaults; pass keywords to override per game.
    """

    # ==================== BOARD SETTINGS ====================
    # Classic TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # ==================== TURN SETTINGS ====================
    # The engine only forbids the last mover from moving again,
    # so the "last player" is seeded with the opposite of this one
    FIRST_PLAYER = Player.PLAYER1

    # ==================== DISPLAY SETTINGS ====================
    EMPTY_MARK = "-"

    def __init__(
        self,
        board_size: Optional[int] = None,
        first_player: Optional[Player] = None
    ):
        if board_size is not None:
            self.BOARD_SIZE = board_size
        if first_player is not None:
            self.FIRST_PLAYER = first_player

        size = self.BOARD_SIZE
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"Board size must be a positive integer, got {self.BOARD_SIZE!r}")
        if not isinstance(self.FIRST_PLAYER, Player):
            raise ValueError(f"First player must be a Player, got {self.FIRST_PLAYER!r}")

    def seed_player(self) -> Player:
        """The player treated as having moved last before the game starts."""
        return self.FIRST_PLAYER.opposite()

    def __repr__(self) -> str:
        return f"GameConfig(board_size={self.BOARD_SIZE}, first_player={self.FIRST_PLAYER.name})"
