"""
Console driver for the TicTacToe engine.

Renders the board in the terminal and either replays two scripted
games (a win and a draw) or lets two people play from the keyboard.

Run this script to watch the demo:
    python main.py
    python main.py --interactive --board-size 4
"""

from typing import Iterable, Optional, Tuple

from colorama import Fore, Style, just_fix_windows_console

from logic.config import GameConfig
from logic.game_engine import GameEngine, PlayResult
from logic.game_state import GameStatus, Move, Player
from logic.logging_config import setup_logging


STATUS_COLORS = {
    GameStatus.CAN_PLAY: Fore.CYAN,
    GameStatus.WIN: Fore.GREEN,
    GameStatus.INVALID: Fore.RED,
    GameStatus.FINISHED: Fore.YELLOW,
}

# Scripted games: a diagonal win for PlayerB, then a draw.
# The last move of each is played after the game is over.
WIN_GAME = [
    (Player.PLAYER1, 0, 0),
    (Player.PLAYER2, 2, 0),
    (Player.PLAYER1, 0, 1),
    (Player.PLAYER2, 2, 1),
    (Player.PLAYER1, 2, 2),
    (Player.PLAYER2, 0, 2),
    (Player.PLAYER1, 1, 0),
    (Player.PLAYER2, 1, 1),
    (Player.PLAYER1, 1, 2),
]

DRAW_GAME = [
    (Player.PLAYER1, 0, 0),
    (Player.PLAYER2, 1, 1),
    (Player.PLAYER1, 0, 1),
    (Player.PLAYER2, 0, 2),
    (Player.PLAYER1, 2, 0),
    (Player.PLAYER2, 1, 0),
    (Player.PLAYER1, 1, 2),
    (Player.PLAYER2, 2, 1),
    (Player.PLAYER1, 2, 2),
    (Player.PLAYER1, 2, 2),
]


def colored(text: str, color: str) -> str:
    return f"{color}{text}{Style.RESET_ALL}"


class ConsolePresenter:
    """
    Draws an engine's board and move results to the console.
    Winning cells are highlighted in green.
    """

    def __init__(self, engine: GameEngine, empty_mark: str = GameConfig.EMPTY_MARK):
        self.engine = engine
        self.empty_mark = empty_mark

    def render_board(self) -> str:
        """Board as text, one row per line."""
        winning = self.engine.get_winning_line()
        lines = []
        for row in range(self.engine.size):
            cells = []
            for col in range(self.engine.size):
                player = self.engine.get_cell(row, col)
                text = f" {player.mark if player else self.empty_mark} "
                if (row, col) in winning:
                    text = colored(text, Fore.GREEN)
                cells.append(text)
            lines.append("|".join(cells))
        return "\n".join(lines)

    def render_result(self, result: PlayResult) -> str:
        """One-line summary of a move, colored by status."""
        text = result.message if result.is_valid else result.summary
        return colored(text, STATUS_COLORS[result.status])

    def show_board(self):
        print(self.render_board())
        print()

    def show_result(self, result: PlayResult):
        if not result.is_valid:
            print(colored(result.message, Fore.RED))
        print(self.render_result(result))
        self.show_board()

    def show_reset(self):
        print(colored("\n\nRestarting the game.\n\n", Fore.MAGENTA))

    def show_game_over(self):
        if self.engine.winner:
            print(colored(f"{self.engine.winner} wins!", Fore.GREEN))
        elif self.engine.status == GameStatus.FINISHED:
            print(colored("It's a draw!", Fore.YELLOW))


def play_moves(
    engine: GameEngine,
    presenter: ConsolePresenter,
    moves: Iterable[Tuple[Player, int, int]]
):
    """Play a scripted list of (player, row, col) and show each result."""
    statuses = []
    for player, row, col in moves:
        statuses.append(engine.play(player, Move(row, col)))
        presenter.show_result(engine.last_result)
    return statuses


def run_demo(engine: Optional[GameEngine] = None) -> GameEngine:
    """Replay the scripted win and draw games on one engine."""
    engine = engine or GameEngine()
    presenter = ConsolePresenter(engine)

    play_moves(engine, presenter, WIN_GAME)
    engine.reset()
    presenter.show_reset()

    play_moves(engine, presenter, DRAW_GAME)
    engine.reset()
    presenter.show_reset()
    return engine


def parse_move(text: str) -> Optional[Move]:
    """Parse "row col" (or "row,col") typed by a player."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return Move(int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def run_interactive(engine: Optional[GameEngine] = None, input_func=input) -> GameEngine:
    """Two people take turns typing moves until the game ends."""
    engine = engine or GameEngine()
    presenter = ConsolePresenter(engine)
    presenter.show_board()

    while not engine.is_game_over:
        player = engine.last_player.opposite()
        try:
            text = input_func(f"{player} move (row col, q to quit): ")
        except EOFError:
            break
        if text.strip().lower() == "q":
            break

        move = parse_move(text)
        if move is None:
            print(colored("Please enter two numbers, e.g. '1 2'.", Fore.RED))
            continue

        engine.play(player, move)
        presenter.show_result(engine.last_result)

    presenter.show_game_over()
    return engine


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe engine demo")
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Play from the keyboard instead of replaying the demo games"
    )
    parser.add_argument(
        "--board-size",
        type=int,
        default=GameConfig.BOARD_SIZE,
        help="Board dimension (interactive mode only)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Engine log level (DEBUG, INFO, WARNING, ...)"
    )
    parser.add_argument(
        "--log-format",
        choices=["simple", "detailed"],
        default="simple",
        help="Log line format"
    )

    args = parser.parse_args(argv)

    just_fix_windows_console()
    setup_logging(args.log_level, args.log_format)

    if args.interactive:
        try:
            engine = GameEngine(GameConfig(board_size=args.board_size))
        except ValueError as e:
            parser.error(str(e))
        try:
            run_interactive(engine)
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user.")
        finally:
            print("Goodbye!")
    else:
        run_demo()

    return 0


if __name__ == "__main__":
    main()
