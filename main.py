#!/usr/bin/env python3
"""
Terminal Minesweeper - Main entry point.

Usage:
    python main.py play [--side N] [--mines N] [--seed S] [--log-file PATH]
    python main.py replay SCRIPT [--side N] [--mines N] [--seed S]
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).parent / "src"))

from game import BEGINNER, BoardConfig, Game  # noqa: E402
from tui import AppConfig, parse_script, play, render_text, replay  # noqa: E402


def build_config(args: argparse.Namespace, parser: argparse.ArgumentParser) -> BoardConfig:
    """Board settings from the command line, reported as usage errors when invalid."""
    try:
        return BoardConfig(side=args.side, num_mines=args.mines, seed=args.seed)
    except ValueError as exc:
        parser.error(str(exc))


def configure_logging(args: argparse.Namespace) -> None:
    # curses owns the screen, so records only go somewhere when a file is given
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def play_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Play interactively."""
    game = Game(build_config(args, parser))
    try:
        app_config = AppConfig(poll_timeout_ms=args.poll_ms)
    except ValueError as exc:
        parser.error(str(exc))
    snapshot = play(game, app_config)

    if snapshot.is_won:
        print("You won!")
    elif snapshot.is_over:
        print("Game Over!")


def replay_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Apply a command script and print the final frame."""
    config = build_config(args, parser)
    try:
        commands = list(parse_script(args.script))
    except ValueError as exc:
        parser.error(str(exc))

    snapshot = replay(Game(config), commands)
    print(render_text(snapshot))


def add_board_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--side", type=int, default=BEGINNER.side, help="Rows and columns of the grid"
    )
    subparser.add_argument(
        "--mines", type=int, default=BEGINNER.num_mines, help="Number of mines"
    )
    subparser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Terminal Minesweeper")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)
    play_parser.add_argument(
        "--poll-ms", type=int, default=AppConfig.poll_timeout_ms,
        help="Input poll timeout in milliseconds",
    )
    play_parser.add_argument(
        "--log-file", default=None, help="Write log records to this file"
    )
    play_parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Log level for --log-file",
    )

    # Replay command
    replay_parser = subparsers.add_parser(
        "replay", help="Apply a command script and print the final board"
    )
    replay_parser.add_argument(
        "script",
        help="Commands: ^ v < > move, f flag, r reveal, q quit",
    )
    add_board_arguments(replay_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "play":
        configure_logging(args)
        play_command(args, parser)
    elif args.command == "replay":
        replay_command(args, parser)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
