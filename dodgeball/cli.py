"""
Dodgeball CLI - Command-line interface for the engine.

Usage:
    dodgeball play [--seed N]          Play in the terminal
    dodgeball simulate [--seed N]      Run a headless game with a random-walk player
"""

import argparse
import logging
import sys


PLAY_HELP = """Commands (one or more per line):
  w a s d   move up / left / down / right
  t         throw (space also works)
  .         wait
  q         quit"""


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Dodgeball - two-agent grid dodgeball",
        prog="dodgeball",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    play_parser.add_argument(
        "--frames-per-command", type=int, default=20,
        help="Host frames that pass after each command",
    )

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Run a headless game")
    simulate_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    simulate_parser.add_argument(
        "--max-frames", type=int, default=60 * 60 * 10,
        help="Stop after this many host frames",
    )
    simulate_parser.add_argument(
        "--frames-per-move", type=int, default=20,
        help="Host frames between player decisions",
    )
    simulate_parser.add_argument("--json", action="store_true", help="Print a JSON snapshot")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "simulate":
        return cmd_simulate(args)
    else:
        parser.print_help()
        return 1


def _load_config(seed):
    from .config import GameConfig

    config = GameConfig.from_env()
    if seed is not None:
        config = config.model_copy(update={"seed": seed})
    return config


def cmd_play(args, stdin=None, stdout=None):
    """Interactive, line-driven game."""
    from .session import SessionManager

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    manager = SessionManager()
    session = manager.create_session(_load_config(args.seed))
    host, loop = session.host, session.loop

    print(PLAY_HELP, file=stdout)
    print(host.render(), file=stdout)

    for line in stdin:
        quit_requested = False
        for command in line.rstrip("\n") or ".":
            if command == "q":
                quit_requested = True
                break
            if command == "t":
                loop.handle_key("space")
            elif command != ".":
                loop.handle_key(command)
            host.advance(args.frames_per_command)
            if loop.game_over:
                break

        print(host.render(), file=stdout)
        if quit_requested or loop.game_over:
            break

    manager.end_session(session.session_id)
    return 0


def cmd_simulate(args, stdout=None):
    """Headless game: a random-walk player against the enemy policy."""
    from .bots import RandomWalkPolicy
    from .engine_core import Side
    from .session import SessionManager

    stdout = stdout or sys.stdout

    config = _load_config(args.seed)
    manager = SessionManager()
    session = manager.create_session(config)
    host, loop = session.host, session.loop
    player = RandomWalkPolicy(side=Side.PLAYER, seed=config.seed)

    frames = 0
    while not loop.game_over and frames < args.max_frames:
        decision = player.select_move(loop.state)
        if decision.throw:
            loop.throw(Side.PLAYER)
        elif decision.dx or decision.dy:
            loop.move_player(decision.dx, decision.dy)
        host.advance(args.frames_per_move)
        frames += args.frames_per_move

    snapshot = session.snapshot()
    manager.end_session(session.session_id)

    if args.json:
        print(snapshot.model_dump_json(indent=2), file=stdout)
    else:
        print(host.render(), file=stdout)
        print(
            f"Frames: {snapshot.frame}  "
            f"Player {snapshot.player.score} - Enemy {snapshot.enemy.score}  "
            f"Winner: {snapshot.winner or 'none'}",
            file=stdout,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
