from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import EngineConfig, validate_depth, validate_log_level
from .core import GameStatus, Position, ascii_board
from .engine import Engine
from .fen import parse_fen, position_to_fen
from .notation import move_to_uci, uci_to_legal_move
from .perft import perft, perft_divide, perft_stats

LOGGER = logging.getLogger("microchess.cli")


def _load(args: argparse.Namespace) -> Position:
    return parse_fen(args.fen) if args.fen else Position()


def _depth(value: str) -> int:
    try:
        return validate_depth(int(value))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _log_level(value: str) -> str:
    try:
        return validate_log_level(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def cmd_perft(args: argparse.Namespace) -> int:
    pos = _load(args)
    if args.stats:
        for d in range(1, args.depth + 1):
            s = perft_stats(pos, d)
            print(
                f"depth {d}: nodes={s.nodes} captures={s.captures} promotions={s.promotions} "
                f"checks={s.checks} mates={s.checkmates}"
            )
    elif args.divide:
        out = perft_divide(pos, args.depth)
        total = 0
        for k in sorted(out):
            print(f"{k}: {out[k]}")
            total += out[k]
        print(f"Total: {total}")
    else:
        print(perft(pos, args.depth))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    pos = _load(args)
    print(ascii_board(pos.board))
    print()
    print(position_to_fen(pos))
    print("Status:", pos.status.value)
    return 0


def cmd_hint(args: argparse.Namespace) -> int:
    pos = _load(args)
    m = Engine().best_move(pos, depth=args.depth or args.config.hint_depth)
    print(move_to_uci(m) if m is not None else "none")
    return 0


def cmd_play(args: argparse.Namespace) -> int:
    pos = _load(args)
    eng = Engine()
    human = args.human.lower()
    depth = args.depth or args.config.depth

    while True:
        print(ascii_board(pos.board))
        print()
        status = pos.status
        if status is GameStatus.CHECKMATE:
            print("Checkmate.")
            return 0
        if status is GameStatus.STALEMATE:
            print("Stalemate.")
            return 0

        if pos.side_to_move.name.lower() == human:
            text = input("Your move (e.g. b2b3): ").strip()
            if text in ("quit", "exit"):
                return 0
            if text == "resign":
                pos.resign()
                print("Resigned.")
                return 0
            if text == "undo":
                # take back the engine reply and the human move
                pos.undo_last_move()
                pos.undo_last_move()
                continue
            m = uci_to_legal_move(pos, text)
            if m is None or not pos.execute_move(m):
                print("Illegal move.")
                continue
        else:
            m = eng.best_move(pos, depth=depth)
            if m is None:
                print("Engine has no legal moves.")
                return 0
            print("Engine:", move_to_uci(m))
            pos.execute_move(m)


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="microchess")
    ap.add_argument("--log-level", type=_log_level, default=None)
    sub = ap.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("perft", help="Run perft")
    sp.add_argument("--depth", type=int, default=3)
    sp.add_argument("--fen", type=str, default=None)
    sp.add_argument("--divide", action="store_true")
    sp.add_argument("--stats", action="store_true", help="Classify moves at every depth up to --depth")
    sp.set_defaults(fn=cmd_perft)

    ss = sub.add_parser("show", help="Show ASCII board, FEN and status")
    ss.add_argument("--fen", type=str, default=None)
    ss.set_defaults(fn=cmd_show)

    sh = sub.add_parser("hint", help="Print the engine's choice for the side to move")
    sh.add_argument("--fen", type=str, default=None)
    sh.add_argument("--depth", type=_depth, default=None)
    sh.set_defaults(fn=cmd_hint)

    pl = sub.add_parser("play", help="Play against the built-in engine")
    pl.add_argument("--human", type=str, default="white", choices=["white", "black"])
    pl.add_argument("--depth", type=_depth, default=None)
    pl.add_argument("--fen", type=str, default=None)
    pl.set_defaults(fn=cmd_play)

    args = ap.parse_args(argv)
    try:
        config = EngineConfig.from_env()
    except ValueError as exc:
        ap.error(str(exc))
    args.config = config
    logging.basicConfig(level=args.log_level or config.log_level, format="%(levelname)s %(name)s %(message)s")
    LOGGER.debug("cli_start", extra={"cmd": args.cmd})
    return int(args.fn(args))


if __name__ == "__main__":
    raise SystemExit(main())
