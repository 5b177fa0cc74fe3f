import argparse
import json
from pathlib import Path
from typing import Any, Dict, List

from .env import load_env

from . import __version__
from .errors import ScoreboardError
from .logger import get_logger
from .models import MatchSnapshot
from .schema import validate_event
from .scoreboard import Scoreboard

DEMO_FIXTURES = [
    ("Mexico", "Canada", 0, 5),
    ("Spain", "Brazil", 10, 2),
    ("Germany", "France", 2, 2),
    ("Uruguay", "Italy", 6, 6),
    ("Argentina", "Australia", 3, 1),
]


def format_summary(summary: List[MatchSnapshot]) -> List[str]:
    return [f"{i}. {snap}" for i, snap in enumerate(summary, start=1)]


def apply_event(board: Scoreboard, event: Dict[str, Any], refs: Dict[str, str]) -> Dict[str, Any]:
    """Apply one replay event. Unknown refs are passed through as raw match ids."""
    errors = validate_event(event)
    if errors:
        return {"status": "invalid", "errors": errors}

    action = event["action"]
    ref = event.get("ref")
    try:
        if action == "start":
            match_id = board.start_match(event["home"], event["away"])
            if ref:
                refs[ref] = match_id
            return {"status": "ok", "action": action, "match_id": match_id}

        match_id = refs.get(ref, ref)
        if action == "update":
            board.update_score(match_id, event["home"], event["away"])
        else:
            board.finish_match(match_id)
        return {"status": "ok", "action": action, "match_id": match_id}
    except ScoreboardError as e:
        return {"status": "error", "kind": e.kind, "errors": [str(e)]}


def load_events(input_path: Path) -> List[Any]:
    if not input_path.exists():
        raise SystemExit(f"Input file not found: {input_path}")
    with input_path.open("r", encoding="utf-8") as f:
        try:
            events = json.load(f)
        except json.JSONDecodeError as e:
            raise SystemExit(f"Invalid JSON in {input_path}: {e}")
    if not isinstance(events, list):
        print("Input must be a JSON list of events")
        raise SystemExit(2)
    return events


def print_summary(summary: List[MatchSnapshot], as_json: bool = False) -> None:
    if as_json:
        print(json.dumps([snap.to_dict() for snap in summary], indent=2, ensure_ascii=False))
        return
    if not summary:
        print("No matches in progress.")
        return
    print("Summary:")
    for line in format_summary(summary):
        print(f"  {line}")


def cmd_demo(args: argparse.Namespace) -> None:
    board = Scoreboard()
    ids = [board.start_match(home, away) for home, away, _, _ in DEMO_FIXTURES]
    for match_id, (_, _, home_score, away_score) in zip(ids, DEMO_FIXTURES):
        board.update_score(match_id, home_score, away_score)
    print_summary(board.get_summary(), as_json=args.json)


def cmd_replay(args: argparse.Namespace) -> None:
    events = load_events(Path(args.input))
    board = Scoreboard()
    refs: Dict[str, str] = {}
    for n, event in enumerate(events, start=1):
        outcome = apply_event(board, event, refs)
        if outcome["status"] == "ok":
            if not args.json:
                print(f"[ok] #{n} {outcome['action']} {outcome['match_id']}")
        else:
            for e in outcome["errors"]:
                print(f"[error] #{n} {e}")
    print_summary(board.get_summary(), as_json=args.json)
    if args.verbose:
        board.log_metrics_summary()


def cmd_validate(args: argparse.Namespace) -> None:
    events = load_events(Path(args.input))
    invalid = 0
    for n, event in enumerate(events, start=1):
        errors = validate_event(event)
        if errors:
            invalid += 1
            for e in errors:
                print(f" - #{n} {e}")
    if invalid:
        print(f"Invalid: {invalid} of {len(events)} events")
        raise SystemExit(2)
    print("Valid")


def main():
    # Load .env if present (SCOREBOARD_LOG_LEVEL, SCOREBOARD_LOG_DIR, etc.)
    load_env()
    parser = argparse.ArgumentParser(prog="scoreboard", description="Live match scoreboard")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("--verbose", action="store_true", help="Log every scoreboard operation")

    # SUPPRESS: a top-level --verbose must survive subcommand parsing
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--verbose", action="store_true", default=argparse.SUPPRESS, help="Log every scoreboard operation")

    subparsers = parser.add_subparsers(dest="command")
    demo = subparsers.add_parser("demo", parents=[common], help="Play the World Cup example and print the summary")
    demo.add_argument("--json", action="store_true", help="Print the summary as JSON")
    demo.set_defaults(func=cmd_demo)

    rep = subparsers.add_parser("replay", parents=[common], help="Apply a JSON list of start/update/finish events")
    rep.add_argument("--input", required=True, help="Path to events JSON")
    rep.add_argument("--json", action="store_true", help="Print the summary as JSON")
    rep.set_defaults(func=cmd_replay)

    val = subparsers.add_parser("validate", parents=[common], help="Check the shape of a JSON events file")
    val.add_argument("--input", required=True, help="Path to events JSON")
    val.set_defaults(func=cmd_validate)

    args = parser.parse_args()

    if args.version:
        print(__version__)
        return

    if args.verbose:
        logger = get_logger()
        logger.set_level("DEBUG")
        logger.add_console_handler()

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
