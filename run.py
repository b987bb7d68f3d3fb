# run.py
"""Analyze mood descriptions from the command line and print the journey log."""
import argparse
import json
import logging
import os
import sys
from datetime import date

from dotenv import load_dotenv

from colorwalk.session import apply_event, current_suggestions
from colorwalk.journey import trend_summary
from colorwalk.state import initial_state, snapshot
from colorwalk.validator import validate_history


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO date (YYYY-MM-DD): {value!r}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("text", nargs="*", help="Mood descriptions; read from stdin when omitted")
    parser.add_argument("--date", type=_parse_date, default=None, help="Day to record under (default: today)")
    parser.add_argument("--json", action="store_true", help="Print the session snapshot as JSON")
    return parser


def run(texts, today=None, as_json=False, out=None):
    if out is None:
        out = sys.stdout
    state = initial_state()
    for t in texts:
        state = apply_event(state, {"type": "set_text", "text": t})
        state = apply_event(state, {"type": "analyze", "today": today})
        if not as_json:
            p = state.preset
            print(f"🎨 {t} → {p.name} ({p.key}, {p.color}, valence {p.valence:+.1f})", file=out)
            for s in current_suggestions(state):
                print(f"   • {s['text']}", file=out)

    if as_json:
        print(json.dumps(snapshot(state), ensure_ascii=False, indent=2), file=out)
        return state

    summary = trend_summary(list(state.history))
    ok, reason = validate_history(list(state.history))
    print(f"🗺️  Journey: {summary['count']} days, mean valence {summary['mean_valence']:+.2f} [{reason}]", file=out)
    for e in state.history:
        print(f"   {e['date']:>5}  {e['emotion']:<8} {e['value']:+.1f}", file=out)
    if not ok:
        print(f"⚠️  Journey log failed validation: {reason}", file=out)
    return state


def main(argv=None):
    load_dotenv()
    logging.basicConfig(level=os.getenv("COLOR_WALK_LOG_LEVEL", "WARNING").upper())
    args = _build_parser().parse_args(argv)
    texts = args.text or [line.strip() for line in sys.stdin if line.strip()]
    run(texts, today=args.date, as_json=args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
