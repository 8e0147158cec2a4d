#!/usr/bin/env python3
"""Replay recorded GPS payloads through the heading presenter.

Reads a file of producer payloads and prints every heading the
presenter publishes, one per line.  Handy for checking how a recorded
trip looks on the compass without a live feed.

Usage
-----
::

    python scripts/replay_fixes.py trip.jsonl
    python scripts/replay_fixes.py trip.json --json

Input is either a JSON array of payloads or JSON lines (one payload per
line).  Payloads use any of the usual key spellings (``lat``/``latitude``,
``lng``/``lon``/``longitude``) and may nest the position under ``data``.
``null`` entries (or payloads without a position) are replayed as lost
fixes.

Options::

    --json               Output as machine-readable JSON lines
    --validate           Reject out-of-range coordinates
    -v, --verbose        Enable DEBUG logging (coordinates stay redacted
                         unless HEADING_LOG_COORDINATES=1)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyheading import FixTracker, HeadingConfig, HeadingError, HeadingPresenter, PresentationState  # noqa: E402


def _load_payloads(path: Path) -> list[Any]:
    text = path.read_text(encoding="utf-8")
    stripped = text.lstrip()
    if stripped.startswith("["):
        data = json.loads(stripped)
        if not isinstance(data, list):
            raise ValueError(f"{path}: expected a JSON array")
        return data
    return [json.loads(line) for line in text.splitlines() if line.strip()]


def _format_state(index: int, state: PresentationState) -> str:
    return f"{index:>5}  {state.label.value:<2}  {state.display_text:>5}  {state.degrees:10.4f}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Replay GPS payloads through the heading presenter")
    parser.add_argument("path", type=Path, help="JSON or JSON-lines file of payloads")
    parser.add_argument("--json", action="store_true", help="Output JSON lines")
    parser.add_argument("--validate", action="store_true", help="Reject out-of-range coordinates")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        payloads = _load_payloads(args.path)
    except (OSError, ValueError) as exc:
        print(f"Cannot read {args.path}: {exc}", file=sys.stderr)
        return 2

    overrides: dict[str, Any] = {}
    if args.validate:
        overrides["validate_coordinates"] = True
    presenter = HeadingPresenter(HeadingConfig.from_env(**overrides))
    tracker = FixTracker(presenter)

    current_index = 0

    def _emit(state: PresentationState) -> None:
        if args.json:
            print(json.dumps({"index": current_index, **state.model_dump(mode="json")}))
        else:
            print(_format_state(current_index, state))

    presenter.subscribe(_emit)

    for current_index, payload in enumerate(payloads):
        try:
            tracker.push_payload(payload if isinstance(payload, dict) else None)
        except HeadingError as exc:
            print(f"Payload {current_index}: {exc}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
