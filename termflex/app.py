"""Layout preview entrypoint for termflex."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from termflex.cells import to_plain
from termflex.document import build, load_document
from termflex.layout import SMALL, select_layout_mode
from termflex.models import LayoutResult, LayoutSettings
from termflex.profiles import resolve_profile, settings_from_profile

logger = logging.getLogger(__name__)

DEMO_SESSIONS = [
    {"name": "api-refactor", "status": "active", "path": "~/src/api", "age": "2m ago"},
    {"name": "docs-site", "status": "inactive", "path": "~/src/docs", "age": "3h ago"},
    {"name": "billing-fix", "status": "active", "path": "~/src/billing", "age": "just now"},
    {"name": "infra-migrate", "status": "error", "path": "~/src/infra", "age": "1d ago"},
]

STATUS_COLORS = {
    "total": "#6BB6FF",
    "active": "#2ECC71",
    "inactive": "#F39C12",
    "error": "#E74C3C",
}

HELP_TEXT = "up/down navigate   enter attach   n new   k kill   ? help   q quit"


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        level=level,
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(level=level, handlers=[handler], format="%(message)s", force=True)


def _summary_cards(compact: bool) -> list[dict]:
    counts = {"total": len(DEMO_SESSIONS), "active": 0, "inactive": 0, "error": 0}
    for session in DEMO_SESSIONS:
        counts[session["status"]] += 1
    return [
        {
            "content": {
                "type": "card",
                "value": str(count),
                "label": key.title(),
                "color": STATUS_COLORS[key],
                "compact": compact,
            },
            "grow": 1,
            "order": order,
        }
        for order, (key, count) in enumerate(counts.items(), start=1)
    ]


def demo_document(width: int, height: int, settings: LayoutSettings | None = None) -> dict:
    compact = select_layout_mode(width, settings) == SMALL
    session_lines = [
        f"{session['name']:<16}{session['status']:<10}{session['age']}" for session in DEMO_SESSIONS
    ]
    selected = DEMO_SESSIONS[0]
    detail_lines = [
        f"name:   {selected['name']}",
        f"status: {selected['status']}",
        f"path:   {selected['path']}",
        f"seen:   {selected['age']}",
    ]
    return {
        "type": "dashboard",
        "width": width,
        "height": height,
        "max_header_height": 4,
        "min_footer_height": 1,
        "header": {
            "type": "flex",
            "direction": "row",
            "gap": 2,
            "justify": "space-evenly",
            "align": "stretch",
            "items": _summary_cards(compact),
        },
        "main": {
            "type": "sidebar",
            "main": {"type": "panel", "title": "Sessions", "content": session_lines, "focused": True, "padding": 1},
            "sidebar": {"type": "panel", "title": "Details", "content": detail_lines, "padding": 1},
        },
        "footer": HELP_TEXT,
    }


def _json_output(profile: dict, result: LayoutResult) -> str:
    payload = {
        "profile": profile["name"],
        "layout": result.to_dict(),
        "plain": to_plain(result.text),
    }
    return json.dumps(payload, indent=2)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Preview termflex layouts in the terminal")
    parser.add_argument("document", nargs="?", help="JSON layout document (default: builtin demo dashboard)")
    parser.add_argument("--width", type=int, help="Layout width in cells (default: terminal width)")
    parser.add_argument("--height", type=int, help="Layout height in cells (default: terminal height)")
    parser.add_argument(
        "--profile",
        default=os.environ.get("TERMFLEX_PROFILE", "default"),
        help="Profile name: default|compact|plain",
    )
    parser.add_argument("--config", help="Optional JSON config file for profile overrides")
    parser.add_argument("--json", action="store_true", help="Emit layout geometry as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log layout clamps to stderr")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)
    console = Console(highlight=False)

    try:
        profile = resolve_profile(args.profile, args.config)
        settings = settings_from_profile(profile)
        width = args.width or console.size.width
        height = args.height or console.size.height
        node = load_document(args.document) if args.document else demo_document(width, height, settings)
        result = build(node, width, height, settings)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for note in result.clamps:
        logger.info("layout clamp: %s", note)

    if args.json:
        print(_json_output(profile, result))
        return 0

    console.print(Text.from_ansi(result.text), soft_wrap=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
