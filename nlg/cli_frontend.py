"""
nlg/cli_frontend.py

Command-line interface for the message renderer.

Typical usage:

    phrasing-cli render \
        --template "@I jumped with @my spear at ~user!" \
        --user-person 2 --user-name rogue --user-gender female \
        --user-specific Brunhilda \
        --target-person 3 --target-name goblin --target-gender male

    phrasing-cli render --input path/to/request.json

The CLI:

- Builds a RenderRequest from flags, or reads one as JSON from a file (or
  stdin with `--input -`).
- Forwards it to the RenderMessage use case.
- Prints the rendered text to stdout.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from app.core.domain.exceptions import DomainError
from app.core.domain.models import RenderRequest
from app.core.use_cases.render_message import RenderMessage
from utils.logging_setup import init_logging


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _add_being_arguments(parser: argparse.ArgumentParser, role: str) -> None:
    parser.add_argument(
        f"--{role}-person",
        default="3",
        help=f"Grammatical person of the {role}: 1, 2 or 3 (default: 3).",
    )
    parser.add_argument(
        f"--{role}-name",
        help=f"General name of the {role} (e.g. 'goblin').",
    )
    parser.add_argument(
        f"--{role}-gender",
        default="genderless",
        help=f"Gender of the {role} (male, female, genderless, they, additional, other, plural).",
    )
    parser.add_argument(
        f"--{role}-specific",
        default=None,
        help=f"Optional specific name of the {role} (e.g. 'Brunhilda').",
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phrasing-cli",
        description="Render message templates with person- and gender-aware pronouns.",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    render = subparsers.add_parser(
        "render",
        help="Render one template.",
    )

    render.add_argument(
        "--template",
        "-t",
        help="Template text, e.g. '@I jumped with @my spear at ~user!'.",
    )

    render.add_argument(
        "--input",
        "-i",
        metavar="PATH",
        help=(
            "Path to a JSON RenderRequest. '-' reads from stdin. "
            "Overrides the other flags."
        ),
    )

    _add_being_arguments(render, "user")
    _add_being_arguments(render, "target")

    render.add_argument(
        "--no-capitalize",
        action="store_true",
        help="Do not upper-case the first letter of the output.",
    )

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_json(path: str) -> Dict[str, Any]:
    """
    Load a JSON object from a file or stdin ('-').
    """
    if path == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(path).read_text(encoding="utf-8")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Error: invalid JSON input ({exc}).") from exc

    if not isinstance(data, dict):
        raise SystemExit("Error: expected a JSON object at top level.")

    return data


def _being_payload(args: argparse.Namespace, role: str) -> Optional[Dict[str, Any]]:
    name = getattr(args, f"{role}_name")
    if not name:
        return None
    return {
        "person": getattr(args, f"{role}_person"),
        "being": {
            "general_name": name,
            "gender": getattr(args, f"{role}_gender"),
            "specific_name": getattr(args, f"{role}_specific"),
        },
    }


def _build_request(args: argparse.Namespace) -> RenderRequest:
    """
    Construct a RenderRequest from a JSON input or from flags.
    """
    if args.input:
        payload = _load_json(args.input)
    else:
        if args.template is None:
            raise SystemExit("Error: --template or --input is required.")
        user = _being_payload(args, "user")
        if user is None:
            raise SystemExit("Error: --user-name is required.")
        payload = {
            "template": args.template,
            "user": user,
            "target": _being_payload(args, "target"),
            "capitalize": not args.no_capitalize,
        }

    try:
        return RenderRequest.model_validate(payload)
    except ValidationError as exc:
        raise SystemExit(f"Error: invalid render request.\n{exc}") from exc


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_render(args: argparse.Namespace) -> int:
    """
    Handle `phrasing-cli render` command.
    """
    request = _build_request(args)

    try:
        result = RenderMessage().execute(
            request.template,
            request.user,
            request.target,
            capitalize=request.capitalize,
        )
    except DomainError as exc:
        raise SystemExit(f"Error: {exc.message}") from exc

    print(result.text)
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> None:
    init_logging()
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.command == "render":
        exit_code = _cmd_render(args)
    else:
        parser.error(f"Unknown command: {args.command}")
        return

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
