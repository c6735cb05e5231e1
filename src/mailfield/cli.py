from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import TRANSLITERATION_POLICIES
from .header.block import parse_headers
from .header.exceptions import HeaderError
from .header.generic import HeaderField, parse_line
from .header.models import snapshot


def cmd_parse(args: argparse.Namespace) -> int:
    field = parse_line(args.line, policy=args.policy)
    print(json.dumps(snapshot(field).model_dump(), ensure_ascii=False, indent=2))
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    field = HeaderField(args.name, args.value)
    if args.encoding:
        field.set_encoding(args.encoding)
    print(field.to_string())
    return 0


def cmd_block(args: argparse.Namespace) -> int:
    if args.input == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.input).read_text(encoding="utf-8")
    fields = parse_headers(text)
    print(json.dumps([snapshot(f).model_dump() for f in fields], ensure_ascii=False, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser("mailfield", description="Parse and render unstructured mail header fields")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_parse = sub.add_parser("parse", help="parse one 'Name: Value' line")
    p_parse.add_argument("line")
    p_parse.add_argument("--policy", choices=TRANSLITERATION_POLICIES, default=None)
    p_parse.set_defaults(func=cmd_parse)

    p_render = sub.add_parser("render", help="serialize a name/value pair")
    p_render.add_argument("name")
    p_render.add_argument("value")
    p_render.add_argument("--encoding", choices=["ASCII", "UTF-8"], default=None)
    p_render.set_defaults(func=cmd_render)

    p_block = sub.add_parser("block", help="parse a header section from a file ('-' for stdin)")
    p_block.add_argument("input")
    p_block.set_defaults(func=cmd_block)

    args = p.parse_args(argv)
    try:
        return args.func(args)
    except (HeaderError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
