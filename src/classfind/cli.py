"""Command-line interface for classfind."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, TextIO

from classfind.config import Settings, language_for_path, load_config, settings_from_config
from classfind.errors import ConfigError, CustomPatternError
from classfind.tokens import ClassToken, HelperReference, Range


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    language_id: str
    settings: Settings
    helpers: bool
    as_json: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="classfind",
        description="List the class names used in a markup, script or stylesheet file",
    )
    p.add_argument("input", help="Input file")
    p.add_argument(
        "-l",
        "--language",
        metavar="ID",
        help="Language id (default: guessed from the file extension)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover classfind.toml)",
    )
    p.add_argument(
        "--attr",
        action="append",
        default=[],
        metavar="NAME",
        help="Class attribute name (repeatable, replaces the configured list)",
    )
    p.add_argument(
        "--block",
        action="append",
        default=[],
        metavar="NAME",
        help="Class name to ignore (repeatable)",
    )
    p.add_argument(
        "--variant-groups",
        action="store_true",
        default=None,
        help="Expand variant groups such as hover:(a b)",
    )
    p.add_argument("--helpers", action="store_true", help="List theme()/config() references")
    p.add_argument("--json", action="store_true", help="Emit JSON with 0-based positions")
    p.add_argument("--debug", action="store_true", help="Dump class lists and tokens to stderr")
    return p


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    settings = settings_from_config(load_config(config_path, input_dir))

    changes: dict[str, Any] = {}
    if args.attr:
        changes["class_attributes"] = tuple(args.attr)
    if args.block:
        changes["blocklist"] = settings.blocklist | frozenset(args.block)
    if args.variant_groups is not None:
        changes["variant_groups"] = args.variant_groups

    return CliOptions(
        input_file=input_file,
        language_id=args.language or language_for_path(input_file),
        settings=replace(settings, **changes),
        helpers=args.helpers,
        as_json=args.json,
        debug=args.debug,
    )


def _range_json(range: Range) -> dict[str, dict[str, int]]:
    return {
        "start": {"line": range.start.line, "character": range.start.character},
        "end": {"line": range.end.line, "character": range.end.character},
    }


def format_tokens(tokens: list[ClassToken], filename: str, as_json: bool) -> str:
    """Render class tokens as text lines (1-based) or JSON (0-based)."""
    if as_json:
        records = [
            {
                "name": t.name,
                "variants": list(t.variants),
                "important": t.span.important,
                "range": _range_json(t.range),
            }
            for t in tokens
        ]
        return json.dumps(records, indent=2) + "\n"

    lines = []
    for t in tokens:
        line = f"{filename}:{t.range.start.line + 1}:{t.range.start.character + 1}: {t.name}"
        if t.variants:
            line += f" [{', '.join(t.variants)}]"
        lines.append(line + "\n")
    return "".join(lines)


def format_helpers(references: list[HelperReference], filename: str, as_json: bool) -> str:
    """Render helper references as text lines (1-based) or JSON (0-based)."""
    if as_json:
        records = [
            {
                "helper": r.kind.value,
                "path": r.path,
                "range": _range_json(r.full_range),
                "pathRange": _range_json(r.path_range),
            }
            for r in references
        ]
        return json.dumps(records, indent=2) + "\n"

    return "".join(
        f"{filename}:{r.path_range.start.line + 1}:{r.path_range.start.character + 1}: "
        f"{r.kind.value}({r.path})\n"
        for r in references
    )


def run(options: CliOptions, out: TextIO) -> None:
    """Read the input file and write the requested listing to out."""
    from classfind.debug import dump_class_lists
    from classfind.document import TextDocument
    from classfind.finder import (
        find_class_lists_in_document,
        find_helper_functions_in_document,
        tokenize_class_lists,
    )

    source = options.input_file.read_text(encoding="utf-8")
    doc = TextDocument(options.input_file.resolve().as_uri(), options.language_id, source)
    filename = str(options.input_file)

    if options.helpers:
        references = find_helper_functions_in_document(doc, options.settings)
        out.write(format_helpers(references, filename, options.as_json))
        return

    spans = find_class_lists_in_document(doc, options.settings)
    tokens = tokenize_class_lists(spans, options.settings)
    if options.debug:
        dump_class_lists(spans, tokens)
    out.write(format_tokens(tokens, filename, options.as_json))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    try:
        run(options, sys.stdout)
    except CustomPatternError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0
