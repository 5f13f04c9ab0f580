"""Command-line interface for the Lox scanner: file runner and prompt."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from lox.errors import DiagnosticCollector

USAGE = "Usage: lox [script]"

# sysexits.h
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

OUTPUT_FORMATS = ("text", "json")
CONFIG_NAME = "lox.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    script: Path | None
    prompt: str
    output_format: str
    show_source: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="lox",
        description="Scan a Lox script, or each line typed at the prompt, and print its tokens",
    )
    p.add_argument("script", nargs="*", help="Script file (omit for an interactive prompt)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Token output format (default: text)",
    )
    p.add_argument(
        "--show-source",
        action="store_true",
        default=None,
        help="Show the offending source line under each error",
    )
    p.add_argument("--debug", action="store_true", default=None, help="Dump a token table to stderr")
    return p


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def _config_bool(config: dict[str, Any], key: str) -> bool:
    value = config.get(key, False)
    if not isinstance(value, bool):
        raise argparse.ArgumentTypeError(f"invalid {key} in config (expected true or false): {value!r}")
    return value


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    script = Path(args.script[0]) if args.script else None
    base_dir = script.parent if script is not None else Path(".")
    if not base_dir.parts:
        base_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, base_dir)

    prompt = config.get("prompt", "> ")
    if not isinstance(prompt, str):
        raise argparse.ArgumentTypeError(f"invalid prompt in config (expected a string): {prompt!r}")

    output_format = config.get("format", "text")
    if args.format is not None:
        output_format = args.format
    if output_format not in OUTPUT_FORMATS:
        raise argparse.ArgumentTypeError(
            f"invalid format {output_format!r} (expected one of: {', '.join(OUTPUT_FORMATS)})"
        )

    show_source = _config_bool(config, "show_source")
    if args.show_source is not None:
        show_source = args.show_source

    debug = _config_bool(config, "debug")
    if args.debug is not None:
        debug = args.debug

    return CliOptions(
        script=script,
        prompt=prompt,
        output_format=output_format,
        show_source=show_source,
        debug=debug,
    )


def run(
    source: str,
    options: CliOptions,
    *,
    filename: str = "<script>",
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> DiagnosticCollector:
    """Scan one source text, print its tokens and errors, and return the errors."""
    from lox.debug import dump_tokens
    from lox.scanner import Scanner

    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    # Plain reports are echoed as they arrive; context snippets need the whole source
    collector = DiagnosticCollector(stream=None if options.show_source else err)
    tokens = Scanner(source, collector).scan_tokens()

    if options.show_source:
        for diag in collector.diagnostics:
            print(diag.format_context(source, filename), file=err)

    if options.debug:
        dump_tokens(tokens, file=err)

    for tok in tokens:
        if options.output_format == "json":
            print(json.dumps(tok.to_dict()), file=out)
        else:
            print(tok, file=out)

    return collector


def run_file(
    options: CliOptions,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Scan the script once. Returns 65 if any error was reported, else 0."""
    assert options.script is not None
    err = err if err is not None else sys.stderr

    try:
        source = options.script.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"error: cannot read {options.script}: {exc.strerror}", file=err)
        return EX_NOINPUT

    collector = run(source, options, filename=str(options.script), out=out, err=err)
    return EX_DATAERR if collector.had_error else 0


def run_prompt(
    options: CliOptions,
    *,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Scan one line at a time until end of input. Errors never end the loop."""
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout

    try:
        while True:
            out.write(options.prompt)
            out.flush()
            line = stdin.readline()
            if not line:
                break
            # Each line gets its own collector, so the error state resets here
            run(line.rstrip("\n"), options, filename="<stdin>", out=out, err=err)
    except KeyboardInterrupt:
        pass
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/2/64/65/66). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.script) > 1:
        print(USAGE)
        return EX_USAGE

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.script is None:
        return run_prompt(options)
    return run_file(options)
