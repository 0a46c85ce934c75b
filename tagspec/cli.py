"""
tagspec — parse and order image tag specifications
"""

import argparse
import json
import sys

from tagspec import config
from tagspec.commands import cmd_build, cmd_kinds, cmd_parse
from tagspec.exceptions import CliError

HELP_TEXT = """\
Usage: tagspec <command> [args...]

Global flags:
  --format table          Output as readable text instead of JSON (default: json)
  --quiet, -q             Suppress the "Processing tags input" trace
  --version               Show version number

Commands:
  parse <spec>            - Parse one tag specification (e.g. "type=ref,event=pr")
  build [spec ...]        - Parse a set of specifications and print them by priority
    --file <path>           Read specifications from a file, one per line
                            (use "-" for stdin; blank lines and # comments skipped)
                            With no specs, falls back to INPUT_TAGS, then to the
                            built-in defaults (schedule + ref branch/tag/pr)
  kinds                   - List tag kinds with default priorities
  version                 - Show version number

Examples:
  tagspec parse "type=semver,pattern={{version}}"
  tagspec build "type=sha" "type=ref,event=branch" --format table
"""


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so --format works after subcommand)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, quiet, remaining_argv).
    Handles --version directly.
    """
    fmt = "json"
    quiet = False
    remaining = []
    i = 0
    while i < len(argv):
        if argv[i] == "--version":
            print(f"tagspec {config.VERSION}")
            sys.exit(0)
        elif argv[i] in ("--quiet", "-q"):
            quiet = True
            i += 1
            continue
        elif argv[i] == "--format" and i + 1 < len(argv):
            fmt = argv[i + 1]
            if fmt not in config.VALID_FORMATS:
                raise CliError(
                    f"[ERROR] Invalid format '{fmt}'. Use: {', '.join(config.VALID_FORMATS)}"
                )
            i += 2
            continue
        else:
            remaining.append(argv[i])
        i += 1
    return fmt, quiet, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises CliError instead of printing full help text."""

    def error(self, message):
        raise CliError(f"[ERROR] {message}")


def build_parser():
    parser = _SubcommandParser(prog="tagspec", add_help=False)
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    # --- parse ---
    p = sub.add_parser("parse")
    p.add_argument("spec")
    p.set_defaults(func=cmd_parse)

    # --- build ---
    p = sub.add_parser("build")
    p.add_argument("specs", nargs="*")
    p.add_argument("--file")
    p.set_defaults(func=cmd_build)

    # --- kinds ---
    sub.add_parser("kinds").set_defaults(func=cmd_kinds)

    # --- version (bare word) ---
    sub.add_parser("version").set_defaults(func=None)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _error_message(err):
    msg = str(err)
    return msg if msg.startswith("[ERROR]") else f"[ERROR] {msg}"


def _emit_cli_error(err, fmt):
    if fmt == "json":
        payload = {
            "ok": False,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "error": {
                "type": getattr(err, "error_type", "error"),
                "message": str(err),
                "exit_code": getattr(err, "exit_code", 1),
            },
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return
    print(_error_message(err), file=sys.stderr)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(HELP_TEXT)
        sys.exit(0)

    fmt = "json"
    try:
        fmt, quiet, remaining_argv = _extract_global_flags(argv)
        config.RUNTIME_QUIET = quiet

        if not remaining_argv:
            print(HELP_TEXT)
            sys.exit(0)

        parser = build_parser()
        ns = parser.parse_args(remaining_argv)
        ns.format = fmt  # inject global format flag

        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        if ns.command == "version":
            print(f"tagspec {config.VERSION}")
            sys.exit(0)

        ns.func(ns)

    except CliError as e:
        _emit_cli_error(e, fmt)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
