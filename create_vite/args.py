"""
args.py

Responsibility: Turn raw process arguments into an immutable `ParsedArgs` request.

Parsing is permissive:
- Unknown flags and extra positionals are ignored.
- A missing `--template` value is treated as "no template".
- Nothing here prints, raises or exits; `--help` is only recorded.
- Input argparse rejects (`-hx`, `--help=yes`) is re-read by a plain token
  scan instead, so `-h`/`--help` still win.
- An unknown flag never takes a value: in `--force my-app`, `my-app` is the
  target directory.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_TARGET_DIR = "vite-project"


class _ArgumentError(Exception):
    pass


class _PermissiveParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _ArgumentError(message)


@dataclass(frozen=True)
class ParsedArgs:
    """Structured CLI request."""

    target_dir: str | None = None
    template: str | None = None
    help: bool = False


def format_target_dir(value: str | None) -> str:
    """
    Trim surrounding whitespace and strip trailing path separators.

    Returns an empty string when nothing is left; callers decide the fallback.
    """
    if not value:
        return ""
    return value.strip().rstrip("/\\")


def _build_parser() -> argparse.ArgumentParser:
    p = _PermissiveParser(prog="create-vite", add_help=False, allow_abbrev=False)
    p.add_argument("-h", "--help", dest="help", action="store_true", default=False)
    p.add_argument("-t", "--template", dest="template", nargs="?", default=None, const=None)
    p.add_argument("directory", nargs="?", default=None)
    return p


def _scan_tokens(argv: list[str]) -> tuple[bool, str | None, str | None]:
    """
    Fallback reader for argument lists argparse refuses.

    Returns (help, template, directory).
    """
    help_flag = False
    template: str | None = None
    directory: str | None = None

    def value_at(i: int) -> str | None:
        if i < len(argv) and not argv[i].startswith("-"):
            return argv[i]
        return None

    i = 0
    while i < len(argv):
        token = argv[i]
        if token == "--":
            if directory is None and i + 1 < len(argv):
                directory = argv[i + 1]
            break
        if token.startswith("--"):
            name, has_value, value = token[2:].partition("=")
            if name == "help":
                help_flag = True
            elif name == "template":
                if has_value:
                    template = value or None
                else:
                    template = value_at(i + 1)
                    if template is not None:
                        i += 1
        elif token.startswith("-") and len(token) > 1:
            letters = token[1:]
            if "h" in letters:
                help_flag = True
            if "t" in letters:
                inline = letters[letters.index("t") + 1 :]
                if inline and "h" not in inline:
                    template = inline
                elif letters.endswith("t"):
                    template = value_at(i + 1)
                    if template is not None:
                        i += 1
        elif directory is None:
            directory = token
        i += 1

    return help_flag, template, directory


def normalize(argv: Sequence[str] | None) -> ParsedArgs:
    """
    Parse raw arguments (without the program name) into `ParsedArgs`.
    """
    raw = list(argv or [])
    try:
        args, _unknown = _build_parser().parse_known_args(raw)
        help_flag, template, directory = bool(args.help), args.template, args.directory
    except _ArgumentError:
        help_flag, template, directory = _scan_tokens(raw)

    target_dir = format_target_dir(directory) or None

    return ParsedArgs(target_dir=target_dir, template=template or None, help=help_flag)
