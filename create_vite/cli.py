"""
cli.py

Responsibility: CLI entrypoint for create-vite.

High-level flow:
1) Normalize argv -> `ParsedArgs` (print usage and stop on --help)
2) Resolve target dir + template id, prompting only for what is missing
3) Copy the template into the target dir
4) Print next steps

This module should orchestrate behavior but keep concerns isolated:
- Argument parsing: `args.py`
- Prompt sequence: `resolver.py` / `prompts.py`
- Copying: `scaffolder.py` / `renderer.py`
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape

from create_vite.args import normalize
from create_vite.catalog import Catalog, default_catalog
from create_vite.display import console, err_console, help_text
from create_vite.prompts import Prompter, TerminalPrompter
from create_vite.resolver import Cancelled, resolve
from create_vite.scaffolder import ScaffoldError, next_steps, scaffold

logger = logging.getLogger(__name__)


def main(
    argv: Sequence[str] | None = None,
    *,
    prompter: Prompter | None = None,
    catalog: Catalog | None = None,
) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    parsed = normalize(sys.argv[1:] if argv is None else argv)
    catalog = catalog or default_catalog()

    if parsed.help:
        console.print(help_text(catalog))
        return 0

    console.print(f"[dim]{escape(repr(parsed))}[/dim]")

    try:
        resolution = resolve(parsed, catalog, prompter or TerminalPrompter())
    except Cancelled as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        return 0

    root = Path.cwd() / resolution.target_dir
    console.print(f"\nScaffolding project in {escape(str(root))}...")

    try:
        result = scaffold(resolution.target_dir, resolution.template_id, catalog=catalog)
    except ScaffoldError as e:
        logger.debug("scaffold failed", exc_info=True)
        err_console.print(f"[red]{escape(str(e))}[/red]")
        return 1

    console.print("\nDone. Now run:\n")
    for step in next_steps(result.root):
        console.print(f"  {escape(step)}")
    console.print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
