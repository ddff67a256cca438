"""
display.py

Responsibility: Presentation boundary.

Colour tags from the catalog are resolved to `rich` styles here and nowhere
else. The shared stdout/stderr consoles live here as well so tests can capture
output with the usual pytest fixtures.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from create_vite.catalog import Catalog, ColorTag

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

STYLES: dict[ColorTag, str] = {
    ColorTag.YELLOW: "yellow",
    ColorTag.GREEN: "green",
    ColorTag.CYAN: "cyan",
    ColorTag.MAGENTA: "magenta",
    ColorTag.RED: "red",
    ColorTag.RED_BRIGHT: "bright_red",
    ColorTag.BLUE: "blue",
    ColorTag.BLUE_BRIGHT: "bright_blue",
}

_ID_COLUMN_WIDTH = 15

_USAGE = """\
Usage: create-vite [OPTION]... [DIRECTORY]

Create a new Vite project in JavaScript or TypeScript.
With no arguments, start the CLI in interactive mode.

Options:
  -t, --template NAME        use a specific template

Available templates:"""


def styled(text: str, color: ColorTag | None) -> Text:
    """Return `text` rendered in the style bound to `color` (plain if None)."""
    return Text(text, style=STYLES[color] if color is not None else "")


def _template_rows(ids: list[str]) -> list[list[str]]:
    """
    Pair each `<name>-ts` id with its JavaScript `<name>` counterpart.

    Ids without a counterpart get a row of their own.
    """
    remaining = list(ids)
    rows: list[list[str]] = []
    while remaining:
        head = remaining.pop(0)
        partner = head[: -len("-ts")] if head.endswith("-ts") else None
        if partner is not None and partner in remaining:
            remaining.remove(partner)
            rows.append([head, partner])
        else:
            rows.append([head])
    return rows


def help_text(catalog: Catalog) -> Text:
    """
    Usage text listing every template id, TypeScript and JavaScript side by side.
    """
    out = Text(_USAGE)
    for fw in catalog.frameworks():
        for row in _template_rows([v.id for v in fw.variants]):
            line = "".join(i.ljust(_ID_COLUMN_WIDTH) for i in row[:-1]) + row[-1]
            out.append("\n")
            out.append_text(styled(line, fw.color))
    return out
