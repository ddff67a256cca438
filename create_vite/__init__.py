"""
create_vite package

This package implements create-vite as a CLI-first utility.

Key responsibilities are split across modules:
- `args.py`: normalize raw process arguments into a `ParsedArgs` request
- `catalog.py`: load the framework/variant template catalog (`catalog.yaml`)
- `prompts.py`: terminal prompter (free text + arrow-key selection)
- `resolver.py`: ordered prompt steps that decide target dir and template id
- `renderer.py`: deterministic template copying into an output directory
- `scaffolder.py`: locate the template, create the destination, report next steps
- `display.py`: colour styles, help text and the shared consoles
- `cli.py`: CLI entrypoint and orchestration (parse -> resolve -> scaffold)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
