"""
resolver.py

Responsibility: Decide the target directory and template id for one run.

The prompt sequence is an ordered list of step descriptors. Each step says
whether it is active for the answers known so far and which choices it offers;
`resolve()` walks the list in order, skipping inactive steps, and threads a
single `ResolutionState` through it. A later step may depend on an earlier
answer (framework gates variants), never the reverse.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal

from create_vite.args import DEFAULT_TARGET_DIR, ParsedArgs, format_target_dir
from create_vite.catalog import Catalog, Framework
from create_vite.prompts import Choice, PromptCancelled, Prompter

CANCELLED_MESSAGE = "✖ Operation cancelled"


class Cancelled(Exception):
    """The user aborted an interactive prompt."""

    def __init__(self, message: str = CANCELLED_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class ResolutionState:
    target_dir: str
    framework: Framework | None = None
    variant: str | None = None


@dataclass(frozen=True)
class Resolution:
    target_dir: str
    template_id: str


@dataclass(frozen=True)
class ResolutionContext:
    parsed: ParsedArgs
    catalog: Catalog
    state: ResolutionState


class Step(ABC):
    """One question in the prompt sequence."""

    name: str = ""
    message: str = ""
    kind: Literal["text", "select"] = "select"
    default: str = ""

    @abstractmethod
    def is_active(self, ctx: ResolutionContext) -> bool: ...

    def choices(self, ctx: ResolutionContext) -> list[Choice]:
        return []

    @abstractmethod
    def apply(self, ctx: ResolutionContext, answer: str) -> None: ...


class ProjectNameStep(Step):
    name = "projectName"
    message = "Project name"
    kind = "text"
    default = DEFAULT_TARGET_DIR

    def is_active(self, ctx: ResolutionContext) -> bool:
        return not ctx.parsed.target_dir

    def apply(self, ctx: ResolutionContext, answer: str) -> None:
        ctx.state.target_dir = format_target_dir(answer) or DEFAULT_TARGET_DIR


class FrameworkStep(Step):
    name = "framework"
    message = "Select a framework"

    def is_active(self, ctx: ResolutionContext) -> bool:
        return not ctx.catalog.is_valid(ctx.parsed.template)

    def choices(self, ctx: ResolutionContext) -> list[Choice]:
        return [Choice(value=fw.id, label=fw.display_name, color=fw.color) for fw in ctx.catalog.frameworks()]

    def apply(self, ctx: ResolutionContext, answer: str) -> None:
        ctx.state.framework = ctx.catalog.get_framework(answer)


class VariantStep(Step):
    name = "variant"
    message = "Select a variant"

    def is_active(self, ctx: ResolutionContext) -> bool:
        fw = ctx.state.framework
        return fw is not None and bool(fw.variants)

    def choices(self, ctx: ResolutionContext) -> list[Choice]:
        fw = ctx.state.framework
        if fw is None:
            return []
        return [Choice(value=v.id, label=v.display_name, color=v.color) for v in fw.variants]

    def apply(self, ctx: ResolutionContext, answer: str) -> None:
        ctx.state.variant = answer


STEPS: tuple[Step, ...] = (ProjectNameStep(), FrameworkStep(), VariantStep())


def _ask(step: Step, ctx: ResolutionContext, prompter: Prompter) -> str | None:
    if step.kind == "text":
        return prompter.text(step.message, default=step.default)

    choices = step.choices(ctx)
    if not choices:
        return None
    return prompter.select(step.message, choices, default_index=0).value


def resolve(
    parsed: ParsedArgs,
    catalog: Catalog,
    prompter: Prompter,
    *,
    steps: tuple[Step, ...] = STEPS,
) -> Resolution:
    """
    Run the active prompt steps in order and return the final answer.

    Raises `Cancelled` if the user aborts any prompt; no partial result is
    returned in that case.
    """
    state = ResolutionState(target_dir=format_target_dir(parsed.target_dir) or DEFAULT_TARGET_DIR)
    ctx = ResolutionContext(parsed=parsed, catalog=catalog, state=state)

    for step in steps:
        if not step.is_active(ctx):
            continue
        try:
            answer = _ask(step, ctx, prompter)
        except PromptCancelled as e:
            raise Cancelled() from e
        if answer is not None:
            step.apply(ctx, answer)

    template_id = state.variant or parsed.template or ""
    return Resolution(target_dir=state.target_dir, template_id=template_id)
