from __future__ import annotations

import pytest

from create_vite.args import ParsedArgs, format_target_dir, normalize


@pytest.mark.parametrize(
    "argv",
    [
        ["--help"],
        ["-h"],
        ["my-app", "--help"],
        ["--template", "vue", "-h"],
        ["-h", "my-app", "-t", "react"],
        ["-hx"],
        ["--help=yes"],
    ],
)
def test_help_flag_anywhere(argv: list[str]) -> None:
    assert normalize(argv).help is True


def test_no_arguments() -> None:
    assert normalize([]) == ParsedArgs(target_dir=None, template=None, help=False)
    assert normalize(None) == ParsedArgs()


def test_directory_and_template() -> None:
    assert normalize(["my-app", "--template", "vue-ts"]) == ParsedArgs(
        target_dir="my-app", template="vue-ts", help=False
    )


def test_short_template_alias_before_directory() -> None:
    parsed = normalize(["-t", "react-ts", "my-app"])
    assert parsed.template == "react-ts"
    assert parsed.target_dir == "my-app"


def test_directory_is_normalized() -> None:
    assert normalize(["  my-app//  "]).target_dir == "my-app"


def test_blank_directory_is_absent() -> None:
    assert normalize(["   "]).target_dir is None


def test_unknown_flags_are_ignored() -> None:
    parsed = normalize(["--force", "my-app", "--verbose"])
    assert parsed == ParsedArgs(target_dir="my-app", template=None, help=False)


def test_only_first_positional_is_used() -> None:
    assert normalize(["first", "second"]).target_dir == "first"


def test_template_without_value() -> None:
    assert normalize(["--template"]).template is None


def test_abbreviated_option_is_not_template() -> None:
    assert normalize(["--temp", "vue"]).template is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("aaa///", "aaa"),
        ("  aaa  ", "aaa"),
        ("nested/dir/", "nested/dir"),
        ("win\\dir\\\\", "win\\dir"),
        ("  ", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_format_target_dir(raw: str | None, expected: str) -> None:
    assert format_target_dir(raw) == expected


@pytest.mark.parametrize("raw", ["aaa///", " my app/ ", "x", "a/b//"])
def test_format_target_dir_is_idempotent(raw: str) -> None:
    once = format_target_dir(raw)
    assert format_target_dir(once) == once


def test_rejected_input_keeps_directory_and_template() -> None:
    parsed = normalize(["my-app", "--help=yes", "--template", "vue-ts"])
    assert parsed == ParsedArgs(target_dir="my-app", template="vue-ts", help=True)


def test_rejected_input_with_inline_template() -> None:
    assert normalize(["-hx", "--template=react-ts"]).template == "react-ts"


def test_unknown_flag_does_not_take_a_value() -> None:
    assert normalize(["--force", "my-app"]).target_dir == "my-app"
