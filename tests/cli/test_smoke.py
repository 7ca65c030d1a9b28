# topmark:header:start
#
#   project      : DocTheme
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Smoke tests for the DocTheme CLI entry points."""

from __future__ import annotations

import pytest

from doctheme.cli.exit_codes import ExitCode
from doctheme.constants import DOCTHEME_VERSION

from tests.cli.conftest import assert_exit_code, assert_SUCCESS, run_cli

pytestmark = pytest.mark.cli


def test_help_lists_commands() -> None:
    """`--help` lists every subcommand."""
    result = run_cli(["--help"])
    assert_SUCCESS(result)
    for command in ("render", "annotations", "parse-annotation", "config-defaults", "version"):
        assert command in result.output


def test_no_subcommand_prints_hint() -> None:
    """Without a subcommand the group prints a hint and its help."""
    result = run_cli([])
    assert_SUCCESS(result)
    assert "doctheme render DEST" in result.output
    assert "Usage:" in result.output


def test_version() -> None:
    """`version` prints the installed version."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == DOCTHEME_VERSION


def test_verbose_and_quiet_are_exclusive() -> None:
    """`-v` and `-q` together are a usage error."""
    result = run_cli(["-v", "-q", "version"])
    assert_exit_code(result, ExitCode.USAGE_ERROR)
