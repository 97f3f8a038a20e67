"""Tests for the CLI error boundary."""

import click
import pytest
from click.testing import CliRunner

from ai_skills.error_boundary import cli_error_boundary
from ai_skills.errors import UnparseableSource


def _failing_command(error: Exception) -> click.Command:
    @click.command()
    @cli_error_boundary
    def fail() -> None:
        raise error

    return fail


@pytest.mark.parametrize(
    "error",
    [OSError("disk gone"), PermissionError("disk gone"), UnparseableSource("disk gone")],
)
def test_well_known_errors_exit_cleanly(error: Exception) -> None:
    result = CliRunner().invoke(_failing_command(error))

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "disk gone" in result.output
    assert "Traceback" not in result.output


def test_other_errors_propagate() -> None:
    result = CliRunner().invoke(_failing_command(RuntimeError("bug")))

    assert isinstance(result.exception, RuntimeError)
