"""Shared fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from ai_skills.context import AiSkillsContext
from tests.fakes.context import create_test_context


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def test_ctx(tmp_path: Path) -> AiSkillsContext:
    return create_test_context(tmp_path)
