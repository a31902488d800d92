"""
Tests for the interactive session loop and the startup credential check.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.agent.conversation import ConversationState
from src.application.agent.prompts import APOLOGY
from src.infrastructure.entrypoints import cli


def _reader(lines):
    pending = iter(lines)

    def read_line(prompt):
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    return read_line


def _session(lines, use_case):
    output = []
    asyncio.run(
        cli.run_session(use_case, ConversationState(), read_line=_reader(lines), write=output.append)
    )
    return output


def test_exit_is_case_insensitive():
    use_case = MagicMock()
    use_case.execute = AsyncMock()
    output = _session(["  EXIT "], use_case)
    use_case.execute.assert_not_awaited()
    assert output[-1] == cli.GOODBYE


def test_queries_are_answered_until_exit():
    use_case = MagicMock()
    use_case.execute = AsyncMock(side_effect=["first answer", "second answer"])
    output = _session(["price of AAPL?", "what is a bull market?", "exit"], use_case)

    assert use_case.execute.await_count == 2
    assert "\nAnswer: first answer" in output
    assert "\nAnswer: second answer" in output


def test_query_failure_apologises_and_continues():
    use_case = MagicMock()
    use_case.execute = AsyncMock(side_effect=[RuntimeError("engine down"), "recovered"])
    output = _session(["q1", "q2", "exit"], use_case)

    assert f"\n{APOLOGY}" in output
    assert "\nAnswer: recovered" in output
    assert output[-1] == cli.GOODBYE


def test_end_of_input_ends_session():
    use_case = MagicMock()
    use_case.execute = AsyncMock()
    output = _session([], use_case)
    assert output[-1] == cli.GOODBYE


def test_missing_credentials_exit_non_zero(monkeypatch, capsys):
    for name in ("AWS_BEARER_TOKEN_BEDROCK", "ALPHA_VANTAGE_API_KEY", "LANGFUSE_SECRET_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("src.infrastructure.config.settings.load_dotenv", lambda: False)
    build = MagicMock()
    monkeypatch.setattr(cli, "build_run_use_case", build)

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 1
    assert "AWS_BEARER_TOKEN_BEDROCK not found in environment variables" in capsys.readouterr().err
    build.assert_not_called()
