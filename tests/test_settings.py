"""
Tests for Settings.from_env credential checks and tunable parsing.
"""

import pytest

from src.infrastructure.config.settings import MissingCredentialError, Settings

CREDENTIALS = {
    "AWS_BEARER_TOKEN_BEDROCK": "bedrock-key",
    "ALPHA_VANTAGE_API_KEY": "av-key",
    "LANGFUSE_SECRET_KEY": "lf-key",
}


def test_defaults():
    settings = Settings.from_env(CREDENTIALS)
    assert settings.strategy == "agent_loop"
    assert settings.max_rounds == 8
    assert settings.tool_fan_out == "all"
    assert settings.retrieval_top_k == 2
    assert settings.company_info_threshold == 0.9
    assert settings.glossary_threshold == 0.7
    assert settings.history_exchanges == 4
    assert settings.max_sessions == 1000
    assert settings.langfuse_public_key is None
    assert settings.langfuse_host is None


@pytest.mark.parametrize("missing", sorted(CREDENTIALS))
def test_each_credential_is_required(missing):
    env = {k: v for k, v in CREDENTIALS.items() if k != missing}
    with pytest.raises(MissingCredentialError) as excinfo:
        Settings.from_env(env)
    assert excinfo.value.missing == [missing]
    assert f"{missing} not found in environment variables" in str(excinfo.value)


def test_blank_credential_counts_as_missing():
    with pytest.raises(MissingCredentialError) as excinfo:
        Settings.from_env({**CREDENTIALS, "ALPHA_VANTAGE_API_KEY": "  "})
    assert excinfo.value.missing == ["ALPHA_VANTAGE_API_KEY"]


def test_overrides():
    settings = Settings.from_env({
        **CREDENTIALS,
        "ORCHESTRATION_STRATEGY": "Routed",
        "MAX_AGENT_ROUNDS": "3",
        "TOOL_FAN_OUT": "first",
        "GLOSSARY_THRESHOLD": "0.65",
        "LOG_LEVEL": "debug",
        "MAX_SESSIONS": "50",
        "LANGFUSE_PUBLIC_KEY": "pk-lf",
        "LANGFUSE_HOST": "https://langfuse.example",
    })
    assert settings.strategy == "routed"
    assert settings.max_rounds == 3
    assert settings.tool_fan_out == "first"
    assert settings.glossary_threshold == 0.65
    assert settings.log_level == "DEBUG"
    assert settings.max_sessions == 50
    assert settings.langfuse_public_key == "pk-lf"
    assert settings.langfuse_host == "https://langfuse.example"


@pytest.mark.parametrize(
    "name,value",
    [
        ("ORCHESTRATION_STRATEGY", "freestyle"),
        ("MAX_AGENT_ROUNDS", "0"),
        ("MAX_AGENT_ROUNDS", "many"),
        ("MAX_SESSIONS", "0"),
        ("TOOL_FAN_OUT", "some"),
        ("COMPANY_INFO_THRESHOLD", "high"),
    ],
)
def test_malformed_tunables(name, value):
    with pytest.raises(ValueError):
        Settings.from_env({**CREDENTIALS, name: value})
