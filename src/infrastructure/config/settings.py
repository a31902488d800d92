"""
Runtime configuration read from the environment.

load_dotenv() merges a local .env file first, so credentials can live there
during development. Three credentials are mandatory; everything else has a
default.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

REQUIRED_CREDENTIALS = (
    "AWS_BEARER_TOKEN_BEDROCK",
    "ALPHA_VANTAGE_API_KEY",
    "LANGFUSE_SECRET_KEY",
)

STRATEGIES = ("agent_loop", "single_pass", "routed")
FAN_OUT_POLICIES = ("all", "first")


class MissingCredentialError(RuntimeError):
    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            "; ".join(f"{name} not found in environment variables" for name in missing)
        )


def _int(env: Mapping[str, str], name: str, default: int, minimum: int = 1) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _choice(env: Mapping[str, str], name: str, default: str, choices: tuple[str, ...]) -> str:
    value = (env.get(name) or default).strip().lower()
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}, got {value!r}")
    return value


@dataclass(frozen=True)
class Settings:
    bedrock_api_key: str
    alpha_vantage_api_key: str
    langfuse_secret_key: str
    langfuse_public_key: Optional[str] = None
    langfuse_host: Optional[str] = None
    aws_region: str = "us-east-1"
    model_id: str = "us.amazon.nova-pro-v1:0"
    embedding_model_id: str = "amazon.titan-embed-text-v2:0"
    strategy: str = "agent_loop"
    max_rounds: int = 8
    tool_fan_out: str = "all"
    retrieval_top_k: int = 2
    company_info_threshold: float = 0.9
    glossary_threshold: float = 0.7
    history_exchanges: int = 4
    max_sessions: int = 1000
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from *environ* (defaults to os.environ after load_dotenv).

        Raises:
            MissingCredentialError: if any required credential is absent or empty.
            ValueError: if a tunable has a malformed value.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        missing = [name for name in REQUIRED_CREDENTIALS if not environ.get(name, "").strip()]
        if missing:
            raise MissingCredentialError(missing)

        return cls(
            bedrock_api_key=environ["AWS_BEARER_TOKEN_BEDROCK"],
            alpha_vantage_api_key=environ["ALPHA_VANTAGE_API_KEY"],
            langfuse_secret_key=environ["LANGFUSE_SECRET_KEY"],
            langfuse_public_key=environ.get("LANGFUSE_PUBLIC_KEY") or None,
            langfuse_host=environ.get("LANGFUSE_HOST") or None,
            aws_region=environ.get("AWS_DEFAULT_REGION") or cls.aws_region,
            model_id=environ.get("BEDROCK_MODEL_ID") or cls.model_id,
            embedding_model_id=environ.get("BEDROCK_EMBEDDING_MODEL_ID") or cls.embedding_model_id,
            strategy=_choice(environ, "ORCHESTRATION_STRATEGY", cls.strategy, STRATEGIES),
            max_rounds=_int(environ, "MAX_AGENT_ROUNDS", cls.max_rounds),
            tool_fan_out=_choice(environ, "TOOL_FAN_OUT", cls.tool_fan_out, FAN_OUT_POLICIES),
            retrieval_top_k=_int(environ, "RETRIEVAL_TOP_K", cls.retrieval_top_k),
            company_info_threshold=_float(
                environ, "COMPANY_INFO_THRESHOLD", cls.company_info_threshold
            ),
            glossary_threshold=_float(environ, "GLOSSARY_THRESHOLD", cls.glossary_threshold),
            history_exchanges=_int(environ, "HISTORY_EXCHANGES", cls.history_exchanges),
            max_sessions=_int(environ, "MAX_SESSIONS", cls.max_sessions),
            log_level=(environ.get("LOG_LEVEL") or cls.log_level).upper(),
        )
