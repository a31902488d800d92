"""
FastAPI entry point: the assistant as a multi-session HTTP service.

Every session id owns its own ConversationState in a SessionStore; the
orchestrator itself keeps no per-session state.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app_factory --factory --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from src.application.agent.prompts import APOLOGY
from src.application.services.session_store import SessionStore
from src.application.use_cases.run_agent import RunAgentUseCase
from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints.composition import build_run_use_case
from src.infrastructure.observability.logging_setup import configure_logging

logger = logging.getLogger(__name__)


class QueryRequest(BaseModel):
    prompt: str
    session_id: Optional[str] = None
    user_id: Optional[str] = None


class QueryResponse(BaseModel):
    session_id: str
    answer: str


def create_app(run_use_case: RunAgentUseCase, sessions: SessionStore) -> FastAPI:
    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        run_use_case.flush()

    app = FastAPI(title="Financial Research Assistant API", lifespan=lifespan)

    @app.post("/query", response_model=QueryResponse)
    async def query_agent(body: QueryRequest) -> QueryResponse:
        session_id, conversation = sessions.get_or_create(body.session_id)
        try:
            answer = await run_use_case.execute(
                body.prompt,
                conversation,
                user_id=body.user_id,
                session_id=session_id,
            )
        except Exception as exc:
            logger.exception("Error processing query for session %s", session_id)
            raise HTTPException(status_code=502, detail=APOLOGY) from exc
        return QueryResponse(session_id=session_id, answer=answer)

    @app.delete("/sessions/{session_id}", status_code=204)
    async def end_session(session_id: str) -> None:
        if not sessions.end(session_id):
            raise HTTPException(status_code=404, detail="Unknown session.")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


def app_factory() -> FastAPI:
    """Composition Root for the HTTP service; fails fast on missing credentials."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    return create_app(
        build_run_use_case(settings),
        SessionStore(
            max_exchanges=settings.history_exchanges,
            max_sessions=settings.max_sessions,
        ),
    )


def serve() -> None:
    import uvicorn

    uvicorn.run(
        "src.infrastructure.entrypoints.fastapi_app:app_factory",
        factory=True,
        host="0.0.0.0",
        port=8000,
    )
