"""
Composition Root shared by the CLI and the HTTP entry points.

Wires infrastructure adapters (Bedrock, FAISS, Alpha Vantage, Langfuse) into
the application layer according to Settings and returns a ready
RunAgentUseCase.
"""

import logging

from src.application.agent.graph import ToolFanOut
from src.application.agent.orchestrator import Orchestrator
from src.application.agent.router import QueryRouter
from src.application.agent.strategies import (
    AgentLoopStrategy,
    OrchestrationStrategy,
    RoutedStrategy,
    SinglePassStrategy,
)
from src.application.services.capability_registry import CapabilityRegistry
from src.application.services.knowledge_ingestor import IngestCorpusService
from src.application.use_cases.retrieve_documents import RetrievalGate
from src.application.use_cases.run_agent import RunAgentUseCase
from src.domain.ports.llm_port import ILanguageModel
from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints.tool_registry import create_capability_registry
from src.infrastructure.knowledge_base.corpora import COMPANY_PROFILES, FINANCIAL_GLOSSARY
from src.infrastructure.knowledge_base.faiss_vector_store import FAISSVectorStore
from src.infrastructure.llm.bedrock_adapter import BedrockChatAdapter
from src.infrastructure.observability.langfuse_adapter import LangfuseObservabilityHandler
from src.infrastructure.stock_data.alpha_vantage_adapter import AlphaVantageStockDataProvider

logger = logging.getLogger(__name__)


def build_strategy(
    settings: Settings,
    llm: ILanguageModel,
    registry: CapabilityRegistry,
    glossary_gate: RetrievalGate,
) -> OrchestrationStrategy:
    if settings.strategy == "single_pass":
        return SinglePassStrategy(llm, registry)
    if settings.strategy == "routed":
        return RoutedStrategy(llm, registry, QueryRouter(llm), glossary_gate)
    return AgentLoopStrategy(
        llm,
        registry,
        max_rounds=settings.max_rounds,
        fan_out=ToolFanOut(settings.tool_fan_out),
    )


def _indexed_gate(
    settings: Settings, corpus_name: str, entries: list[str], threshold: float, message: str
) -> RetrievalGate:
    vector_store = FAISSVectorStore(
        model_id=settings.embedding_model_id, region=settings.aws_region
    )
    count = IngestCorpusService(vector_store).ingest(corpus_name, entries)
    logger.info("Indexed %d %s entries", count, corpus_name)
    return RetrievalGate(
        vector_store,
        threshold=threshold,
        k=settings.retrieval_top_k,
        not_found_message=message,
    )


def build_run_use_case(settings: Settings) -> RunAgentUseCase:
    company_gate = _indexed_gate(
        settings,
        "company_profiles",
        COMPANY_PROFILES,
        settings.company_info_threshold,
        "No relevant company information found in the knowledge base.",
    )
    glossary_gate = _indexed_gate(
        settings,
        "glossary",
        FINANCIAL_GLOSSARY,
        settings.glossary_threshold,
        "No matching glossary entry found in the knowledge base.",
    )
    stock_provider = AlphaVantageStockDataProvider(api_key=settings.alpha_vantage_api_key)
    registry = create_capability_registry(stock_provider, company_gate, glossary_gate)

    llm = BedrockChatAdapter(model_id=settings.model_id, region=settings.aws_region)
    strategy = build_strategy(settings, llm, registry, glossary_gate)
    logger.info("Using %s orchestration", settings.strategy)
    observability = LangfuseObservabilityHandler(
        secret_key=settings.langfuse_secret_key,
        public_key=settings.langfuse_public_key,
        host=settings.langfuse_host,
    )
    return RunAgentUseCase(Orchestrator(strategy), observability)
