"""
Use-case: gated semantic search over one knowledge-base corpus.

The gate is the only guard against irrelevant retrieval: it checks the best
candidate's score against a corpus-specific threshold before any retrieved
text reaches the reasoning engine. Lower-ranked candidates are returned
alongside the best one without being checked individually.
Depends only on Domain ports and entities; no infrastructure imports.
"""

import logging
from typing import Optional

from src.domain.entities.document_chunk import GateVerdict
from src.domain.ports.vector_store_port import IVectorStore

logger = logging.getLogger(__name__)


class RetrievalGate:
    DEFAULT_K: int = 2

    def __init__(
        self,
        vector_store: IVectorStore,
        threshold: float,
        k: int = DEFAULT_K,
        not_found_message: str = "No relevant information found in the knowledge base.",
    ) -> None:
        """
        Args:
            vector_store:      Corpus handle; an already indexed IVectorStore.
            threshold:         Minimum score the best candidate must reach.
            k:                 Number of candidates requested per query.
            not_found_message: Reason reported on a not-found verdict.
        """
        if k < 1:
            raise ValueError("k must be at least 1")
        self._vector_store = vector_store
        self._threshold = threshold
        self._k = k
        self._not_found_message = not_found_message

    async def gate(
        self,
        query: str,
        k: Optional[int] = None,
        threshold: Optional[float] = None,
    ) -> GateVerdict:
        """Search the corpus and accept or reject the candidates as a whole.

        Args:
            query:     Natural-language search query.
            k:         Overrides the configured candidate count.
            threshold: Overrides the configured minimum score.

        Returns:
            GateVerdict with found=False and a reason when there are no
            candidates or the best score is strictly below the threshold,
            otherwise found=True with every returned candidate.
        """
        k = self._k if k is None else k
        threshold = self._threshold if threshold is None else threshold
        if k < 1:
            raise ValueError("k must be at least 1")

        candidates = await self._vector_store.similarity_search_with_score(query, k=k)
        candidates = candidates[:k]
        if not candidates:
            logger.info("Retrieval gate: no candidates for %r", query)
            return GateVerdict.not_found(self._not_found_message)

        best = max(doc.score for doc in candidates)
        if best < threshold:
            logger.info(
                "Retrieval gate: best score %.3f below threshold %.3f for %r",
                best, threshold, query,
            )
            return GateVerdict.not_found(self._not_found_message)

        return GateVerdict.accepted(candidates)
