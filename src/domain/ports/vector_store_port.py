"""
Port (interface) for vector stores.
Infrastructure adapters (e.g. FAISSVectorStore) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.document_chunk import DocumentChunk, RetrievedDocument


class IVectorStore(ABC):
    @abstractmethod
    def add_documents(self, chunks: list[DocumentChunk]) -> None:
        """Embed and index a list of document chunks."""
        ...

    @abstractmethod
    async def similarity_search_with_score(
        self, query: str, k: int = 2
    ) -> list[RetrievedDocument]:
        """Return up to *k* hits for *query*, ordered by descending similarity."""
        ...
