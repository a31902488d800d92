"""
Infrastructure adapter: FAISS + Bedrock Titan Embeddings → IVectorStore.

All FAISS and BedrockEmbeddings details are confined here.
Vectors are L2-normalised and searched by inner product, so reported scores
are cosine similarities (1.0 = identical direction).
DocumentChunk ↔ langchain Document conversion happens in this adapter so
the rest of the codebase never imports langchain_community or faiss directly.
"""

from typing import Any, Optional

from langchain_aws import BedrockEmbeddings
from langchain_community.vectorstores import FAISS
from langchain_community.vectorstores.utils import DistanceStrategy
from langchain_core.documents import Document

from src.domain.entities.document_chunk import DocumentChunk, RetrievedDocument
from src.domain.ports.vector_store_port import IVectorStore


class FAISSVectorStore(IVectorStore):
    """In-memory FAISS index backed by Amazon Bedrock Titan Text Embeddings v2."""

    EMBEDDING_MODEL_ID = "amazon.titan-embed-text-v2:0"

    def __init__(
        self,
        embedding: Optional[Any] = None,
        model_id: str = EMBEDDING_MODEL_ID,
        region: str = "us-east-1",
    ) -> None:
        """
        Args:
            embedding: Any LangChain Embeddings instance; Bedrock Titan when omitted.
            model_id:  Bedrock embedding model id.
            region:    AWS region hosting the embedding model.
        """
        if embedding is None:
            embedding = BedrockEmbeddings(model_id=model_id, region_name=region)
        self._embedding = embedding
        self._store: FAISS | None = None

    def add_documents(self, chunks: list[DocumentChunk]) -> None:
        """Embed all chunks and add them to the index, creating it on first use."""
        lc_docs = [self._to_lc_doc(chunk) for chunk in chunks]
        if self._store is None:
            self._store = FAISS.from_documents(
                lc_docs,
                self._embedding,
                distance_strategy=DistanceStrategy.MAX_INNER_PRODUCT,
                normalize_L2=True,
            )
        else:
            self._store.add_documents(lc_docs)

    async def similarity_search_with_score(
        self, query: str, k: int = 2
    ) -> list[RetrievedDocument]:
        """Return the *k* most similar chunks for *query* with cosine scores."""
        if self._store is None:
            raise RuntimeError("Vector store is empty; call add_documents() first.")
        results = await self._store.asimilarity_search_with_score(query, k=k)
        return [
            RetrievedDocument(
                content=doc.page_content,
                score=float(score),
                source=doc.metadata.get("source", ""),
            )
            for doc, score in results
        ]

    @staticmethod
    def _to_lc_doc(chunk: DocumentChunk) -> Document:
        return Document(
            page_content=chunk.content,
            metadata={"source": chunk.source, "chunk_id": chunk.chunk_id},
        )
