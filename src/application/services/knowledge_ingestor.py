"""
Application service: indexes a static reference corpus into a vector store.

Business decisions owned here:
  - One DocumentChunk per corpus entry; entries are short enough that they
    are never split.
  - Blank entries are skipped.

Infrastructure adapters (IVectorStore) are injected; no imports from
langchain, faiss, or any other external library appear here.
"""

from src.domain.entities.document_chunk import DocumentChunk
from src.domain.ports.vector_store_port import IVectorStore


class IngestCorpusService:
    def __init__(self, vector_store: IVectorStore) -> None:
        self._vector_store = vector_store

    def ingest(self, corpus_name: str, entries: list[str]) -> int:
        """Index every non-blank entry of a corpus.

        Args:
            corpus_name: Label stored as the chunk source (e.g. 'glossary').
            entries:     Raw text entries.

        Returns:
            Number of chunks indexed.
        """
        chunks = [
            DocumentChunk(content=text.strip(), source=corpus_name, chunk_id=idx)
            for idx, text in enumerate(entry for entry in entries if entry.strip())
        ]
        if not chunks:
            raise ValueError(f"Corpus {corpus_name!r} has no entries to index")
        self._vector_store.add_documents(chunks)
        return len(chunks)
