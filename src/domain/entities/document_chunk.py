"""
Domain entities for the static knowledge base and its retrieval results.
Zero external dependencies; pure Python dataclasses only.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DocumentChunk:
    content: str
    source: str
    chunk_id: int


@dataclass(frozen=True)
class RetrievedDocument:
    """A single similarity-search hit, ranked by *score* (higher is closer)."""

    content: str
    score: float
    source: str = ""

    def to_payload(self) -> dict:
        return {"content": self.content, "score": self.score, "source": self.source}


@dataclass(frozen=True)
class GateVerdict:
    """Outcome of a gated retrieval: either trusted documents or a reason."""

    found: bool
    documents: tuple[RetrievedDocument, ...] = field(default_factory=tuple)
    reason: str = ""

    @classmethod
    def not_found(cls, reason: str) -> "GateVerdict":
        return cls(found=False, reason=reason)

    @classmethod
    def accepted(cls, documents: list[RetrievedDocument]) -> "GateVerdict":
        return cls(found=True, documents=tuple(documents))

    def to_payload(self) -> dict:
        if not self.found:
            return {"found": False, "message": self.reason}
        return {"found": True, "documents": [doc.to_payload() for doc in self.documents]}
