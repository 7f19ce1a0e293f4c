"""RAG query business logic.

Includes retrieval over the vector index and answer synthesis.
"""

from .models import Answer, RetrievalResult, RetrievedChunk, SourceRef
from .retriever import RetrievalPipeline
from .synthesizer import NO_ANSWER_GENERATED, NO_CONTEXT_ANSWER, AnswerSynthesizer

__all__ = [
    "Answer",
    "RetrievalResult",
    "RetrievedChunk",
    "SourceRef",
    "RetrievalPipeline",
    "AnswerSynthesizer",
    "NO_ANSWER_GENERATED",
    "NO_CONTEXT_ANSWER",
]
