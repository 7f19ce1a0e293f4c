"""
Answer synthesizer.

Builds the context prompt from retrieved chunks, invokes the generative model
once and extracts a normalized answer. Never calls the model without context.

Dependencies: langchain_core.prompts, rag_service.boundary.bedrock
System role: Final stage of query handling
"""

import logging

from rag_service.boundary.bedrock.generation_client import BedrockGenerationClient
from rag_service.boundary.bedrock.model_adapters import ModelAdapter, SamplingParameters

from .models import Answer, RetrievalResult, SourceRef
from .rag_prompt import build_context, render_prompt

logger = logging.getLogger(__name__)

NO_CONTEXT_ANSWER = "I couldn't find any relevant information to answer your question."
NO_ANSWER_GENERATED = "No answer generated."


class AnswerSynthesizer:
    """Generate an answer grounded in retrieved context."""

    def __init__(
        self,
        generation_client: BedrockGenerationClient,
        adapter: ModelAdapter,
        sampling: SamplingParameters | None = None,
    ) -> None:
        """
        Initialize synthesizer.

        Args:
            generation_client: Transport for the generative model
            adapter: Request/response adapter for the model's family
            sampling: Sampling parameters (defaults: 500 tokens, temperature 0.7)
        """
        self._generation_client = generation_client
        self._adapter = adapter
        self._sampling = sampling or SamplingParameters()

    async def synthesize(self, query: str, retrieval: RetrievalResult) -> Answer:
        """
        Produce the final answer for a query.

        Args:
            query: User question
            retrieval: Ranked retrieval output

        Returns:
            Answer: Trimmed answer text and ranked sources

        Raises:
            GenerationError: When the model invocation fails
        """
        if retrieval.is_empty:
            logger.info(f"{__name__}:synthesize - No relevant chunks, returning fallback answer")
            return Answer(answer=NO_CONTEXT_ANSWER, sources=[])

        context = build_context([chunk.text for chunk in retrieval.chunks])
        prompt = render_prompt(context=context, question=query)
        body = self._adapter.build_request(prompt, self._sampling)

        response = await self._generation_client.invoke(body)
        answer = self._adapter.extract_answer(response)
        if answer is None:
            logger.warning(
                f"{__name__}:synthesize - Unrecognized response shape",
                extra={"family": self._adapter.family, "keys": list(response.keys())},
            )
            answer = NO_ANSWER_GENERATED

        logger.info(
            f"{__name__}:synthesize - Answer generated",
            extra={"chunks": len(retrieval.chunks), "answer_length": len(answer)},
        )
        return Answer(
            answer=answer.strip() or NO_ANSWER_GENERATED,
            sources=[
                SourceRef(s3_key=chunk.source_document_key, score=chunk.score)
                for chunk in retrieval.chunks
            ],
        )
