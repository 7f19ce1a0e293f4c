"""
Per-family request builders and answer extractors for Bedrock text models.

Each model family has its own request schema and its own response shape. An
adapter builds the request from a prompt and sampling parameters, and pulls
the answer text back out of the response. Extraction tries the family's own
location first, then every other known location, and returns None rather
than raising when nothing matches.

Dependencies: pydantic
System role: Model-family polymorphism for answer synthesis
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from pydantic import BaseModel, Field

from rag_service.core.exceptions import ConfigurationError


class SamplingParameters(BaseModel):
    """Sampling configuration shared by all model families."""

    max_tokens: int = Field(default=500, gt=0)
    temperature: float = Field(default=0.7, ge=0.0)
    top_p: float | None = Field(default=None)


def _completion(response: dict[str, Any]) -> Any:
    return response.get("completion")


def _content_blocks(response: dict[str, Any]) -> Any:
    content = response.get("content")
    if not isinstance(content, list):
        return None
    texts = [
        block["text"]
        for block in content
        if isinstance(block, dict) and isinstance(block.get("text"), str)
    ]
    return "".join(texts) if texts else None


def _cohere_generations(response: dict[str, Any]) -> Any:
    generations = response.get("generations")
    if isinstance(generations, list) and generations and isinstance(generations[0], dict):
        return generations[0].get("text")
    return None


def _titan_results(response: dict[str, Any]) -> Any:
    results = response.get("results")
    if isinstance(results, list) and results and isinstance(results[0], dict):
        return results[0].get("outputText")
    return None


def _llama_generation(response: dict[str, Any]) -> Any:
    return response.get("generation")


# Priority order when a family's own location yields nothing.
KNOWN_ANSWER_PATHS: list[Callable[[dict[str, Any]], Any]] = [
    _completion,
    _content_blocks,
    _cohere_generations,
    _titan_results,
    _llama_generation,
]


class ModelAdapter(ABC):
    """Base adapter: subclasses set ``family`` and ``answer_paths``."""

    family: str = ""
    answer_paths: tuple[Callable[[dict[str, Any]], Any], ...] = ()

    @abstractmethod
    def build_request(self, prompt: str, sampling: SamplingParameters) -> dict[str, Any]:
        raise NotImplementedError

    def extract_answer(self, response: Any) -> str | None:
        """
        Extract answer text from a decoded model response.

        Args:
            response: Decoded JSON response

        Returns:
            str | None: Answer text, or None when no known location holds a string
        """
        if not isinstance(response, dict):
            return None
        for path in [*self.answer_paths, *KNOWN_ANSWER_PATHS]:
            value = path(response)
            if isinstance(value, str):
                return value
        return None


class AnthropicTextAdapter(ModelAdapter):
    """Claude v2 / Instant text-completion schema."""

    family = "anthropic-text"
    answer_paths = (_completion,)

    def build_request(self, prompt: str, sampling: SamplingParameters) -> dict[str, Any]:
        body: dict[str, Any] = {
            "prompt": f"\n\nHuman: {prompt}\n\nAssistant:",
            "max_tokens_to_sample": sampling.max_tokens,
            "temperature": sampling.temperature,
        }
        if sampling.top_p is not None:
            body["top_p"] = sampling.top_p
        return body


class AnthropicMessagesAdapter(ModelAdapter):
    """Claude 3+ messages schema."""

    family = "anthropic-messages"
    answer_paths = (_content_blocks,)

    def build_request(self, prompt: str, sampling: SamplingParameters) -> dict[str, Any]:
        body: dict[str, Any] = {
            "anthropic_version": "bedrock-2023-05-31",
            "max_tokens": sampling.max_tokens,
            "temperature": sampling.temperature,
            "messages": [
                {"role": "user", "content": [{"type": "text", "text": prompt}]},
            ],
        }
        if sampling.top_p is not None:
            body["top_p"] = sampling.top_p
        return body


class CohereAdapter(ModelAdapter):
    family = "cohere"
    answer_paths = (_cohere_generations,)

    def build_request(self, prompt: str, sampling: SamplingParameters) -> dict[str, Any]:
        body: dict[str, Any] = {
            "prompt": prompt,
            "max_tokens": sampling.max_tokens,
            "temperature": sampling.temperature,
        }
        if sampling.top_p is not None:
            body["p"] = sampling.top_p
        return body


class TitanTextAdapter(ModelAdapter):
    family = "titan"
    answer_paths = (_titan_results,)

    def build_request(self, prompt: str, sampling: SamplingParameters) -> dict[str, Any]:
        config: dict[str, Any] = {
            "maxTokenCount": sampling.max_tokens,
            "temperature": sampling.temperature,
        }
        if sampling.top_p is not None:
            config["topP"] = sampling.top_p
        return {"inputText": prompt, "textGenerationConfig": config}


class LlamaAdapter(ModelAdapter):
    family = "meta"
    answer_paths = (_llama_generation,)

    def build_request(self, prompt: str, sampling: SamplingParameters) -> dict[str, Any]:
        body: dict[str, Any] = {
            "prompt": prompt,
            "max_gen_len": sampling.max_tokens,
            "temperature": sampling.temperature,
        }
        if sampling.top_p is not None:
            body["top_p"] = sampling.top_p
        return body


_ADAPTERS: dict[str, type[ModelAdapter]] = {
    adapter.family: adapter
    for adapter in (
        AnthropicTextAdapter,
        AnthropicMessagesAdapter,
        CohereAdapter,
        TitanTextAdapter,
        LlamaAdapter,
    )
}


def resolve_model_family(model_id: str) -> str:
    """
    Infer the model family from a Bedrock model identifier.

    Args:
        model_id: Bedrock model ID, optionally region-prefixed (e.g. "us.anthropic...")

    Returns:
        str: Model family name

    Raises:
        ConfigurationError: When the identifier matches no known family
    """
    lowered = model_id.lower()
    if "anthropic." in lowered:
        if "claude-v2" in lowered or "claude-instant" in lowered:
            return "anthropic-text"
        return "anthropic-messages"
    if "cohere." in lowered:
        return "cohere"
    if "amazon.titan-text" in lowered:
        return "titan"
    if "meta.llama" in lowered:
        return "meta"
    raise ConfigurationError(
        "Cannot determine model family for generative model",
        details={"model_id": model_id},
    )


def get_model_adapter(model_id: str, family: str = "auto") -> ModelAdapter:
    """
    Select the adapter for a generative model.

    Args:
        model_id: Bedrock model ID
        family: Explicit family name, or "auto" to infer from model_id

    Returns:
        ModelAdapter: Adapter instance

    Raises:
        ConfigurationError: When the family is unknown
    """
    resolved = resolve_model_family(model_id) if family == "auto" else family
    adapter_cls = _ADAPTERS.get(resolved)
    if adapter_cls is None:
        raise ConfigurationError(
            f"Unknown model family: {resolved}",
            details={"model_id": model_id},
        )
    return adapter_cls()
