"""Tests for generation model adapters and family resolution."""

import pytest

from rag_service.boundary.bedrock.model_adapters import (
    AnthropicMessagesAdapter,
    AnthropicTextAdapter,
    CohereAdapter,
    LlamaAdapter,
    ModelAdapter,
    SamplingParameters,
    TitanTextAdapter,
    get_model_adapter,
    resolve_model_family,
)
from rag_service.core.exceptions import ConfigurationError

SAMPLING = SamplingParameters(max_tokens=500, temperature=0.7)


class TestResolveModelFamily:
    """Test resolve_model_family."""

    @pytest.mark.parametrize(
        ("model_id", "family"),
        [
            ("anthropic.claude-v2:1", "anthropic-text"),
            ("anthropic.claude-instant-v1", "anthropic-text"),
            ("anthropic.claude-3-sonnet-20240229-v1:0", "anthropic-messages"),
            ("us.anthropic.claude-3-5-haiku-20241022-v1:0", "anthropic-messages"),
            ("cohere.command-text-v14", "cohere"),
            ("amazon.titan-text-express-v1", "titan"),
            ("meta.llama3-8b-instruct-v1:0", "meta"),
        ],
    )
    def test_known_families(self, model_id: str, family: str) -> None:
        """Should map model ids to their family."""
        assert resolve_model_family(model_id) == family

    def test_unknown_model(self) -> None:
        """Should raise ConfigurationError for unknown ids."""
        with pytest.raises(ConfigurationError):
            resolve_model_family("mistral.mistral-7b-instruct-v0:2")

    def test_explicit_family_overrides_auto(self) -> None:
        """Should use the explicit family regardless of model id."""
        adapter = get_model_adapter("custom-provisioned-model", family="titan")

        assert isinstance(adapter, TitanTextAdapter)

    def test_auto_family(self) -> None:
        """Should infer the adapter when family is auto."""
        assert isinstance(get_model_adapter("cohere.command-text-v14"), CohereAdapter)


class TestBuildRequest:
    """Test per-family request bodies."""

    def test_anthropic_text(self) -> None:
        """Should wrap the prompt in Human/Assistant turns."""
        body = AnthropicTextAdapter().build_request("PROMPT", SAMPLING)

        assert body == {
            "prompt": "\n\nHuman: PROMPT\n\nAssistant:",
            "max_tokens_to_sample": 500,
            "temperature": 0.7,
        }

    def test_anthropic_messages(self) -> None:
        """Should build a messages request with the bedrock anthropic version."""
        body = AnthropicMessagesAdapter().build_request("PROMPT", SamplingParameters(top_p=0.9))

        assert body["anthropic_version"] == "bedrock-2023-05-31"
        assert body["max_tokens"] == 500
        assert body["top_p"] == 0.9
        assert body["messages"] == [
            {"role": "user", "content": [{"type": "text", "text": "PROMPT"}]}
        ]

    def test_titan(self) -> None:
        """Should nest sampling in textGenerationConfig."""
        body = TitanTextAdapter().build_request("PROMPT", SAMPLING)

        assert body == {
            "inputText": "PROMPT",
            "textGenerationConfig": {"maxTokenCount": 500, "temperature": 0.7},
        }

    def test_llama(self) -> None:
        """Should use max_gen_len."""
        body = LlamaAdapter().build_request("PROMPT", SAMPLING)

        assert body["max_gen_len"] == 500
        assert body["prompt"] == "PROMPT"


class TestExtractAnswer:
    """Test answer extraction."""

    @pytest.mark.parametrize(
        ("adapter", "response", "expected"),
        [
            (AnthropicTextAdapter(), {"completion": " A "}, " A "),
            (
                AnthropicMessagesAdapter(),
                {"content": [{"type": "text", "text": "Hello "}, {"type": "text", "text": "world"}]},
                "Hello world",
            ),
            (CohereAdapter(), {"generations": [{"text": "C"}]}, "C"),
            (TitanTextAdapter(), {"results": [{"outputText": "T"}]}, "T"),
            (LlamaAdapter(), {"generation": "L"}, "L"),
        ],
    )
    def test_family_path(self, adapter, response: dict, expected: str) -> None:
        """Should read the family's own answer location."""
        assert adapter.extract_answer(response) == expected

    def test_falls_back_to_known_paths(self) -> None:
        """Should try other known locations when its own is absent."""
        assert TitanTextAdapter().extract_answer({"completion": "from claude"}) == "from claude"
        assert AnthropicTextAdapter().extract_answer({"generations": [{"text": "cohere"}]}) == "cohere"

    @pytest.mark.parametrize(
        "response",
        [{}, {"completion": 42}, {"content": "not a list"}, {"results": []}, None, ["list"]],
    )
    def test_unrecognized_returns_none(self, response) -> None:
        """Should return None without raising."""
        assert AnthropicMessagesAdapter().extract_answer(response) is None


class TestModelAdapterBase:
    """Test the adapter base class contract."""

    def test_base_not_instantiable(self) -> None:
        """Should refuse to instantiate an adapter without a request builder."""
        with pytest.raises(TypeError):
            ModelAdapter()

    def test_answer_paths_not_shared(self) -> None:
        """Should keep per-family answer paths immutable."""
        assert ModelAdapter.answer_paths == ()
        for adapter_cls in (AnthropicTextAdapter, AnthropicMessagesAdapter, CohereAdapter, TitanTextAdapter, LlamaAdapter):
            assert isinstance(adapter_cls.answer_paths, tuple)
            assert len(adapter_cls.answer_paths) == 1
