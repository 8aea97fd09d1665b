"""Tests for model and provider display names."""

import pytest

from modeldb.normalization.names import (
    clean_bedrock_id,
    extract_date_suffix,
    generate_display_name,
    get_provider_display_name,
    smart_title_case,
)


class TestGenerateDisplayName:
    """Tests for generate_display_name."""

    @pytest.mark.parametrize(
        ("model_id", "expected"),
        [
            ("gpt-4", "GPT-4"),
            ("gpt-4o", "GPT-4o"),
            ("mixtral-8x7b", "Mixtral 8x7B"),
            ("llama-2-70b-chat", "LLaMA 2 70b Chat"),
            ("gemini-2.5-flash", "Gemini 2.5 Flash"),
            ("claude-3-5-sonnet-latest", "Claude 3.5 Sonnet"),
        ],
    )
    def test_known_ids(self, model_id: str, expected: str) -> None:
        assert generate_display_name(model_id) == expected

    def test_trailing_date_becomes_month(self) -> None:
        assert generate_display_name("model-2024-01-15") == "Model (Jan 2024)"

    def test_bedrock_id(self) -> None:
        assert (
            generate_display_name("us.anthropic.claude-3-5-haiku-20241022-v1:0")
            == "Claude 3.5 Haiku (Oct 2024)"
        )

    def test_fine_tuned(self) -> None:
        assert generate_display_name("ft:gpt-4o") == "GPT-4o [Fine-tuned]"

    def test_vendor_routed_id_uses_last_segment(self) -> None:
        assert generate_display_name("azure/gpt-4o") == "GPT-4o"

    def test_empty(self) -> None:
        assert generate_display_name("") == ""

    def test_case_is_preserved(self) -> None:
        assert generate_display_name("MODEL") == "MODEL"

    def test_underscores_are_not_separators(self) -> None:
        assert generate_display_name("model_with_underscores") == "Model_with_underscores"

    @pytest.mark.parametrize(
        ("model_id", "expected"),
        [
            ("model--name", "Model  Name"),
            ("-start", " Start"),
            ("end-", "End "),
        ],
    )
    def test_degenerate_spacing_is_kept(self, model_id: str, expected: str) -> None:
        assert generate_display_name(model_id) == expected


class TestDateHelpers:
    """Tests for date suffix extraction and Bedrock cleaning."""

    def test_full_date(self) -> None:
        assert extract_date_suffix("gpt-4o-2024-08-06") == ("gpt-4o", "(Aug 2024)")

    def test_compact_date(self) -> None:
        assert extract_date_suffix("claude-3-haiku-20240307") == ("claude-3-haiku", "(Mar 2024)")

    def test_short_date(self) -> None:
        assert extract_date_suffix("mistral-large-2411") == ("mistral-large", "(Nov 2024)")

    def test_invalid_month_is_not_a_date(self) -> None:
        assert extract_date_suffix("model-2024-13-01") == ("model-2024-13-01", "")

    def test_no_date(self) -> None:
        assert extract_date_suffix("gpt-4") == ("gpt-4", "")

    def test_clean_bedrock_region_prefix(self) -> None:
        assert clean_bedrock_id("eu.meta.llama3-70b-instruct-v1:0") == (
            "llama3-70b-instruct",
            "",
        )

    def test_clean_bedrock_provider_prefix_with_date(self) -> None:
        assert clean_bedrock_id("anthropic.claude-3-sonnet-20240229-v1:0") == (
            "claude-3-sonnet",
            "(Feb 2024)",
        )

    def test_clean_plain_id_is_untouched(self) -> None:
        assert clean_bedrock_id("gpt-4") == ("gpt-4", "")


class TestSmartTitleCase:
    """Tests for smart_title_case."""

    def test_acronyms(self) -> None:
        assert smart_title_case("tts-1-hd") == "TTS 1 HD"

    def test_parameter_counts(self) -> None:
        assert smart_title_case("qwen-72b") == "Qwen 72B"


class TestProviderDisplayName:
    """Tests for get_provider_display_name."""

    def test_known_provider(self) -> None:
        assert get_provider_display_name("openai") == "OpenAI"

    def test_case_insensitive(self) -> None:
        assert get_provider_display_name("GoOgLe") == "Google"

    def test_text_completion_wrapper(self) -> None:
        assert get_provider_display_name("text-completion-openai") == "OpenAI"

    def test_unknown_text_completion_wrapper(self) -> None:
        assert get_provider_display_name("text-completion-unknown") == "Text Completion Unknown"

    def test_unknown_provider_fixes_acronyms(self) -> None:
        assert get_provider_display_name("acme_ai") == "Acme AI"
