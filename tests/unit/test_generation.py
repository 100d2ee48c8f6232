"""Unit tests for resume generation and enhancement."""

import json

import pytest

from quire.contexts.generation import (
    CareerProfile,
    GenerationAction,
    GenerationError,
    ResumeGenerator,
    Tone,
    build_prompts,
    resolve_tone,
)
from quire.contexts.templating import parse
from quire.utils.llm import LLMProvider, LLMResponse

GENERATED_RESUME = """## Jane Doe
### Experience
**Senior Engineer at Acme**
Built things."""


class FakeRateLimit(Exception):
    pass


class ProviderError(Exception):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class FakeProvider(LLMProvider):
    """Provider that records prompts and returns canned text (or raises)."""

    _provider_prefix = "fake"
    _retryable_exception = FakeRateLimit
    _retry_message = "Fake rate limit"

    def __init__(self, content=GENERATED_RESUME, error=None):
        self.content = content
        self.error = error
        self.calls = []
        self.update_model("fake-model")

    def _call_api(self, system_prompt, user_prompt):
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, model=self.model, input_tokens=10, output_tokens=20)


@pytest.mark.unit
class TestPrompts:
    """Prompt construction per action and tone."""

    def test_generate_prompt_carries_fields_and_tone(self):
        profile = CareerProfile(name="Jane Doe", email="jane@example.com", skills="Python")
        system_prompt, user_prompt = build_prompts("generate", profile.to_dict(), "creative")

        assert "Tone: creative" in system_prompt
        assert "'### '" in system_prompt
        assert json.dumps(profile.to_dict(), indent=2) in user_prompt

    def test_enhance_prompt_carries_text(self):
        system_prompt, user_prompt = build_prompts(GenerationAction.ENHANCE, "Old resume", Tone.SIMPLE)

        assert "enhance" in system_prompt
        assert "Tone: simple" in system_prompt
        assert user_prompt.endswith("Old resume")

    def test_invalid_action(self):
        with pytest.raises(GenerationError, match="Invalid action"):
            build_prompts("summarize", "text")

    def test_resolve_tone(self):
        assert resolve_tone("Professional") is Tone.PROFESSIONAL
        with pytest.raises(GenerationError, match="Invalid tone"):
            resolve_tone("sarcastic")


@pytest.mark.unit
class TestResumeGenerator:
    """Generator behavior around the provider."""

    def test_generate_returns_parseable_text(self):
        provider = FakeProvider()
        text = ResumeGenerator(provider).generate(CareerProfile(name="Jane Doe"), tone="creative")

        assert text == GENERATED_RESUME
        assert parse(text).title == "Jane Doe"
        assert "Tone: creative" in provider.calls[0][0]

    def test_enhance(self):
        provider = FakeProvider(content="  ## Jane Doe\n### Summary\nBetter.\n\n")
        text = ResumeGenerator(provider).enhance("Jane Doe, engineer")

        assert text == "## Jane Doe\n### Summary\nBetter."
        assert provider.calls[0][1].endswith("Jane Doe, engineer")

    def test_generate_requires_name(self):
        provider = FakeProvider()
        with pytest.raises(GenerationError, match="name is required"):
            ResumeGenerator(provider).generate(CareerProfile(name="  "))
        assert provider.calls == []

    @pytest.mark.parametrize("text", ["", "   \n", None])
    def test_enhance_rejects_empty_text(self, text):
        with pytest.raises(GenerationError, match="No resume text"):
            ResumeGenerator(FakeProvider()).enhance(text)

    def test_invalid_tone_before_provider_call(self):
        provider = FakeProvider()
        with pytest.raises(GenerationError, match="Invalid tone"):
            ResumeGenerator(provider).enhance("text", tone="loud")
        assert provider.calls == []

    @pytest.mark.parametrize(
        "status, message",
        [
            (429, "Rate limits exceeded, please try again later."),
            (402, "Payment required, please add funds to your workspace."),
            (500, "AI gateway error"),
            (None, "AI gateway error"),
        ],
    )
    def test_provider_errors(self, status, message):
        provider = FakeProvider(error=ProviderError("upstream", status_code=status))

        with pytest.raises(GenerationError) as excinfo:
            ResumeGenerator(provider).enhance("text")

        assert excinfo.value.message == message
        assert excinfo.value.status_code == status
        assert isinstance(excinfo.value.original_error, ProviderError)

    def test_empty_response(self):
        with pytest.raises(GenerationError, match="empty resume"):
            ResumeGenerator(FakeProvider(content="  ")).enhance("text")

    def test_rate_limit_retried(self, monkeypatch):
        monkeypatch.setattr("quire.utils.llm.time.sleep", lambda seconds: None)

        class FlakyProvider(FakeProvider):
            def _call_api(self, system_prompt, user_prompt):
                if not self.calls:
                    self.calls.append((system_prompt, user_prompt))
                    raise FakeRateLimit()
                return super()._call_api(system_prompt, user_prompt)

        provider = FlakyProvider()
        assert ResumeGenerator(provider).enhance("text") == GENERATED_RESUME
        assert len(provider.calls) == 2
