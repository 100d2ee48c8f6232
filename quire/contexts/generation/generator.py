"""
Resume Generator

Asks an LLM to write a resume body from career fields, or to enhance text from
an uploaded resume. The returned text is what the templating context parses.
"""

import time
from dataclasses import asdict, dataclass
from typing import Optional, Union

from quire.contexts.generation.exceptions import GenerationError
from quire.contexts.generation.logger import (
    _log_debug,
    log_generation_result,
    log_generation_start,
)
from quire.contexts.generation.prompts import GenerationAction, Tone, build_prompts, resolve_tone
from quire.utils.llm import LLMProvider, get_provider

# User-facing messages for provider statuses
STATUS_MESSAGES = {
    429: "Rate limits exceeded, please try again later.",
    402: "Payment required, please add funds to your workspace.",
}


@dataclass
class CareerProfile:
    """Structured career fields collected from the user."""

    name: str
    email: str = ""
    phone: str = ""
    summary: str = ""
    experience: str = ""
    education: str = ""
    skills: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


def _status_code(error: Exception) -> Optional[int]:
    """HTTP status carried by an SDK exception, if any."""
    status = getattr(error, "status_code", None)
    if status is None:
        response = getattr(error, "response", None)
        status = getattr(response, "status_code", None)
    return status if isinstance(status, int) else None


class ResumeGenerator:
    """
    Generate or enhance resume text through an LLM provider.

    Usage:
        generator = ResumeGenerator()
        text = generator.generate(CareerProfile(name="Jane Doe", ...), tone="creative")
    """

    def __init__(self, provider: Optional[LLMProvider] = None):
        """
        Args:
            provider: LLM provider (default: get_provider() from environment)
        """
        self.provider = provider if provider is not None else get_provider()

    def _run(self, action: GenerationAction, content, tone: Union[Tone, str]) -> str:
        tone = resolve_tone(tone)
        system_prompt, user_prompt = build_prompts(action, content, tone)
        log_generation_start(action.value, self.provider.name, tone.value)

        start_time = time.time()
        try:
            response = self.provider.generate(system_prompt, user_prompt)
        except GenerationError:
            raise
        except Exception as e:
            status = _status_code(e)
            message = STATUS_MESSAGES.get(status, "AI gateway error")
            log_generation_result(action.value, None, time.time() - start_time, error=message)
            raise GenerationError(message, status_code=status, original_error=e) from e

        text = (response.content or "").strip()
        if not text:
            log_generation_result(action.value, response, time.time() - start_time, error="empty")
            raise GenerationError("AI returned an empty resume")

        log_generation_result(action.value, response, time.time() - start_time)
        _log_debug(f"Generated {len(text)} chars")
        return text

    def generate(self, profile: CareerProfile, tone: Union[Tone, str] = Tone.PROFESSIONAL) -> str:
        """
        Write a resume body from career fields.

        Raises:
            GenerationError: If the profile has no name or the provider fails
        """
        if not profile.name.strip():
            raise GenerationError("A name is required to generate a resume")
        return self._run(GenerationAction.GENERATE, profile.to_dict(), tone)

    def enhance(self, text: str, tone: Union[Tone, str] = Tone.PROFESSIONAL) -> str:
        """
        Polish existing resume text.

        Raises:
            GenerationError: If text is empty or the provider fails
        """
        if not isinstance(text, str) or not text.strip():
            raise GenerationError("No resume text to enhance")
        return self._run(GenerationAction.ENHANCE, text, tone)
