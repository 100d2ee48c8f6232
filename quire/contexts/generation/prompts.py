"""
Prompts for resume generation and enhancement.

Two actions are supported:
    generate  Write a resume from structured career fields.
    enhance   Polish text extracted from an uploaded resume.
"""

import json
from enum import Enum
from typing import Any, Tuple, Union

from quire.contexts.generation.exceptions import GenerationError


class Tone(Enum):
    """Writing register requested from the model."""

    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    SIMPLE = "simple"


class GenerationAction(Enum):
    GENERATE = "generate"
    ENHANCE = "enhance"


ENHANCE_SYSTEM_PROMPT = (
    "You are an expert resume writer and career consultant. Your task is to enhance "
    "the provided resume content by improving grammar, phrasing, impact statements, "
    "and overall professional presentation. Maintain the original structure but make "
    "the content more compelling and ATS-friendly. Tone: {tone}."
)

GENERATE_SYSTEM_PROMPT = (
    "You are an expert resume writer. Create a professional, well-structured resume "
    "based on the provided information. Use strong action verbs, quantify achievements "
    "where possible, and format in a clear, ATS-friendly manner. Tone: {tone}."
)

# Output layout the parser understands
FORMAT_INSTRUCTIONS = (
    " Format the resume with the person's name on a line starting with '## ', each "
    "section heading on a line starting with '### ', and employer or degree lines "
    "wrapped in ** on their own line."
)

ENHANCE_USER_PROMPT = "Please enhance this resume:\n\n{content}"
GENERATE_USER_PROMPT = "Generate a professional resume with this information:\n\n{content}"


def resolve_tone(tone: Union[Tone, str]) -> Tone:
    """Accept a Tone or its case-insensitive value."""
    if isinstance(tone, Tone):
        return tone
    try:
        return Tone(str(tone).strip().lower())
    except ValueError:
        raise GenerationError(f"Invalid tone: {tone!r}")


def build_prompts(
    action: Union[GenerationAction, str],
    content: Any,
    tone: Union[Tone, str] = Tone.PROFESSIONAL,
) -> Tuple[str, str]:
    """
    Build the system and user prompts for an action.

    Args:
        action: "generate" or "enhance"
        content: Career fields (dict) for generate, resume text for enhance
        tone: Writing register

    Returns:
        (system_prompt, user_prompt)

    Raises:
        GenerationError: If action or tone is unknown
    """
    try:
        action = GenerationAction(action) if not isinstance(action, GenerationAction) else action
    except ValueError:
        raise GenerationError("Invalid action")
    tone = resolve_tone(tone)

    if action is GenerationAction.ENHANCE:
        system_prompt = ENHANCE_SYSTEM_PROMPT.format(tone=tone.value) + FORMAT_INSTRUCTIONS
        user_prompt = ENHANCE_USER_PROMPT.format(content=content)
    else:
        system_prompt = GENERATE_SYSTEM_PROMPT.format(tone=tone.value) + FORMAT_INSTRUCTIONS
        user_prompt = GENERATE_USER_PROMPT.format(content=json.dumps(content, indent=2))

    return system_prompt, user_prompt
