"""
Generation Context

Responsibilities:
- Builds prompts for resume generation and enhancement
- Calls the LLM provider and returns resume body text
- Maps provider failures to user-facing errors

Owns: Prompts, tone selection, AI collaborator calls
Never: Parses or renders resume text
"""

from quire.contexts.generation.exceptions import GenerationError
from quire.contexts.generation.generator import CareerProfile, ResumeGenerator
from quire.contexts.generation.prompts import GenerationAction, Tone, build_prompts, resolve_tone

__all__ = [
    "ResumeGenerator",
    "CareerProfile",
    "GenerationAction",
    "Tone",
    "build_prompts",
    "resolve_tone",
    "GenerationError",
]
