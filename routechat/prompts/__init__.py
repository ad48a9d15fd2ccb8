"""프롬프트 템플릿 모음"""

from .intent import INTENT_CLASSIFICATION_PROMPT, format_classification_input
from .personas import (
    CONTACT_SYSTEM_PROMPT_TEMPLATE,
    EMOTIONAL_SYSTEM_PROMPT,
    GENERAL_SYSTEM_PROMPT,
    LOGICAL_SYSTEM_PROMPT,
    format_contact_input,
    format_persona_input,
)

__all__ = [
    "INTENT_CLASSIFICATION_PROMPT",
    "format_classification_input",
    "CONTACT_SYSTEM_PROMPT_TEMPLATE",
    "EMOTIONAL_SYSTEM_PROMPT",
    "GENERAL_SYSTEM_PROMPT",
    "LOGICAL_SYSTEM_PROMPT",
    "format_contact_input",
    "format_persona_input",
]
