"""의도 분류 프롬프트"""

INTENT_CLASSIFICATION_PROMPT = """Classify the user message as either:
- 'emotional': for emotional support or feelings
- 'logical': for facts, information, or general queries not covered by the above
- 'general': for greetings (e.g., "hello", "hi") or simple small talk
- 'contact_request': if the user asks for contact information, phone number, contact list
"""


def format_classification_input(user_message: str) -> str:
    return f'Message: "{user_message}"'
