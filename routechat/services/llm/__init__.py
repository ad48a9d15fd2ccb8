"""LLM 서비스 레이어"""

from .base import BaseLLMService, LLMResponse, Message
from .factory import get_llm_service

__all__ = ["BaseLLMService", "LLMResponse", "Message", "get_llm_service"]
