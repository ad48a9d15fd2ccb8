"""LLM 서비스 팩토리"""

from routechat.settings import Settings, settings

from .anthropic_llm import AnthropicLLM
from .base import BaseLLMService
from .dummy_llm import DummyLLM
from .openai_llm import OpenAILLM


def get_llm_service(current: Settings | None = None) -> BaseLLMService:
    """설정에 따라 적절한 LLM 서비스 반환

    Args:
        current: 사용할 설정 (None이면 전역 설정)

    Returns:
        BaseLLMService 인스턴스
    """
    current = current or settings

    if current.llm_provider == "openai":
        return OpenAILLM(
            api_key=current.openai_api_key,
            model=current.openai_model,
            temperature=current.llm_temperature,
        )
    elif current.llm_provider == "anthropic":
        return AnthropicLLM(
            api_key=current.anthropic_api_key,
            model=current.anthropic_model,
            temperature=current.llm_temperature,
        )
    elif current.llm_provider == "dummy":
        return DummyLLM()
    else:
        raise ValueError(f"지원하지 않는 LLM 제공자: {current.llm_provider}")
