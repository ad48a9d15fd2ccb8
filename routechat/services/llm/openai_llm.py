"""OpenAI API LLM 구현"""

import logging

from openai import OpenAI

from routechat.settings import settings

from .base import BaseLLMService, LLMResponse, Message, TSchema

logger = logging.getLogger(__name__)


class OpenAILLM(BaseLLMService):
    """OpenAI API를 사용한 LLM 서비스"""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
    ):
        """OpenAI 클라이언트 초기화

        Args:
            api_key: OpenAI API 키 (None이면 설정값 사용)
            model: 모델명 (None이면 설정값 사용)
            temperature: 기본 temperature (None이면 설정값 사용)
        """
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.openai_model
        self.temperature = settings.llm_temperature if temperature is None else temperature
        self.client = OpenAI(api_key=self.api_key)

    def _to_openai_messages(self, messages: list[Message]) -> list[dict]:
        return [{"role": msg.role, "content": msg.content} for msg in messages]

    def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """메시지를 기반으로 응답 생성 (동기, 논-스트리밍)

        Args:
            messages: 대화 메시지 리스트
            **kwargs: 추가 파라미터 (temperature, max_tokens 등)

        Returns:
            LLMResponse 객체
        """
        kwargs.setdefault("temperature", self.temperature)

        # API 호출
        response = self.client.chat.completions.create(
            model=self.model, messages=self._to_openai_messages(messages), **kwargs
        )

        # 응답 변환
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=response.model,
            usage={
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            },
            metadata={"provider": "openai"},
        )

    def generate_structured(
        self, messages: list[Message], schema: type[TSchema], **kwargs
    ) -> TSchema:
        """Structured Outputs(response_format)로 스키마 응답 생성

        Args:
            messages: 대화 메시지 리스트
            schema: 응답 Pydantic 모델 클래스
            **kwargs: 추가 파라미터

        Returns:
            schema 인스턴스

        Raises:
            ValueError: 모델이 응답을 거부했거나 파싱 결과가 없을 때
        """
        kwargs.setdefault("temperature", self.temperature)

        response = self.client.chat.completions.parse(
            model=self.model,
            messages=self._to_openai_messages(messages),
            response_format=schema,
            **kwargs,
        )

        message = response.choices[0].message
        if message.parsed is None:
            # refusal 또는 빈 응답
            raise ValueError(f"구조화 응답을 받지 못했습니다: {message.refusal!r}")

        logger.debug("structured response model=%s parsed=%s", response.model, message.parsed)
        return message.parsed
