"""Anthropic API LLM 구현"""

from anthropic import Anthropic

from routechat.settings import settings

from .base import BaseLLMService, LLMResponse, Message, TSchema


class AnthropicLLM(BaseLLMService):
    """Anthropic API를 사용한 LLM 서비스"""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
    ):
        """Anthropic 클라이언트 초기화

        Args:
            api_key: Anthropic API 키 (None이면 설정값 사용)
            model: 모델명 (None이면 설정값 사용)
            temperature: 기본 temperature (None이면 설정값 사용)
        """
        self.api_key = api_key or settings.anthropic_api_key
        self.model = model or settings.anthropic_model
        self.temperature = settings.llm_temperature if temperature is None else temperature
        self.client = Anthropic(api_key=self.api_key)

    def _split_messages(self, messages: list[Message]) -> tuple[str | None, list[dict]]:
        """system 메시지 분리"""
        system_message = None
        conversation_messages = []

        for msg in messages:
            if msg.role == "system":
                system_message = msg.content
            else:
                conversation_messages.append({"role": msg.role, "content": msg.content})

        return system_message, conversation_messages

    def _create(self, messages: list[Message], **kwargs):
        system_message, conversation_messages = self._split_messages(messages)
        if system_message is not None:
            kwargs["system"] = system_message
        kwargs.setdefault("temperature", self.temperature)

        return self.client.messages.create(
            model=self.model,
            max_tokens=kwargs.pop("max_tokens", 4096),
            messages=conversation_messages,
            **kwargs,
        )

    def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """메시지를 기반으로 응답 생성

        Args:
            messages: 대화 메시지 리스트
            **kwargs: 추가 파라미터 (temperature, max_tokens 등)

        Returns:
            LLMResponse 객체
        """
        response = self._create(messages, **kwargs)

        # 응답 변환
        return LLMResponse(
            content=response.content[0].text,
            model=response.model,
            usage={
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
            },
            metadata={"provider": "anthropic", "stop_reason": response.stop_reason},
        )

    def generate_structured(
        self, messages: list[Message], schema: type[TSchema], **kwargs
    ) -> TSchema:
        """강제 tool 호출로 스키마 응답 생성

        스키마의 JSON Schema를 tool 입력 스키마로 넘기고,
        모델이 반드시 해당 tool을 호출하도록 tool_choice를 고정합니다.

        Args:
            messages: 대화 메시지 리스트
            schema: 응답 Pydantic 모델 클래스
            **kwargs: 추가 파라미터

        Returns:
            schema 인스턴스
        """
        tool_name = schema.__name__
        response = self._create(
            messages,
            tools=[
                {
                    "name": tool_name,
                    "description": schema.__doc__ or tool_name,
                    "input_schema": schema.model_json_schema(),
                }
            ],
            tool_choice={"type": "tool", "name": tool_name},
            **kwargs,
        )

        for block in response.content:
            if block.type == "tool_use" and block.name == tool_name:
                return schema.model_validate(block.input)

        raise ValueError(f"{tool_name} tool 호출 결과가 응답에 없습니다")
