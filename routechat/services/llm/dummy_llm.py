"""더미 LLM 구현 (오프라인 실행/테스트용)"""

from enum import Enum
from typing import Literal, get_args, get_origin

from .base import BaseLLMService, LLMResponse, Message, TSchema


class DummyLLM(BaseLLMService):
    """테스트용 더미 LLM 서비스

    API 키 없이 CLI 흐름을 확인할 때 사용합니다.
    """

    def _last_user_message(self, messages: list[Message]) -> str:
        for msg in reversed(messages):
            if msg.role == "user":
                return msg.content
        return ""

    def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """더미 응답 생성

        Args:
            messages: 대화 메시지 리스트
            **kwargs: 추가 파라미터 (무시됨)

        Returns:
            LLMResponse 객체
        """
        user_message = self._last_user_message(messages)

        response_text = (
            "[더미 응답 모드 - 실제 LLM 대신 테스트용 응답입니다]\n"
            f"{user_message[:100]}"
        )

        return LLMResponse(
            content=response_text,
            model="dummy-model",
            usage={"prompt_tokens": 0, "completion_tokens": 0, "total_tokens": 0},
            metadata={"provider": "dummy"},
        )

    def generate_structured(
        self, messages: list[Message], schema: type[TSchema], **kwargs
    ) -> TSchema:
        """선택지 필드(Literal/Enum)를 채운 더미 구조화 응답

        사용자 메시지에 선택지 이름이 포함되어 있으면 그 값을,
        아니면 첫 번째 선택지를 사용합니다.
        """
        user_message = self._last_user_message(messages).lower()
        data = {}

        for name, field in schema.model_fields.items():
            choices = _field_choices(field.annotation)
            if not choices:
                continue
            matched = [c for c in choices if c.replace("_", " ") in user_message]
            data[name] = matched[0] if matched else choices[0]

        return schema.model_validate(data)


def _field_choices(annotation) -> list[str]:
    if get_origin(annotation) is Literal:
        return [str(arg) for arg in get_args(annotation)]
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return [str(member.value) for member in annotation]
    return []
