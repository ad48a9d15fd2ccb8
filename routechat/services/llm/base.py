"""LLM 서비스 기본 인터페이스"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TypeVar

from pydantic import BaseModel

TSchema = TypeVar("TSchema", bound=BaseModel)


@dataclass(frozen=True)
class Message:
    """채팅 메시지"""

    role: str  # "system" | "user" | "assistant"
    content: str


@dataclass
class LLMResponse:
    """LLM 응답 데이터 클래스"""

    content: str
    model: str | None = None
    usage: dict | None = None
    metadata: dict | None = None


class BaseLLMService(ABC):
    """LLM 서비스 기본 추상 클래스"""

    @abstractmethod
    def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """메시지를 기반으로 응답 생성 (동기, 논-스트리밍)

        Args:
            messages: 대화 메시지 리스트
            **kwargs: 추가 파라미터 (temperature, max_tokens 등)

        Returns:
            LLMResponse 객체
        """
        pass

    @abstractmethod
    def generate_structured(
        self, messages: list[Message], schema: type[TSchema], **kwargs
    ) -> TSchema:
        """스키마에 맞는 구조화 응답 생성

        Args:
            messages: 대화 메시지 리스트
            schema: 응답을 검증할 Pydantic 모델 클래스
            **kwargs: 추가 파라미터

        Returns:
            schema 인스턴스

        Raises:
            pydantic.ValidationError: 응답이 스키마와 맞지 않을 때
        """
        pass
