"""오케스트레이션 데이터 모델"""

import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, TypedDict

from pydantic import BaseModel, Field

from routechat.services.llm.base import Message


class IntentType(str, Enum):
    """사용자 의도 유형 (닫힌 집합)"""

    EMOTIONAL = "emotional"  # 감정적 지지, 감정 표현
    LOGICAL = "logical"  # 사실/정보 질문, 그 외 모든 질의
    GENERAL = "general"  # 인사, 가벼운 잡담
    CONTACT_REQUEST = "contact_request"  # 연락처/전화번호 요청

    @classmethod
    def parse(cls, value: "str | IntentType | None") -> "IntentType | None":
        """문자열을 IntentType으로 변환 (집합에 없으면 None)"""
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class IntentClassification(BaseModel):
    """Classify the latest user message into exactly one intent label."""

    intent: IntentType = Field(description="Intent label of the user message")


@dataclass
class Intent:
    """의도 분류 결과"""

    intent_type: IntentType
    raw_response: str | None = None  # LLM 원본 응답 (디버깅용)


@dataclass
class ConversationState:
    """세션 대화 상태

    messages는 추가만 가능합니다. intent는 매 턴 라우터가 덮어씁니다.
    """

    messages: list[Message] = field(default_factory=list)
    intent: IntentType | None = None

    def append(self, message: Message) -> None:
        """메시지 추가 (기존 항목은 변경/삭제하지 않음)"""
        self.messages.append(message)

    def add_user_message(self, content: str) -> Message:
        message = Message(role="user", content=content)
        self.append(message)
        return message

    @property
    def last_message(self) -> Message | None:
        return self.messages[-1] if self.messages else None

    def history(self) -> tuple[Message, ...]:
        """읽기 전용 히스토리 스냅샷"""
        return tuple(self.messages)


class ChatGraphState(TypedDict):
    """LangGraph 한 턴 동안 흐르는 상태

    - messages: 응답 노드가 반환한 메시지가 뒤에 이어 붙습니다
    - intent: 분류 노드가 채우는 의도 라벨
    """

    messages: Annotated[list[Message], operator.add]
    intent: IntentType | None


def last_message_text(messages: list[Message]) -> str:
    """마지막 메시지 본문 (대화 시작 전이면 빈 문자열)"""
    return messages[-1].content if messages else ""
