"""의도별 응답기 (Responder)

각 응답기는 고정 페르소나 지시문과 마지막 사용자 메시지로
LLM을 한 번 호출하고, 그 결과를 assistant 메시지로 돌려줍니다.
"""

import logging
from typing import TYPE_CHECKING

from routechat.models.contacts import ContactBook
from routechat.prompts import (
    CONTACT_SYSTEM_PROMPT_TEMPLATE,
    EMOTIONAL_SYSTEM_PROMPT,
    GENERAL_SYSTEM_PROMPT,
    LOGICAL_SYSTEM_PROMPT,
    format_contact_input,
    format_persona_input,
)
from routechat.services.llm.base import Message

from .models import ChatGraphState, last_message_text

if TYPE_CHECKING:
    from routechat.services.llm.base import BaseLLMService

logger = logging.getLogger(__name__)


class PersonaResponder:
    """페르소나 기반 응답 생성기 (공통 베이스)"""

    name = "persona"
    system_prompt = ""

    def __init__(self, llm_service: "BaseLLMService"):
        """
        Args:
            llm_service: LLM 서비스 인스턴스
        """
        self.llm_service = llm_service

    def generate(self, messages: list[Message]) -> Message:
        """마지막 메시지에 대한 응답 생성

        Args:
            messages: 대화 히스토리 (마지막 항목이 현재 사용자 입력)

        Returns:
            assistant 메시지
        """
        logger.debug("responder=%s history_len=%d", self.name, len(messages))

        response = self.llm_service.generate(self._build_messages(last_message_text(messages)))

        return Message(role="assistant", content=response.content)

    def as_node(self, state: ChatGraphState) -> dict:
        """LangGraph 노드: 응답을 messages 채널에 추가"""
        return {"messages": [self.generate(state["messages"])]}

    def _build_messages(self, user_message: str) -> list[Message]:
        return [
            Message(role="system", content=self.get_system_prompt()),
            Message(role="user", content=format_persona_input(user_message)),
        ]

    def get_system_prompt(self) -> str:
        return self.system_prompt


class LogicalResponder(PersonaResponder):
    """사실/정보 중심 응답기 (기본 라우트)"""

    name = "logical"
    system_prompt = LOGICAL_SYSTEM_PROMPT


class EmotionalResponder(PersonaResponder):
    """공감/감정 지지 응답기"""

    name = "emotional"
    system_prompt = EMOTIONAL_SYSTEM_PROMPT


class GeneralResponder(PersonaResponder):
    """인사/잡담 응답기"""

    name = "general"
    system_prompt = GENERAL_SYSTEM_PROMPT


class ContactResponder(PersonaResponder):
    """연락처 조회 응답기

    주입된 ContactBook을 JSON으로 시스템 프롬프트에 포함합니다.
    """

    name = "contact_request"

    def __init__(self, llm_service: "BaseLLMService", contact_book: ContactBook):
        """
        Args:
            llm_service: LLM 서비스 인스턴스
            contact_book: 읽기 전용 연락처 목록
        """
        super().__init__(llm_service)
        self.contact_book = contact_book

    def get_system_prompt(self) -> str:
        return CONTACT_SYSTEM_PROMPT_TEMPLATE.format(contacts=self.contact_book.to_json())

    def _build_messages(self, user_message: str) -> list[Message]:
        return [
            Message(role="system", content=self.get_system_prompt()),
            Message(role="user", content=format_contact_input(user_message)),
        ]
