"""의도 분류기 (IntentClassifier)

사용자 메시지의 의도를 LLM 구조화 출력으로 분류합니다.
라벨은 IntentType 닫힌 집합으로 제한됩니다.
"""

import logging
from typing import TYPE_CHECKING

from routechat.prompts import INTENT_CLASSIFICATION_PROMPT, format_classification_input
from routechat.services.llm.base import Message

from .models import Intent, IntentClassification

if TYPE_CHECKING:
    from routechat.services.llm.base import BaseLLMService

logger = logging.getLogger(__name__)


class IntentClassifier:
    """LLM 기반 의도 분류기"""

    def __init__(self, llm_service: "BaseLLMService"):
        """
        Args:
            llm_service: LLM 서비스 인스턴스
        """
        self.llm_service = llm_service

    def classify(self, user_input: str) -> Intent:
        """사용자 입력의 의도를 분류

        LLM 호출 실패나 스키마 검증 실패는 그대로 전파됩니다.

        Args:
            user_input: 사용자 입력 텍스트

        Returns:
            Intent 객체
        """
        messages = self._build_messages(user_input)

        result = self.llm_service.generate_structured(messages, IntentClassification)

        logger.info("intent classified: %s", result.intent.value)
        return Intent(
            intent_type=result.intent,
            raw_response=result.model_dump_json(),
        )

    def _build_messages(self, user_input: str) -> list[Message]:
        return [
            Message(role="system", content=INTENT_CLASSIFICATION_PROMPT),
            Message(role="user", content=format_classification_input(user_input)),
        ]
