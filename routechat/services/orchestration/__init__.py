"""오케스트레이션 레이어

의도분류 → 라우팅 → 응답생성 파이프라인을 관리합니다.

구성:
- IntentClassifier: 사용자 입력의 의도를 닫힌 라벨 집합으로 분류
- *Responder: 라벨별 페르소나로 응답 생성 (연락처 응답기는 ContactBook 주입)
- Router: 라벨 → 응답기 정적 라우팅 테이블과 LangGraph 그래프 구성
- ChatSession: 대화 히스토리를 소유하는 블로킹 입력 루프
"""

from .models import ConversationState, Intent, IntentClassification, IntentType
from .intent_classifier import IntentClassifier
from .responders import (
    ContactResponder,
    EmotionalResponder,
    GeneralResponder,
    LogicalResponder,
    PersonaResponder,
)
from .router import DEFAULT_ROUTE, ROUTES, Router
from .session import ChatSession, is_exit_command

__all__ = [
    "ConversationState",
    "Intent",
    "IntentClassification",
    "IntentType",
    "IntentClassifier",
    "PersonaResponder",
    "LogicalResponder",
    "EmotionalResponder",
    "GeneralResponder",
    "ContactResponder",
    "DEFAULT_ROUTE",
    "ROUTES",
    "Router",
    "ChatSession",
    "is_exit_command",
]
