"""라우터 (Router)

의도 분류 결과를 정적 라우팅 테이블로 조회해 응답기를 선택하고,
분류 → 응답 한 턴을 LangGraph 그래프로 구성합니다.

흐름: START → classifier → (emotional | logical | general | contact_request) → END
"""

import logging
from typing import TYPE_CHECKING, Any

from langgraph.graph import END, START, StateGraph

from routechat.models.contacts import ContactBook

from .intent_classifier import IntentClassifier
from .models import ChatGraphState, IntentType, last_message_text
from .responders import (
    ContactResponder,
    EmotionalResponder,
    GeneralResponder,
    LogicalResponder,
    PersonaResponder,
)

if TYPE_CHECKING:
    from routechat.services.llm.base import BaseLLMService

logger = logging.getLogger(__name__)

# 라벨 → 라우트(노드) 이름
ROUTES: dict[IntentType, str] = {
    IntentType.EMOTIONAL: "emotional",
    IntentType.LOGICAL: "logical",
    IntentType.GENERAL: "general",
    IntentType.CONTACT_REQUEST: "contact_request",
}

DEFAULT_ROUTE = ROUTES[IntentType.LOGICAL]

CLASSIFIER_NODE = "classifier"


class Router:
    """의도 라우터

    분류기와 라벨별 응답기를 소유하고, 라벨로 다음 단계를 고릅니다.
    """

    def __init__(self, llm_service: "BaseLLMService", contact_book: ContactBook | None = None):
        """
        Args:
            llm_service: LLM 서비스 인스턴스
            contact_book: 연락처 응답기에 주입할 연락처 (None이면 기본 연락처)
        """
        self.llm_service = llm_service
        self.contact_book = contact_book if contact_book is not None else ContactBook.default()

        # 각 컴포넌트 초기화
        self.intent_classifier = IntentClassifier(llm_service)
        self.responders: dict[str, PersonaResponder] = {
            "emotional": EmotionalResponder(llm_service),
            "logical": LogicalResponder(llm_service),
            "general": GeneralResponder(llm_service),
            "contact_request": ContactResponder(llm_service, self.contact_book),
        }

    @staticmethod
    def select_route(intent: "IntentType | str | None") -> str:
        """라벨로 라우트 이름 조회 (없거나 모르는 라벨이면 기본 라우트)"""
        intent_type = IntentType.parse(intent)
        if intent_type is None:
            logger.debug("unknown intent %r, falling back to %s", intent, DEFAULT_ROUTE)
            return DEFAULT_ROUTE
        return ROUTES[intent_type]

    def route_key(self, state: ChatGraphState) -> str:
        """조건부 엣지용 라우팅 함수"""
        return self.select_route(state.get("intent"))

    def classifier_node(self, state: ChatGraphState) -> dict:
        """LangGraph 노드: 마지막 메시지를 분류해 intent를 덮어씀"""
        intent = self.intent_classifier.classify(last_message_text(state["messages"]))
        return {"intent": intent.intent_type}

    def build_graph(self) -> Any:
        """분류 → 응답 그래프를 구성해 컴파일합니다."""
        graph = StateGraph(ChatGraphState)
        graph.add_node(CLASSIFIER_NODE, self.classifier_node)
        for route_name, responder in self.responders.items():
            graph.add_node(route_name, responder.as_node)

        graph.add_edge(START, CLASSIFIER_NODE)
        graph.add_conditional_edges(
            CLASSIFIER_NODE,
            self.route_key,
            {route_name: route_name for route_name in self.responders},
        )
        for route_name in self.responders:
            graph.add_edge(route_name, END)

        return graph.compile()

    def get_route_info(self, intent: "IntentType | str | None") -> dict:
        """라우팅 정보 반환 (디버깅/로깅용)"""
        route = self.select_route(intent)
        return {
            "intent": intent.value if isinstance(intent, IntentType) else intent,
            "route": route,
            "responder": type(self.responders[route]).__name__,
            "is_fallback": IntentType.parse(intent) is None,
        }
