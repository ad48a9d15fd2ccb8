"""채팅 세션

대화 히스토리를 소유하고, 한 줄 입력마다 그래프를 한 번 실행합니다.
"""

import logging
from typing import Any, Callable

from routechat.services.llm.base import Message

from .models import ConversationState
from .router import Router

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
USER_PROMPT = "👤 Kamu: "
BOT_PREFIX = "🤖 Bot:"
FAREWELL = "👋 Chat selesai."


def is_exit_command(text: str) -> bool:
    """종료 명령 여부

    대소문자뿐 아니라 앞뒤 공백도 무시합니다 (" exit "도 종료).
    """
    return text.strip().lower() == EXIT_COMMAND


class ChatSession:
    """단일 프로세스 채팅 세션"""

    def __init__(self, router: Router, state: ConversationState | None = None):
        """
        Args:
            router: 의도 라우터
            state: 초기 대화 상태 (None이면 빈 상태)
        """
        self.router = router
        self.state = state if state is not None else ConversationState()
        self.graph: Any = router.build_graph()

    def send(self, text: str) -> Message:
        """사용자 메시지 한 턴 처리

        Args:
            text: 사용자 입력

        Returns:
            새로 추가된 assistant 메시지

        Raises:
            LLM/스키마 오류는 그대로 전파됩니다 (해당 턴 실패).
        """
        self.state.add_user_message(text)

        result = self.graph.invoke({"messages": list(self.state.messages), "intent": None})

        reply = result["messages"][-1]
        self.state.append(reply)
        self.state.intent = result.get("intent")
        route_info = self.router.get_route_info(self.state.intent)
        logger.info(
            "turn done intent=%s route=%s fallback=%s history_len=%d",
            route_info["intent"],
            route_info["route"],
            route_info["is_fallback"],
            len(self.state.messages),
        )
        return reply

    def run(
        self,
        read_line: Callable[[str], str] | None = None,
        write: Callable[..., None] | None = None,
    ) -> None:
        """블로킹 입력 루프

        "exit"(대소문자 무관) 또는 입력 종료(EOF) 시 끝납니다.

        Args:
            read_line: 프롬프트를 받아 한 줄을 돌려주는 함수
            write: 출력 함수
        """
        read_line = read_line or input
        write = write or print

        while True:
            try:
                user_input = read_line(USER_PROMPT)
            except EOFError:
                write(FAREWELL)
                break

            if is_exit_command(user_input):
                write(FAREWELL)
                break

            reply = self.send(user_input)
            write(BOT_PREFIX, reply.content)
