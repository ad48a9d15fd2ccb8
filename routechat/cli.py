"""대화형 CLI 진입점

사용법:
    routechat            # .env / 환경변수 설정 사용
    LLM_PROVIDER=dummy routechat
"""
from __future__ import annotations

import logging
import sys

from routechat.models.contacts import load_contact_book
from routechat.services.llm.factory import get_llm_service
from routechat.services.orchestration import ChatSession, Router
from routechat.settings import Settings, settings, validate_settings
from routechat.utils.runtime import setup_logging

logger = logging.getLogger("routechat.cli")

EXIT_OK = 0
EXIT_TURN_FAILED = 1
EXIT_CONFIG_ERROR = 3


def build_session(current: Settings | None = None) -> ChatSession:
    """설정으로 LLM 서비스/연락처/라우터를 조립해 세션 생성"""
    current = current or settings
    llm_service = get_llm_service(current)
    contact_book = load_contact_book(current.contacts_file)
    return ChatSession(Router(llm_service, contact_book))


def main() -> int:
    setup_logging(settings.log_config_file, settings.log_level)

    warnings = validate_settings(settings)
    if warnings:
        for area, message in warnings.items():
            print(f"ERROR[{area}]: {message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        session = build_session(settings)
    except (OSError, ValueError) as e:
        # 연락처 파일 JSON/형식 오류 (JSONDecodeError, ValidationError 모두 ValueError)
        print(f"ERROR[contacts]: 연락처 파일을 불러오지 못했습니다: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        session.run()
    except KeyboardInterrupt:
        print()
        return EXIT_OK
    except Exception as e:
        logger.exception("turn failed")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_TURN_FAILED
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
