"""테스트 픽스처 및 설정"""

from unittest.mock import Mock

import pytest

from routechat.models.contacts import ContactBook
from routechat.services.llm.base import LLMResponse
from routechat.services.llm.dummy_llm import DummyLLM
from routechat.services.orchestration.models import IntentClassification, IntentType


@pytest.fixture
def dummy_llm_service():
    """더미 LLM 서비스 픽스처"""
    return DummyLLM()


@pytest.fixture
def contact_book():
    """테스트용 연락처 픽스처"""
    return ContactBook.from_list([
        {"name": "Citra", "phone": "0811111111", "city": "Parepare"},
        {"name": "Dewi", "phone": "0822222222", "city": "Gowa"},
    ])


@pytest.fixture
def make_llm_service():
    """고정 라벨/고정 응답을 돌려주는 Mock LLM 서비스 팩토리"""

    def _make(intent: str = "general", reply: str = "Halo juga!"):
        service = Mock()
        service.generate_structured = Mock(
            return_value=IntentClassification(intent=IntentType(intent))
        )
        service.generate = Mock(return_value=LLMResponse(content=reply, model="stub-model"))
        return service

    return _make
