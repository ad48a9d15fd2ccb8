"""CLI 진입점 테스트"""

from unittest.mock import Mock

import pytest

from routechat import cli
from routechat.services.orchestration import ChatSession
from routechat.services.llm.dummy_llm import DummyLLM
from routechat.settings import Settings


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)


def test_missing_api_key_is_fatal(monkeypatch, capsys):
    """API 키가 없으면 루프 시작 전 종료 코드 3"""
    monkeypatch.setattr(
        cli, "settings", Settings(llm_provider="openai", openai_api_key=None, _env_file=None)
    )
    build = Mock()
    monkeypatch.setattr(cli, "build_session", build)

    assert cli.main() == cli.EXIT_CONFIG_ERROR
    assert "OPENAI_API_KEY" in capsys.readouterr().err
    build.assert_not_called()


def test_build_session_with_dummy(tmp_path):
    contacts = tmp_path / "contacts.json"
    contacts.write_text('[{"name": "Gita", "phone": "0844", "city": "Bone"}]', encoding="utf-8")

    session = cli.build_session(
        Settings(llm_provider="dummy", contacts_file=str(contacts), _env_file=None)
    )

    assert isinstance(session, ChatSession)
    assert isinstance(session.router.llm_service, DummyLLM)
    assert session.router.contact_book.find_by_name("Gita") is not None


def test_dummy_chat_until_exit(monkeypatch, capsys):
    monkeypatch.setattr(
        cli, "settings", Settings(llm_provider="dummy", contacts_file=None, _env_file=None)
    )
    lines = iter(["Halo", "EXIT"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    assert cli.main() == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "🤖 Bot:" in out
    assert "👋 Chat selesai." in out


def test_turn_failure_exits_with_error(monkeypatch, capsys):
    monkeypatch.setattr(
        cli, "settings", Settings(llm_provider="dummy", contacts_file=None, _env_file=None)
    )
    session = Mock()
    session.run.side_effect = RuntimeError("authentication failed")
    monkeypatch.setattr(cli, "build_session", lambda current=None: session)

    assert cli.main() == cli.EXIT_TURN_FAILED
    assert "authentication failed" in capsys.readouterr().err


@pytest.mark.parametrize(
    "content",
    ['{"name": "Andi"}', "not json", '[{"name": "Andi"}]'],
)
def test_malformed_contacts_file_is_fatal(monkeypatch, capsys, tmp_path, content):
    """형식이 잘못된 연락처 파일은 traceback 대신 종료 코드 3"""
    contacts = tmp_path / "contacts.json"
    contacts.write_text(content, encoding="utf-8")
    monkeypatch.setattr(
        cli,
        "settings",
        Settings(llm_provider="dummy", contacts_file=str(contacts), _env_file=None),
    )

    assert cli.main() == cli.EXIT_CONFIG_ERROR
    assert "ERROR[contacts]" in capsys.readouterr().err
