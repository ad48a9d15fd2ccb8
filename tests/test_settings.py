"""설정/런타임 테스트"""

import logging

from routechat.settings import ROOT_DIR, Settings, validate_settings
from routechat.utils.runtime import setup_logging


class TestValidateSettings:
    def test_missing_openai_key(self):
        current = Settings(llm_provider="openai", openai_api_key=None, _env_file=None)
        warnings = validate_settings(current)
        assert "OPENAI_API_KEY" in warnings["llm"]

    def test_missing_anthropic_key(self):
        current = Settings(llm_provider="anthropic", anthropic_api_key=None, _env_file=None)
        assert "ANTHROPIC_API_KEY" in validate_settings(current)["llm"]

    def test_valid_openai(self):
        current = Settings(
            llm_provider="openai", openai_api_key="sk-test", contacts_file=None, _env_file=None
        )
        assert validate_settings(current) == {}

    def test_dummy_needs_no_key(self):
        current = Settings(llm_provider="dummy", contacts_file=None, _env_file=None)
        assert "llm" not in validate_settings(current)

    def test_missing_contacts_file(self, tmp_path):
        current = Settings(
            llm_provider="dummy",
            contacts_file=str(tmp_path / "nope.json"),
            _env_file=None,
        )
        assert "contacts" in validate_settings(current)

    def test_defaults(self):
        current = Settings.model_construct()
        assert current.llm_temperature == 0.0
        assert current.openai_model == "gpt-4o"


class TestSetupLogging:
    def test_loads_yaml_config(self, tmp_path):
        config = tmp_path / "logging.yml"
        config.write_text(
            "version: 1\n"
            "disable_existing_loggers: false\n"
            "loggers:\n"
            "  routechat.test_yaml:\n"
            "    level: DEBUG\n",
            encoding="utf-8",
        )

        setup_logging(str(config))

        assert logging.getLogger("routechat.test_yaml").level == logging.DEBUG

    def test_missing_file_falls_back(self, tmp_path):
        # basicConfig 폴백은 예외 없이 끝나야 함
        setup_logging(str(tmp_path / "missing.yml"), level="warning")

    def test_invalid_yaml_falls_back(self, tmp_path):
        config = tmp_path / "broken.yml"
        config.write_text("version: 1\nhandlers: [unclosed\n", encoding="utf-8")

        setup_logging(str(config))


class TestLogLevel:
    """LOG_LEVEL 적용 테스트"""

    def test_level_overrides_yaml(self, tmp_path):
        config = tmp_path / "logging.yml"
        config.write_text(
            "version: 1\n"
            "disable_existing_loggers: false\n"
            "loggers:\n"
            "  routechat:\n"
            "    level: WARNING\n",
            encoding="utf-8",
        )

        setup_logging(str(config), level="debug")

        assert logging.getLogger("routechat").level == logging.DEBUG

    def test_shipped_config_passes_info(self):
        """기본 설정에서 INFO 로그가 콘솔 핸들러를 통과"""
        setup_logging(str(ROOT_DIR / "config" / "logging.yml"), level="INFO")

        app_logger = logging.getLogger("routechat")
        assert app_logger.isEnabledFor(logging.INFO)
        assert app_logger.handlers
        assert all(handler.level <= logging.INFO for handler in app_logger.handlers)
