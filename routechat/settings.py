"""애플리케이션 설정 관리"""

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env 파일 로드
load_dotenv()

# 프로젝트 루트 디렉토리
ROOT_DIR = Path(__file__).parent.parent


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # LLM 설정
    llm_provider: Literal["openai", "anthropic", "dummy"] = Field(
        default="openai", description="LLM 제공자 (openai | anthropic | dummy)"
    )
    openai_api_key: str | None = Field(default=None, description="OpenAI API 키")
    anthropic_api_key: str | None = Field(default=None, description="Anthropic API 키")

    # 모델 설정
    openai_model: str = Field(default="gpt-4o", description="OpenAI 모델명")
    anthropic_model: str = Field(
        default="claude-3-5-sonnet-20241022", description="Anthropic 모델명"
    )
    llm_temperature: float = Field(default=0.0, description="분류/응답 공통 temperature")

    # 연락처 설정
    contacts_file: str | None = Field(
        default=None, description="연락처 JSON 파일 경로 (없으면 기본 연락처 사용)"
    )

    # 앱 설정
    log_level: str = Field(default="INFO", description="로그 레벨")
    log_config_file: str = Field(
        default=str(ROOT_DIR / "config" / "logging.yml"),
        description="logging dictConfig YAML 경로",
    )


# 전역 설정 인스턴스
settings = Settings()


def validate_settings(current: Settings | None = None) -> dict[str, str]:
    """설정 유효성 검사 및 경고 메시지 반환

    Args:
        current: 검사할 설정 (None이면 전역 설정)

    Returns:
        {영역: 경고 메시지} 딕셔너리. "llm" 키가 있으면 실행 불가.
    """
    current = current or settings
    warnings = {}

    # LLM 설정 검증
    if current.llm_provider == "openai":
        if not current.openai_api_key:
            warnings["llm"] = "OpenAI API 사용을 위해서는 OPENAI_API_KEY가 필요합니다."
    elif current.llm_provider == "anthropic":
        if not current.anthropic_api_key:
            warnings["llm"] = (
                "Anthropic API 사용을 위해서는 ANTHROPIC_API_KEY가 필요합니다."
            )

    # 연락처 파일 검증
    if current.contacts_file and not Path(current.contacts_file).exists():
        warnings["contacts"] = f"연락처 파일을 찾을 수 없습니다: {current.contacts_file}"

    return warnings
