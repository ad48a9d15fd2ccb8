"""
공통 런타임 유틸리티

- setup_logging(): config/logging.yml 로깅 설정을 불러오고, 없으면 기본 로깅으로 대체
"""
from __future__ import annotations

import logging
import logging.config
import os
import sys
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

logger = logging.getLogger(__name__)

APP_LOGGER = "routechat"


def _load_yaml(path: str) -> Dict[str, Any]:
    """YAML 파일을 로드합니다. 파일이 없거나 dict가 아니면 빈 dict 반환."""
    if not os.path.exists(path):
        return {}
    yaml = YAML(typ="safe")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.load(f) or {}
    return data if isinstance(data, dict) else {}


def setup_logging(config_path: Optional[str] = None, level: str = "INFO") -> None:
    """로깅 설정을 초기화합니다.

    - config_path YAML 파일이 있으면 이를 로드해 dictConfig로 구성하고,
      routechat 로거 레벨은 level로 덮어씁니다.
    - 없거나 형식이 잘못되었으면 stderr 기본 로깅으로 대체합니다.
      (stdout은 채팅 출력 전용)

    Args:
        config_path: logging dictConfig YAML 경로.
        level: routechat 로거(또는 기본 로깅)에 적용할 레벨 이름.
    """
    if config_path:
        try:
            data = _load_yaml(config_path)
            if data:
                logging.config.dictConfig(data)
                # LOG_LEVEL은 YAML 설정보다 우선
                logging.getLogger(APP_LOGGER).setLevel(level.upper())
                return
        except (OSError, YAMLError, ValueError) as e:
            # 설정 파일 오류 시 기본 로깅 설정으로 폴백
            logging.basicConfig(stream=sys.stderr, level=level.upper())
            logger.warning("로깅 설정을 불러오지 못했습니다 (%s): %s", config_path, e)
            return
    logging.basicConfig(
        stream=sys.stderr,
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
