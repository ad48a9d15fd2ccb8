"""routechat - 의도 분류 기반 대화 라우팅 CLI"""

__version__ = "0.1.0"
