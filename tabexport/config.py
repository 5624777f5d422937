"""
@file config.py
@description 내보내기 설정 관리

이 모듈은 환경변수(.env 포함)에서 내보내기 설정을 읽어 Pydantic 모델로 제공합니다.

주요 기능:
1. 스프레드시트 행 높이 / 열 너비 배율 설정
2. 디버그 로그 출력 여부 설정

@dependencies
- python-dotenv: .env 파일 로드
- pydantic: 설정 값 검증
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_ROW_HEIGHT = 500
DEFAULT_COLUMN_WIDTH_SCALE = 800


class ExportSettings(BaseModel):
    """
    내보내기 설정

    Attributes:
        row_height (int): 스프레드시트 행 높이 (twips, 1/20 포인트)
        column_width_scale (int): 헤더 글자 수당 열 너비 (1/256 문자 단위)
        debug (bool): 상세 로그 출력 여부
    """

    row_height: int = Field(default=DEFAULT_ROW_HEIGHT, gt=0, le=0x7FFF)
    column_width_scale: int = Field(default=DEFAULT_COLUMN_WIDTH_SCALE, gt=0)
    debug: bool = False

    @classmethod
    def from_env(cls) -> "ExportSettings":
        """환경변수에서 설정을 읽어옵니다."""
        return cls(
            row_height=os.getenv("EXPORT_ROW_HEIGHT", str(DEFAULT_ROW_HEIGHT)),
            column_width_scale=os.getenv(
                "EXPORT_COLUMN_WIDTH_SCALE", str(DEFAULT_COLUMN_WIDTH_SCALE)
            ),
            debug=os.getenv("EXPORT_DEBUG_MODE", "false").lower() == "true",
        )
