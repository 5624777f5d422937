"""
@file utils.py
@description 내보내기 관련 유틸리티 함수 모음

주요 기능:
1. 입력 JSON 파일 읽기
2. 출력 파일명 자동 생성 (타임스탬프 기반)
3. 출력 디렉토리 생성

@dependencies
- datetime: 타임스탬프 생성
- pathlib: 파일 경로 처리
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from .errors import ExportIOError, FormatError


def read_json_content(filepath: str) -> str:
    """
    입력 JSON 파일을 문자열로 읽습니다.

    Note:
        - UTF-8 BOM이 있는 파일도 읽을 수 있도록 utf-8-sig로 디코딩
    """
    try:
        return Path(filepath).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise FormatError(f"입력 파일이 UTF-8 텍스트가 아닙니다: {filepath}") from e
    except OSError as e:
        raise ExportIOError(f"입력 파일을 읽을 수 없습니다: {filepath}") from e


def generate_output_filename(
    source: str, extension: str, custom_output: Optional[str] = None
) -> str:
    """
    입력 파일명과 현재 시간을 기반으로 출력 파일명을 생성합니다.

    Args:
        source (str): 입력 파일 경로
        extension (str): 출력 확장자 (csv, xls)
        custom_output (Optional[str]): 지정된 출력 경로 (있으면 그대로 사용)

    Returns:
        str: 생성된 파일명 (예: data/users_20241215_143022.csv)
    """
    if custom_output:
        return custom_output

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"data/{Path(source).stem}_{timestamp}.{extension}"


def ensure_output_directory(filepath: str) -> None:
    """출력 파일의 상위 디렉토리가 없으면 생성합니다."""
    Path(filepath).parent.mkdir(parents=True, exist_ok=True)
