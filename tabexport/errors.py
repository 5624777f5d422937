"""
@file errors.py
@description 내보내기 예외 계층 정의

모든 예외는 ExportError를 상속하므로 호출자는 하나의 예외 종류만 처리하면 됩니다.
원인 예외는 `raise ... from` 으로 보존됩니다.
"""


class ExportError(Exception):
    """내보내기 실패 (워크북 생성/직렬화 오류 등)"""


class FormatError(ExportError, ValueError):
    """입력 JSON이 올바르지 않거나, 배열이 아니거나, 비어 있는 경우"""


class ExportIOError(ExportError, OSError):
    """출력 파일을 생성하거나 쓰거나 닫을 수 없는 경우"""
