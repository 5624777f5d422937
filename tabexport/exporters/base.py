"""
@file base.py
@description 표 형식 내보내기 베이스 클래스

이 모듈은 모든 내보내기 형식의 공통 기능을 제공하는 추상 베이스 클래스를 정의합니다.

주요 기능:
1. 공통 내보내기 인터페이스 정의 (parse → header → rows → close)
2. 출력 파일 열기/닫기 관리
3. 설정 및 로거 주입

핵심 구현 로직:
- ABC(Abstract Base Class)를 사용한 인터페이스 강제
- contextmanager로 출력 파일을 모든 종료 경로에서 닫음
- 실패 시 일부만 쓰인 출력 파일 삭제
- OSError는 ExportIOError로 변환

@dependencies
- abc: 추상 베이스 클래스
- contextlib: 컨텍스트 매니저
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Iterator, Optional, Union

from ..config import ExportSettings
from ..errors import ExportError, ExportIOError
from ..print import ExportLogger

PathLike = Union[str, Path]


class BaseExporter(ABC):
    """
    표 형식 내보내기 베이스 클래스

    하위 클래스는 `export(path, content)`를 구현해야 합니다.
    """

    format_name: str = "unknown"

    def __init__(
        self,
        settings: Optional[ExportSettings] = None,
        logger: Optional[ExportLogger] = None,
    ):
        """
        Args:
            settings (Optional[ExportSettings]): 내보내기 설정 (None이면 환경변수에서 읽음)
            logger (Optional[ExportLogger]): 로거 (None이면 설정의 debug 값으로 생성)
        """
        self.settings = settings or ExportSettings.from_env()
        self.logger = logger or ExportLogger(verbose=self.settings.debug)

    @abstractmethod
    def export(self, path: PathLike, content: str) -> None:
        """
        JSON 문자열을 파일로 내보냅니다.

        Args:
            path: 출력 파일 경로 (없으면 생성, 있으면 덮어씀)
            content: JSON 객체 배열 문자열
        """

    @contextmanager
    def _open_output(self, path: PathLike, mode: str = "wb", **kwargs: Any) -> Iterator[IO]:
        """
        출력 파일을 열고, 블록이 끝나면 닫습니다.

        블록 안에서 예외가 발생하면 일부만 쓰인 파일을 삭제한 뒤 예외를 다시 발생시킵니다.
        """
        target = Path(path)
        try:
            handle = open(target, mode, **kwargs)
        except OSError as e:
            raise ExportIOError(f"출력 파일을 열 수 없습니다: {target}") from e

        try:
            with handle:
                yield handle
        except Exception as e:
            target.unlink(missing_ok=True)
            if isinstance(e, OSError) and not isinstance(e, ExportError):
                raise ExportIOError(f"출력 파일 쓰기 실패: {target}") from e
            raise
