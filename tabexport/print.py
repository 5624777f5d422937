"""
@file tabexport/print.py
@description 내보내기 작업용 로깅 및 출력 유틸리티

이 모듈은 내보내기 작업에 대한 일관된 로깅과 출력 기능을 제공합니다.

주요 기능:
1. 내보내기 작업 추적을 위한 데코레이터
2. 주입 가능한 로거 (전역 로거 없음)
3. 디버그 정보 및 에러 출력
4. CLI 결과 요약 출력

핵심 구현 로직:
- 데코레이터를 통한 횡단 관심사 분리
- 로거는 각 내보내기 객체에 주입되어 테스트에서 교체 가능
- 타입 안전성을 위한 ParamSpec 사용
- 작업 ID 포함으로 추적성 향상

@dependencies
- typer: CLI 출력
- functools: 데코레이터 메타데이터 보존
- time: 성능 측정
- uuid: 고유 식별자 생성
"""

import functools
import time
import uuid
from datetime import datetime
from typing import Any, Callable, Optional, ParamSpec, TypeVar

import typer

# === Type Variables ===
P = ParamSpec("P")
T = TypeVar("T")


# === Logger ===
class ExportLogger:
    """
    내보내기 로거

    Args:
        verbose: True이면 debug 메시지도 출력
        echo: 출력 함수 (기본: typer.echo)
    """

    def __init__(self, verbose: bool = False, echo: Callable[..., Any] = typer.echo):
        self.verbose = verbose
        self._echo = echo

    def debug(self, message: str) -> None:
        if self.verbose:
            self._echo(f"🐛 {message}")

    def info(self, message: str) -> None:
        self._echo(message)

    def error(self, message: str, error: Optional[BaseException] = None) -> None:
        self._echo(f"❌ {message}", err=True)
        if error is not None:
            self._echo(f"   🔍 에러: {error}", err=True)
            cause = error.__cause__
            if self.verbose and cause is not None:
                self._echo(f"   🔍 원인: {type(cause).__name__}: {cause}", err=True)


# === Logging Context ===
class ExportContext:
    """내보내기 작업 한 건의 로깅 컨텍스트"""

    def __init__(self, fmt: str, path: Any, operation_id: Optional[str] = None):
        self.fmt = fmt
        self.path = str(path)
        self.operation_id = operation_id or str(uuid.uuid4())[:8]
        self.start_time = time.time()

    @property
    def elapsed(self) -> float:
        return time.time() - self.start_time


# === Logging Decorators ===
def log_export_operation(fmt: str):
    """
    내보내기 작업을 추적하는 데코레이터

    데코레이트된 메서드의 첫 번째 인자는 `logger` 속성을 가진 내보내기 객체,
    두 번째 인자는 출력 파일 경로여야 합니다.

    Args:
        fmt: 출력 형식 이름 (csv, xls)
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            exporter = args[0]
            logger: ExportLogger = exporter.logger
            path = kwargs.get("path", args[1] if len(args) > 1 else "unknown")
            context = ExportContext(fmt, path)
            label = f"[{context.operation_id}] {fmt.upper()}"

            logger.debug(f"{label} 파일 생성 시작: {context.path}")

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"{label} 파일 생성 실패 ({context.elapsed:.2f}초): {context.path}", e
                )
                raise

            logger.debug(f"{label} 파일 생성 완료 ({context.elapsed:.2f}초): {context.path}")
            return result

        return wrapper

    return decorator


# === Output Functions ===
def print_export_summary(fmt: str, output_file: str, elapsed: float) -> None:
    """내보내기 완료 요약 출력"""
    typer.echo("\n📊 내보내기 완료 요약:")
    typer.echo(f"   - 형식: {fmt.upper()}")
    typer.echo(f"   - 저장 위치: {output_file}")
    typer.echo(f"   - 실행 시간: {elapsed:.2f}초")


def print_export_error(fmt: str, error: Exception, debug: bool = False) -> None:
    """내보내기 실패 출력"""
    typer.echo(f"❌ {fmt.upper()} 내보내기 실패: {error}", err=True)

    if debug:
        typer.echo("   💡 해결 방법:", err=True)
        typer.echo("     - 입력이 JSON 객체 배열인지 확인", err=True)
        typer.echo("     - 출력 경로에 쓰기 권한이 있는지 확인", err=True)
        typer.echo(
            f"   - 발생 시간: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}", err=True
        )
