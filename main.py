"""
@file main.py
@description JSON → 표 형식 파일 변환 CLI 인터페이스

이 모듈은 JSON 객체 배열 파일을 CSV 또는 엑셀(.xls) 파일로 변환하는 명령줄 인터페이스를 제공합니다.

주요 기능:
1. 형식별 변환 명령어 (csv, xls)
2. 통일된 변환 옵션 설정 (저장 위치, 디버그 모드)
3. 일관된 결과 출력

핵심 구현 로직:
- Typer를 사용한 직관적인 CLI 인터페이스
- 로깅 데코레이터를 통한 통일된 작업 추적
- 모든 형식에서 동일한 출력 형식 제공

@dependencies
- typer: CLI 프레임워크
- pathlib: 경로 처리
"""

import time
from pathlib import Path
from typing import Optional

import typer

from tabexport import __version__
from tabexport.config import ExportSettings
from tabexport.errors import ExportError
from tabexport.exporters import BaseExporter, CsvExporter, ExcelExporter
from tabexport.print import ExportLogger, print_export_error, print_export_summary
from tabexport.utils import ensure_output_directory, generate_output_filename, read_json_content

# === App Configuration ===
app = typer.Typer(
    name="tabexport",
    help="JSON 객체 배열을 CSV / 엑셀(.xls) 파일로 변환하는 도구",
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


# === Utility Functions ===
def run_export(
    exporter_cls: type[BaseExporter], input_file: Path, output: Optional[str], debug: bool
) -> None:
    """입력 파일을 읽어 지정된 형식으로 내보내고 결과를 출력합니다."""
    settings = ExportSettings.from_env()
    if debug:
        settings = settings.model_copy(update={"debug": True})

    exporter = exporter_cls(settings=settings, logger=ExportLogger(verbose=settings.debug))
    fmt = exporter.format_name

    output_file = generate_output_filename(str(input_file), fmt, output)
    ensure_output_directory(output_file)

    start_time = time.time()
    try:
        exporter.export(output_file, read_json_content(str(input_file)))
    except ExportError as e:
        print_export_error(fmt, e, settings.debug)
        raise typer.Exit(1)

    print_export_summary(fmt, output_file, time.time() - start_time)


# === Export Commands ===
@app.command("csv")
def csv_command(
    input_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="JSON 객체 배열 파일"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="출력 파일명 (기본: 자동 생성)"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="디버그 모드 (상세 로그)"),
):
    """
    JSON 파일을 UTF-8 BOM CSV 파일로 변환합니다.

    예시:
    python main.py csv users.json
    python main.py csv users.json -o out/users.csv
    python main.py csv users.json --debug
    """
    run_export(CsvExporter, input_file, output, debug)


@app.command("xls")
def xls_command(
    input_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="JSON 객체 배열 파일"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="출력 파일명 (기본: 자동 생성)"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="디버그 모드 (상세 로그)"),
):
    """
    JSON 파일을 엑셀(.xls) 파일로 변환합니다.

    예시:
    python main.py xls users.json
    python main.py xls users.json -o out/users.xls
    """
    run_export(ExcelExporter, input_file, output, debug)


# === Utility Commands ===
@app.command()
def version():
    """버전 정보를 출력합니다."""
    typer.echo(f"tabexport v{__version__}")
    typer.echo("xlwt 기반 JSON → CSV / XLS 변환 도구")


if __name__ == "__main__":
    app()
