"""
@file csv_exporter.py
@description CSV 내보내기 클래스

이 모듈은 JSON 객체 배열을 UTF-8 BOM이 붙은 CSV 파일로 저장하는 기능을 제공합니다.

핵심 구현 로직:
- 첫 번째 요소의 필드 이름으로 헤더(열 순서) 결정
- 각 행은 헤더 이름으로 값을 조회 (없는 필드는 빈 칸, 헤더에 없는 필드는 무시)
- utf-8-sig 인코딩으로 파일 맨 앞에 BOM(EF BB BF) 기록
- csv 모듈 기본 방언: 구분자 ",", 최소 인용, 줄바꿈 "\\r\\n"

@dependencies
- csv: CSV 직렬화
"""

import csv
from typing import Mapping, Optional

from ..config import ExportSettings
from ..errors import FormatError
from ..models import derive_header, load_json_array, summarize_content, to_text
from ..print import ExportLogger, log_export_operation
from .base import BaseExporter, PathLike

CSV_ENCODING = "utf-8-sig"


class CsvExporter(BaseExporter):
    """JSON 배열을 CSV 파일로 내보내는 클래스"""

    format_name = "csv"

    @log_export_operation("csv")
    def export(self, path: PathLike, content: str) -> None:
        rows = load_json_array(content)
        header = derive_header(rows[0])
        self.logger.debug(f"CSV 헤더: {header}")

        with self._open_output(path, "w", encoding=CSV_ENCODING, newline="") as f:
            writer = csv.DictWriter(f, fieldnames=header, restval="", extrasaction="ignore")
            writer.writeheader()
            for index, row in enumerate(rows):
                if not isinstance(row, Mapping):
                    raise FormatError(
                        f"{index}번째 요소가 JSON 객체가 아닙니다: {summarize_content(row)}"
                    )
                writer.writerow({name: to_text(row[name]) for name in header if name in row})

        self.logger.debug(f"CSV 행 {len(rows)}개 기록")


def export_csv(
    path: PathLike,
    content: str,
    settings: Optional[ExportSettings] = None,
    logger: Optional[ExportLogger] = None,
) -> None:
    """JSON 배열 문자열을 CSV 파일로 저장합니다."""
    CsvExporter(settings=settings, logger=logger).export(path, content)
