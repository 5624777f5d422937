"""
@file excel_exporter.py
@description 엑셀(.xls) 내보내기 클래스

이 모듈은 JSON 객체 배열을 BIFF8 형식(.xls) 워크북으로 저장하는 기능을 제공합니다.

핵심 구현 로직:
- 첫 번째 레코드의 필드 순서로 헤더 결정
- 시트 1개, 0번 행은 헤더, 이후 레코드 1건당 1행
- 모든 셀은 텍스트로 기록, 행 높이 고정, 열 너비는 헤더 글자 수에 비례
- 워크북은 메모리 버퍼에 직렬화한 뒤 파일에 기록
- 파일 외의 모든 실패는 ExportError로 감싸서 발생

주의:
- 본문 셀은 헤더 이름으로 조회하지 않고 각 레코드 자신의 필드 순서(위치)로 배치합니다.
  필드 순서가 첫 레코드와 다른 레코드는 열이 어긋나지만 기존 출력과의 호환을 위해 유지합니다.

@dependencies
- xlwt: .xls 워크북 생성
"""

import io
from typing import Any, List, Optional

import xlwt

from ..config import ExportSettings
from ..errors import ExportError
from ..models import Dataset, to_text
from ..print import ExportLogger, log_export_operation
from .base import BaseExporter, PathLike

SHEET_NAME = "Sheet0"
MAX_COLUMN_WIDTH = 255 * 256


class ExcelExporter(BaseExporter):
    """JSON 배열을 엑셀(.xls) 파일로 내보내는 클래스"""

    format_name = "xls"

    @log_export_operation("xls")
    def export(self, path: PathLike, content: str) -> None:
        dataset = Dataset.from_json(content)
        self.logger.debug(f"레코드 수: {len(dataset)}")

        with io.BytesIO() as buffer:
            try:
                self._build_workbook(dataset).save(buffer)
            except Exception as e:
                raise ExportError(f"엑셀 파일 생성 오류: {e}") from e

            with self._open_output(path, "wb") as f:
                f.write(buffer.getvalue())

    def _build_workbook(self, dataset: Dataset) -> xlwt.Workbook:
        """데이터셋으로 시트 1개짜리 워크북을 만듭니다."""
        header = dataset.header
        self.logger.debug(f"헤더 열: {header}")

        workbook = xlwt.Workbook(encoding="utf-8")
        sheet = workbook.add_sheet(SHEET_NAME)

        self.logger.debug("헤더 기록 시작")
        self._write_row(sheet, 0, header)
        self.logger.debug("헤더 기록 완료")

        self.logger.debug("본문 기록 시작")
        for row_index, record in enumerate(dataset.records, start=1):
            # 위치 기준 배치: record[j]의 값이 j번째 헤더 열에 들어감
            values = [to_text(value, null="null") for value in record.values()]
            self._write_row(sheet, row_index, values[: len(header)])
        self.logger.debug("본문 기록 완료")

        for col_index, name in enumerate(header):
            sheet.col(col_index).width = column_width(name, self.settings.column_width_scale)

        return workbook

    def _write_row(self, sheet: Any, row_index: int, values: List[str]) -> None:
        row = sheet.row(row_index)
        row.height = self.settings.row_height
        row.height_mismatch = True
        for col_index, value in enumerate(values):
            row.set_cell_text(col_index, value)


def column_width(label: str, scale: int) -> int:
    """헤더 글자 수 × 배율로 열 너비를 계산합니다 (.xls 최대값으로 제한)."""
    return min(len(label) * scale, MAX_COLUMN_WIDTH)


def export_spreadsheet(
    path: PathLike,
    content: str,
    settings: Optional[ExportSettings] = None,
    logger: Optional[ExportLogger] = None,
) -> None:
    """JSON 배열 문자열을 엑셀(.xls) 파일로 저장합니다."""
    ExcelExporter(settings=settings, logger=logger).export(path, content)
