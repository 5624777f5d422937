"""
@module tabexport.exporters
@description JSON 배열 내보내기 모듈

이 패키지는 JSON 객체 배열을 다양한 표 형식 파일로 내보내는 기능을 제공합니다.

지원 형식:
- CSV 파일 내보내기 (UTF-8 BOM)
- 엑셀(.xls) 파일 내보내기
"""

from .base import BaseExporter
from .csv_exporter import CsvExporter, export_csv
from .excel_exporter import ExcelExporter, export_spreadsheet

__all__ = ["BaseExporter", "CsvExporter", "ExcelExporter", "export_csv", "export_spreadsheet"]
