"""
@module tabexport
@description JSON 배열 → CSV / 엑셀(.xls) 변환 패키지
"""

from .config import ExportSettings
from .errors import ExportError, ExportIOError, FormatError
from .exporters import CsvExporter, ExcelExporter, export_csv, export_spreadsheet
from .print import ExportLogger

__version__ = "0.1.0"

__all__ = [
    "CsvExporter",
    "ExcelExporter",
    "ExportError",
    "ExportIOError",
    "ExportLogger",
    "ExportSettings",
    "FormatError",
    "export_csv",
    "export_spreadsheet",
]
