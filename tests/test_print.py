"""
Tests for the injectable logger and the export operation decorator.
"""
import pytest

from tabexport.print import ExportLogger, log_export_operation


class DummyExporter:
    def __init__(self, logger):
        self.logger = logger

    @log_export_operation("csv")
    def export(self, path, content):
        if content == "boom":
            raise RuntimeError("boom happened")
        return "done"


def test_debug_hidden_when_not_verbose(echo):
    logger = ExportLogger(verbose=False, echo=echo)
    logger.debug("hidden")
    logger.info("shown")

    assert echo.messages == [("shown", False)]


def test_debug_shown_when_verbose(echo, logger):
    logger.debug("visible")

    assert echo.messages == [("🐛 visible", False)]


def test_error_goes_to_stderr(echo):
    logger = ExportLogger(verbose=False, echo=echo)
    logger.error("failed", ValueError("bad value"))

    assert echo.messages == [("❌ failed", True), ("   🔍 에러: bad value", True)]


def test_error_includes_cause_when_verbose(echo, logger):
    try:
        try:
            raise KeyError("inner")
        except KeyError as inner:
            raise RuntimeError("outer") from inner
    except RuntimeError as e:
        logger.error("failed", e)

    assert any("원인: KeyError" in message for message in echo.errors)


def test_decorator_passes_result_and_logs(echo, logger):
    exporter = DummyExporter(logger)

    assert exporter.export("/tmp/out.csv", "[]") == "done"
    assert "CSV 파일 생성 시작: /tmp/out.csv" in echo.text
    assert "CSV 파일 생성 완료" in echo.text


def test_decorator_reads_path_keyword(echo, logger):
    exporter = DummyExporter(logger)
    exporter.export(path="/tmp/kw.csv", content="[]")

    assert "/tmp/kw.csv" in echo.text


def test_decorator_logs_and_reraises(echo, logger):
    exporter = DummyExporter(logger)

    with pytest.raises(RuntimeError, match="boom happened"):
        exporter.export("/tmp/fail.csv", "boom")

    errors = "\n".join(echo.errors)
    assert "CSV 파일 생성 실패" in errors
    assert "/tmp/fail.csv" in errors
    assert "boom happened" in errors


def test_decorator_preserves_metadata():
    assert DummyExporter.export.__name__ == "export"


def test_operation_ids_differ_between_calls(echo, logger):
    exporter = DummyExporter(logger)
    exporter.export("/tmp/a.csv", "[]")
    exporter.export("/tmp/b.csv", "[]")

    starts = [message for message, _ in echo.messages if "생성 시작" in message]
    ids = {message.split("]")[0] for message in starts}
    assert len(ids) == 2
