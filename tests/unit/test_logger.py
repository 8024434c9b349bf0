import logging

import pytest

from screener.logging.logger import Log, _DocumentFormatter


def _record(message: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("screener", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestDocumentFormatter:
    def test_prefixes_document_name(self) -> None:
        formatter = _DocumentFormatter("[%(levelname)s] %(message)s")
        assert formatter.format(_record("Extracted", document="cv.pdf")) == "[INFO] <cv.pdf> Extracted"

    def test_plain_message_without_document(self) -> None:
        formatter = _DocumentFormatter("[%(levelname)s] %(message)s")
        assert formatter.format(_record("Batch complete")) == "[INFO] Batch complete"


class TestLog:
    def test_messages_reach_logger_with_extras(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="screener"):
            Log.info("Screening document", document="jane.pdf")

        assert caplog.records[-1].getMessage() == "Screening document"
        assert caplog.records[-1].document == "jane.pdf"  # type: ignore[attr-defined]

    def test_configure_sets_level_and_single_handler(self) -> None:
        Log.configure("debug")
        Log.configure("warning")
        logger = logging.getLogger("screener")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
