from collections.abc import Sequence
from pathlib import Path

from screener.logging.logger import Log
from screener.processor.models import ScreeningResult


class TextDumpExporter:
    """Writes each result's extracted text to ``<prefix>_<n>.txt`` (1-based)."""

    def __init__(self, prefix: str = "resume") -> None:
        self._prefix = prefix

    def filename_for(self, index: int) -> str:
        return f"{self._prefix}_{index}.txt"

    def write(self, results: Sequence[ScreeningResult], directory: Path) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for index, result in enumerate(results, start=1):
            path = directory / self.filename_for(index)
            path.write_text(result.full_text or "", encoding="utf-8")
            written.append(path)
        Log.info(f"Wrote {len(written)} text dumps to {directory}")
        return written
