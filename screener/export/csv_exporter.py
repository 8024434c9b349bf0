import csv
import io
from collections.abc import Mapping, Sequence
from pathlib import Path

from screener.logging.logger import Log


class CsvExporter:
    """Serializes flat records to CSV.

    The header is the key order of the first record. Every field is quoted,
    embedded quotes are doubled and rows end with a bare newline. Keys missing
    from later records and ``None`` values render as empty strings.
    """

    def to_csv(self, records: Sequence[Mapping[str, object]]) -> str:
        if not records:
            return ""
        buffer = io.StringIO()
        writer = csv.DictWriter(
            buffer,
            fieldnames=list(records[0].keys()),
            restval="",
            extrasaction="ignore",
            quoting=csv.QUOTE_ALL,
            lineterminator="\n",
        )
        writer.writeheader()
        writer.writerows(records)
        return buffer.getvalue().rstrip("\n")

    def write(self, records: Sequence[Mapping[str, object]], destination: Path) -> Path:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(self.to_csv(records), encoding="utf-8")
        Log.info(f"Wrote {len(records)} rows to {destination}")
        return destination
