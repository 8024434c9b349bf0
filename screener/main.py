import argparse
import threading
from collections.abc import Sequence
from pathlib import Path

from screener.config.settings import Settings
from screener.export.csv_exporter import CsvExporter
from screener.export.records import RecordBuilder, RecordLayout
from screener.export.text_exporter import TextDumpExporter
from screener.extraction.models import UploadedDocument
from screener.keywords import catalog
from screener.keywords.universe import KeywordSelection, UniverseBuilder
from screener.logging.logger import Log
from screener.processor.file_loader import FileLoader
from screener.processor.models import ScreeningResult
from screener.processor.processor import build_processor
from screener.worker.batch_runner import BatchRunner


def screen_documents(
    documents: Sequence[UploadedDocument],
    selection: KeywordSelection,
    settings: Settings | None = None,
    cancel_event: threading.Event | None = None,
) -> list[ScreeningResult]:
    """Screen a batch: build criteria once, then run every document through the pipeline."""
    settings = settings or Settings()
    criteria = UniverseBuilder(settings.min_job_token_length).build(selection)
    runner = BatchRunner(build_processor(settings), settings)
    return runner.run(documents, criteria, cancel_event=cancel_event)


def _parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Screen PDF/DOCX resumes against keywords and a job description.",
    )
    parser.add_argument("resume_dir", type=Path, help="Directory containing resumes.")
    parser.add_argument(
        "--job-description",
        type=Path,
        help="Plain text file with the job description.",
    )
    parser.add_argument(
        "--keywords",
        default="",
        help="Comma-separated keywords, e.g. 'python, sql'.",
    )
    parser.add_argument(
        "--skill",
        action="append",
        default=[],
        choices=catalog.PREDEFINED_SKILLS,
        metavar="SKILL",
        help="Predefined skill to require (repeatable).",
    )
    parser.add_argument(
        "--cert",
        action="append",
        default=[],
        choices=catalog.all_certifications(),
        metavar="CERT",
        help="Certification to require (repeatable).",
    )
    parser.add_argument(
        "--education",
        action="append",
        default=[],
        choices=catalog.EDUCATION_OPTIONS,
        help="Education level to require (repeatable).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="CSV file to write, or an existing directory to write the default file name into.",
    )
    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in RecordLayout],
        default=RecordLayout.DUAL.value,
        help="CSV column set.",
    )
    parser.add_argument(
        "--text-dir",
        type=Path,
        help="Also dump each file's extracted text into this directory.",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def _summary_line(result: ScreeningResult) -> str:
    if result.error is not None:
        return f"{result.file_name}: error ({result.error.value})"
    checklist = result.checklist_score or "n/a"
    jd = result.jd_score or "n/a"
    return (
        f"{result.file_name}: checklist {checklist}, job description {jd}, "
        f"email {result.email}, phone {result.phone}"
    )


def main(argv: Sequence[str] | None = None) -> list[ScreeningResult]:
    """Entry point: load files -> screen batch -> export -> print summary."""
    args = _parse_arguments(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    job_description = ""
    if args.job_description is not None:
        # Line breaks separate words; the tokenizer only keeps spaces.
        job_description = " ".join(args.job_description.read_text(encoding="utf-8").split())

    selection = KeywordSelection(
        skills=args.skill,
        certifications=args.cert,
        education=args.education,
        keywords=args.keywords,
        job_description=job_description,
    )
    documents = FileLoader().load_directory(args.resume_dir)
    results = screen_documents(documents, selection, settings)

    if args.output is not None:
        destination = args.output
        if destination.is_dir():
            destination = destination / settings.csv_filename
        records = RecordBuilder(RecordLayout(args.layout)).build_all(results)
        CsvExporter().write(records, destination)
    if args.text_dir is not None:
        TextDumpExporter(settings.text_dump_prefix).write(results, args.text_dir)

    for result in results:
        print(_summary_line(result))
    return results


if __name__ == "__main__":
    main()
