from dataclasses import dataclass, field
from typing import Iterable, List, Union
from .parser import RecordParser
from ..aggregation.store import AggregationStore
from ..config import Settings
from ..errors import InputUnavailable, MalformedRecord
from ..utils.logging import get_logger

logger = get_logger(__name__)

@dataclass
class IngestSummary:
    files_read: int = 0
    files_missing: List[str] = field(default_factory=list)
    lines_read: int = 0
    records_ingested: int = 0
    malformed_skipped: int = 0

    def merge(self, other: "IngestSummary") -> None:
        self.files_read += other.files_read
        self.files_missing.extend(other.files_missing)
        self.lines_read += other.lines_read
        self.records_ingested += other.records_ingested
        self.malformed_skipped += other.malformed_skipped

class IngestJob:
    def __init__(self, parser: RecordParser, store: AggregationStore, settings: Settings):
        self.parser = parser
        self.store = store
        self.settings = settings

    def run(self, paths: Iterable[str]) -> IngestSummary:
        """Ingest every path in order into the shared store.

        With the "abort" policy the first unopenable path raises
        InputUnavailable and nothing after it is read. With "skip" the path is
        logged, recorded in the summary and the run moves on.
        """
        summary = IngestSummary()

        for path in paths:
            logger.info(f"Opening file: {path}")
            try:
                # bytes; each line is decoded by the parser so a bad byte only costs that line
                f = open(path, "rb")
            except OSError as e:
                err = InputUnavailable(path, e.strerror or str(e))
                if self.settings.missing_file_policy == "abort":
                    raise err from e
                logger.error(f"{err}. Moving on to next file...")
                summary.files_missing.append(path)
                continue

            with f:
                summary.merge(self.ingest_stream(f, source=path))
            summary.files_read += 1

        logger.info(
            f"Ingested {summary.records_ingested} records "
            f"({summary.malformed_skipped} malformed skipped) "
            f"into {len(self.store)} region(s)"
        )
        return summary

    def ingest_stream(self, lines: Iterable[Union[str, bytes]], source: str = "<stream>") -> IngestSummary:
        summary = IngestSummary()

        for line_no, line in enumerate(lines, start=1):
            summary.lines_read += 1
            try:
                obs = self.parser.parse(line)
            except MalformedRecord as e:
                summary.malformed_skipped += 1
                logger.debug(f"{source}:{line_no}: skipping malformed record: {e.reason}")
                continue
            self.store.observe(obs)
            summary.records_ingested += 1

        if summary.malformed_skipped:
            logger.warning(f"{source}: {summary.malformed_skipped} malformed line(s) skipped")
        return summary
