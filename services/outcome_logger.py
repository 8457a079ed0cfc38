# services/outcome_logger.py

import csv
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, Union

from services.models import OutcomeRecord, OutcomeStatus
from utils.logger import get_logger

logger = get_logger("outcome_logger")

SKIPPED_HEADER = ["Email", "Reason"]
CHANGED_HEADER = ["Email", "Updated Interests"]


class OutcomeLogger:
    """
    Writes each OutcomeRecord to the skipped or changed CSV as soon as it is
    recorded. Rows are flushed immediately so an interrupted run keeps
    everything logged so far.
    """

    def __init__(self, skipped_file: IO[str], changed_file: IO[str]):
        self._skipped_file = skipped_file
        self._changed_file = changed_file
        self._skipped_writer = csv.writer(skipped_file)
        self._changed_writer = csv.writer(changed_file)
        self.skipped_count = 0
        self.updated_count = 0

    def write_headers(self) -> None:
        self._skipped_writer.writerow(SKIPPED_HEADER)
        self._changed_writer.writerow(CHANGED_HEADER)
        self._skipped_file.flush()
        self._changed_file.flush()

    def record(self, outcome: OutcomeRecord) -> None:
        if outcome.status is OutcomeStatus.UPDATED:
            self._changed_writer.writerow([outcome.email, outcome.detail])
            self._changed_file.flush()
            self.updated_count += 1
        else:
            self._skipped_writer.writerow([outcome.email, outcome.detail])
            self._skipped_file.flush()
            self.skipped_count += 1

    @property
    def total_count(self) -> int:
        return self.updated_count + self.skipped_count


@contextmanager
def open_outcome_logs(skipped_path: Union[str, Path], changed_path: Union[str, Path]) -> Iterator[OutcomeLogger]:
    """
    Opens (truncating) both outcome logs and writes their headers.
    Both files are closed on every exit path.
    """
    skipped_path, changed_path = Path(skipped_path), Path(changed_path)
    for path in (skipped_path, changed_path):
        path.parent.mkdir(parents=True, exist_ok=True)

    with open(skipped_path, mode="w", encoding="utf-8", newline="") as skipped_file, \
            open(changed_path, mode="w", encoding="utf-8", newline="") as changed_file:
        logger.debug(f"Opened outcome logs: skipped={skipped_path}, changed={changed_path}")
        outcome_logger = OutcomeLogger(skipped_file, changed_file)
        outcome_logger.write_headers()
        yield outcome_logger
