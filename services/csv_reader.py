# services/csv_reader.py

import csv
from pathlib import Path
from typing import Iterator, List, Sequence, Union

from services.exceptions import InputFileError
from services.models import ContactRow
from utils.logger import get_logger

logger = get_logger("csv_reader")


def parse_interests(raw: str) -> List[str]:
    """
    Splits a comma-separated interests cell into its entries.

    Pieces are trimmed and empty ones dropped. Order is kept and duplicates
    are not removed.
    """
    if not raw:
        return []
    return [piece.strip() for piece in raw.split(",") if piece.strip()]


def parse_contact_row(fields: Sequence[str]) -> ContactRow:
    """
    Builds a ContactRow from the fields of one CSV data line.

    Everything after the email column is interests, so an unquoted list
    (`a@x.com,Ladies,Gentlemen`) reads the same as a quoted one.
    """
    email = fields[0].strip() if len(fields) > 0 else ""
    interests = parse_interests(",".join(fields[1:]))
    return ContactRow(email=email, interests=interests)


def read_contact_rows(path: Union[str, Path]) -> Iterator[ContactRow]:
    """
    Yields one ContactRow per data line of the CSV at `path`.

    The first line is always treated as the header and discarded. The file is
    opened before the first row is produced, so a missing or unreadable file
    raises InputFileError without yielding anything.

    Raises:
        InputFileError: if the file cannot be opened or decoded.
    """
    path = Path(path)
    try:
        infile = open(path, mode="r", encoding="utf-8-sig", newline="")
    except OSError as e:
        logger.error(f"❌ Cannot open input file {path}: {e}")
        raise InputFileError(path, original_exception=e) from e

    with infile:
        reader = csv.reader(infile)
        try:
            header = next(reader, None)
            if header is None:
                logger.warning(f"Input file {path} is empty, nothing to migrate.")
                return
            logger.debug(f"Skipping header row: {header}")

            for line_number, fields in enumerate(reader, start=2):
                logger.debug(f"Row {line_number}: {fields}")
                yield parse_contact_row(fields)
        except (UnicodeDecodeError, csv.Error) as e:
            logger.error(f"❌ Failed to read input file {path}: {e}")
            raise InputFileError(path, original_exception=e) from e
