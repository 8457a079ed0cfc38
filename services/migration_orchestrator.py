# services/migration_orchestrator.py

from dataclasses import dataclass
from pathlib import Path

from contacts_client.contacts_client import get_contact_by_email, update_contact_interests
from contacts_client.exceptions import ContactsClientError
from services.csv_reader import read_contact_rows
from services.models import ContactRow, OutcomeRecord
from services.outcome_logger import open_outcome_logs
from utils.config import MigrationConfig
from utils.logger import get_logger
from validators.email_format_checker import is_valid_email_format

logger = get_logger("migration_orchestrator")

INVALID_EMAIL_REASON = "Invalid email format"


@dataclass
class MigrationSummary:
    processed: int
    updated: int
    skipped: int
    skipped_log: Path
    changed_log: Path


def migrate_row(config: MigrationConfig, row: ContactRow) -> OutcomeRecord:
    """
    Migrates the interests of a single row and returns its outcome.

    Every failure is row-scoped: it becomes a Skipped outcome and nothing is
    raised, so one bad row never stops the run.
    """
    if not is_valid_email_format(row.email):
        logger.warning(f"Invalid email format: {row.email!r}")
        return OutcomeRecord.skipped(row.email, INVALID_EMAIL_REASON)

    contact = get_contact_by_email(config, row.email)
    if contact is None:
        return OutcomeRecord.skipped(row.email, f"Not found in {config.remote_system_name}")

    try:
        status_code, body = update_contact_interests(config, contact.contact_id, row.interests)
    except ContactsClientError as e:
        logger.error(f"💥 Update failed for {row.email} (Contact ID: {contact.contact_id}): {e}")
        return OutcomeRecord.skipped(row.email, "Update failed (no response)")

    if status_code != 200:
        logger.error(f"📉 Update rejected for {row.email} (Contact ID: {contact.contact_id}): {status_code} {body}")
        return OutcomeRecord.skipped(row.email, f"Update failed ({status_code})")

    logger.info(f"🔄 Updated interests for {row.email} (Contact ID: {contact.contact_id}): {row.interests}")
    return OutcomeRecord.updated(row.email, row.interests)


def run_migration(config: MigrationConfig) -> MigrationSummary:
    """
    Processes every row of the input file, one at a time, logging each
    outcome before the next row starts.

    Raises:
        InputFileError: if the input file is missing or unreadable. The
            outcome logs are still closed.
    """
    logger.info(f"🚀 Starting interests migration from {config.input_file}")

    with open_outcome_logs(config.skipped_log, config.changed_log) as outcome_log:
        for row in read_contact_rows(config.input_file):
            outcome = migrate_row(config, row)
            outcome_log.record(outcome)

        summary = MigrationSummary(
            processed=outcome_log.total_count,
            updated=outcome_log.updated_count,
            skipped=outcome_log.skipped_count,
            skipped_log=config.skipped_log,
            changed_log=config.changed_log,
        )

    logger.info(f"✅ Migration complete. Processed: {summary.processed}, Updated: {summary.updated}, Skipped: {summary.skipped}")
    return summary
