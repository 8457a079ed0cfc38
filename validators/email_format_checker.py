from email_validator import EmailNotValidError, validate_email

from utils.logger import get_logger

logger = get_logger(__name__)

__all__ = ["is_valid_email_format"]


def is_valid_email_format(email: str) -> bool:
    """Syntax-only check (no DNS lookups), same library pydantic's EmailStr uses."""
    if not email or '@' not in email:
        logger.debug(f"Rejected email without '@': {email!r}")
        return False

    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        logger.debug(f"Rejected email {email!r}: {e}")
        return False

    return True
