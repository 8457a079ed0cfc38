# contacts_client/contacts_client.py

import requests
from typing import Dict, List, Optional, Tuple

from utils.config import MigrationConfig
from utils.logger import get_logger
from services.models import RemoteContact
from .exceptions import ContactsRequestError

logger = get_logger("contacts_client")

INTERESTS_PROPERTY = "interests"


def _headers(config: MigrationConfig) -> Dict[str, str]:
    return {
        config.api_key_header: config.api_key,
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


# --- get_contact_by_email ---
def get_contact_by_email(config: MigrationConfig, email: str) -> Optional[RemoteContact]:
    """
    Looks up an existing contact by exact email match.

    Args:
        config: The run configuration (endpoint, API key, timeout).
        email: The email address to search for.

    Returns:
        The first matching contact, or None when the API answered with
        anything other than 200, returned no contacts, or could not be reached.
    """
    url = config.contacts_endpoint
    logger.debug(f"Looking up contact by email: {email}")

    try:
        response = requests.get(
            url,
            params={"email": email},
            headers=_headers(config),
            timeout=config.request_timeout,
        )
    except requests.exceptions.RequestException as e:
        # Surfaced to the caller the same way as a miss
        logger.error(f"💥 Contacts lookup request failed for {email}: {e}")
        return None

    if response.status_code != 200:
        logger.warning(f"Contacts lookup for {email} returned status {response.status_code}: {response.text}")
        return None

    try:
        contacts = response.json().get("contacts") or []
    except (ValueError, AttributeError) as e:
        logger.error(f"💥 Unparsable lookup response for {email}: {e}")
        return None

    if not contacts:
        logger.info(f"❓ No contact found for {email}")
        return None

    try:
        contact = RemoteContact.from_api(contacts[0])
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.error(f"💥 Contact returned for {email} has no usable id: {e}")
        return None

    if len(contacts) > 1:
        logger.warning(f"👥 {len(contacts)} contacts match {email}, using the first one (ID: {contact.contact_id})")

    logger.debug(f"Found contact {contact.contact_id} for {email}")
    return contact
# --- END get_contact_by_email ---


# --- update_contact_interests ---
def update_contact_interests(config: MigrationConfig, contact_id: str, interests: List[str]) -> Tuple[int, str]:
    """
    Replaces the contact's interests custom property with `interests`.

    Interests already on the contact but missing from the list are removed.
    Non-2xx responses are not raised; the caller decides what counts as success.

    Returns:
        (status_code, response_body)

    Raises:
        ContactsRequestError: if the request never got a response.
    """
    url = f"{config.contacts_endpoint}/{contact_id}"
    payload = {"customProperties": {INTERESTS_PROPERTY: list(interests)}}

    logger.info(f"Attempting to update interests for contact {contact_id}.")
    logger.debug(f"Update data for {contact_id}: {payload}")

    try:
        response = requests.patch(
            url,
            json=payload,
            headers=_headers(config),
            timeout=config.request_timeout,
        )
    except requests.exceptions.RequestException as e:
        logger.error(f"💥 Update request failed for contact {contact_id}: {e}")
        raise ContactsRequestError(
            message=f"Network or request error updating contact {contact_id}: {e}",
            original_exception=e,
        ) from e

    logger.debug(f"Update response for {contact_id}: {response.status_code} {response.text}")
    return response.status_code, response.text
# --- END update_contact_interests ---
