# utils/config.py

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from services.exceptions import ConfigError
from utils.logger import get_logger

logger = get_logger("config")

# Field name -> environment variable
ENV_VARS = {
    "api_key": "CONTACTS_API_KEY",
    "api_base_url": "CONTACTS_API_URL",
    "api_key_header": "CONTACTS_API_KEY_HEADER",
    "remote_system_name": "REMOTE_SYSTEM_NAME",
    "input_file": "INTERESTS_INPUT_FILE",
    "skipped_log": "SKIPPED_LOG_FILE",
    "changed_log": "CHANGED_LOG_FILE",
    "request_timeout": "CONTACTS_API_TIMEOUT",
}


class MigrationConfig(BaseModel):
    """Everything a run needs, fixed once at start of run."""
    model_config = ConfigDict(frozen=True)

    api_key: str
    api_base_url: str
    api_key_header: str = "X-Api-Key"
    remote_system_name: str = "CRM"
    input_file: Path = Path("interests.csv")
    skipped_log: Path = Path("skipped_contacts.csv")
    changed_log: Path = Path("changed_contacts.csv")
    request_timeout: float = 10.0

    @field_validator("api_key", "api_base_url")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value.strip()

    @property
    def contacts_endpoint(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/contacts"


def load_config(env_file: Optional[Path] = None, **overrides: Any) -> MigrationConfig:
    """
    Builds the run configuration from the environment (after loading .env)
    and explicit overrides. Overrides that are None are ignored.

    Raises:
        ConfigError: if a required value is missing or a value is invalid.
    """
    if env_file is not None:
        load_dotenv(dotenv_path=env_file)
    else:
        load_dotenv()

    values: Dict[str, Any] = {}
    for field, env_var in ENV_VARS.items():
        env_value = os.getenv(env_var)
        if env_value:
            values[field] = env_value
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        config = MigrationConfig(**values)
    except ValidationError as e:
        missing = [
            ENV_VARS.get(str(err["loc"][0]), str(err["loc"][0]))
            for err in e.errors()
            if err["loc"]
        ]
        logger.critical(f"❌ Invalid configuration, check: {', '.join(missing)}")
        raise ConfigError(f"Invalid configuration ({', '.join(missing)}): {e}") from e

    logger.debug(f"Loaded configuration for endpoint {config.contacts_endpoint}")
    return config
