# tests/conftest.py

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# --- Make the flat project packages importable without installing ---
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
# ---------------------------------------------

from utils.config import MigrationConfig  # noqa: E402


@pytest.fixture
def config(tmp_path: Path) -> MigrationConfig:
    """A run configuration pointing all files into a temporary directory."""
    return MigrationConfig(
        api_key="test-key",
        api_base_url="https://api.example.test/v1/",
        remote_system_name="CRM",
        input_file=tmp_path / "interests.csv",
        skipped_log=tmp_path / "out" / "skipped.csv",
        changed_log=tmp_path / "out" / "changed.csv",
    )


@pytest.fixture
def write_input(config: MigrationConfig):
    """Writes the given lines (header included) to the configured input file."""
    def _write(*lines: str) -> Path:
        config.input_file.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return config.input_file
    return _write


@pytest.fixture
def make_response():
    """Builds a fake requests.Response."""
    def _make(status_code=200, json_data=None, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        if isinstance(json_data, Exception):
            response.json.side_effect = json_data
        else:
            response.json.return_value = json_data if json_data is not None else {}
        return response
    return _make
