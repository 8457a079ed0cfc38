# tests/test_main.py

import csv

import pytest

import main
from utils.config import ENV_VARS


@pytest.fixture(autouse=True)
def api_env(monkeypatch):
    # setenv first so teardown also removes anything load_dotenv adds
    for env_var in ENV_VARS.values():
        monkeypatch.setenv(env_var, "")
        monkeypatch.delenv(env_var)
    monkeypatch.setenv("CONTACTS_API_KEY", "test-key")
    monkeypatch.setenv("CONTACTS_API_URL", "https://api.example.test/v1")


def _cli_args(tmp_path, input_file):
    return [
        "--input", str(input_file),
        "--skipped-log", str(tmp_path / "skipped.csv"),
        "--changed-log", str(tmp_path / "changed.csv"),
        "--env-file", str(tmp_path / "missing.env"),
    ]


def test_successful_run_exits_zero(tmp_path, mocker, make_response):
    input_file = tmp_path / "input.csv"
    input_file.write_text('email,interests\na@x.com,"Ladies,Gentlemen"\n', encoding="utf-8")
    mocker.patch(
        "contacts_client.contacts_client.requests.get",
        return_value=make_response(200, {"contacts": [{"id": "1", "email": "a@x.com"}]}),
    )
    mocker.patch("contacts_client.contacts_client.requests.patch", return_value=make_response(200))

    exit_code = main.main(_cli_args(tmp_path, input_file))

    assert exit_code == main.EXIT_SUCCESS
    with open(tmp_path / "changed.csv", encoding="utf-8", newline="") as f:
        assert list(csv.reader(f)) == [["Email", "Updated Interests"], ["a@x.com", "Ladies,Gentlemen"]]


def test_missing_input_file_exits_fatal(tmp_path, mocker):
    mock_get = mocker.patch("contacts_client.contacts_client.requests.get")

    exit_code = main.main(_cli_args(tmp_path, tmp_path / "nope.csv"))

    assert exit_code == main.EXIT_FATAL
    mock_get.assert_not_called()


def test_unwritable_log_location_exits_fatal(tmp_path):
    input_file = tmp_path / "input.csv"
    input_file.write_text("email,interests\na@x.com,Ladies\n", encoding="utf-8")
    # A regular file where the log directory should be
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    exit_code = main.main([
        "--input", str(input_file),
        "--skipped-log", str(blocker / "skipped.csv"),
        "--changed-log", str(tmp_path / "changed.csv"),
        "--env-file", str(tmp_path / "missing.env"),
    ])

    assert exit_code == main.EXIT_FATAL


def test_missing_config_exits_fatal(tmp_path, monkeypatch):
    monkeypatch.delenv("CONTACTS_API_KEY")
    input_file = tmp_path / "input.csv"
    input_file.write_text("email,interests\n", encoding="utf-8")

    assert main.main(_cli_args(tmp_path, input_file)) == main.EXIT_FATAL


def test_debug_flag_raises_log_level(tmp_path):
    import logging

    input_file = tmp_path / "input.csv"
    input_file.write_text("email,interests\n", encoding="utf-8")

    try:
        assert main.main(_cli_args(tmp_path, input_file) + ["--debug"]) == main.EXIT_SUCCESS
        assert logging.getLogger("contacts_client").level == logging.DEBUG
    finally:
        main.set_log_level(logging.INFO, *main.APP_LOGGERS)
