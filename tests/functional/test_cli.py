"""Functional tests for the ``customer-service`` CLI.

Scope
-----
End-to-end verification of the CLI via ``click.testing.CliRunner`` against a
file-backed SQLite database (and, for one scenario, the Testcontainers
Postgres). Commands covered: ``init``, ``add``, ``list`` and ``status``, plus
the global verbosity options.

Notes
-----
The flight recorder is disabled so no log files are written outside the
test's temp directory.
"""

import json
import re

import pytest
from click.testing import CliRunner

from customer_service import __version__
from customer_service.adapters.db import ConnectionProvider
from customer_service.entrypoints.cli.customers import (
    CANNOT_CONNECT_MSG,
    MISSING_DB_URL_MSG,
    SCHEMA_MISSING_MSG,
)
from customer_service.entrypoints.cli.main import customer_service

# pylint: disable=redefined-outer-name

BASE_ARGS = ["--no-flight-recorder"]


@pytest.fixture
def run(sqlite_url):
    """Invoke the CLI with CUSTOMER_SERVICE_DB_URL pointing at a fresh SQLite file."""
    runner = CliRunner(env={"CUSTOMER_SERVICE_DB_URL": sqlite_url})

    def _run(*args: str):
        return runner.invoke(customer_service, [*BASE_ARGS, *args])

    return _run


@pytest.mark.parametrize(
    "cmd", [["init"], ["add", "1", "George"], ["list"], ["status"]]
)
def test_commands_require_db_url(cmd):
    """Commands that need a database error out if CUSTOMER_SERVICE_DB_URL is unset."""
    runner = CliRunner(env={"CUSTOMER_SERVICE_DB_URL": ""})
    result = runner.invoke(customer_service, [*BASE_ARGS, *cmd])
    assert result.exit_code == 1
    assert MISSING_DB_URL_MSG in result.output


@pytest.mark.parametrize(
    "bad_url",
    ["not a url", "postgresql+psycopg://u:p@host:notaport/db"],
    ids=["no-scheme", "non-numeric-port"],
)
def test_invalid_url_is_reported(bad_url):
    """A malformed URL is reported with guidance instead of a traceback."""
    runner = CliRunner(env={"CUSTOMER_SERVICE_DB_URL": bad_url})
    result = runner.invoke(customer_service, [*BASE_ARGS, "init"])
    assert result.exit_code == 1
    assert CANNOT_CONNECT_MSG in result.output
    assert not isinstance(result.exception, ValueError)


def test_version():
    """--version reports the package version."""
    result = CliRunner().invoke(customer_service, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_status_before_and_after_init(run):
    """status reports an uninitialized schema until init runs."""
    before = run("status")
    assert before.exit_code == 0
    assert "Database reachable" in before.output
    assert "Backend : sqlite" in before.output
    assert "Schema  : uninitialized" in before.output
    assert SCHEMA_MISSING_MSG in before.output

    init = run("init")
    assert init.exit_code == 0
    assert "Customers table ready" in init.output

    after = run("status")
    assert after.exit_code == 0
    assert "Schema  : ready" in after.output


def test_add_and_list(run):
    """Customers added through the CLI are listed back as text and JSON."""
    assert run("add", "1", "George").exit_code == 0
    assert run("add", "2", "John").exit_code == 0

    as_text = run("list")
    assert as_text.exit_code == 0
    lines = set(as_text.stdout.strip().splitlines())
    assert lines == {"1\tGeorge", "2\tJohn"}

    as_json = run("list", "--json")
    assert as_json.exit_code == 0
    assert sorted(json.loads(as_json.stdout), key=lambda c: c["id"]) == [
        {"id": 1, "name": "George"},
        {"id": 2, "name": "John"},
    ]


def test_list_empty(run):
    """Listing with no customers prints nothing (or an empty JSON array)."""
    assert run("list").stdout == ""
    assert json.loads(run("list", "--json").stdout) == []


def test_add_duplicate_id_fails(run):
    """A second customer with the same id is rejected and the first is kept."""
    assert run("add", "1", "George").exit_code == 0

    result = run("add", "1", "Paul")
    assert result.exit_code == 1
    assert "Customer with id 1 already exists." in result.output

    assert run("list").stdout.strip() == "1\tGeorge"


@pytest.mark.parametrize("args", [["1", ""], ["1", "   "], ["x", "George"]])
def test_add_rejects_bad_input(run, args):
    """Blank names and non-integer ids are usage errors."""
    result = run("add", *args)
    assert result.exit_code == 2


def test_verbose_shows_info(run):
    """-v enables INFO output on the console; the default does not."""
    quiet = run("init")
    assert not re.search(r"schema ready at", quiet.output)

    verbose = run("-v", "init")
    assert verbose.exit_code == 0
    assert re.search(r"INFO", verbose.output)
    assert re.search(r"schema ready", verbose.output)


@pytest.mark.slow
def test_add_and_list_against_postgres(pg_url):
    """The CLI works end to end against a real Postgres."""
    runner = CliRunner(env={"CUSTOMER_SERVICE_DB_URL": pg_url})
    try:
        for cid, name in (("1", "George"), ("2", "John")):
            result = runner.invoke(customer_service, [*BASE_ARGS, "add", cid, name])
            assert result.exit_code == 0, result.output
        result = runner.invoke(customer_service, [*BASE_ARGS, "list", "--json"])
        assert result.exit_code == 0
        assert {c["name"] for c in json.loads(result.stdout)} == {"George", "John"}
    finally:
        with ConnectionProvider(pg_url).get_connection() as conn:
            conn.exec_driver_sql("DROP TABLE IF EXISTS customers")
            conn.commit()
