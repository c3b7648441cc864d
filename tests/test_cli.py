"""Tests for the ratings CLI."""

import json

import pytest
from typer.testing import CliRunner

from ratings_spine.cli import app

runner = CliRunner()


@pytest.fixture
def ratings_file(tmp_path, raw_rating):
    path = tmp_path / "ratings.json"
    path.write_text(json.dumps([raw_rating, dict(raw_rating, ticker="AMD", target_from=120)]))
    return path


def test_check_valid(ratings_file):
    result = runner.invoke(app, ["check", str(ratings_file)])

    assert result.exit_code == 0
    assert "OK: 2 ratings valid" in result.output


def test_check_invalid(tmp_path, raw_rating):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([raw_rating, dict(raw_rating, target_to="??")]))

    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 1


def test_check_not_an_array(tmp_path, raw_rating):
    path = tmp_path / "single.json"
    path.write_text(json.dumps(raw_rating))

    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 1


def test_ingest_memory_backend(monkeypatch, ratings_file):
    monkeypatch.setenv("RATINGS_STORE_BACKEND", "memory")

    result = runner.invoke(app, ["ingest", str(ratings_file)])

    assert result.exit_code == 0
    assert "Stored 2 ratings" in result.output


def test_migrate_missing_directory(tmp_path):
    result = runner.invoke(app, ["db", "migrate", "--migrations-path", str(tmp_path / "nope")])
    assert result.exit_code == 1
