"""CLI tests for the newsmirror entry point."""

import json

import pytest
from asyncclick.testing import CliRunner

from newsmirror.main import app as main
from newsmirror.models import Record
from newsmirror.persistence.sink import JsonDatasetSink


def test_main_function_exists():
    """Test that the main function exists and is callable."""
    assert callable(main)


@pytest.mark.asyncio
async def test_main_command_help():
    runner = CliRunner()
    result = await runner.invoke(main, ["--help"])

    assert result.exit_code == 0
    assert "newsmirror" in result.output
    assert "scrape" in result.output
    assert "query" in result.output


@pytest.mark.asyncio
async def test_main_with_logging_status(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = await runner.invoke(main, ["logging-status"])

    assert result.exit_code == 0
    assert "Logging Configuration" in result.output


@pytest.mark.asyncio
async def test_scrape_writes_dataset(story, listing, httpx_mock, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NEWSMIRROR_BASE_URL", "https://news.example.com/news")
    httpx_mock.add_response(url="https://news.example.com/news?p=1", text=listing([story(5), story(6)], more=True))
    httpx_mock.add_response(url="https://news.example.com/news?p=2", text=listing([story(7)]))

    runner = CliRunner()
    result = await runner.invoke(main, ["scrape"])

    assert result.exit_code == 0, result.output
    data = json.loads((tmp_path / "data.json").read_text())
    assert [item["id"] for item in data] == [5, 6, 7]
    assert "Scrape Summary" in result.output


@pytest.mark.asyncio
async def test_scrape_failure_exits_non_zero(httpx_mock, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NEWSMIRROR_BASE_URL", "https://news.example.com/news")
    httpx_mock.add_response(url="https://news.example.com/news?p=1", status_code=502)

    runner = CliRunner()
    result = await runner.invoke(main, ["scrape"])

    assert result.exit_code == 1
    assert not (tmp_path / "data.json").exists()


@pytest.mark.asyncio
async def test_query_shows_sorted_slice(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    dataset = tmp_path / "data.json"
    await JsonDatasetSink(dataset).persist(
        [
            Record(id=1, title="Low scorer", points=1, comments=9),
            Record(id=2, title="High scorer", points=99, comments=0),
        ]
    )

    runner = CliRunner()
    result = await runner.invoke(main, ["--json", "query", "--order-by", "points", "--limit", "1"])

    assert result.exit_code == 0, result.output
    assert [item["id"] for item in json.loads(result.output)] == [2]


@pytest.mark.asyncio
async def test_query_without_dataset_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    runner = CliRunner()
    result = await runner.invoke(main, ["query"])

    assert result.exit_code == 1
    assert "No dataset" in result.output
