from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests
from typer.testing import CliRunner

from http_request.cli import main as cli
from http_request.clients import BaseHttpClient

runner = CliRunner()


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    mock = MagicMock(spec=BaseHttpClient)
    factory = MagicMock()
    factory.from_config.return_value = mock
    monkeypatch.setattr(cli, "RequestsClient", factory)
    monkeypatch.setattr(cli, "setup_logging", lambda config: None)
    return mock


def test_get_prints_json_response(client: MagicMock) -> None:
    client.get.return_value = {"items": [1, 2]}

    result = runner.invoke(
        cli.app,
        ["get", "https://example.org", "-H", "X-Token: abc", "-q", "page=4", "-q", "query=some string"],
    )

    assert result.exit_code == 0, result.output
    client.get.assert_called_once_with(
        {
            "url": "https://example.org",
            "headers": {"X-Token": "abc"},
            "json": True,
            "qs": {"page": "4", "query": "some string"},
        }
    )
    assert '"items"' in result.output


def test_post_parses_json_body_and_options(client: MagicMock) -> None:
    client.post.return_value = "created"

    result = runner.invoke(
        cli.app,
        ["post", "https://example.org", "--body", '{"name": "widget"}', "-o", "timeout=5"],
    )

    assert result.exit_code == 0, result.output
    client.post.assert_called_once_with(
        {"url": "https://example.org", "json": True, "body": {"name": "widget"}, "timeout": 5}
    )
    assert "created" in result.output


def test_put_without_json_sends_raw_body(client: MagicMock) -> None:
    client.put.return_value = None

    result = runner.invoke(cli.app, ["put", "https://example.org", "--no-json", "--body", "{raw"])

    assert result.exit_code == 0, result.output
    client.put.assert_called_once_with({"url": "https://example.org", "json": False, "body": "{raw"})


def test_delete_full_response(client: MagicMock) -> None:
    response = requests.Response()
    response.status_code = 200
    response.reason = "OK"
    response.headers["Content-Type"] = "text/plain"
    response._content = b"gone"
    response.encoding = "utf-8"
    client.delete.return_value = response

    result = runner.invoke(cli.app, ["delete", "https://example.org", "--full"])

    assert result.exit_code == 0, result.output
    assert client.delete.call_args.args[0]["resolveWithFullResponse"] is True
    assert "HTTP 200 OK" in result.output
    assert "Content-Type: text/plain" in result.output
    assert "gone" in result.output


def test_empty_url_reports_bad_request(client: MagicMock) -> None:
    result = runner.invoke(cli.app, ["get", ""])

    assert result.exit_code == 1
    assert "Bad Request" in result.output
    client.get.assert_not_called()


def test_transport_error_exits_with_failure(client: MagicMock) -> None:
    client.get.side_effect = requests.ConnectionError("refused")

    result = runner.invoke(cli.app, ["get", "https://example.org"])

    assert result.exit_code == 1
    assert "Request failed: refused" in result.output


def test_malformed_header_is_rejected(client: MagicMock) -> None:
    result = runner.invoke(cli.app, ["get", "https://example.org", "-H", "no-separator"])

    assert result.exit_code != 0
    client.get.assert_not_called()


def test_query_values_are_sent_verbatim(client: MagicMock) -> None:
    client.get.return_value = None

    result = runner.invoke(
        cli.app, ["get", "https://example.org", "-q", "v=1.10", "-q", "n=null", "-q", "e=1e3"]
    )

    assert result.exit_code == 0, result.output
    assert client.get.call_args.args[0]["qs"] == {"v": "1.10", "n": "null", "e": "1e3"}
