import json
import logging
from typing import Any, List, Optional

import requests
import typer

from http_request.clients import RequestsClient
from http_request.configs import load_config, setup_logging
from http_request.errors import HttpRequestError
from http_request.executor import HttpRequestExecutor
from http_request.request import HttpRequest
from http_request.utils import parse_pair, parse_pairs, parse_value

logger = logging.getLogger(__name__)

app = typer.Typer(help="Build and send HTTP requests from the command line")

HeaderOption = typer.Option(None, "--header", "-H", help="Request header as NAME:VALUE")
QueryOption = typer.Option(None, "--query", "-q", help="Query string parameter as KEY=VALUE")
BodyOption = typer.Option(None, "--body", "-d", help="Request body; parsed as JSON when --json is set")
JsonOption = typer.Option(True, "--json/--no-json", help="Send and parse JSON")
ExtraOption = typer.Option(None, "--option", "-o", help="Extra client option as KEY=VALUE")
FullOption = typer.Option(False, "--full", help="Print status and headers as well as the body")
ConfigOption = typer.Option(None, "--config", help="Path to a YAML configuration file")


def _echo_result(result: Any) -> None:
    if isinstance(result, requests.Response):
        typer.echo(f"HTTP {result.status_code} {result.reason}")
        for name, value in result.headers.items():
            typer.echo(f"{name}: {value}")
        typer.echo("")
        typer.echo(result.text)
    elif isinstance(result, (dict, list)):
        typer.echo(json.dumps(result, indent=2, ensure_ascii=False))
    elif result is not None:
        typer.echo(result)


def _send(
    method: str,
    url: str,
    headers: Optional[List[str]],
    query: Optional[List[str]],
    body: Optional[str],
    use_json: bool,
    options: Optional[List[str]],
    full: bool,
    config_path: Optional[str],
) -> None:
    config = load_config(config_path)
    setup_logging(config)
    try:
        req = HttpRequest.create(HttpRequestExecutor(RequestsClient.from_config(config)))
        req.set_url(url).set_json(use_json)
        for item in headers or []:
            req.set_header(*parse_pair(item, ":"))
        if query:
            req.set_qs(parse_pairs(query, coerce=False))
        if body is not None:
            req.set_body(parse_value(body) if use_json else body)
        for key, value in parse_pairs(options or []).items():
            req.set_option(key, value)
        if full:
            req.set_resolve_with_full_response(True)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    logger.debug("Sending %s", req)
    try:
        result = req.execute(method)
    except HttpRequestError as exc:
        typer.echo(f"{exc.title}: {exc.message}", err=True)
        raise typer.Exit(code=1) from exc
    except requests.RequestException as exc:
        logger.debug("Request failed", exc_info=True)
        typer.echo(f"Request failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    _echo_result(result)


@app.command()
def get(
    url: str,
    header: Optional[List[str]] = HeaderOption,
    query: Optional[List[str]] = QueryOption,
    json_: bool = JsonOption,
    option: Optional[List[str]] = ExtraOption,
    full: bool = FullOption,
    config: Optional[str] = ConfigOption,
):
    """Send a GET request."""
    _send("get", url, header, query, None, json_, option, full, config)


@app.command()
def post(
    url: str,
    header: Optional[List[str]] = HeaderOption,
    query: Optional[List[str]] = QueryOption,
    body: Optional[str] = BodyOption,
    json_: bool = JsonOption,
    option: Optional[List[str]] = ExtraOption,
    full: bool = FullOption,
    config: Optional[str] = ConfigOption,
):
    """Send a POST request."""
    _send("post", url, header, query, body, json_, option, full, config)


@app.command()
def put(
    url: str,
    header: Optional[List[str]] = HeaderOption,
    query: Optional[List[str]] = QueryOption,
    body: Optional[str] = BodyOption,
    json_: bool = JsonOption,
    option: Optional[List[str]] = ExtraOption,
    full: bool = FullOption,
    config: Optional[str] = ConfigOption,
):
    """Send a PUT request."""
    _send("put", url, header, query, body, json_, option, full, config)


@app.command()
def delete(
    url: str,
    header: Optional[List[str]] = HeaderOption,
    query: Optional[List[str]] = QueryOption,
    json_: bool = JsonOption,
    option: Optional[List[str]] = ExtraOption,
    full: bool = FullOption,
    config: Optional[str] = ConfigOption,
):
    """Send a DELETE request."""
    _send("delete", url, header, query, None, json_, option, full, config)


if __name__ == "__main__":
    app()
