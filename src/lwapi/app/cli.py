from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from enum import Enum
from typing import Iterator, Optional

import httpx
import typer
from typing_extensions import Annotated

from .container import Container
from ..config.settings import AppConfig
from ..core.domain.enums import InventoryType
from ..core.domain.models import Filter, InventorySearch
from ..core.errors import LwApiError


app = typer.Typer(add_completion=False, help="Cloud-security API v2 client")


class LogLevel(str, Enum):
    OFF = "OFF"
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


@app.callback()
def main(
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option("--log-level", help="Set log level (OFF, CRITICAL, ERROR, WARNING, INFO, DEBUG). Default: OFF"),
    ] = None,
) -> None:
    """Configure logging for the lwapi package when requested."""
    if log_level in (None, LogLevel.OFF):
        return

    level = logging.getLevelNamesMapping().get(log_level.value, logging.INFO)
    logger = logging.getLogger("lwapi")

    # avoid duplicate stream handlers on repeated invocations
    has_stream = any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s | %(name)s | %(message)s"))
        logger.addHandler(handler)

    logger.propagate = False
    logger.setLevel(level)


@contextmanager
def provide_container() -> Iterator[Container]:
    container = Container()
    try:
        container.config.from_pydantic(AppConfig())
        container.init_resources()
        yield container
    except (LwApiError, httpx.HTTPError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    finally:
        container.shutdown_resources()


def _parse_time(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise typer.BadParameter(f"invalid ISO-8601 time: {value}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _parse_filters(values: list[str]) -> list[Filter]:
    filters: list[Filter] = []
    for raw in values:
        field, sep, value = raw.partition("=")
        if not sep or not field:
            raise typer.BadParameter(f"expected FIELD=VALUE, got: {raw}")
        filters.append(Filter(field=field.strip(), expression="eq", value=value.strip()))
    return filters


@app.command(help="List alerts (all pages). Columns: ID, severity, status, name.")
def alerts(
    start: str | None = typer.Option(None, help="Range start, ISO-8601 (default: 24h before end)"),
    end: str | None = typer.Option(None, help="Range end, ISO-8601 (default: now)"),
    sort: str = typer.Option("id", help="Sort order: id | severity"),
) -> None:
    start_dt, end_dt = _parse_time(start), _parse_time(end)
    with provide_container() as container:
        resp = container.list_alerts_uc().execute(start=start_dt, end=end_dt)
        if sort == "severity":
            resp.sort_by_severity()
        else:
            resp.sort_by_id()
        print(f"{'ID':>10} {'Severity':10} {'Status':8} Name")
        for a in resp.data:
            print(f"{a.id:>10} {a.severity or '-':10} {a.status or '-':8} {a.name or '-'}")
        typer.echo(f"Total: {resp.data_length()}")


@app.command(help="List machine details from the last 7 days (all pages).")
def machines() -> None:
    with provide_container() as container:
        resp = container.list_machines_uc().execute()
        print(f"{'MID':>8} {'Hostname':40} OS")
        for m in resp.data:
            os_s = f"{m.os or '-'} {m.os_version or ''}".strip()
            print(f"{m.mid if m.mid is not None else '-':>8} {m.hostname or '-':40} {os_s}")
        typer.echo(f"Total: {resp.data_length()}")


@app.command(help=(
    "Search the resource inventory, sliding back through the search history "
    "until a window with data is found, then list every page of it."
))
def inventory(
    csp: str = typer.Option("AWS", help="Cloud provider: AWS, Azure or GCP"),
    filter: list[str] = typer.Option([], "--filter", "-f", help="Equality filter FIELD=VALUE (repeatable), e.g. urn=arn:aws:s3:::bucket"),
) -> None:
    try:
        csp_type = InventoryType.from_str(csp)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    search = InventorySearch(csp=csp_type, filters=_parse_filters(filter))
    with provide_container() as container:
        resp = container.search_inventory_uc().execute(search)
        print(f"{'Type':30} {'Region':15} URN")
        for r in resp.data:
            print(f"{r.resource_type or '-':30} {r.resource_region or '-':15} {r.urn or '-'}")
        typer.echo(f"Total: {resp.data_length()}")


@app.command(help="List container vulnerabilities from the last 7 days (all pages).")
def vulnerabilities() -> None:
    with provide_container() as container:
        resp = container.search_vulnerabilities_uc().execute()
        print(f"{'Vulnerability':20} {'Severity':10} {'Status':10} Image")
        for v in resp.data:
            print(f"{v.vuln_id or '-':20} {v.severity or '-':10} {v.status or '-':10} {v.image_id or '-'}")
        typer.echo(f"Total: {resp.data_length()}")


if __name__ == "__main__":  # pragma: no cover
    app()
