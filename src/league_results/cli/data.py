from __future__ import annotations

import json

import typer

from league_results.cli.common import configure_logging, gateway_scope
from league_results.core.enums import DataProviderEnum
from league_results.providers.table_store.provider import TableStoreProvider

app = typer.Typer(help="Read and update league data through the configured provider.")


@app.callback()
def main(
    ctx: typer.Context,
    provider: DataProviderEnum | None = typer.Option(
        None, "--provider", help="Override DATA_PROVIDER for this command."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Override LOG_LEVEL."),
) -> None:
    configure_logging(log_level)
    ctx.obj = provider


@app.command("show")
def show(
    ctx: typer.Context,
    location: str | None = typer.Option(None, "--location", help="Only show one location."),
    league: str | None = typer.Option(
        None, "--league", help="Only show one league (requires --location)."
    ),
) -> None:
    """Print league data as JSON."""
    if league and not location:
        raise typer.BadParameter("--league requires --location")

    with gateway_scope(ctx.obj) as gateway:
        data = gateway.get_all_data()

    selected: object = data
    if location:
        if location not in data:
            typer.echo(f"Unknown location: {location}", err=True)
            raise typer.Exit(code=1)
        selected = data[location]
        if league:
            if league not in data[location]:
                typer.echo(f"Unknown league: {location}/{league}", err=True)
                raise typer.Exit(code=1)
            selected = data[location][league]

    typer.echo(json.dumps(selected, indent=2, ensure_ascii=False))


@app.command("submit-result")
def submit_result(
    ctx: typer.Context,
    location: str = typer.Argument(..., help="Location key, e.g. EU."),
    league: str = typer.Argument(..., help="League key within the location."),
    group: str = typer.Argument(..., help="Group key within the league."),
    week: str = typer.Argument(..., help="Week key the result belongs to."),
    home: str = typer.Option(..., "--home", help="Home team."),
    away: str = typer.Option(..., "--away", help="Away team."),
    score: str = typer.Option(..., "--score", help="Final score, e.g. 2-1."),
) -> None:
    """Append one result record."""
    record = {"home": home, "away": away, "score": score}

    with gateway_scope(ctx.obj) as gateway:
        ok = gateway.submit_result(location, league, group, week, record)
        provider_key = gateway.provider_key

    if not ok:
        typer.echo(f"Result was not saved (provider={provider_key}).", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Saved {home} vs {away} ({score}) to {location}/{league}/{group} week {week}.")


@app.command("seed")
def seed(ctx: typer.Context) -> None:
    """Create the table-store schema if needed and seed an empty backend from the static data."""
    with gateway_scope(ctx.obj) as gateway:
        if isinstance(gateway.provider, TableStoreProvider):
            gateway.provider.create_schema()
        data = gateway.get_all_data()
        provider_key = gateway.provider_key

    typer.echo(f"League data ready on {provider_key} ({len(data)} locations).")
