from __future__ import annotations

import typer

from league_results.cli.data import app as data_app

app = typer.Typer(no_args_is_help=True)
app.add_typer(data_app, name="data")
