"""Command-line interface for medline-loader."""

import logging
from pathlib import Path

import click

from medline_loader.config import get_settings
from medline_loader.db.session import create_tables, get_db, make_engine
from medline_loader.errors import FatalParseError
from medline_loader.services.pipeline import load_file
from medline_loader.services.sink import CitationSink

_database_url_option = click.option(
    "--database-url",
    default=None,
    help="SQLAlchemy database URL (defaults to DATABASE_URL / settings).",
)


@click.group()
@click.version_option(package_name="medline-loader")
def main():
    """medline-loader: load MEDLINE citation XML into a citations table."""
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command("init-db")
@_database_url_option
def init_db(database_url: str | None):
    """Create the citations table if it does not exist."""
    engine = make_engine(database_url)
    create_tables(engine)
    click.echo(f"Tables ready in {engine.url.render_as_string(hide_password=True)}")


@main.command()
@click.argument(
    "file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@_database_url_option
@click.option(
    "--create-tables",
    "create",
    is_flag=True,
    help="Create the citations table before loading.",
)
def load(file: Path, database_url: str | None, create: bool):
    """Load every citation in FILE (.xml or .xml.gz)."""
    db_gen = get_db(database_url)
    db = next(db_gen)
    try:
        if create:
            create_tables(db.get_bind())
        report = load_file(
            file,
            CitationSink(db),
            on_row=lambda row: click.echo(".", nl=False),
            on_failure=lambda failure: click.echo(
                f"\n{failure.pmid}: {failure.reason}"
            ),
        )
    except FatalParseError as e:
        click.echo()
        raise click.ClickException(f"Nothing loaded: {e}")
    finally:
        db_gen.close()

    click.echo(f"\n{report.persisted} loaded, {report.failed} failed")


if __name__ == "__main__":
    main()
