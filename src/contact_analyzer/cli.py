"""Contact Analyzer Command Line Interface."""

import click

from contact_analyzer.logging import configure_logging
from contact_analyzer.services import ContactService
from contact_analyzer.spreadsheet import SpreadsheetError, read_contacts
from contact_analyzer.store import InMemoryContactStore


@click.group()
def main():
    """Contact Analyzer - validate and clean up contact spreadsheets."""
    pass


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--max-rows", "-m", default=50, show_default=True,
              help="Data rows to read from the sheet")
@click.option("--only-invalid", is_flag=True, help="Only list contacts with errors")
def check(path: str, max_rows: int, only_invalid: bool):
    """Validate every contact in an .xlsx file."""
    configure_logging()

    with open(path, "rb") as f:
        try:
            contacts = read_contacts(f, max_rows=max_rows)
        except SpreadsheetError as e:
            click.secho(f"✗ {e}", fg="red")
            raise SystemExit(1)

    service = ContactService(InMemoryContactStore())
    service.save_batch(contacts)
    results = service.validate_all()

    invalid = 0
    for result in results:
        contact = result.contact
        if result.is_valid:
            if not only_invalid:
                click.secho(f"  ✓ {contact.client_key:10} {contact.name}", fg="green")
            continue

        invalid += 1
        click.secho(f"  ✗ {contact.client_key:10} {contact.name}", fg="red")
        for error in result.errors:
            click.echo(f"      {error.field:10} {error.kind.value:18} {error.message}")

    color = "red" if invalid else "green"
    click.secho(f"{len(results)} contacts, {invalid} with errors", fg=color)

    if invalid:
        raise SystemExit(1)


@main.command()
@click.option("--host", "-h", default="0.0.0.0", help="Host to bind")
@click.option("--port", "-p", default=8080, help="Port to bind")
def serve(host: str, port: int):
    """Start the API server."""
    from contact_analyzer.app import create_app

    app = create_app()
    click.echo(f"Starting Contact Analyzer API on {host}:{port}")
    app.run(host=host, port=port, threaded=True)


if __name__ == "__main__":
    main()
