from __future__ import annotations

import logging
import sys

import click

from mime_to_ext.lookup import ext_to_mime, mime_to_ext, mime_to_exts
from mime_to_ext.utils import enable_logs

USAGE = "usage: mime-to-ext <mime-type|extension>"
UNKNOWN = "?"
EXIT_MISSING_ARGUMENT = 1
EXIT_UNKNOWN = 2


@click.command()
@click.argument("query", required=False)
@click.option("-p", "--preferred", is_flag=True, help="Print only the preferred extension of a MIME type.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logs.")
def main(query: str | None, preferred: bool, verbose: bool) -> None:
    """Look up the extensions of a MIME type, or the MIME type of an extension."""
    if verbose:
        enable_logs(logging.DEBUG)
    if query is None:
        click.echo(USAGE, err=True)
        sys.exit(EXIT_MISSING_ARGUMENT)
    output = lookup(query, preferred)
    if output is None:
        click.echo(UNKNOWN)
        sys.exit(EXIT_UNKNOWN)
    click.echo(output)


def lookup(query: str, preferred: bool = False) -> str | None:
    if "/" not in query:
        return ext_to_mime(query)
    if preferred:
        return mime_to_ext(query)
    extensions = mime_to_exts(query)
    if extensions is None:
        return None
    return ", ".join(extensions)


if __name__ == "__main__":
    main()
