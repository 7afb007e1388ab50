"""Command line tool for retrieving a Nanoleaf authorization token."""

from __future__ import annotations

import asyncio
import logging

import click

from pynanoleaf.const import DEFAULT_PORT
from pynanoleaf.exceptions import NanoleafError
from pynanoleaf.pairing import request_token


@click.command()
@click.option(
    "--host",
    envvar="NANOLEAF_HOST",
    help="The host name or IP address of the Nanoleaf product. Prompted for when omitted.",
)
@click.option(
    "--port",
    envvar="NANOLEAF_PORT",
    type=int,
    default=DEFAULT_PORT,
    show_default=True,
    help="Port of the local Nanoleaf API.",
)
@click.option("--debug/--normal", default=False)
@click.version_option(package_name="pynanoleaf")
def main(host: str | None, port: int, debug: bool) -> None:
    """Retrieve an authorization token from a Nanoleaf product in pairing mode.

    Hold down the power button for 5-7 seconds to enter pairing mode before
    running this command.
    """
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)

    click.echo("[!] Prior to starting, make sure to hold down the power button for 5-7 seconds to enter pairing mode.")

    if host is None:
        host = click.prompt("What's the IP of your Nanoleaf product?")

    try:
        token = asyncio.run(request_token(host, port))
    except NanoleafError as err:
        raise click.ClickException(str(err)) from err

    click.echo(f"[!] Authorization token: {token}")


if __name__ == "__main__":
    main()
