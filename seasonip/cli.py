from __future__ import annotations

import logging
import sys

import typer

from seasonip.models import InvalidOctetRange, IpAddr, make_v4, make_v6, variant_tag
from seasonip.season import Season, describe, format_season, from_int, to_int
from seasonip.utils.logging import get_logger, setup_logging

app = typer.Typer(help="Season flags and IP address variants, printed to stdout.")
ip_app = typer.Typer(help="Build an IP address variant and print it.")
app.add_typer(ip_app, name="ip")

log = get_logger(__name__)


@app.callback()
def _root(
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-V",
            help="Log debug details to stderr.",
        ),
) -> None:
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


def _echo_ip(addr: IpAddr) -> None:
    typer.echo(f"{variant_tag(addr)} {addr}")


@app.command()
def demo() -> None:
    """
    Run the fixed walkthrough: season names, int conversions,
    the mood lines, and both IP variants.
    """
    log.info("Running demo sequence")

    typer.echo(format_season(Season.Winter))
    typer.echo(format_season(Season.Fall))

    as_integer = to_int(Season.Fall)
    typer.echo(f"{Season.Fall} is actually {as_integer}")

    as_season = from_int(2)
    typer.echo(f"2 is {as_season}")

    as_season2 = from_int(42)
    typer.echo(f"42 is {as_season2}")

    for season in (
            Season.Summer,
            Season.Winter,
            Season.Spring,
            Season.Fall,
            Season.WinterOrSpring,
            as_season2,
    ):
        typer.echo(describe(season))

    _echo_ip(make_v4(192, 168, 1, 1))
    _echo_ip(make_v6("::1"))


@app.command("describe")
def describe_cmd(
        value: int = typer.Argument(..., help="Integer season value, e.g. 4 or 42."),
) -> None:
    """Print the mood line for a season value."""
    typer.echo(describe(from_int(value)))


@app.command()
def season(
        value: int = typer.Argument(..., help="Integer season value."),
) -> None:
    """Print the season name for an integer and its bit pattern."""
    s = from_int(value)
    typer.echo(f"{value} is {s}")
    typer.echo(f"bits: {to_int(s):04b}")


@ip_app.command("v4")
def ip_v4(
        p0: int = typer.Argument(...),
        p1: int = typer.Argument(...),
        p2: int = typer.Argument(...),
        p3: int = typer.Argument(...),
        strict: bool = typer.Option(
            False,
            "--strict",
            help="Reject octets outside 0..255.",
        ),
) -> None:
    """Build a V4 variant from four octets."""
    try:
        addr = make_v4(p0, p1, p2, p3, strict=strict)
    except InvalidOctetRange as e:
        raise typer.BadParameter(str(e)) from e
    log.debug("Built %r", addr)
    _echo_ip(addr)


@ip_app.command("v6")
def ip_v6(
        value: str = typer.Argument(..., help="IPv6 text, taken verbatim."),
) -> None:
    """Build a V6 variant from text."""
    addr = make_v6(value)
    log.debug("Built %r", addr)
    _echo_ip(addr)


def main() -> None:
    """Entry point for console_scripts."""
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Interrupted by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
