"""
================================================================================
utmconv Command-Line Interface (CLI)
================================================================================

This module provides the command-line interface for the UTM/UPS converter.
It uses the Click library for argument parsing, help text and error handling.

AVAILABLE COMMANDS:
-------------------
1. convert - Convert one coordinate (the default command)
   Usage: utmconv -latlon 32.28305 -106.80035
          utmconv -utm 13S 330459 3573233
          utmconv                      (runs the built-in self-test)

2. test - Check the installation (imports, settings, pyproj agreement)
   Usage: utmconv test

3. version - Show version information
   Usage: utmconv version

EXAMPLES:
---------
# Lat/lon in decimal degrees or DMS
utmconv -latlon 34.111397 -119.330528
utmconv -latlon "34°6'41.03\\"N" "119°19'49.9\\"W" --dms

# Grid zone is case-insensitive
utmconv -utm 13s 330459 3573233

# Another datum, and compare against pyproj
utmconv -latlon 45 -93 --datum Clarke1866 --check

License: MIT
================================================================================
"""

# ==============================================================================
# IMPORTS
# ==============================================================================

import sys
from typing import Any, Dict, List, Optional

import click

from config import get_settings
from geodesy import Datum, UnknownDatumError, __version__, dms_to_decimal
from tools import UTMConverter
from utils.coordinate_parsing import parse_angle
from utils.logger import get_logger, setup_logger

logger = get_logger(__name__)

# Fixed self-test point: 34°6'41.03"N 119°19'49.9"W
SELF_TEST_LATITUDE = dms_to_decimal(34, 6, 41.03)
SELF_TEST_LONGITUDE = -1 * dms_to_decimal(119, 19, 49.9)

HELP_OPTIONS = ["-h", "--help"]
CONTEXT_SETTINGS = {"help_option_names": HELP_OPTIONS}

KNOWN_COMMANDS = ["convert", "test", "version", *HELP_OPTIONS]


# ==============================================================================
# PARAMETER TYPES & FORMATTING
# ==============================================================================

class AngleType(click.ParamType):
    """Decimal degrees or a DMS string such as 34°6'41.03"N."""

    name = "angle"

    def convert(self, value, param, ctx):
        if isinstance(value, float):
            return value
        parsed = parse_angle(value)
        if parsed is None:
            self.fail(f"{value!r} is not a valid angle", param, ctx)
        return parsed


ANGLE = AngleType()


def format_decimal(value: float, places: int) -> str:
    """Up to ``places`` decimals with trailing zeros dropped (34.1, not 34.100000)."""
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_result_line(latlon: Dict[str, float], utm: Dict[str, Any]) -> str:
    settings = get_settings()
    lat = format_decimal(latlon["latitude"], settings.latlon_decimals)
    lon = format_decimal(latlon["longitude"], settings.latlon_decimals)
    x = format_decimal(utm["easting"], settings.utm_decimals)
    y = format_decimal(utm["northing"], settings.utm_decimals)
    return f"Lat/lon: {lat} {lon} UTM: {utm['grid_zone']} {x},{y}"


def format_dms_line(dms: Dict[str, Dict[str, Any]]) -> str:
    places = get_settings().dms_seconds_decimals
    parts = []
    for key in ("latitude", "longitude"):
        d = dms[key]
        seconds = format_decimal(d["seconds"], places)
        parts.append(f"{d['degrees']}°{d['minutes']}'{seconds}\"{d['hemisphere']}")
    return "DMS: " + " ".join(parts)


def _echo_result(converter: UTMConverter, result: Dict[str, Any], show_dms: bool, check: bool) -> None:
    if not result["success"]:
        raise click.ClickException(result["error"])

    click.echo(format_result_line(result["latlon"], result["utm"]))

    if show_dms:
        click.echo(format_dms_line(result["dms"]))

    if check:
        latlon = result["latlon"]
        report = converter.cross_check(latlon["latitude"], latlon["longitude"])
        status = "OK" if report["agrees"] else "MISMATCH"
        ref = report["reference"]
        click.echo(
            f"Check: pyproj {ref['easting']:.3f},{ref['northing']:.3f} "
            f"delta {report['delta_m']:.4f} m [{status}]"
        )


# ==============================================================================
# CLI GROUP
# ==============================================================================

@click.group(context_settings=CONTEXT_SETTINGS)
def cli():
    """
    utmconv - Lat/lon <-> UTM/UPS coordinate converter.

    \b
    QUICK START:
    ------------
    utmconv -latlon 32.28305 -106.80035
    utmconv -utm 13S 330459 3573233
    utmconv                              (self-test)

    \b
    GETTING HELP:
    -------------
    - utmconv --help           (this text)
    - utmconv convert --help   (all conversion options)
    """
    pass


# ==============================================================================
# CONVERT COMMAND
# ==============================================================================

@cli.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-latlon", "latlon",
    nargs=2,
    type=ANGLE,
    metavar="LAT LON",
    help="Convert a latitude/longitude to UTM/UPS",
)
@click.option(
    "-utm", "utm",
    type=(str, float, float),
    metavar="ZONE EASTING NORTHING",
    help="Convert a UTM/UPS coordinate to latitude/longitude",
)
@click.option(
    "--datum", "-d",
    default=None,
    help="WGS84 (default), GRS80 or Clarke1866",
)
@click.option(
    "--dms",
    "show_dms",
    is_flag=True,
    help="Also print degrees/minutes/seconds",
)
@click.option(
    "--check",
    is_flag=True,
    help="Compare the result with pyproj",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable detailed debug logging",
)
def convert(latlon, utm, datum, show_dms, check, verbose):
    """
    Convert a coordinate between lat/lon and UTM/UPS.

    With neither -latlon nor -utm, converts a fixed test point
    (34°6'41.03"N 119°19'49.9"W) to UTM and back.

    \b
    EXAMPLES:
    ---------
    utmconv convert -latlon 32.28305 -106.80035
    utmconv convert -utm 13S 330459 3573233 --dms
    """
    setup_logger(level="DEBUG" if verbose else None)

    if latlon and utm:
        raise click.UsageError("Use either -latlon or -utm, not both.")

    try:
        converter = UTMConverter(datum=datum)
    except UnknownDatumError as exc:
        raise click.BadParameter(str(exc), param_hint="--datum")

    if utm:
        zone, easting, northing = utm
        _echo_result(converter, converter.utm_to_latlon(zone, easting, northing), show_dms, check)
        return

    if latlon:
        _echo_result(converter, converter.latlon_to_utm(*latlon), show_dms, check)
        return

    # Self-test: forward, then invert the grid coordinate we just produced.
    # The cross-check covers the forward leg only.
    logger.debug("Running self-test on %s", converter.datum.value)
    there = converter.latlon_to_utm(SELF_TEST_LATITUDE, SELF_TEST_LONGITUDE)
    _echo_result(converter, there, show_dms, check)
    grid = there["utm"]
    back = converter.utm_to_latlon(grid["grid_zone"], grid["easting"], grid["northing"])
    _echo_result(converter, back, show_dms, check=False)


# ==============================================================================
# VERSION COMMAND
# ==============================================================================

@cli.command()
def version():
    """
    Display utmconv version information.

    \b
    EXAMPLE:
    --------
    $ utmconv version
    utmconv version 0.1.0
    """
    click.echo(f"utmconv version {__version__}")


# ==============================================================================
# TEST COMMAND
# ==============================================================================

@cli.command()
def test():
    """
    Test the utmconv installation and configuration.

    \b
    CHECKS PERFORMED:
    -----------------
    1. Configuration loading
    2. Self-test round trip on every datum
    3. Agreement with pyproj (optional dependency check)
    """
    click.echo("🔧 Testing utmconv installation...")
    click.echo("")

    # -------------------------------------------------------------------------
    # Test 1: Configuration loading
    # -------------------------------------------------------------------------
    click.echo("1. Testing configuration...")
    try:
        settings = get_settings()
        click.echo(f"   [OK] Configuration loaded (default datum: {settings.default_datum})")
    except Exception as e:
        click.echo(f"   [ERROR] Configuration error: {e}", err=True)
        raise click.Abort()

    # -------------------------------------------------------------------------
    # Test 2: Round trip on every datum
    # -------------------------------------------------------------------------
    click.echo("\n2. Testing round trips...")
    failures = 0
    for datum in Datum:
        converter = UTMConverter(datum=datum)
        there = converter.latlon_to_utm(SELF_TEST_LATITUDE, SELF_TEST_LONGITUDE)
        grid = there["utm"]
        back = converter.utm_to_latlon(grid["grid_zone"], grid["easting"], grid["northing"])["latlon"]
        error = max(abs(back["latitude"] - SELF_TEST_LATITUDE), abs(back["longitude"] - SELF_TEST_LONGITUDE))
        if error < 1e-5:
            click.echo(f"   [OK] {datum.value}: {grid['grid_zone']} (error {error:.1e}°)")
        else:
            failures += 1
            click.echo(f"   [ERROR] {datum.value}: round trip off by {error:.1e}°", err=True)

    # -------------------------------------------------------------------------
    # Test 3: pyproj agreement
    # -------------------------------------------------------------------------
    click.echo("\n3. Testing agreement with pyproj...")
    try:
        report = UTMConverter().cross_check(SELF_TEST_LATITUDE, SELF_TEST_LONGITUDE)
        status = "[OK]" if report["agrees"] else "[WARNING]"
        click.echo(f"   {status} delta {report['delta_m']:.4f} m")
    except ImportError as e:
        click.echo(f"   [INFO] pyproj not available: {e}")

    click.echo("\n" + "=" * 50)
    if failures:
        click.echo(f"❌ {failures} datum(s) failed the round trip", err=True)
        raise click.Abort()
    click.echo("✅ utmconv installation test completed!")
    click.echo("=" * 50)


# ==============================================================================
# MAIN ENTRY POINT
# ==============================================================================

def route_args(argv: List[str]) -> List[str]:
    """
    Insert the 'convert' subcommand when it was left out.

    'utmconv -latlon 32 -106' and a bare 'utmconv' both mean 'convert'.
    """
    if not argv or argv[0] not in KNOWN_COMMANDS:
        return ["convert", *argv]
    return list(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI (console script ``utmconv``)."""
    args = route_args(sys.argv[1:] if argv is None else argv)
    cli.main(args=args, prog_name="utmconv")


# ==============================================================================
# SCRIPT ENTRY
# ==============================================================================

if __name__ == '__main__':
    main()
