#!/usr/bin/env python3
import json
import logging
import warnings

import click

from census_geocoder.core.config import settings
from census_geocoder.geocode import CensusGeocoder, GeocodingWarning, InvalidUsage


# -----------------------------
# CLI entry point
# -----------------------------
@click.command()
@click.argument("words", nargs=-1, required=True)
@click.option("--host", default=None, help="Geocoder endpoint (host and path, no scheme)")
@click.option("--min-interval", type=float, default=None, help="Minimum seconds between API calls")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(words, host, min_interval, verbose):
    """Geocode a U.S. address, e.g.: census-geocode 1600 Pennsylvania Avenue NW, Washington DC"""
    logging.basicConfig(
        level=logging.DEBUG if verbose or settings.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    location = " ".join(words)

    try:
        # soft failures already reach the log through the geocoder's logger
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", GeocodingWarning)
            result = CensusGeocoder(host=host, min_interval=min_interval).geocode(location)
    except InvalidUsage as e:
        raise click.UsageError(str(e))
    if result is None:
        raise click.ClickException("geocoding failed")

    click.echo(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
