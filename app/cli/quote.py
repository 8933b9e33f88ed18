# app/cli/quote.py
import asyncio
import json
import logging
import sys

import click

from app.core.exceptions import RateValidationError
from app.services.shipping.data import DEFAULT_CARRIERS
from app.services.shipping.factory import get_carrier
from app.services.shipping.rate_engine import RateEngine, fixed_jitter
from app.services.shipping.service import RateService

logger = logging.getLogger(__name__)


def _format_table(response) -> str:
    lines = [f"{response.route}  ({response.weight:g}kg)", ""]
    lines.append(f"{'Carrier':<14} {'Service':<22} {'Price':>9}  Transit")
    for rate in response.rates:
        lines.append(f"{rate.carrier:<14} {rate.service:<22} {rate.price:>9.2f}  {rate.transit}")
    return "\n".join(lines)


@click.command()
@click.argument('origin')
@click.argument('destination')
@click.option('--weight', default=None, help='Shipment weight in kg (unparseable values fall back to 1)')
@click.option('--collection-postcode', default=None, help='Collection postcode (informational)')
@click.option('--delivery-postcode', default=None, help='Delivery postcode (informational)')
@click.option('--carrier', 'carriers', multiple=True, help='Only quote this carrier (repeatable), e.g. --carrier FedEx')
@click.option('--no-jitter', is_flag=True, help='Disable the +/-10% price variation')
@click.option('--json', 'as_json', is_flag=True, help='Print the JSON response envelope')
def quote(origin, destination, weight, collection_postcode, delivery_postcode, carriers, no_jitter, as_json):
    """Quote simulated shipping rates from ORIGIN to DESTINATION country."""
    try:
        profiles = [get_carrier(name) for name in dict.fromkeys(carriers)] if carriers else DEFAULT_CARRIERS
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    jitter = fixed_jitter(1.0) if no_jitter else None
    service = RateService(RateEngine(carriers=profiles, jitter=jitter))

    payload = {
        "collection_country": origin,
        "delivery_country": destination,
        "weight": weight,
        "collection_postcode": collection_postcode,
        "delivery_postcode": delivery_postcode,
    }

    try:
        response = asyncio.run(service.get_rates(payload))
    except RateValidationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(response.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
    else:
        click.echo(_format_table(response))


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(levelname)s - %(message)s')
    quote()
