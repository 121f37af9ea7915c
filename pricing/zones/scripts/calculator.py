"""
Zone Shipping Cost Calculator
=============================

Interactive CLI tool to price a single shipment by destination zone.

Usage:
    python -m pricing.zones.scripts.calculator
"""

from pricing.zones.lookup import ZoneQuote, quote_destination
from pricing.zones.data import DEFAULT_PROFIT_MARKUP_PERCENT
from pricing.zones.version import VERSION


def get_user_input() -> dict:
    """Prompt user for shipment details."""
    print("\n=== DMX Zone Shipping Cost Calculator ===")
    print(f"Version: {VERSION}\n")

    country = input("Destination country: ").strip()
    weight = float(input("Weight (kg): "))

    markup_input = input(f"Markup % [default: {DEFAULT_PROFIT_MARKUP_PERCENT}]: ").strip()
    if markup_input:
        markup = float(markup_input)
    else:
        markup = DEFAULT_PROFIT_MARKUP_PERCENT

    return {
        "country": country,
        "weight_kg": weight,
        "markup_percent": markup,
    }


def print_results(quote: ZoneQuote | None, shipment: dict) -> None:
    """Print calculation results."""
    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    if quote is None:
        print(f"\nUnsupported destination: '{shipment['country']}'")
        print("No pricing zone covers this country.\n")
        return

    print(f"\nDestination: {quote.country} ({quote.zone_label})")
    print(f"Weight: {quote.weight_kg} kg")

    print("\n--- Price ---")
    print(f"Carrier cost:       NGN {quote.carrier_cost:>10,}")
    print(f"Markup:             {quote.markup_percent:>13}%")
    print(f"                    {'=' * 14}")
    print(f"SELL PRICE:         NGN {quote.sell_price:>10,}")
    print()


def main():
    """Main entry point."""
    try:
        shipment = get_user_input()

        quote = quote_destination(
            shipment["country"],
            shipment["weight_kg"],
            shipment["markup_percent"],
        )

        print_results(quote, shipment)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
