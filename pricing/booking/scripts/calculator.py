"""
Booking Price Calculator
========================

Interactive CLI tool to show the price breakdown for a single booking.

Usage:
    python -m pricing.booking.scripts.calculator
"""

from pricing.booking.price import BookingPriceBreakdown, calculate_booking_price
from pricing.booking.version import VERSION


def _ask_yes_no(prompt: str) -> bool:
    return input(f"{prompt} (y/N): ").strip().lower() in ("y", "yes")


def get_user_input() -> dict:
    """Prompt user for booking details."""
    print("\n=== DMX Booking Price Calculator ===")
    print(f"Version: {VERSION}\n")

    weight = float(input("Weight (kg): "))

    declared_input = input("Declared value [default: 0]: ").strip()
    declared_value = float(declared_input) if declared_input else 0.0

    premium_insurance = _ask_yes_no("Premium insurance?")
    fragile = _ask_yes_no("Fragile items?")

    return {
        "weight_kg": weight,
        "declared_value": declared_value,
        "premium_insurance": premium_insurance,
        "fragile": fragile,
    }


def print_results(price: BookingPriceBreakdown, booking: dict) -> None:
    """Print calculation results."""
    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    print(f"\nBooking: {booking['weight_kg']} kg, declared value {booking['declared_value']:,.2f}")

    print("\n--- Cost Breakdown ---")
    print(f"Base shipping:      NGN {price.base_shipping:>10,}")
    print(f"Fuel surcharge:     NGN {price.fuel_surcharge:>10,}")
    if price.insurance > 0:
        print(f"Insurance:          NGN {price.insurance:>10,}")
    if price.fragile_fee > 0:
        print(f"Fragile fee:        NGN {price.fragile_fee:>10,}")

    print(f"                    {'-' * 14}")
    print(f"Subtotal:           NGN {price.subtotal_before_vat:>10,}")
    print(f"VAT:                NGN {price.vat:>10,}")
    print(f"                    {'=' * 14}")
    print(f"TOTAL:              NGN {price.grand_total:>10,}")
    print()


def main():
    """Main entry point."""
    try:
        booking = get_user_input()
        price = calculate_booking_price(**booking)
        print_results(price, booking)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
