"""Bi-Directional Currency Text Examples.

currencytext works in both directions:
- Parse: messy display text -> float (parse_currency_string)
- Format: float -> display text (format_currency)

This enables invoice import, form normalization and re-rendering of
amounts between regional styles without knowing the input locale.

API Notes:
- parse_currency_string never raises; unreadable text becomes 0.0
- format_currency raises CurrencyTypeError (a TypeError) on bad input
- Options may be FormatOptions or a dict with camelCase or snake_case keys
"""

import logging

from currencytext import (
    CurrencyTypeError,
    FormatOptions,
    NegativeFormat,
    NegativeStyle,
    extract_digits,
    format_currency,
    parse_currency_string,
)
from currencytext.parsing import classify, is_valid_amount

RUPIAH = FormatOptions(decimal=True, suffix_currency="Rp ")


def example_invoice_processing() -> None:
    """Invoice totals from pasted Indonesian amounts."""
    print("[Example 1] Invoice Processing")
    print("-" * 60)

    user_input = "Rp 1.234.567,89"
    subtotal = parse_currency_string(user_input)
    if not is_valid_amount(subtotal) or subtotal == 0.0:
        print("Failed to parse subtotal")
        return
    print(f"User input: {user_input!r} -> {subtotal}")

    vat = subtotal * 0.11
    total = subtotal + vat
    print(f"Subtotal: {format_currency(subtotal, RUPIAH)}")
    print(f"VAT 11%:  {format_currency(vat, RUPIAH)}")
    print(f"Total:    {format_currency(total, RUPIAH)}")
    # Output: Total:    Rp 1.370.370,36


def example_mixed_locale_input() -> None:
    """The same amount typed in different regional styles."""
    print("\n[Example 2] Mixed Locale Input")
    print("-" * 60)

    for text in ("1.234,56", "1,234.56", "CHF 1'234.56", "1 234,56"):
        result = classify(text.replace("CHF ", "").replace("'", "").replace(" ", ""))
        amount = parse_currency_string(text)
        print(f"  {text!r:16} -> {amount:>10} (rule: {result.rule})")


def example_indian_grouping() -> None:
    """Lakh / crore grouping in both directions."""
    print("\n[Example 3] Indian Grouping")
    print("-" * 60)

    amount = parse_currency_string("1,23,45,678.90")
    print(f"Parsed:  {amount}")
    print(f"Indian:  {format_currency(amount, {'decimal': True, 'indianFormat': True})}")
    # Output: Indian:  1,23,45,678.90
    print(f"Default: {format_currency(amount, {'decimal': True})}")
    # Output: Default: 12.345.678,90


def example_negative_styles() -> None:
    """Sign presentation for ledgers and statements."""
    print("\n[Example 4] Negative Styles")
    print("-" * 60)

    styles: dict[str, NegativeFormat] = {
        "dash": NegativeFormat(),
        "dash + space": NegativeFormat(space=True),
        "brackets": NegativeFormat(style=NegativeStyle.BRACKETS),
        "abs": NegativeFormat(style=NegativeStyle.ABS),
        "custom": NegativeFormat(custom=lambda text: f"{text} CR"),
    }
    for name, negative in styles.items():
        options = FormatOptions(decimal=True, suffix_currency="$ ", negative_format=negative)
        print(f"  {name:13} {format_currency(-1500.5, options)}")


def example_rounding() -> None:
    """Rounding modes at two places."""
    print("\n[Example 5] Rounding Modes")
    print("-" * 60)

    for mode in ("round", "ceil", "floor", "truncate"):
        text = format_currency(1.005, {"decimal": True, "roundedDecimal": mode})
        print(f"  {mode:9} 1.005 -> {text}")


def example_form_validation() -> None:
    """Reject bad option values at the API boundary."""
    print("\n[Example 6] Form Validation")
    print("-" * 60)

    try:
        format_currency(100, {"totalDecimal": -1})
    except CurrencyTypeError as error:
        print(error)

    phone = "+62 812-3456-7890"
    print(f"Digits only: {phone!r} -> {extract_digits(phone)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("Bi-Directional Currency Text Examples")
    print("=" * 60)

    example_invoice_processing()
    example_mixed_locale_input()
    example_indian_grouping()
    example_negative_styles()
    example_rounding()
    example_form_validation()

    print("\n" + "=" * 60)
    print("All examples completed!")
    print("=" * 60)
