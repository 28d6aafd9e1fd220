"""Quickstart example for currencyinfo.

This example demonstrates formatting, stripping and detecting currency
amounts with cached locale-currency profiles.

Note: fr-CA renders with no-break spaces; the output below shows them as
ordinary spaces.
"""

from decimal import Decimal

from currencyinfo import (
    Assumption,
    InvalidLocaleError,
    UnsupportedCurrencyError,
    cad,
    detect,
    get_profile,
    is_valid_amount,
    usd,
)

# Example 1: Formatting
print("=" * 50)
print("Example 1: Formatting")
print("=" * 50)

print(usd().format(1234.5))
# Output: $1,234.50

print(cad().format(Decimal("123456789.123")))
# Output: 123 456 789,12 $

print(get_profile("GBP", "en-GB").format("1234.5"))
# Output: £1,234.50

# Example 2: Stripping
print("\n" + "=" * 50)
print("Example 2: Stripping")
print("=" * 50)

print(repr(usd().strip("$1,234.56")))
# Output: Decimal('1234.56')

print(repr(cad().strip("1 234,56 $")))
# Output: Decimal('1234.56')

amount = usd().strip("1 234,56 $")
print(is_valid_amount(amount))
# Output: False (en-US cannot read a French Canadian amount)

# Example 3: Profiles
print("\n" + "=" * 50)
print("Example 3: Profile Facts")
print("=" * 50)

profile = get_profile("USD", "en-CA")
print(profile)
# Output: CurrencyProfile(currency='USD', locale='en-CA', group_separator=',', ...)
print(get_profile("USD", "en-CA") is profile)
# Output: True

# Example 4: Detection
print("\n" + "=" * 50)
print("Example 4: Detection")
print("=" * 50)

for text in ("$1,234.56", "1 234,56 $", "$1", "abc"):
    result = detect(text)
    if result is None:
        print(f"{text!r}: not detected")
    else:
        print(f"{text!r}: {result.currency} {result.locale} amount={result.amount} score={result.score:.2f}")
# Output:
# '$1,234.56': USD en-US amount=1234.56 score=1.00
# '1 234,56 $': CAD fr-CA amount=1234.56 score=1.00
# '$1': USD en-US amount=1 score=0.33
# 'abc': not detected

result = detect(42, assume=Assumption("en-US", "USD"))
assert result is not None
print(result.formatted, result.score)
# Output: $42.00 0.0

result = detect("£99.99", currencies=["GBP", "EUR"], languages=["en"], countries=["GB", "IE"])
assert result is not None
print(result.currency, result.locale)
# Output: GBP en-GB

# Example 5: Errors
print("\n" + "=" * 50)
print("Example 5: Errors")
print("=" * 50)

try:
    get_profile("XYZ")
except UnsupportedCurrencyError as e:
    print(e)
# Output:
# error[UNSUPPORTED_CURRENCY]: Currency value XYZ is not supported
#   = currency: XYZ
#   = help: Use an ISO 4217 code known to CLDR, such as USD or EUR

try:
    get_profile("USD", "en_US")
except InvalidLocaleError as e:
    print(e.locale)
# Output: en_US

error = get_profile("XYZ", raise_on_error=False)
print(type(error).__name__)
# Output: UnsupportedCurrencyError
