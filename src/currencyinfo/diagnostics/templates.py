"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def unsupported_runtime(feature: str) -> Diagnostic:
        """Formatting backend is not importable.

        Args:
            feature: Name of the feature/function requiring the backend

        Returns:
            Diagnostic for UNSUPPORTED_RUNTIME
        """
        msg = f"{feature} requires Babel for CLDR locale data"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_RUNTIME,
            message=msg,
            hint="Install with: pip install currencyinfo (Babel is a required dependency)",
        )

    @staticmethod
    def unsupported_currency(currency: str) -> Diagnostic:
        """Currency code is not in the supported set.

        Args:
            currency: The rejected currency value

        Returns:
            Diagnostic for UNSUPPORTED_CURRENCY
        """
        msg = f"Currency value {currency} is not supported"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_CURRENCY,
            message=msg,
            hint="Use an ISO 4217 code known to CLDR, such as USD or EUR",
            currency=currency,
        )

    @staticmethod
    def invalid_locale(locale: str, reason: str) -> Diagnostic:
        """Locale tag failed canonicalization.

        Args:
            locale: The rejected locale tag
            reason: Why canonicalization failed

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        msg = f"Incorrect locale information provided: '{locale}' ({reason})"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Use a hyphenated BCP 47 tag such as 'en-US' or 'fr-CA'",
            locale=locale,
        )

    @staticmethod
    def formatting_failed(currency: str, locale: str, reason: str) -> Diagnostic:
        """Formatting service could not render an amount.

        Args:
            currency: Currency code used for rendering
            locale: Locale tag used for rendering
            reason: Underlying failure

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Currency formatting failed for {currency} in '{locale}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            currency=currency,
            locale=locale,
        )
