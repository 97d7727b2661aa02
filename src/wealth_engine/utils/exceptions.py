"""
Exception Hierarchy
===================
Typed errors raised by the calculation engine.

Only parameter-domain violations on the projection / what-if entry points
and unusable holding numbers raise. Empty portfolios, zero totals and
zero-quantity holdings are normal inputs and never raise.
"""

from typing import Any, Optional


# =============================================================================
# BASE EXCEPTION HIERARCHY
# =============================================================================

class PortfolioEngineError(Exception):
    """
    Base exception for the calculation engine.

    All engine exceptions inherit from this to allow catching every
    engine failure with a single except clause.
    """
    pass


class InvalidParameterError(PortfolioEngineError, ValueError):
    """
    Caller supplied an out-of-domain parameter.

    Args:
        parameter: Name of the offending parameter
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, parameter: str, value: Any, reason: str):
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {parameter}={value!r}: {reason}")


class InvalidHorizonError(InvalidParameterError):
    """Raised when a projection horizon is negative or not an integer."""

    def __init__(self, horizon_years: Any, reason: str = "horizon must be an integer >= 0"):
        super().__init__("horizon_years", horizon_years, reason)


class InvalidContributionError(InvalidParameterError):
    """Raised when a contribution or lump-sum amount is negative or not finite."""

    def __init__(self, amount: Any, parameter: str = "monthly_contribution",
                 reason: str = "amount must be a finite number >= 0"):
        super().__init__(parameter, amount, reason)


class InvalidAgeRangeError(InvalidParameterError):
    """
    Raised when the retirement age is before the current age.

    Carries both ages so the UI can point at the right control.
    """

    def __init__(self, current_age: Any, retirement_age: Optional[Any] = None,
                 reason: str = "retirement age must not precede current age"):
        self.current_age = current_age
        self.retirement_age = retirement_age
        super().__init__(
            "age_range",
            (current_age, retirement_age),
            reason,
        )


# =============================================================================
# HOLDING ERRORS
# =============================================================================

class InvalidHoldingError(PortfolioEngineError, ValueError):
    """
    Raised when a holding carries a non-numeric quantity or price.

    Negative numbers are not errors: the normalizer clamps them to zero.

    Args:
        index: Position of the record in the input list
        field: Offending field name
        value: Raw value found in the record
    """

    def __init__(self, index: int, field: str, value: Any):
        self.index = index
        self.field = field
        self.value = value
        super().__init__(
            f"Holding #{index}: field '{field}' must be numeric, got {value!r}"
        )


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(PortfolioEngineError):
    """Raised when engine configuration content is invalid."""
    pass


class UnknownRegionError(ConfigurationError, KeyError):
    """Raised when a regional configuration is requested for an unsupported region."""

    def __init__(self, region: str, supported: Optional[list] = None):
        self.region = region
        self.supported = supported or []
        super().__init__(
            f"Regional configuration not found for: {region} "
            f"(supported: {', '.join(self.supported) or 'none'})"
        )

    def __str__(self) -> str:
        # KeyError quotes its message otherwise
        return self.args[0]
