"""
Exception hierarchy for verifiable secret sharing.

Parameter errors also derive from ValueError so that callers which only
catch ValueError keep working.
"""


class VSSError(Exception):
    """Base class for all secret sharing errors."""


class ConfigurationError(VSSError, ValueError):
    """Invalid parts/threshold combination or unknown curve."""


class InputError(VSSError, ValueError):
    """Secret is missing or outside the field."""


class RandomSourceError(VSSError):
    """The entropy source failed or produced no usable value."""


class NotOnCurveError(VSSError, ValueError):
    """A share or commitment does not belong to the curve group."""


class CommitmentLengthMismatchError(VSSError, ValueError):
    """Commitment count does not match the threshold for the scheme."""


class NoModularInverseError(VSSError, ArithmeticError):
    """A Lagrange denominator has no inverse modulo the field order."""
