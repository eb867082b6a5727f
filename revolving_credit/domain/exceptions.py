"""Domain-specific exceptions"""

from decimal import Decimal


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Calculation input was rejected before any computation"""

    pass


class MissingInputError(ValidationError):
    """A required field is absent or empty"""

    pass


class InvalidNumericValueError(ValidationError):
    """A numeric field could not be parsed or is not finite"""

    pass


class NegativeValueError(ValidationError):
    """A numeric field that must be non-negative was negative"""

    pass


class InvalidDateRangeError(ValidationError):
    """Dates are unparseable or the end date is not after the start date"""

    pass


class InsufficientPaymentError(ValidationError):
    """Payment does not exceed monthly interest, so the balance can never be paid off"""

    def __init__(self, message: str, monthly_interest: Decimal, minimum_payment: Decimal):
        super().__init__(message)
        self.monthly_interest = monthly_interest
        self.minimum_payment = minimum_payment


class CalculationError(DomainException):
    """Arithmetic produced a value that cannot be reported (e.g. non-finite)"""

    pass
