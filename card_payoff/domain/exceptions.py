"""Domain-specific exceptions"""

from card_payoff.domain.models import Schedule


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationFailure(DomainException):
    """A required input is missing, non-positive or otherwise unusable"""

    pass


class PolicyInfeasible(DomainException):
    """Inputs are individually valid but the payment can never retire the debt"""

    def __init__(self, message: str, minimum_required_payment: float):
        super().__init__(message)
        self.minimum_required_payment = minimum_required_payment


class HorizonExceeded(DomainException):
    """Schedule hit the horizon cap with the balance still outstanding"""

    def __init__(self, schedule: Schedule):
        super().__init__(
            f"Debt not paid off after {schedule.months} months "
            f"(remaining balance {schedule.remaining_balance:.2f})"
        )
        self.schedule = schedule
