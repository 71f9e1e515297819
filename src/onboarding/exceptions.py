"""Onboarding wizard exceptions for Deal Match."""


class OnboardingError(Exception):
    """Base exception for onboarding wizard errors."""

    pass


class UnknownFieldError(OnboardingError):
    """Raised when a field name is not part of the draft record."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Unknown draft field: {field}")


class StepIndexError(OnboardingError):
    """Raised when a step index is outside the wizard's step range."""

    def __init__(self, index: int, step_count: int):
        self.index = index
        self.step_count = step_count
        super().__init__(f"Step index {index} out of range (0-{step_count - 1})")


class AlreadySubmittedError(OnboardingError):
    """Raised when a wizard that already produced a profile is submitted again."""

    def __init__(self):
        super().__init__("Registration has already been submitted")
