"""Domain-level exceptions.

Everything the package raises on purpose derives from ShowcaseError so the
CLI can catch it in one place. The record query service raises none of them.
"""


class ShowcaseError(Exception):
    """Base class for all showcase errors."""


class UnsupportedOperation(ShowcaseError, NotImplementedError):
    """A type was asked for a capability it claims but cannot honor.

    Only the legacy (principle-violating) variants raise this.
    """

    def __init__(self, subject: str, operation: str, reason: str) -> None:
        self.subject = subject
        self.operation = operation
        self.reason = reason
        super().__init__(f"{subject}.{operation}: {reason}")


class UnknownDemonstrationError(ShowcaseError, ValueError):
    """A demonstration name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown demonstration '{name}'. Available: {', '.join(available)}")
