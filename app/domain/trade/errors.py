"""
Domain-specific errors for the trade bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class TradeDomainError(Exception):
    """Base error for all trade domain errors."""

    kind = "trade"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ParseError(TradeDomainError):
    """Raised when raw text is not a well-formed trade-state document."""

    kind = "parse"

    def __init__(self, reason: str, location: str | None = None) -> None:
        if location:
            super().__init__(f"Malformed trade document at {location}: {reason}")
        else:
            super().__init__(f"Malformed trade document: {reason}")
        self.reason = reason
        self.location = location


class NavigationError(TradeDomainError):
    """Raised when a required node on the economic-terms path is absent.

    Attributes:
        step: Name of the missing node (e.g. "tradableProduct").
        path: Dotted path up to and including the missing node.
    """

    kind = "navigation"

    def __init__(self, step: str, path: str, message: str | None = None) -> None:
        super().__init__(message or f"Trade document has no {step} at {path}")
        self.step = step
        self.path = path


class TypeMismatchError(TradeDomainError):
    """Raised when a polymorphic field resolves to an unsupported variant."""

    kind = "type_mismatch"

    def __init__(self, field: str, variant: str, path: str | None = None) -> None:
        super().__init__(
            f"Unsupported {field} variant: {variant}. Expected contractualProduct."
        )
        self.field = field
        self.variant = variant
        self.path = path or field


class QualificationError(TradeDomainError):
    """Raised when the economic terms do not qualify for the product taxonomy."""

    kind = "qualification"

    def __init__(self, qualifier: str) -> None:
        super().__init__(f"Trade does not qualify as {qualifier}")
        self.qualifier = qualifier


class NegativeQuantityError(TradeDomainError):
    """Raised when a non-negative quantity is given a negative magnitude."""

    kind = "negative_quantity"

    def __init__(self, value: str) -> None:
        super().__init__(f"Quantity must not be negative, got {value}")
        self.value = value


class TransportError(TradeDomainError):
    """Raised when the trade document could not be retrieved."""

    kind = "transport"

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to retrieve trade document from {url}: {reason}")
        self.url = url
        self.reason = reason
