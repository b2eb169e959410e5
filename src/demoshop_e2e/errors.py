"""Custom exceptions for the Demo Web Shop suite."""


class DemoShopError(Exception):
    """Base exception for all demoshop_e2e errors."""

    pass


class ValidationError(DemoShopError):
    """Raised when input data (line items, addresses, test data) is malformed."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        if field:
            message = f"{field}: {message}"
        super().__init__(message)


class NotFoundError(DemoShopError):
    """Raised when a referenced product or category does not exist."""

    def __init__(self, name: str, kind: str = "product"):
        self.name = name
        self.kind = kind
        super().__init__(f"{kind.capitalize()} not found: {name!r}")


class MismatchError(DemoShopError):
    """Raised when a computed value disagrees with the one reported by the page."""

    def __init__(self, label: str, expected, actual):
        self.label = label
        self.expected = expected
        self.actual = actual
        super().__init__(f"{label} mismatch: expected {expected}, got {actual}")


class InvalidStateError(DemoShopError):
    """Raised when a checkout step is attempted out of order."""

    def __init__(self, operation: str, current, required=None):
        self.operation = operation
        self.current = current
        self.required = required
        msg = f"Cannot {operation} in state {_state_name(current)}"
        if required is not None:
            msg = f"{msg} (requires {_state_name(required)})"
        super().__init__(msg)


class ParseError(DemoShopError):
    """Raised when a money string cannot be parsed."""

    def __init__(self, text: str | None, reason: str | None = None):
        self.text = text
        msg = f"Cannot parse money value from {text!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class ProtocolError(DemoShopError):
    """Raised when a collaborator returns data of an unexpected shape."""

    def __init__(self, message: str, raw: str | None = None):
        self.raw = raw
        if raw is not None:
            message = f"{message}: {raw!r}"
        super().__init__(message)


class DriverTimeoutError(DemoShopError):
    """Raised by the page driver when the browser does not respond in time."""

    def __init__(self, action: str, selector: str, timeout_ms: float | None = None):
        self.action = action
        self.selector = selector
        self.timeout_ms = timeout_ms
        msg = f"Timed out during {action} on {selector!r}"
        if timeout_ms is not None:
            msg = f"{msg} after {timeout_ms:.0f}ms"
        super().__init__(msg)


def _state_name(state) -> str:
    return getattr(state, "name", str(state))
