"""Error kinds raised while decoding shares and recovering f(0).

Every error is terminal for the computation it interrupts. Each class
keeps the closest builtin as a second parent so callers that only know
about ValueError / ZeroDivisionError still catch them.
"""


class RecoveryError(Exception):
    """Base class. `kind` names the failure independently of the message."""

    kind = "RecoveryError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidBase(RecoveryError, ValueError):
    kind = "InvalidBase"

    def __init__(self, base, reason: str = "invalid base"):
        super().__init__(f"{reason}: {base}")
        self.base = base


class InvalidDigit(RecoveryError, ValueError):
    kind = "InvalidDigit"

    def __init__(self, char: str, base: int | None = None):
        if not char:
            msg = "empty digit string"
        elif base is None:
            msg = f"invalid digit: {char!r}"
        else:
            msg = f"digit {char!r} not valid in base {base}"
        super().__init__(msg)
        self.char = char
        self.base = base


class ZeroDenominator(RecoveryError, ZeroDivisionError):
    kind = "ZeroDenominator"

    def __init__(self):
        super().__init__("denominator = 0")


class DivisionByZero(RecoveryError, ZeroDivisionError):
    kind = "DivisionByZero"

    def __init__(self):
        super().__init__("divide by zero")


class DuplicateX(RecoveryError, ValueError):
    kind = "DuplicateX"

    def __init__(self, x: int):
        super().__init__(f"duplicate x encountered: {x}")
        self.x = x


class ZeroX(RecoveryError, ValueError):
    kind = "ZeroX"

    def __init__(self):
        super().__init__("x_i = 0 not supported in barycentric at x=0")


class InsufficientPoints(RecoveryError, ValueError):
    kind = "InsufficientPoints"

    def __init__(self, required: int, available: int):
        super().__init__(
            f"not enough distinct x's to reach k={required} (have {available})")
        self.required = required
        self.available = available


class MalformedDocument(RecoveryError, ValueError):
    """Input document is unreadable or missing a required field."""

    kind = "MalformedDocument"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
