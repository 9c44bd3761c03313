"""Domain errors."""


class InvalidArgumentError(ValueError):
    """Raised when an operation is called with an argument it cannot accept.

    Out-of-range indices and empty lists are not errors; only precondition
    violations at the call site (non-positive step, size or count, missing
    callbacks, zero divisors) raise this.
    """
