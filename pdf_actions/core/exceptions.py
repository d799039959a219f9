"""
Error types raised by the document actions.

Provider failures are not wrapped: whatever the provider SDK raises reaches
the caller as-is.
"""


class InvalidArgumentError(ValueError):
    """Raised when an action input fails local validation.

    Always raised before a session is opened, so no remote call is made.
    """


class EmptyResultError(RuntimeError):
    """Raised when the provider completes a job without producing output"""
