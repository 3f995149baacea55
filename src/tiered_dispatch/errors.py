"""Exceptions raised while building or dispatching through a handler chain."""


class ChainError(RuntimeError):
    """
    Base class for chain errors.
    """


class ChainConfigurationError(ChainError):
    """
    Raised when a chain is used or built in a way that breaks its preconditions
    (no handlers at all, an unknown tier kind, a non-handler link).
    """


__all__ = ["ChainError", "ChainConfigurationError"]
