"""Shared invariant errors for the container implementations."""


class InvariantError(Exception):
    """Raised when a container's structural invariant is violated."""
