"""
evonet Exceptions Module

Defines the exceptions raised while decoding a genome and activating the
resulting network.

Exception Hierarchy:
    EvonetError (base)
    ├── ConfigurationError
    └── InvalidInputError

Both concrete errors also derive from ValueError, so code that already
guards network construction or evaluation with 'except ValueError' keeps
working.

Connections whose source or target node is missing from the genome are
not errors: they are dropped while wiring the network.
"""

class EvonetError(Exception):
    """Base exception for all evonet errors."""

class ConfigurationError(EvonetError, ValueError):
    """
    The genome cannot be decoded under the current configuration.

    Raised when a node's activation selector cannot be resolved to a function,
    or when the genome has fewer nodes than the configured number of sensor
    and output nodes. Decoding is aborted and no network is returned.
    """

class InvalidInputError(EvonetError, ValueError):
    """
    A network was activated with the wrong number of inputs.

    Raised before any node signal is touched, so the network remains usable.
    """

    def __init__(self, expected: int, received: int):
        super().__init__(f"Expected {expected} inputs, got {received}")
        self.expected = expected
        self.received = received
