"""
Domain exceptions for HETU validation.

Malformed codes never raise: they are rejected with a plain False. These
exceptions cover programmer errors only.
"""


class InvalidOptionsError(ValueError):
    """
    Raised when validation options cannot be built.

    Covers unknown option keys, non-boolean flag values and option objects
    of an unsupported type.
    """

    pass
