"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details
"""


class ThorSigError(Exception):
    pass


class InvalidArgumentError(ThorSigError):
    """
    A precondition on a public entry point was violated. These are programming
    errors and are never retried.
    """

    pass


def verifyPrecondition(assertionResult, errorMessage):
    """
    Raise an InvalidArgumentError if the assertion doesn't hold.

    Args:
        assertionResult bool: the evaluated precondition.
        errorMessage str: the message carried by the error.

    Raises:
        InvalidArgumentError if assertionResult is falsy.
    """
    if not assertionResult:
        raise InvalidArgumentError(errorMessage)
