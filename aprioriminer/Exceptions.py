# ############################# Apriori error types #############################
class AprioriError(Exception):
    """Base class for every error raised by aprioriminer."""


class InvalidArgumentError(AprioriError, ValueError):
    """Malformed input handed to a constructor, setter or loader."""


class InvalidStateError(AprioriError, RuntimeError):
    """The miner was asked to run before it was configured."""
