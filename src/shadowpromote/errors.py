"""Domain errors for shadowpromote."""


class PromoteError(RuntimeError):
    """Raised when the promotion cannot be attempted or continued."""


class TransportError(PromoteError):
    """Raised when the connection to the metadata server fails or breaks."""


class ProtocolError(TransportError):
    """Raised when the metadata server replies with a malformed packet."""
