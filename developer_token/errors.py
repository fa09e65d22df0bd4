"""
Errors raised while minting a developer token.

Every failure surfaces as a TokenError. The subclass tells the caller which
stage failed; the original exception is chained as __cause__.
"""


class TokenError(Exception):
    kind = None

    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"{self.kind} error: {detail}")


class SerializationError(TokenError):
    """Header or claims could not be turned into JSON."""
    kind = 'serialization'


class CryptoError(TokenError):
    """The private key could not be loaded, or signing failed."""
    kind = 'crypto'


class ClockError(TokenError):
    """The system time cannot be expressed as seconds since the epoch."""
    kind = 'clock'
