"""Error types raised by blskeys."""


class DecodeError(ValueError):
    """Error decoding key material from bytes."""


class IncorrectSize(DecodeError):
    """Input length does not match the fixed size of the format."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class InvalidSecretKeyRange(DecodeError):
    """Decoded scalar is not strictly less than the curve order."""

    def __init__(self) -> None:
        super().__init__("Secret key must be less than the curve order")


class BadPoint(DecodeError):
    """Decoded bytes do not describe a valid G1 point."""


class RandomnessError(RuntimeError):
    """The randomness source failed to produce a usable value."""


class SecretKeyDestroyedError(RuntimeError):
    """A secret key was used after it was zeroized."""

    def __init__(self) -> None:
        super().__init__("Secret key has been zeroized")


class SigningError(ValueError):
    """The signing backend rejected the key or message."""
