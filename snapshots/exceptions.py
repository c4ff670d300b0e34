class SnapshotError(Exception):
    """Base class for failures raised while generating snapshot content."""


class EmptyResponseError(SnapshotError):
    """The model service returned no text where text was required."""


class ParseError(SnapshotError):
    """Model text was present but did not match the expected shape."""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Could not parse model response: {reason}")


class ServiceError(SnapshotError):
    """The model service call itself failed (network, auth, quota)."""
