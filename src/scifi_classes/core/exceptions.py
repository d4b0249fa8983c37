class ScifiClassesError(Exception):
    """Base exception for scifi_classes failures."""


class QuoteFileError(ScifiClassesError):
    """Raised when a quotes file is missing or cannot be read."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")
