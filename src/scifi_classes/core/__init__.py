from scifi_classes.core.exceptions import QuoteFileError, ScifiClassesError

__all__ = [
    "QuoteFileError",
    "ScifiClassesError",
]
