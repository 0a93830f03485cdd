"""
Application errors
"""


class ValidationError(Exception):
    """
    User input rejected before it reached the store.

    missing holds the names of required fields that were absent or empty;
    it is empty when every field was present but some value was malformed
    or referenced a row that does not exist.
    """

    def __init__(self, message: str, missing=None):
        super().__init__(message)
        self.message = message
        self.missing = list(missing or [])

    @property
    def is_missing_fields(self) -> bool:
        return bool(self.missing)
