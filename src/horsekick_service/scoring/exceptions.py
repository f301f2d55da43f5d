"""
Model loading exceptions.
"""


class ModelLoadError(Exception):
    """
    Raised when a model artifact cannot be loaded.

    Covers a missing file, invalid JSON, and content that does not match the
    artifact schema. Startup aborts on this error.
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
