# exceptions.py


class CancelAction(Exception):
    """User typed 'cancel' at a cancellable prompt."""


class UnknownScreenError(LookupError):
    def __init__(self, screen_name: str):
        super().__init__(f"No screen registered under {screen_name!r}")
        self.screen_name = screen_name


class StorageError(OSError):
    """Storage directory could not be prepared at startup."""
