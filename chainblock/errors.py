class ChainblockError(Exception):
    """Base class for chainblock errors."""


class NotFoundError(ChainblockError, KeyError):
    """Raised when an id, sender, receiver or status group is not in the store."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class RecordLoadError(ChainblockError):
    """Raised when a transactions file cannot be read or is malformed."""
