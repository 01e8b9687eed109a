class SSMError(Exception):
    """Base class for every error raised by the connection manager."""


class DecodeError(SSMError, ValueError):
    """A backing file holds invalid JSON or an unexpected shape."""

    def __init__(self, path, detail):
        self.path = path
        self.detail = detail
        super().__init__(f"Cannot decode {path}: {detail}")


class InvalidInput(SSMError, ValueError):
    """User supplied text that does not parse as an integer."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"'{text}' is not a valid number.")


class OutOfRange(SSMError, IndexError):
    """A 1-based index that falls outside [1, length]."""

    def __init__(self, index, length):
        self.index = index
        self.length = length
        super().__init__(f"Index {index} is out of range (1-{length}).")


class LaunchError(SSMError):
    """The SSH client could not be started."""


class SSHClientNotFound(LaunchError):
    """No usable SSH executable on this host."""
