"""Custom exceptions for depcheck."""


class DepcheckError(Exception):
    """Base exception for all depcheck errors."""


class UsageError(DepcheckError):
    """Raised when the checker is called incorrectly (e.g. no completion callback)."""


class ManifestError(DepcheckError):
    """Raised when a manifest exists but cannot be interpreted."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid manifest {path}: {reason}")


class InstallError(DepcheckError):
    """Raised when a delegated install/prune command fails."""

    def __init__(self, cmd: list[str], returncode: int | None, stderr: str = ""):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            detail = stderr or "could not be started"
        else:
            detail = f"exit {returncode}: {stderr}" if stderr else f"exit {returncode}"
        super().__init__(f"{' '.join(cmd)} failed ({detail})")
