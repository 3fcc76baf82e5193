"""Error taxonomy for the project generator.

Every failure of an external operation maps to one ``ScaffoldError``
subclass.  ``ValidationError`` is the only one that is expected to be
handled locally (the prompt layer re-asks); the others propagate to the
top-level handler in :func:`rn_scaffold.pipeline.main`.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for every error raised by a generation stage."""

    stage: str = "scaffold"

    def __init__(
        self,
        message: str,
        command: str = "",
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class ValidationError(ScaffoldError, ValueError):
    """Raised when a prompt answer is rejected."""

    stage = "prompt"


class CloneError(ScaffoldError):
    """Raised when the template repository cannot be cloned."""

    stage = "fetch"


class FilesystemError(ScaffoldError):
    """Raised when the cloned template cannot be detached from its history."""

    stage = "fetch"


class RenameError(ScaffoldError):
    """Raised when the rename utility fails or cannot be spawned."""

    stage = "rename"


class InstallError(ScaffoldError):
    """Raised when a package manager invocation exits non-zero."""

    stage = "install"


class NativeInstallError(ScaffoldError):
    """Raised when the native (CocoaPods) installer fails."""

    stage = "pods"


class GitError(ScaffoldError):
    """Raised when ``git init``, ``add`` or ``commit`` fails."""

    stage = "repo-init"
