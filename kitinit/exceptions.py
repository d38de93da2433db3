"""kitinit exception classes."""


class KitInitError(Exception):
    """Base exception for all kitinit errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(KitInitError):
    """Raised when options or environment configuration are invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class InvalidReferenceError(KitInitError):
    """Raised when a string is not a supported HuggingFace repository reference."""

    def __init__(self, message: str, value: str, code: str = "INVALID_REFERENCE") -> None:
        super().__init__(code, message)
        self.value = value


class HostMismatchError(InvalidReferenceError):
    """Raised when a repository URL points at a host other than the trusted one."""

    def __init__(self, hostname: str, value: str) -> None:
        super().__init__(
            f"unsupported hostname: {hostname!r} (only huggingface.co is supported)",
            value,
            code="HOST_MISMATCH",
        )
        self.hostname = hostname


class FilesystemAccessError(KitInitError):
    """Raised when a path cannot be checked for a reason other than not existing."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__("FILESYSTEM_ACCESS", f"cannot access {path!r}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class OutputExistsError(KitInitError):
    """Raised when refusing to overwrite an existing output file."""

    def __init__(self, path: str) -> None:
        super().__init__(
            "OUTPUT_EXISTS", f"file already exists at {path}. Use '--force' to overwrite"
        )
        self.path = path


class SourceNotFoundError(KitInitError):
    """Raised when a local input does not exist and is not a repository reference."""

    def __init__(self, path: str) -> None:
        super().__init__("PATH_NOT_FOUND", f"path not found: {path}")
        self.path = path
