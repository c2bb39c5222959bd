"""repo-inspect exception classes."""


class RepoInspectError(Exception):
    """Base exception for all repo-inspect errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(RepoInspectError):
    """Raised when client configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ArgumentError(RepoInspectError):
    """Raised when the repository argument is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__("ARGUMENT_ERROR", message)


class ResolutionError(RepoInspectError):
    """Raised when the current repository cannot be determined."""

    def __init__(self, message: str) -> None:
        super().__init__("RESOLUTION_ERROR", message)


class FormatError(RepoInspectError):
    """Raised for an unsupported output format."""

    def __init__(self, output_format: str) -> None:
        super().__init__(
            "FORMAT_ERROR", f"unsupported output format: {output_format}"
        )
        self.output_format = output_format


class EncodingError(RepoInspectError):
    """Raised when the output encoder fails."""

    def __init__(self, message: str) -> None:
        super().__init__("ENCODING_ERROR", message)


class AuthenticationError(RepoInspectError):
    """Raised when the token is missing, expired or invalid."""

    pass


class AuthorizationError(RepoInspectError):
    """Raised when access is denied."""

    pass


class NotFoundError(RepoInspectError):
    """Raised when a resource is not found."""

    pass


class ValidationError(RepoInspectError):
    """Raised on other client errors."""

    pass


class ServerError(RepoInspectError):
    """Raised on server errors (5xx) and connection failures."""

    pass
