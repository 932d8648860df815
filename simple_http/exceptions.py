"""Exceptions for simple-http-utilities."""


class SimpleHttpError(Exception):
    """Base exception for all simple-http-utilities errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize SimpleHttpError.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(self.message)


class ConfigError(SimpleHttpError):
    """Raised when the client configuration is invalid."""


class ValidationError(SimpleHttpError):
    """Raised when an input field is missing, empty, unknown or malformed."""

    def __init__(
        self,
        field: str,
        function_name: str,
        reason: str = "input must not be empty",
    ) -> None:
        """
        Initialize ValidationError.

        Args:
            field: Name of the offending input field
            function_name: Name of the function that rejected the input
            reason: What is wrong with the field
        """
        self.field = field
        self.function_name = function_name
        self.reason = reason
        super().__init__(f"{function_name}: {reason}: {field}")


class ParseError(SimpleHttpError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, error: str, response: str) -> None:
        """
        Initialize ParseError.

        Args:
            error: The parser's error message
            response: The raw response body that failed to parse
        """
        self.error = error
        self.response = response
        super().__init__(
            f"The response is not valid JSON. {{error:{error}, response:{response}}}"
        )


class TransportError(SimpleHttpError):
    """Raised when the connection or the response stream fails."""
