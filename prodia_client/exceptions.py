"""Custom exceptions for the Prodia client."""


class ProdiaClientError(Exception):
    """Base exception for all Prodia client errors."""
    pass


class ConfigurationError(ProdiaClientError):
    """Client configuration is incomplete (e.g. no API token)."""
    pass


class CapacityError(ProdiaClientError):
    """The service could not schedule the job with the current token."""
    pass


class UserError(ProdiaClientError):
    """The job reached the service but was rejected as invalid."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BadResponseError(ProdiaClientError):
    """The service answered with an unexpected non-2xx status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"{status_code} {reason}")


class ResponseDecodeError(ProdiaClientError):
    """A successful response did not carry a usable job part."""
    pass


class OutputReadError(ProdiaClientError):
    """The binary output of a job could not be read."""
    pass
