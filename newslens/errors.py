"""Exception types shared by the proxy, the services and the client."""


class NewsLensError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(NewsLensError):
    """Required configuration (such as the Gemini API key) is missing."""


class MissingFieldError(NewsLensError):
    """A request did not carry a field the action needs."""


class UpstreamError(NewsLensError):
    """The Gemini API call failed or returned nothing."""


class ResponseFormatError(NewsLensError):
    """The model reply could not be parsed into the expected structure."""


class ClientError(NewsLensError):
    """Raised by NewsLensClient when a proxy call fails."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
