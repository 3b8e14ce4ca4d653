class OWMError(Exception):
    """Base class for every error raised by the client."""


class FetchError(OWMError):
    """The service could not be reached or its response could not be read."""

    def __init__(self, message: str = "owm: error while getting weather data"):
        super().__init__(message)


class NotFoundError(OWMError):
    """The service answered but does not know the queried location."""

    def __init__(self, message: str = "city not found"):
        self.service_message = message
        super().__init__(f"owm: {message}")


class DecodeError(OWMError):
    """The response body does not match the expected record shape."""

    def __init__(self, message: str = "owm: error while decoding weather"):
        super().__init__(message)
