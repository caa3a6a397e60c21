"""Error taxonomy for the forecast client."""


class InternalError(Exception):
    """Infrastructure failure, as opposed to bad caller input."""

    def __init__(self, message: str, code: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code


class ClientRequestError(InternalError):
    """The request never produced a usable answer from StormGlass."""

    def __init__(self, message: str):
        super().__init__(
            f"Unexpected error when trying to communicate to StormGlass: {message}"
        )


class StormGlassResponseError(InternalError):
    """StormGlass answered, but with an error status."""

    def __init__(self, body: str, status_code: int):
        super().__init__(
            f"Unexpected error returned by the StormGlass service: "
            f"Error: {body} Code: {status_code}"
        )
        self.status_code = status_code
