from __future__ import annotations


class PlaceStepError(Exception):
    """Base class for every error raised inside the place step."""


class QueryRejectedError(PlaceStepError):
    """The search input was refused before any network call was made."""


class RecommendationGatewayError(PlaceStepError):
    pass


class RecommendationServerError(RecommendationGatewayError):
    """The backend answered, but the payload carries an ``error`` message.

    ``str(exc)`` is the backend's message, shown to the user verbatim.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RecommendationTransportError(RecommendationGatewayError):
    """The call itself failed: network, timeout, or an unreadable non-2xx."""
