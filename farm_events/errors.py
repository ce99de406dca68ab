"""Error taxonomy shared by the services and the HTTP boundary.

Text-generation failures are deliberately absent: the insight composer maps
them to placeholder strings instead of raising.
"""

from __future__ import annotations


class FarmEventsError(Exception):
    """Base class for all errors raised by farm_events."""


class DataUnavailable(FarmEventsError):
    """The event CSV file is missing, unreadable or malformed."""


class BadRequest(FarmEventsError):
    """A required request parameter is missing or blank."""


class ChatUnavailable(FarmEventsError):
    """The chat pass-through could not obtain a reply from the model."""


__all__ = ["FarmEventsError", "DataUnavailable", "BadRequest", "ChatUnavailable"]
