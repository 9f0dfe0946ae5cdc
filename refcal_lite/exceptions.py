"""Exception hierarchy for the RefCal Lite outer surface.

The parsing core never raises on feed content; these exceptions belong to
the code around it (reading feed files, applying configuration).
"""


class RefcalError(Exception):
    """Base exception for all RefCal Lite errors."""


class FeedInputError(RefcalError):
    """A feed could not be read.

    Raised when:
    - The feed file does not exist or is not readable
    - The file content is not valid UTF-8
    """


class ConfigurationError(RefcalError):
    """A configuration value is invalid.

    Raised when:
    - A confidence threshold is not one of low, medium, high
    """
