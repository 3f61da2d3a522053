"""Domain-specific exceptions for POS Analytics Core.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from AnalyticsError for easy catching.
"""


class AnalyticsError(Exception):
    """Base exception for all POS Analytics Core errors.

    This is the base class for all domain-specific exceptions in the package.
    Users can catch this exception to handle any analytics error.
    """

    pass


class ConfigError(AnalyticsError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - A FilterOptions field holds a value outside its allowed set
    - An unknown time-range token is requested
    """

    pass


class DataQualityError(AnalyticsError):
    """Raised when input records fail validation.

    This exception is raised when:
    - A sale has a negative total or an unknown status
    - A sale timestamp is not a datetime
    - Required keys are missing from a record being loaded
    """

    pass


class InvalidRangeError(AnalyticsError):
    """Raised when a custom time range is requested without both bounds.

    The filter-control layer is expected to prevent the call until both
    custom bounds are present.
    """

    pass
