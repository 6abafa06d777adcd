"""Exception classes for the nipsearch library.

The query parser, filter builder and request encoder never raise to their
callers. These types are raised by the lower-level filter codec and caught
by the request encoder.
"""


class NipSearchError(Exception):
    """Base exception for nipsearch library errors."""
    pass


class FilterEncodingError(NipSearchError):
    """A filter could not be serialized to its wire encoding."""
    pass
