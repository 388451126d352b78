"""
Exceptions raised by gplay_reviews
"""


class TransportError(Exception):
    """Raised when a batchexecute request fails or returns an unusable envelope"""
