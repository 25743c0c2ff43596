"""
Failures that abort the current request
"""


class TrackerError(Exception):
    """Base class for every error surfaced to the client as a 500"""


class TransportError(TrackerError):
    """The upstream API could not be reached"""


class UpstreamStatusError(TrackerError):
    """The upstream API answered with a non-200 status"""

    def __init__(self, status_code, reason=''):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Upstream answered {status_code} {reason}".rstrip())


class DecodeError(TrackerError):
    """The upstream body is not JSON, or not the expected shape"""


class RenderError(TrackerError):
    """The HTML template failed to render"""
