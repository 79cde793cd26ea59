from typing import Any, Optional


class IDVerifyError(Exception):
    """Base class for every failure raised by this package"""


class ValidationError(IDVerifyError, ValueError):
    """A setter or action argument failed local validation; nothing was changed or sent"""


class ResourceClassificationError(IDVerifyError, ValueError):
    """A media argument is not a URL, an existing file, or inline encoded content"""


class TransportError(IDVerifyError):
    """The HTTP round trip could not be completed"""


class ResponseDecodeError(IDVerifyError):
    """The response body could not be decoded and strict decoding is enabled"""


class ApplicationError(IDVerifyError):
    """
    The service answered but reported an error in its JSON body.

    The decoded response is kept on ``result`` so callers can still read
    whatever partial data came back.
    """

    def __init__(self, code: Optional[int], message: str, result: Any = None):
        self.code = code
        self.message = message
        self.result = result
        super().__init__(f"{code if code is not None else 0}: {message}")
