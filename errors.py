"""Error kinds raised by the directory core.

    DirectoryError
    +-- UpstreamError
    |   +-- UpstreamUnreachable  (transport failure or timeout)
    |   +-- UpstreamBadStatus    (upstream answered with a non-200 status)
    |   +-- UpstreamBadPayload   (body is not the expected JSON shape)
    +-- NotFound                 (no record matches a valid query)
    +-- InvalidParameter         (caller supplied a malformed value)

The HTTP layer maps each kind to its own status code.
"""

from typing import Optional


class DirectoryError(Exception):
    """Base exception for all directory errors"""

    kind = "directory_error"

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(message)


class UpstreamError(DirectoryError):
    """The artist catalog API could not deliver usable data"""

    kind = "upstream_error"

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class UpstreamUnreachable(UpstreamError):
    kind = "upstream_unreachable"


class UpstreamBadStatus(UpstreamError):
    kind = "upstream_bad_status"

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        super().__init__(f"upstream responded with status {status_code}", url)


class UpstreamBadPayload(UpstreamError):
    kind = "upstream_bad_payload"


class NotFound(DirectoryError):
    kind = "not_found"


class InvalidParameter(DirectoryError):
    kind = "invalid_parameter"

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        super().__init__(message)
