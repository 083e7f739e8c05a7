"""
HTTP status to domain outcome mapping.

Applied to every response before its body is looked at. First match wins:

1. 401                        -> UnauthorizedError
2. 404                        -> the operation's not-found kind, when it has one
3. expect BODY, not 200       -> UnexpectedResponseError
4. expect NO_CONTENT, not 204 -> UnexpectedResponseError

Transport failures never reach this module; the transport raises
TransportError itself.
"""

from enum import Enum
from typing import Callable, Optional

from panelfx.exceptions import NotFoundError, UnauthorizedError, UnexpectedResponseError

HTTP_OK = 200
HTTP_NO_CONTENT = 204
HTTP_UNAUTHORIZED = 401
HTTP_NOT_FOUND = 404


class Expect(Enum):
    """What a successful response looks like for an operation."""

    BODY = HTTP_OK
    NO_CONTENT = HTTP_NO_CONTENT


def check_status(
    status_code: int,
    expect: Expect,
    not_found: Optional[Callable[[], NotFoundError]],
    operation: str,
) -> None:
    """
    Raise the domain error for ``status_code``, or return if it is the expected success.

    Args:
        status_code: HTTP status returned by the device
        expect: Expected success shape for the operation
        not_found: Factory for the operation's 404 error, or None when a 404
                   is just another unexpected status
        operation: Operation name, used in error messages

    Raises:
        UnauthorizedError: On 401
        NotFoundError: On 404, if ``not_found`` is given
        UnexpectedResponseError: On any other status that is not the expected one
    """
    if status_code == HTTP_UNAUTHORIZED:
        raise UnauthorizedError()
    if status_code == HTTP_NOT_FOUND and not_found is not None:
        raise not_found()
    if status_code != expect.value:
        raise UnexpectedResponseError(status_code, expect.value, operation)
