"""
HTTP mapping for operation results.

Turns the failure variants from shared.domain.results into DRF responses:
NotFound -> 404, InvalidRequest -> 400, TransientFailure -> 503 with a
Retry-After header.
"""

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.domain.results import Failure, InvalidRequest, NotFound, TransientFailure

RETRY_AFTER_SECONDS = 1

_STATUS_BY_FAILURE = {
    NotFound: status.HTTP_404_NOT_FOUND,
    InvalidRequest: status.HTTP_400_BAD_REQUEST,
    TransientFailure: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def failure_response(failure: Failure) -> Response:
    response = Response({"detail": failure.message}, status=_STATUS_BY_FAILURE[type(failure)])
    if failure.retryable:
        response["Retry-After"] = str(RETRY_AFTER_SECONDS)
    return response
