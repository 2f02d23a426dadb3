"""
EthProofs Error Mapper

Turns a failed HTTP exchange into an ``ApiError``. The service returns
heterogeneous error bodies (plain text, ``{"error": ...}``,
``{"message": ...}``); the raw text is preserved verbatim rather than parsed
so callers see exactly what the service said.
"""

from ethproofs_api.exceptions import ApiError
from ethproofs_api.ports.http import HttpResponse

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class ErrorMapper:
    """Maps non-2xx responses to ApiError. Same policy for every endpoint."""

    @staticmethod
    def extract_error_message(response: HttpResponse) -> str:
        if response.text is None:
            return UNKNOWN_ERROR_MESSAGE
        return response.text

    @staticmethod
    def map_error(response: HttpResponse) -> ApiError:
        return ApiError(
            status=response.status_code,
            message=ErrorMapper.extract_error_message(response),
        )
