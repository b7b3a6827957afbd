"""
Error code to HTTP status mapping shared by the routes.
"""

from fastapi import status

from libs.result import Error
from primeauth.api.error import AuthFlowError, ClientError, ServerError
from primeauth.domain.entities import AuthFailure

AUTH_FAILURE_STATUS = {
    AuthFailure.INVALID_API_KEY.value: status.HTTP_401_UNAUTHORIZED,
    AuthFailure.INVALID_CREDENTIALS.value: status.HTTP_401_UNAUTHORIZED,
    AuthFailure.ACCOUNT_DISABLED.value: status.HTTP_401_UNAUTHORIZED,
    AuthFailure.ACCOUNT_PAUSED.value: status.HTTP_401_UNAUTHORIZED,
    AuthFailure.ACCOUNT_EXPIRED.value: status.HTTP_401_UNAUTHORIZED,
    AuthFailure.HWID_MISMATCH.value: status.HTTP_401_UNAUTHORIZED,
    AuthFailure.INVALID_SESSION.value: status.HTTP_401_UNAUTHORIZED,
    AuthFailure.BLACKLISTED.value: status.HTTP_403_FORBIDDEN,
    AuthFailure.INVALID_LICENSE.value: status.HTTP_400_BAD_REQUEST,
    AuthFailure.LICENSE_EXPIRED.value: status.HTTP_400_BAD_REQUEST,
    AuthFailure.LICENSE_FULL.value: status.HTTP_400_BAD_REQUEST,
    AuthFailure.DUPLICATE_USER.value: status.HTTP_400_BAD_REQUEST,
    AuthFailure.VERSION_MISMATCH.value: status.HTTP_400_BAD_REQUEST,
    AuthFailure.HWID_REQUIRED.value: status.HTTP_400_BAD_REQUEST,
    AuthFailure.SERVICE_UNAVAILABLE.value: status.HTTP_503_SERVICE_UNAVAILABLE,
}

CONSOLE_ERROR_STATUS = {
    "ACCOUNT_NOT_FOUND": status.HTTP_401_UNAUTHORIZED,
    "ACCOUNT_DISABLED": status.HTTP_403_FORBIDDEN,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "APPLICATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "LICENSE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "SESSION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "WEBHOOK_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "BLACKLIST_ENTRY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "BLACKLIST_ENTRY_EXISTS": status.HTTP_409_CONFLICT,
    "LICENSE_KEY_EXISTS": status.HTTP_409_CONFLICT,
    "DUPLICATE_USER": status.HTTP_409_CONFLICT,
    "INVALID_REQUEST": status.HTTP_400_BAD_REQUEST,
    "INVALID_MESSAGE": status.HTTP_400_BAD_REQUEST,
    "INVALID_PERMISSION": status.HTTP_400_BAD_REQUEST,
    "INVALID_WEBHOOK_URL": status.HTTP_400_BAD_REQUEST,
}


def raise_auth_flow_error(error: Error):
    """End-user API: unknown codes are treated as an outage"""
    status_code = AUTH_FAILURE_STATUS.get(error.code, status.HTTP_503_SERVICE_UNAVAILABLE)
    raise AuthFlowError(error, status_code=status_code)


def raise_console_error(error: Error):
    status_code = CONSOLE_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
