from fastapi import status
from gatepass.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Business error code -> HTTP status for routes that share the mapping
ERROR_STATUS = {
    "INVALID_WINDOW": status.HTTP_400_BAD_REQUEST,
    "INVALID_GUEST": status.HTTP_400_BAD_REQUEST,
    "INVALID_COMMUNITY_TYPE": status.HTTP_400_BAD_REQUEST,
    "INVALID_ACCESS_LEVEL": status.HTTP_400_BAD_REQUEST,
    "INVALID_TTL": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_403_FORBIDDEN,
    "INSUFFICIENT_ROLE": status.HTTP_403_FORBIDDEN,
    "OWNER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "GUEST_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CREDENTIAL_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ORGANIZATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ORGANIZATION_EXISTS": status.HTTP_409_CONFLICT,
    "MEMBER_EXISTS": status.HTTP_409_CONFLICT,
}


def raise_for_error(error: Error):
    """Raise the ClientError mapped to error.code, or ServerError for unknown codes"""
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
