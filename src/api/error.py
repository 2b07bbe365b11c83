from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class AuthenticationError(ClientError):
    """Missing, invalid, expired or revoked bearer token"""

    def __init__(self, base_error: Error):
        super().__init__(base_error, status_code=status.HTTP_401_UNAUTHORIZED)


class ServerError(Exception):
    """Rendered as 500 with only the error code; the message stays in the log"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
