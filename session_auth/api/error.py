from fastapi import status
from session_auth.libs.result import Error


class ClientError(Exception):
    """Expected failure caused by the request; rendered with its own code and message"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """Unexpected failure; the message is logged but never returned to the client"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
