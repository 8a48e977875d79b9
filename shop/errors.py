from http import HTTPStatus


class ShopError(Exception):
    """Base class for failures reported to API callers."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    headers: dict[str, str] | None = None

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFound(ShopError):
    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, kind: str, id: str):
        super().__init__(f'{kind} with id {id} not found')
        self.kind = kind
        self.id = id


class ValidationError(ShopError):
    status_code = HTTPStatus.BAD_REQUEST


class AlreadyExists(ValidationError):
    pass


class InvalidCredentials(ShopError):
    # Same message whether the email is unknown or the password is wrong.
    status_code = HTTPStatus.UNAUTHORIZED

    def __init__(self):
        super().__init__('Invalid credentials')


class Unauthorized(ShopError):
    status_code = HTTPStatus.UNAUTHORIZED
    headers = {'WWW-Authenticate': 'Bearer'}

    def __init__(self, detail: str = 'Could not validate credentials'):
        super().__init__(detail)
