# shop/security.py
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from jwt import PyJWTError, decode, encode
from pwdlib import PasswordHash
from pwdlib.hashers.bcrypt import BcryptHasher

from .errors import Unauthorized, ValidationError
from .models import AuthUser

oauth2_scheme = OAuth2PasswordBearer(tokenUrl='auth/token')

# bcrypt only accepts this much input
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    def __init__(self, rounds: int = 10):
        self.pwd_context = PasswordHash((BcryptHasher(rounds=rounds),))
        # Compared against when no stored hash exists, so an unknown email
        # costs the same as a wrong password.
        self._dummy_hash = self.pwd_context.hash('dummy-password')

    def hash(self, password: str) -> str:
        if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise ValidationError(f'Password may not exceed {MAX_PASSWORD_BYTES} bytes')
        return self.pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str | None) -> bool:
        if not hashed_password or len(plain_password.encode('utf-8')) > MAX_PASSWORD_BYTES:
            # bcrypt rejects inputs over 72 bytes; compare a fixed-size
            # stand-in against the dummy hash to keep the cost uniform
            self.pwd_context.verify(plain_password[:MAX_PASSWORD_BYTES // 4], self._dummy_hash)
            return False
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            return False


class TokenSigner:
    def __init__(self, secret_key: str, algorithm: str = 'HS256', expire_minutes: int = 60):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def sign(self, claims: dict[str, Any]) -> str:
        to_encode = claims.copy()
        expire = datetime.now(timezone.utc) + timedelta(minutes=self.expire_minutes)
        to_encode.update({'exp': expire})
        return encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """Decode ``token``; bad signature, expiry or missing subject raise Unauthorized."""
        try:
            payload = decode(token, self.secret_key, algorithms=[self.algorithm])
        except PyJWTError:
            raise Unauthorized()
        if not payload.get('sub'):
            raise Unauthorized()
        return payload

    def sign_user(self, user: AuthUser) -> str:
        return self.sign({'sub': user.user_id, 'email': user.email, 'role': user.role})

    def verify_user(self, token: str) -> AuthUser:
        payload = self.verify(token)
        return AuthUser(
            user_id=payload['sub'],
            email=payload.get('email', ''),
            role=payload.get('role', 'user'),
        )


def get_current_user(request: Request, token: str = Depends(oauth2_scheme)) -> AuthUser:
    """Stateless: the token alone proves identity for this request."""
    return request.app.state.tokens.verify_user(token)


T_CurrentUser = Annotated[AuthUser, Depends(get_current_user)]
