# shop/routers/auth.py
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.security import OAuth2PasswordRequestForm

from .. import schemas
from ..security import T_CurrentUser
from ..services import AuthService


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth


T_Auth = Annotated[AuthService, Depends(get_auth_service)]

router = APIRouter(prefix='/auth', tags=['auth'])


@router.post('/login', response_model=schemas.Token)
def login(credentials: schemas.LoginSchema, auth: T_Auth):
    access_token = auth.login(credentials.email, credentials.password)
    return {'access_token': access_token, 'token_type': 'bearer'}


@router.post('/token', response_model=schemas.Token)
def login_for_access_token(
        form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
        auth: T_Auth,
):
    # OAuth2 form flow for the OpenAPI "Authorize" button; username is the email
    access_token = auth.login(form_data.username, form_data.password)
    return {'access_token': access_token, 'token_type': 'bearer'}


@router.post('/refresh_token', response_model=schemas.Token)
def refresh_access_token(user: T_CurrentUser, auth: T_Auth):
    return {'access_token': auth.refresh(user), 'token_type': 'bearer'}


@router.get('/me', response_model=schemas.AuthUserPublic)
def read_me(user: T_CurrentUser):
    return user
