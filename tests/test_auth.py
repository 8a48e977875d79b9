from datetime import datetime, timedelta, timezone
from http import HTTPStatus

from jwt import decode, encode

from .conftest import SECRET_KEY


def test_login_returns_token(client, customer):
    response = client.post(
        '/auth/login', json={'email': 'alice@acme.io', 'password': 'secret123'}
    )

    assert response.status_code == HTTPStatus.OK
    token = response.json()['access_token']
    assert token
    payload = decode(token, SECRET_KEY, algorithms=['HS256'])
    assert payload['sub'] == customer['id']
    assert payload['email'] == 'alice@acme.io'
    assert payload['role'] == 'user'


def test_wrong_password_and_unknown_email_look_identical(client, customer):
    wrong_password = client.post(
        '/auth/login', json={'email': 'alice@acme.io', 'password': 'wrong'}
    )
    unknown_email = client.post(
        '/auth/login', json={'email': 'nobody@acme.io', 'password': 'anything'}
    )

    assert wrong_password.status_code == HTTPStatus.UNAUTHORIZED
    assert unknown_email.status_code == HTTPStatus.UNAUTHORIZED
    assert wrong_password.json() == unknown_email.json() == {'detail': 'Invalid credentials'}


def test_customer_without_password_cannot_login(client):
    client.post('/customers', json={'name': 'Bob', 'email': 'bob@acme.io'})

    response = client.post('/auth/login', json={'email': 'bob@acme.io', 'password': ''})

    assert response.status_code == HTTPStatus.UNAUTHORIZED
    assert response.json() == {'detail': 'Invalid credentials'}


def test_token_form_flow(client, customer):
    response = client.post(
        '/auth/token', data={'username': 'alice@acme.io', 'password': 'secret123'}
    )

    assert response.status_code == HTTPStatus.OK
    assert response.json()['token_type'] == 'bearer'


def test_token_form_flow_rejects_bad_password(client, customer):
    response = client.post(
        '/auth/token', data={'username': 'alice@acme.io', 'password': 'nope'}
    )

    assert response.status_code == HTTPStatus.UNAUTHORIZED


def test_me_returns_identity_from_token(client, customer, token):
    response = client.get('/auth/me', headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == HTTPStatus.OK
    assert response.json() == {
        'userId': customer['id'],
        'email': 'alice@acme.io',
        'role': 'user',
    }


def test_me_without_token(client):
    response = client.get('/auth/me')

    assert response.status_code == HTTPStatus.UNAUTHORIZED


def test_me_with_invalid_token(client):
    response = client.get('/auth/me', headers={'Authorization': 'Bearer garbage'})

    assert response.status_code == HTTPStatus.UNAUTHORIZED
    assert response.headers['www-authenticate'] == 'Bearer'
    assert response.json() == {'detail': 'Could not validate credentials'}


def test_me_with_expired_token(client, customer):
    expired = encode(
        {
            'sub': customer['id'],
            'email': 'alice@acme.io',
            'role': 'user',
            'exp': datetime.now(timezone.utc) - timedelta(minutes=5),
        },
        SECRET_KEY,
        algorithm='HS256',
    )

    response = client.get('/auth/me', headers={'Authorization': f'Bearer {expired}'})

    assert response.status_code == HTTPStatus.UNAUTHORIZED


def test_token_outlives_deleted_customer(client, customer, token):
    # no server-side session: the token alone is the proof until it expires
    client.delete(f'/customers/{customer["id"]}')

    response = client.get('/auth/me', headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == HTTPStatus.OK


def test_refresh_token(client, token):
    response = client.post(
        '/auth/refresh_token', headers={'Authorization': f'Bearer {token}'}
    )

    assert response.status_code == HTTPStatus.OK
    assert response.json()['access_token']
    assert response.json()['token_type'] == 'bearer'


def test_refresh_token_requires_auth(client):
    assert client.post('/auth/refresh_token').status_code == HTTPStatus.UNAUTHORIZED


def test_overlong_password_login_is_invalid_credentials(client, customer):
    response = client.post(
        '/auth/login', json={'email': 'alice@acme.io', 'password': 'x' * 100}
    )

    assert response.status_code == HTTPStatus.UNAUTHORIZED
    assert response.json() == {'detail': 'Invalid credentials'}


def test_login_with_email_as_registered_in_mixed_case(client):
    created = client.post(
        '/customers',
        json={'name': 'Ann', 'email': 'Ann@ACME.io', 'password': 'secret123'},
    ).json()

    response = client.post(
        '/auth/login', json={'email': 'Ann@ACME.io', 'password': 'secret123'}
    )
    form = client.post(
        '/auth/token', data={'username': 'Ann@ACME.io', 'password': 'secret123'}
    )

    assert response.status_code == HTTPStatus.OK
    assert form.status_code == HTTPStatus.OK
    payload = decode(response.json()['access_token'], SECRET_KEY, algorithms=['HS256'])
    assert payload['sub'] == created['id']


def test_malformed_login_email_is_invalid_credentials(client):
    response = client.post(
        '/auth/login', json={'email': 'not an email', 'password': 'anything'}
    )

    assert response.status_code == HTTPStatus.UNAUTHORIZED
    assert response.json() == {'detail': 'Invalid credentials'}


def test_admin_role_is_carried_in_token(client):
    client.post(
        '/customers',
        json={
            'name': 'Root',
            'email': 'root@acme.io',
            'password': 'secret123',
            'role': 'admin',
        },
    )

    token = client.post(
        '/auth/login', json={'email': 'root@acme.io', 'password': 'secret123'}
    ).json()['access_token']

    assert decode(token, SECRET_KEY, algorithms=['HS256'])['role'] == 'admin'
    me = client.get('/auth/me', headers={'Authorization': f'Bearer {token}'})
    assert me.json()['role'] == 'admin'
