from http import HTTPStatus


def test_create_customer_hides_password(client):
    response = client.post(
        '/customers',
        json={
            'name': 'Bob',
            'email': 'bob@acme.io',
            'orderIds': ['o-1', 'o-2'],
            'password': 'hunter22',
        },
    )

    assert response.status_code == HTTPStatus.CREATED
    body = response.json()
    assert body == {
        'id': body['id'],
        'name': 'Bob',
        'email': 'bob@acme.io',
        'orderIds': ['o-1', 'o-2'],
        'role': 'user',
    }


def test_create_customer_without_password_or_orders(client):
    response = client.post('/customers', json={'name': 'Bob', 'email': 'bob@acme.io'})

    assert response.status_code == HTTPStatus.CREATED
    assert response.json()['orderIds'] is None


def test_duplicate_email_is_rejected(client, customer):
    response = client.post(
        '/customers', json={'name': 'Someone', 'email': 'alice@acme.io'}
    )

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json() == {'detail': 'Email already registered'}


def test_invalid_email_is_rejected(client):
    response = client.post('/customers', json={'name': 'Bob', 'email': 'not-an-email'})

    assert response.status_code == HTTPStatus.BAD_REQUEST


def test_list_and_get_customer(client, customer):
    listed = client.get('/customers').json()
    fetched = client.get(f'/customers/{customer["id"]}').json()

    assert listed == [customer]
    assert fetched == customer
    assert 'passwordHash' not in fetched
    assert 'password_hash' not in fetched


def test_update_customer_merges(client, customer):
    response = client.put(
        f'/customers/{customer["id"]}', json={'orderIds': ['o-9'], 'role': 'admin'}
    )

    assert response.status_code == HTTPStatus.OK
    assert response.json() == {**customer, 'orderIds': ['o-9'], 'role': 'admin'}


def test_update_customer_email_to_taken_one(client, customer):
    other = client.post('/customers', json={'name': 'Bob', 'email': 'bob@acme.io'}).json()

    response = client.put(f'/customers/{other["id"]}', json={'email': 'alice@acme.io'})

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json() == {'detail': 'Email already registered'}


def test_update_customer_keeps_own_email(client, customer):
    response = client.put(
        f'/customers/{customer["id"]}', json={'email': 'alice@acme.io', 'name': 'Al'}
    )

    assert response.status_code == HTTPStatus.OK
    assert response.json()['name'] == 'Al'


def test_update_password_changes_login(client, customer):
    client.put(f'/customers/{customer["id"]}', json={'password': 'new-pass-1'})

    old = client.post('/auth/login', json={'email': 'alice@acme.io', 'password': 'secret123'})
    new = client.post('/auth/login', json={'email': 'alice@acme.io', 'password': 'new-pass-1'})

    assert old.status_code == HTTPStatus.UNAUTHORIZED
    assert new.status_code == HTTPStatus.OK


def test_delete_customer(client, customer):
    response = client.delete(f'/customers/{customer["id"]}')

    assert response.status_code == HTTPStatus.NO_CONTENT
    assert client.get(f'/customers/{customer["id"]}').status_code == HTTPStatus.NOT_FOUND


def test_missing_customer(client):
    response = client.get('/customers/nope')

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json() == {'detail': 'Customer with id nope not found'}
    assert client.put('/customers/nope', json={'name': 'x'}).status_code == HTTPStatus.NOT_FOUND
    assert client.delete('/customers/nope').status_code == HTTPStatus.NOT_FOUND


def test_password_longer_than_bcrypt_limit_is_rejected(client):
    response = client.post(
        '/customers',
        json={'name': 'Bob', 'email': 'bob@acme.io', 'password': 'x' * 100},
    )

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert client.get('/customers').json() == []


def test_password_limit_counts_bytes_not_characters(client, customer):
    # 25 characters, 75 bytes
    response = client.put(f'/customers/{customer["id"]}', json={'password': '€' * 25})

    assert response.status_code == HTTPStatus.BAD_REQUEST
