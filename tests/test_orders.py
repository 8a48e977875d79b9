from http import HTTPStatus


def test_create_order_without_reference_checks(client):
    payload = {
        'productIds': ['not-a-product'],
        'totalPrice': 42.0,
        'customerId': 'not-a-customer',
    }

    response = client.post('/orders', json=payload)

    assert response.status_code == HTTPStatus.CREATED
    assert response.json() == {'id': response.json()['id'], **payload}


def test_create_order_with_empty_product_list(client):
    response = client.post(
        '/orders', json={'productIds': [], 'totalPrice': 0, 'customerId': 'c-1'}
    )

    assert response.status_code == HTTPStatus.CREATED
    assert response.json()['productIds'] == []


def test_list_and_get_orders(client):
    created = client.post(
        '/orders', json={'productIds': ['p-1'], 'totalPrice': 5, 'customerId': 'c-1'}
    ).json()

    assert client.get('/orders').json() == [created]
    assert client.get(f'/orders/{created["id"]}').json() == created


def test_missing_order(client):
    response = client.get('/orders/nope')

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json() == {'detail': 'Order with id nope not found'}


def test_order_validation(client):
    no_customer = client.post('/orders', json={'productIds': [], 'totalPrice': 1})
    no_products = client.post('/orders', json={'totalPrice': 1, 'customerId': 'c-1'})
    bad_total = client.post(
        '/orders', json={'productIds': [], 'totalPrice': 'x', 'customerId': 'c-1'}
    )

    for response in (no_customer, no_products, bad_total):
        assert response.status_code == HTTPStatus.BAD_REQUEST


def test_orders_have_no_update_or_delete(client):
    created = client.post(
        '/orders', json={'productIds': [], 'totalPrice': 1, 'customerId': 'c-1'}
    ).json()

    assert client.put(f'/orders/{created["id"]}', json={}).status_code == HTTPStatus.METHOD_NOT_ALLOWED
    assert client.delete(f'/orders/{created["id"]}').status_code == HTTPStatus.METHOD_NOT_ALLOWED
