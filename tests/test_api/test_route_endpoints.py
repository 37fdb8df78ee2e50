import pytest


def test_find_routes_success(client):
    response = client.get('/api/routes/USD/EUR/1000')

    assert response.status_code == 200
    data = response.json()

    assert data['from_currency'] == 'USD'
    assert data['to_currency'] == 'EUR'
    assert data['amount'] == 1000
    assert data['rates_source'] == 'seed'
    assert data['rates_timestamp'] is None

    routes = data['routes']
    assert len(routes) == 8
    amounts = [r['converted_amount'] for r in routes]
    assert amounts == sorted(amounts, reverse=True)
    assert data['best_route'] == routes[0]
    assert routes[0]['display_name'] == 'Crypto Bridge'
    assert routes[0]['savings'] > 0


def test_find_routes_route_shape(client):
    routes = client.get('/api/routes/USD/EUR/1000').json()['routes']
    ofx = next(r for r in routes if r['display_name'] == 'OFX')

    assert ofx['kind'] == 'direct'
    assert ofx['path'] == ['USD', 'EUR']
    assert ofx['fee_amount'] == pytest.approx(3.0)
    assert ofx['converted_amount'] == pytest.approx(917.24)
    assert ofx['speed_label'] == '1-2 days'
    assert ofx['reliability_score'] == 96


def test_find_routes_lowercase_currencies_normalized(client):
    response = client.get('/api/routes/gbp/inr/250.5')

    assert response.status_code == 200
    data = response.json()
    assert data['from_currency'] == 'GBP'
    assert data['to_currency'] == 'INR'
    assert all(r['path'][0] == 'GBP' and r['path'][-1] == 'INR' for r in data['routes'])


def test_find_routes_same_currency(client):
    response = client.get('/api/routes/USD/USD/100')

    assert response.status_code == 400
    assert 'must be different' in response.json()['detail']


def test_find_routes_unsupported_currency(client):
    response = client.get('/api/routes/USD/NGN/100')

    assert response.status_code == 400
    assert 'NGN' in response.json()['detail']


@pytest.mark.parametrize('amount', ['0', '-100', 'abc'])
def test_find_routes_invalid_amount(client, amount):
    response = client.get(f'/api/routes/USD/EUR/{amount}')

    assert response.status_code == 422


@pytest.mark.parametrize('path', [
    '/api/routes/USD/EUR/inf',
    '/api/routes/USD/EUR/inf/best',
    '/api/convert/USD/EUR/inf',
])
def test_infinite_amount_is_rejected(client, path):
    response = client.get(path)

    assert response.status_code == 400
    assert 'finite' in response.json()['detail']


def test_find_routes_invalid_currency_length(client):
    response = client.get('/api/routes/USDX/EUR/100')

    assert response.status_code == 422


def test_best_route_endpoint(client):
    response = client.get('/api/routes/USD/EUR/1000/best')

    assert response.status_code == 200
    data = response.json()
    assert data['display_name'] == 'Crypto Bridge'
    assert data['converted_amount'] == pytest.approx(918.16)


def test_routes_follow_refreshed_rates(client):
    before = client.get('/api/routes/USD/EUR/1000/best').json()

    client.post('/api/rates/refresh')
    after = client.get('/api/routes/USD/EUR/1000/best').json()

    assert after['converted_amount'] < before['converted_amount']
