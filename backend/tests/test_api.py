import uuid


def test_teapot(client):
    res = client.get('/teapot')
    assert res.status_code == 418


def test_unknown_route(client):
    res = client.get('/dead_end')
    assert res.status_code == 404
    assert res.data == b''


def test_response_time_header(client):
    res = client.get('/teapot')
    assert res.headers['x-response-time'].endswith(' us')


def test_check_valid_request(client, game_payload):
    res = client.post('/game/check', json=game_payload)
    assert res.status_code == 204


def test_check_needs_no_token(client, game_payload, store):
    res = client.post('/game/check', json=game_payload)
    assert res.status_code == 204
    # dry validation never stores anything
    assert len(store) == 0


def test_check_invalid_bet_string(client, game_payload):
    game_payload['bets'][0]['bet'] = '37'
    res = client.post('/game/check', json=game_payload)
    assert res.status_code == 400
    assert res.get_data(as_text=True) == 'Invalid bet string'
    assert res.mimetype == 'text/plain'


def test_check_too_many_chips(client, game_payload):
    game_payload['bets'][0]['chipsIn'] = 2 ** 64 - 1
    res = client.post('/game/check', json=game_payload)
    assert res.status_code == 400
    assert res.get_data(as_text=True) == 'Too many chips'


def test_check_malformed_bodies(client):
    assert client.post('/game/check', data='nope', content_type='text/plain').status_code == 400
    assert client.post('/game/check', json={'game': 'EuropeanRoulette', 'bets': []}).status_code == 400
    assert client.post('/game/check', json={'game': 'Blackjack', 'bets': []}).status_code == 400
    bad_chips = {'game': 'EuropeanRoulette', 'bets': [{'playerId': 'p1', 'bet': '00', 'chipsIn': 0}]}
    assert client.post('/game/check', json=bad_chips).status_code == 400


def test_play_and_retrieve(client, game_payload, auth_headers, store):
    res = client.post('/game/new', json=game_payload, headers=auth_headers())
    assert res.status_code == 200
    played = res.get_json()
    assert played['game'] == 'EuropeanRoulette'
    assert played['serviceId'] == 'test_service_id'
    assert len(played['result']) == 2 and 0 <= int(played['result']) <= 36
    bet = played['bets'][0]
    assert bet['playerId'] == 'player_one'
    assert bet['chipsOut'] == (360 if played['result'] == '00' else 0)
    assert uuid.UUID(played['uuid']) in store
    assert len(store) == 1

    res = client.get(f"/game/{played['uuid']}", headers=auth_headers())
    assert res.status_code == 200
    assert res.get_json() == played


def test_play_invalid_request_not_stored(client, game_payload, auth_headers, store):
    game_payload['bets'].append({'playerId': 'player_two', 'bet': '01,03', 'chipsIn': 5})
    res = client.post('/game/new', json=game_payload, headers=auth_headers())
    assert res.status_code == 400
    assert res.get_data(as_text=True) == 'Invalid bet string'
    assert len(store) == 0


def test_play_requires_token(client, game_payload, store):
    res = client.post('/game/new', json=game_payload)
    assert res.status_code == 403
    assert res.get_data(as_text=True) == 'No Authorization Header'
    assert len(store) == 0


def test_play_rejects_wrong_scheme(client, game_payload, make_token):
    res = client.post('/game/new', json=game_payload, headers={'Authorization': f'Basic {make_token()}'})
    assert res.status_code == 403
    assert res.get_data(as_text=True) == 'Authorization Wrong Format'


def test_play_rejects_expired_token(client, game_payload, make_token):
    token = make_token(iat=-7200, nbf=-7200, exp=-3600)
    res = client.post('/game/new', json=game_payload, headers={'Authorization': f'Bearer {token}'})
    assert res.status_code == 403
    assert res.get_data(as_text=True) == 'Token Validation Error'


def test_retrieve_other_service_is_not_found(client, game_payload, auth_headers):
    played = client.post('/game/new', json=game_payload, headers=auth_headers('service_a')).get_json()
    res = client.get(f"/game/{played['uuid']}", headers=auth_headers('service_b'))
    assert res.status_code == 404
    missing = client.get(f'/game/{uuid.uuid4()}', headers=auth_headers('service_b'))
    # foreign and missing records are indistinguishable
    assert (res.status_code, res.data) == (missing.status_code, missing.data)


def test_retrieve_bad_uuid(client, auth_headers):
    res = client.get('/game/wrong-uuid', headers=auth_headers())
    assert res.status_code == 404


def test_retrieve_requires_token(client):
    res = client.get(f'/game/{uuid.uuid4()}')
    assert res.status_code == 403


def test_play_ignores_remember_cookie(client, game_payload, auth_headers):
    client.set_cookie('remember_token', 'garbage')
    res = client.post('/game/new', json=game_payload, headers=auth_headers())
    assert res.status_code == 200
    assert res.get_json()['serviceId'] == 'test_service_id'


def test_remember_cookie_alone_is_rejected(client, game_payload, store):
    client.set_cookie('remember_token', 'garbage')
    res = client.post('/game/new', json=game_payload)
    assert res.status_code == 403
    assert res.get_data(as_text=True) == 'No Authorization Header'
    assert len(store) == 0
