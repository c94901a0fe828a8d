import os
import sys
import time
import pytest

# Ensure the backend root (containing the `roulette` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from roulette import create_app
from roulette.auth import ServiceClaims, encode_token


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    JWT_SECRET = 'test-jwt-secret-that-is-long-enough-for-hs256'
    JWT_ALGORITHM = 'HS256'
    JWT_LEEWAY_SEC = 0
    TOKEN_TTL_SEC = 3600
    CORS_ORIGINS = ['http://localhost:5173']
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    # No app context held open: Flask-Login caches the user on g per context
    return create_app(TestConfig)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def store(flask_app):
    return flask_app.extensions['record_store']


@pytest.fixture()
def make_token():
    """Build a signed token; offsets are relative to now, in seconds."""
    def _make(service_id='test_service_id', iat=0, nbf=0, exp=86400, secret=TestConfig.JWT_SECRET):
        now = int(time.time())
        claims = ServiceClaims(service_id=service_id, iat=now + iat, nbf=now + nbf, exp=now + exp)
        return encode_token(claims, secret)
    return _make


@pytest.fixture()
def auth_headers(make_token):
    def _headers(service_id='test_service_id'):
        return {'Authorization': f'Bearer {make_token(service_id)}'}
    return _headers


@pytest.fixture()
def game_payload():
    return {
        'game': 'EuropeanRoulette',
        'bets': [{
            'playerId': 'player_one',
            'bet': '00',
            'chipsIn': 10,
        }],
    }
