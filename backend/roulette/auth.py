"""Service authentication with signed bearer tokens.

Client services present ``Authorization: Bearer <jwt>``. The token is an
HS256 JWT signed with the shared ``JWT_SECRET`` and carrying
``{serviceId, iat, nbf, exp}``. Verification runs before every request and
fills Flask-Login's current user, remember cookies are never consulted.
Routes simply use ``@login_required`` and read ``current_user.service_id``.

The shared secret stands in for a real trust authority.
"""
from dataclasses import asdict, dataclass
import time

import jwt
from flask import current_app, g, request
from flask_login import UserMixin

from roulette.errors import (
    AuthorizationError,
    InvalidToken,
    MalformedCredential,
    MissingCredential,
)

REQUIRED_CLAIMS = ['serviceId', 'iat', 'nbf', 'exp']


@dataclass(frozen=True)
class ServiceClaims:
    service_id: str
    iat: int
    nbf: int
    exp: int

    def to_payload(self):
        payload = asdict(self)
        payload['serviceId'] = payload.pop('service_id')
        return payload


class Service(UserMixin):
    """The authenticated caller of a request."""

    def __init__(self, claims: ServiceClaims):
        self.claims = claims

    @property
    def service_id(self):
        return self.claims.service_id

    def get_id(self):
        return self.service_id


def encode_token(claims: ServiceClaims, secret: str, algorithm: str = 'HS256') -> str:
    return jwt.encode(claims.to_payload(), secret, algorithm=algorithm)


def issue_token(service_id: str, secret: str, ttl: int, now=None, algorithm: str = 'HS256') -> str:
    now = int(time.time() if now is None else now)
    claims = ServiceClaims(service_id=service_id, iat=now, nbf=now, exp=now + ttl)
    return encode_token(claims, secret, algorithm)


def decode_token(token: str, secret: str, algorithm: str = 'HS256', leeway: int = 0) -> ServiceClaims:
    """Verify signature, validity window and claim set of ``token``."""
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            leeway=leeway,
            options={'require': REQUIRED_CLAIMS},
        )
    except jwt.PyJWTError as exc:
        raise InvalidToken() from exc

    service_id = payload['serviceId']
    if not isinstance(service_id, str) or not service_id:
        raise InvalidToken()
    return ServiceClaims(
        service_id=service_id,
        iat=int(payload['iat']),
        nbf=int(payload['nbf']),
        exp=int(payload['exp']),
    )


def parse_authorization(header) -> str:
    """Return the token from a ``Bearer <token>`` header value."""
    if not header or not header.strip():
        raise MissingCredential()
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != 'bearer':
        raise MalformedCredential()
    return parts[1]


def load_service_from_request(request):
    """Authenticate a request from its Authorization header.

    Runs before every request and is also the Flask-Login request loader.
    Returns ``None`` on any failure and records the failure on ``g`` so the
    unauthorized handler can report its category.
    """
    cfg = current_app.config
    try:
        token = parse_authorization(request.headers.get('Authorization'))
        claims = decode_token(
            token,
            cfg['JWT_SECRET'],
            algorithm=cfg.get('JWT_ALGORITHM', 'HS256'),
            leeway=int(cfg.get('JWT_LEEWAY_SEC', 0)),
        )
    except AuthorizationError as exc:
        g.auth_error = exc
        return None
    return Service(claims)


def unauthorized():
    error = g.pop('auth_error', None) or MissingCredential()
    current_app.logger.info(f"[auth-reject] path={request.path} reason={error}")
    return str(error), error.status_code, {'Content-Type': 'text/plain; charset=utf-8'}
