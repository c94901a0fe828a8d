"""Error types raised by the game service.

Each category maps to one HTTP status at the app boundary, see
``create_app`` for the handler.
"""


class RouletteError(Exception):
    status_code = 500
    message = 'Internal error'

    def __init__(self, message=None):
        super().__init__(message or self.message)


class BetError(RouletteError):
    """A wager request that cannot be played."""
    status_code = 400
    message = 'Invalid game request'


class UnrecognizedSelector(BetError):
    message = 'Invalid bet string'


class StakeTooLarge(BetError):
    message = 'Too many chips'


class MalformedRequest(BetError):
    message = 'Invalid request body'


class AuthorizationError(RouletteError):
    status_code = 403
    message = 'Unauthorized'


class MissingCredential(AuthorizationError):
    message = 'No Authorization Header'


class MalformedCredential(AuthorizationError):
    message = 'Authorization Wrong Format'


class InvalidToken(AuthorizationError):
    message = 'Token Validation Error'


class NotFoundError(RouletteError):
    status_code = 404
    message = ''
