import random
import time
import uuid

from roulette.errors import MalformedRequest
from roulette.models import Game, GameRequest, PlayedGame
from .bets import resolve_bet, validate_bet
from .odds import outcomes

# Backed by os.urandom, so one instance can be shared by all request threads
_rng = random.SystemRandom()


def validate_request(request: GameRequest) -> None:
    """Validate every bet in order, raising the first failure."""
    if not request.bets:
        raise MalformedRequest('At least one bet is required')
    for bet in request.bets:
        validate_bet(bet, request.game)


def draw_outcome(game: Game) -> str:
    return _rng.choice(outcomes(game))


def play(request: GameRequest, service_id: str, draw=draw_outcome, clock=time.time) -> PlayedGame:
    """Validate and play a game request on behalf of ``service_id``.

    The returned record is not stored; callers insert it into the record
    store themselves. ``draw`` and ``clock`` can be swapped out in tests.
    """
    validate_request(request)

    game_id = uuid.uuid4()
    result = draw(request.game)
    occurred = int(clock())
    bets = tuple(resolve_bet(b, request.game, result) for b in request.bets)

    return PlayedGame(
        uuid=game_id,
        game=request.game,
        bets=bets,
        service_id=service_id,
        occurred=occurred,
        result=result,
    )
