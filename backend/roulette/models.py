from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
import uuid as uuid_lib

from roulette.errors import MalformedRequest

# Chips are tracked in the unsigned 64-bit domain
CHIPS_MAX = 2 ** 64 - 1


class Game(Enum):
    EUROPEAN_ROULETTE = 'EuropeanRoulette'

    @classmethod
    def parse(cls, value):
        try:
            return cls(value)
        except ValueError:
            raise MalformedRequest(f'Unknown game: {value!r}') from None


def _parse_chips(value, name):
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedRequest(f'{name} must be an integer')
    if value <= 0:
        raise MalformedRequest(f'{name} must be greater than zero')
    if value > CHIPS_MAX:
        raise MalformedRequest(f'{name} is out of range')
    return value


@dataclass(frozen=True)
class Bet:
    player_id: str
    bet: str
    chips_in: int
    chips_out: Optional[int] = None

    @classmethod
    def from_dict(cls, data):
        """Build a bet from a submitted ``{playerId, bet, chipsIn}`` object.

        ``chipsOut`` is only ever set by resolution, so a submitted value is
        ignored.
        """
        if not isinstance(data, dict):
            raise MalformedRequest('Each bet must be an object')
        player_id = data.get('playerId')
        selector = data.get('bet')
        if not isinstance(player_id, str) or not player_id:
            raise MalformedRequest('playerId is required')
        if not isinstance(selector, str) or not selector:
            raise MalformedRequest('bet is required')
        return cls(
            player_id=player_id,
            bet=selector,
            chips_in=_parse_chips(data.get('chipsIn'), 'chipsIn'),
        )

    def to_dict(self):
        return {
            'playerId': self.player_id,
            'bet': self.bet,
            'chipsIn': self.chips_in,
            'chipsOut': self.chips_out,
        }


@dataclass(frozen=True)
class GameRequest:
    game: Game
    bets: Tuple[Bet, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise MalformedRequest()
        if 'game' not in data:
            raise MalformedRequest('game is required')
        bets = data.get('bets')
        if not isinstance(bets, list):
            raise MalformedRequest('bets must be a list')
        return cls(
            game=Game.parse(data['game']),
            bets=tuple(Bet.from_dict(b) for b in bets),
        )


@dataclass(frozen=True)
class PlayedGame:
    """A resolved game request, as stored and returned to the service."""
    uuid: uuid_lib.UUID
    game: Game
    bets: Tuple[Bet, ...]
    service_id: str
    occurred: int
    result: str

    def to_dict(self):
        return {
            'uuid': str(self.uuid),
            'game': self.game.value,
            'bets': [b.to_dict() for b in self.bets],
            'serviceId': self.service_id,
            'occurred': self.occurred,
            'result': self.result,
        }
