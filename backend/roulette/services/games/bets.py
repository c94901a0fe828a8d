from dataclasses import replace

from roulette.errors import StakeTooLarge, UnrecognizedSelector
from roulette.models import CHIPS_MAX, Bet, Game
from .odds import odds_for


def validate_bet(bet: Bet, game: Game) -> None:
    """Check the selector is a known bet for ``game`` and that the largest
    possible payout still fits the chip domain."""
    odds = odds_for(game, bet.bet)
    if odds is None:
        raise UnrecognizedSelector()
    if bet.chips_in * odds.multiplier > CHIPS_MAX:
        raise StakeTooLarge()


def resolve_bet(bet: Bet, game: Game, outcome: str) -> Bet:
    # Only validated bets are resolved, both raises below are unreachable otherwise
    odds = odds_for(game, bet.bet)
    if odds is None:
        raise KeyError(bet.bet)
    if outcome not in odds.covers:
        return replace(bet, chips_out=0)
    chips_out = bet.chips_in * odds.multiplier
    if chips_out > CHIPS_MAX:
        raise OverflowError(f'payout for {bet.bet!r} exceeds chip range')
    return replace(bet, chips_out=chips_out)
