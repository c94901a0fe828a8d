from typing import Dict, FrozenSet, Iterable, NamedTuple, Optional, Tuple

from roulette.models import Game


class Odds(NamedTuple):
    multiplier: int
    covers: FrozenSet[str]


RED_NUMBERS = frozenset({1, 3, 5, 7, 9, 12, 14, 16, 18, 19, 21, 23, 25, 27, 30, 32, 34, 36})


def _code(number: int) -> str:
    return f'{number:0>2}'


def selector_for(numbers: Iterable[int]) -> str:
    """Canonical selector for a group of numbers, e.g. ``[2, 1] -> '01,02'``."""
    return ','.join(_code(n) for n in sorted(set(numbers)))


def _european_groups():
    # Table layout: rows are (1,2,3), (4,5,6) ... (34,35,36)
    yield 36, [[n] for n in range(0, 37)]

    splits = [[0, 1], [0, 2], [0, 3]]
    splits += [[n, n + 1] for n in range(1, 37) if n % 3 != 0]
    splits += [[n, n + 3] for n in range(1, 34)]
    yield 18, splits

    streets = [[0, 1, 2], [0, 2, 3]]
    streets += [[r, r + 1, r + 2] for r in range(1, 37, 3)]
    yield 12, streets

    corners = [[0, 1, 2, 3]]
    corners += [[n, n + 1, n + 3, n + 4] for n in range(1, 33) if n % 3 != 0]
    yield 9, corners

    yield 6, [list(range(r, r + 6)) for r in range(1, 32, 3)]

    dozens = [list(range(s, s + 12)) for s in (1, 13, 25)]
    columns = [list(range(c, 37, 3)) for c in (1, 2, 3)]
    yield 3, dozens + columns

    yield 2, [
        list(range(1, 19)),
        list(range(19, 37)),
        sorted(RED_NUMBERS),
        [n for n in range(1, 37) if n not in RED_NUMBERS],
        list(range(1, 37, 2)),
        list(range(2, 37, 2)),
    ]


def _build(groups) -> Dict[str, Odds]:
    table = {}
    for multiplier, numbers_list in groups:
        for numbers in numbers_list:
            table[selector_for(numbers)] = Odds(
                multiplier, frozenset(_code(n) for n in numbers)
            )
    return table


EUROPEAN_BETS: Dict[str, Odds] = _build(_european_groups())
EUROPEAN_OUTCOMES: Tuple[str, ...] = tuple(_code(n) for n in range(0, 37))

_TABLES = {
    Game.EUROPEAN_ROULETTE: (EUROPEAN_BETS, EUROPEAN_OUTCOMES),
}


def odds_for(game: Game, selector: str) -> Optional[Odds]:
    return _TABLES[game][0].get(selector)


def payout_multiplier(game: Game, selector: str) -> Optional[int]:
    odds = odds_for(game, selector)
    return odds.multiplier if odds else None


def covered_outcomes(game: Game, selector: str) -> Optional[FrozenSet[str]]:
    odds = odds_for(game, selector)
    return odds.covers if odds else None


def outcomes(game: Game) -> Tuple[str, ...]:
    return _TABLES[game][1]
