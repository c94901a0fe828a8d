from flask import Blueprint, current_app, jsonify, request
from flask_login import current_user, login_required
import uuid

from roulette.errors import MalformedRequest, NotFoundError
from roulette.models import GameRequest
from roulette.services.games import get_store, play, validate_request


games = Blueprint('games', __name__)


def _game_request() -> GameRequest:
    data = request.get_json(silent=True)
    if data is None:
        raise MalformedRequest()
    return GameRequest.from_dict(data)


@games.route('/check', methods=['POST'])
def game_check():
    """Dry-run validation of a game request; nothing is played or stored."""
    game_request = _game_request()
    validate_request(game_request)
    current_app.logger.info(f"[check] variant={game_request.game.value} bets={len(game_request.bets)} ok")
    return '', 204


@games.route('/new', methods=['POST'])
@login_required
def post_game():
    service_id = current_user.service_id
    played = play(_game_request(), service_id)
    get_store().insert(played)
    current_app.logger.info(
        f"[play] game={played.uuid} service={service_id} variant={played.game.value} "
        f"bets={len(played.bets)} result={played.result}"
    )
    return jsonify(played.to_dict())


@games.route('/<string:game_id>', methods=['GET'])
@login_required
def get_game(game_id):
    try:
        identifier = uuid.UUID(game_id)
    except ValueError:
        raise NotFoundError() from None
    played = get_store().get(identifier, current_user.service_id)
    if played is None:
        # Foreign records look exactly like missing ones
        raise NotFoundError()
    return jsonify(played.to_dict())
