from flask import Blueprint, current_app

main = Blueprint('main', __name__)


@main.route('/teapot')
def teapot():
    # Unauthenticated liveness check
    current_app.logger.info("[teapot]")
    return '', 418


@main.app_errorhandler(404)
def handler_404(error):
    return '', 404
