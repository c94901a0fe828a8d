from flask import Flask, g, request
from flask_cors import CORS
from flask_login import LoginManager
import click
import time
from config import Config

login_manager = LoginManager()


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    login_manager.init_app(flask_app)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS', []))

    # One store per app instance, for the lifetime of the process
    from roulette.services.games.store import RecordStore
    flask_app.extensions['record_store'] = RecordStore()

    from roulette.auth import load_service_from_request, unauthorized
    login_manager.request_loader(load_service_from_request)
    login_manager.unauthorized_handler(unauthorized)

    # Import and register blueprints here
    from roulette.main import main
    flask_app.register_blueprint(main)

    from roulette.api.games import games
    flask_app.register_blueprint(games, url_prefix='/game')

    from roulette.errors import RouletteError

    @flask_app.errorhandler(RouletteError)
    def handle_roulette_error(error):
        flask_app.logger.info(f"[reject] path={request.path} status={error.status_code} reason={error}")
        return str(error), error.status_code, {'Content-Type': 'text/plain; charset=utf-8'}

    @flask_app.before_request
    def start_timer():
        g.request_started = time.perf_counter()
        flask_app.logger.debug(f"[request] {request.method} {request.path} [v]")

    @flask_app.before_request
    def authenticate():
        # The bearer token alone decides identity; Flask-Login would otherwise
        # consult a remember_token cookie before the request loader
        login_manager._update_request_context_with_user(load_service_from_request(request))

    @flask_app.after_request
    def response_time(response):
        started = g.pop('request_started', None)
        if started is not None:
            elapsed = int((time.perf_counter() - started) * 1_000_000)
            response.headers['x-response-time'] = f'{elapsed} us'
        flask_app.logger.debug(f"[request] {request.method} {request.path} [^] status={response.status_code}")
        return response

    @click.command('issue-token')
    @click.argument('service_id')
    @click.option('--ttl', type=int, default=None, help='Token lifetime in seconds.')
    def issue_token_command(service_id, ttl):
        """Prints a bearer token for SERVICE_ID signed with JWT_SECRET."""
        from roulette.auth import issue_token
        cfg = flask_app.config
        token = issue_token(
            service_id,
            cfg['JWT_SECRET'],
            ttl if ttl is not None else int(cfg.get('TOKEN_TTL_SEC', 86400)),
            algorithm=cfg.get('JWT_ALGORITHM', 'HS256'),
        )
        click.echo(f'Bearer {token}')

    flask_app.cli.add_command(issue_token_command)

    return flask_app
