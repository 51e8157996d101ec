import logging
import sys
from types import MappingProxyType

from flask import Flask, Response, jsonify
from werkzeug.exceptions import MethodNotAllowed, NotFound
from werkzeug.serving import make_server

from .errors import StartupBindError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(message)s'
HEALTH_BODY = 'OK'


class StubService:
    """A placeholder HTTP service answering a fixed identity payload.

    The Flask app is built once at construction and holds no mutable state:
    every route returns the same response for every request.
    """

    def __init__(self, name, config, payload, health_check=False,
                 startup_message='{name} running on port {port}'):
        self.name = name
        self.config = config
        self.payload = MappingProxyType(dict(payload))
        self.health_check = health_check
        self.startup_message = startup_message
        self.app = self._create_app()

    def _create_app(self):
        app = Flask(__name__, static_folder=None)
        # Keep the payload's declared key order and compact separators
        app.json.sort_keys = False
        app.json.compact = True

        payload = dict(self.payload)

        @app.route('/', methods=['GET'], provide_automatic_options=False)
        def identity():
            """Identity payload of this service"""
            return jsonify(payload)

        if self.health_check:
            @app.route('/health', methods=['GET'], provide_automatic_options=False)
            def health_check():
                """Liveness probe"""
                return Response(HEALTH_BODY, status=200, mimetype='text/plain')

        @app.errorhandler(MethodNotAllowed)
        def method_not_allowed(e):
            # Only GET is routed; anything else is simply not found
            return NotFound().get_response()

        return app

    def bind(self):
        """Bind the listener, raising StartupBindError if the address is unavailable"""
        host, port = self.config.host, self.config.port
        try:
            return make_server(host, port, self.app, threaded=True)
        except OSError as e:
            raise StartupBindError(host, port, e.strerror) from e
        except SystemExit as e:
            # Werkzeug reports bind failures on stderr and exits instead of raising
            raise StartupBindError(host, port) from e

    def run(self):
        server = self.bind()
        logger.info(self.startup_message.format(name=self.name, port=server.server_port))
        server.serve_forever()


def serve(factory):
    """Process entry point: build a service with factory() and run it until interrupted"""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    service = factory()
    try:
        service.run()
    except StartupBindError as e:
        logger.error(f"{service.name} failed to start: {e}")
        sys.exit(1)
