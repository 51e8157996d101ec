from .config import ServiceConfig
from .service import StubService, serve

IDENTITY = {'service': 'microservice', 'version': '1.0', 'status': 'healthy'}
DEFAULT_PORT = 3002


def create_service(environ=None):
    config = ServiceConfig.from_env(DEFAULT_PORT, environ)
    return StubService(
        'microservice',
        config,
        IDENTITY,
        startup_message='Microservice on port {port}',
    )


def create_app():
    return create_service().app


def main():
    serve(create_service)


if __name__ == "__main__":
    main()
