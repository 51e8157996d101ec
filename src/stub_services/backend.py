"""ECS backend API stub: identity on / and a liveness probe on /health."""
from .config import ServiceConfig
from .service import StubService, serve

IDENTITY = {'message': 'ECS Backend API v1.0', 'status': 'healthy'}
DEFAULT_PORT = 3000


def create_service(environ=None):
    config = ServiceConfig.from_env(DEFAULT_PORT, environ)
    return StubService(
        'backend',
        config,
        IDENTITY,
        health_check=True,
        startup_message='Backend running on port {port}',
    )


def create_app():
    """App factory for WSGI servers and `flask --app stub_services.backend run`"""
    return create_service().app


def main():
    serve(create_service)


if __name__ == "__main__":
    main()
