import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from washbay.core import config
from washbay.ledger import Ledger
from washbay.routes import booking_routes
from washbay.scheduling.scheduler import Scheduler

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def create_app(scheduler: Scheduler | None = None) -> FastAPI:
    app = FastAPI(title='Washbay Scheduler')
    app.state.scheduler = scheduler or Scheduler(Ledger(), settings=config.load_scheduler_settings())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    @app.on_event('startup')
    def check_configuration() -> None:
        try:
            config.validate_runtime_config()
        except RuntimeError:
            logger.exception('Invalid scheduler configuration. Check the environment variables.')
            raise
        logger.info(
            'Scheduler ready (default duration %d min, suggestions within %d h)',
            config.DEFAULT_SERVICE_DURATION_MINUTES,
            config.SUGGESTION_MAX_OFFSET_HOURS,
        )

    @app.get('/')
    def root():
        return {'status': 'Washbay Scheduler API Running'}

    app.include_router(booking_routes.router, prefix='/api')

    return app


configure_logging()
app = create_app()
