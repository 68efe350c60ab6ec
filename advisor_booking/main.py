import logging
from datetime import date

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from advisor_booking.core import config
from advisor_booking.errors import register_error_handlers
from advisor_booking.routes import availability_routes, booking_routes

logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_methods=['*'],
    allow_headers=['*'],
)

register_error_handlers(app)

logger = logging.getLogger(__name__)


def today() -> str:
    current = date.today()
    return f'{current.month}/{current.day}/{current.year}'


@app.on_event('startup')
def check_configuration() -> None:
    config.validate_runtime_config()
    logger.info('Reading advisor availability from %s', config.AVAILABILITY_URL)


@app.get('/')
def root():
    return {'status': 'Booking API Running'}


@app.get('/today')
def get_today():
    return {'today': today()}


app.include_router(availability_routes.router, prefix='/availability')
app.include_router(booking_routes.router, prefix='/bookings')
