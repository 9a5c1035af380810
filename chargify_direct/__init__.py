from flask import Flask
from dotenv import load_dotenv
import logging
import os

from chargify_direct.client import Client
from chargify_direct.direct import (
    Direct,
    DirectError,
    InvalidArgument,
    ResponseParameters,
    SecureParameters,
    generate_nonce,
    generate_timestamp
)
from chargify_direct.payment.constants import SIGNUPS_URL

__all__ = [
    'create_app',
    'Client',
    'Direct',
    'DirectError',
    'InvalidArgument',
    'ResponseParameters',
    'SecureParameters',
    'generate_nonce',
    'generate_timestamp'
]

logger = logging.getLogger(__name__)


def create_app(config=None):
    # Load environment variables from .env file
    load_dotenv()

    app = Flask(__name__)

    # configuration
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', 'dev-secret-key')
    app.config['CHARGIFY_API_KEY'] = os.getenv('CHARGIFY_API_KEY')
    app.config['CHARGIFY_API_PASSWORD'] = os.getenv('CHARGIFY_API_PASSWORD')
    app.config['CHARGIFY_API_SECRET'] = os.getenv('CHARGIFY_API_SECRET')
    app.config['CHARGIFY_PROXY'] = os.getenv('CHARGIFY_PROXY') or None
    app.config['CHARGIFY_DIRECT_URL'] = os.getenv('CHARGIFY_DIRECT_URL', SIGNUPS_URL)

    if config:
        app.config.update(config)

    if not app.config['CHARGIFY_API_KEY'] or not app.config['CHARGIFY_API_SECRET']:
        logger.warning("CHARGIFY_API_KEY/CHARGIFY_API_SECRET not set; Direct endpoints will return configuration errors")

    from chargify_direct.middleware import init_request_tracking
    init_request_tracking(app)

    from chargify_direct.routes import direct_bp, main_bp
    app.register_blueprint(main_bp)
    app.register_blueprint(direct_bp)

    return app
