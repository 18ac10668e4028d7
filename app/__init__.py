from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
import logging
import os
from dotenv import load_dotenv

load_dotenv()

db = SQLAlchemy()

logger = logging.getLogger(__name__)


def create_app(config_name='development', overrides=None):
    app = Flask(__name__)
    
    # Config
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv(
        'DATABASE_URL',
        'sqlite:///translations.db'
    )
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['TESTING'] = config_name == 'testing'
    app.config['ADMIN_SECRET'] = os.getenv('ADMIN_SECRET')
    app.config['REDIS_URL'] = os.getenv('REDIS_URL')
    
    # Translation provider and policy
    app.config['TRANSLATION_API_URL'] = os.getenv(
        'TRANSLATION_API_URL', 'https://api.mymemory.translated.net/get'
    )
    app.config['TRANSLATION_TIMEOUT'] = float(os.getenv('TRANSLATION_TIMEOUT', 10))
    app.config['TRANSLATION_CONTACT_EMAIL'] = os.getenv('TRANSLATION_CONTACT_EMAIL', '')
    app.config['TRANSLATION_STORE'] = os.getenv('TRANSLATION_STORE', 'database')
    app.config['TRANSLATION_MAX_ATTEMPTS'] = int(os.getenv('TRANSLATION_MAX_ATTEMPTS', 2))
    app.config['TRANSLATION_BACKOFF_SECONDS'] = float(os.getenv('TRANSLATION_BACKOFF_SECONDS', 1.2))
    app.config['TRANSLATION_COOLDOWN_SECONDS'] = int(os.getenv('TRANSLATION_COOLDOWN_SECONDS', 1800))
    
    if overrides:
        app.config.update(overrides)
    
    # Initialize extensions
    db.init_app(app)
    CORS(app)
    
    # Create tables with error handling
    with app.app_context():
        from app import models  # noqa: F401 - registers tables
        try:
            db.create_all()
        except Exception as e:
            logger.warning(f"Could not create database tables: {e}")
    
    # One service per app: it owns the process-wide cache, breaker and queue
    service = app.config.get('TRANSLATION_SERVICE')
    if service is None:
        from app.services.translation import create_translation_service
        service = create_translation_service(app.config)
    app.extensions['translation_service'] = service
    
    # Register routes
    from app.routes import register_routes
    register_routes(app)
    
    # Health check
    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok'}, 200
    
    return app
