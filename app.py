"""
Groupie Tracker Web Application
Artist listing aggregated from the artists and relation APIs
"""
from flask import Flask

from api.routes.main_routes import main_bp
from api.services.relation_service import RelationService
from utils.config import CONFIG
from utils.logger import logger


def create_app():
    """Application factory pattern"""
    app = Flask(__name__)

    app.register_blueprint(main_bp)
    app.jinja_env.globals['country_for_artist'] = RelationService.country_for_artist
    app.jinja_env.globals['locations_for_artist'] = RelationService.locations_for_artist

    # Parse the template once; a broken template stops start-up
    app.jinja_env.get_template(CONFIG['TEMPLATE'])

    return app


# Create the Flask application
app = create_app()


if __name__ == '__main__':
    logger(f"Listening on http://localhost:{CONFIG['PORT']}", "INFO")
    app.run(port=CONFIG['PORT'])
