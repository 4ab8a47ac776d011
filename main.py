import os
import logging

from flask import Flask, jsonify

from deployment_config import configure_deployment
from penalty.dashboard import REPOSITORY_EXTENSION, bp_dashboard
from penalty.services.event_repository import EventRepository
from penalty.services.supabase_client import SupabaseService

# Configure logging
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(repository=None) -> Flask:
    """
    Build the Flask application

    Args:
        repository: Object with fetch_events(gender=...) -> List[EventRecord].
            Defaults to an EventRepository over a freshly built SupabaseService.
    """
    app = Flask(__name__)
    app.secret_key = os.environ.get("SESSION_SECRET", "dev-secret-key-change-in-production")
    app.json.sort_keys = False

    if repository is None:
        repository = EventRepository(SupabaseService())
        if not repository.enabled:
            logger.warning("Supabase is not configured; event endpoints will answer 503")
    app.extensions[REPOSITORY_EXTENSION] = repository

    app.register_blueprint(bp_dashboard)
    configure_deployment(app)

    @app.route('/')
    def index():
        return jsonify({
            'service': 'penalty-tracker',
            'endpoints': sorted(str(rule) for rule in app.url_map.iter_rules() if str(rule).startswith('/api/')),
        })

    logger.info("Penalty tracker app created")
    return app


app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)), debug=os.environ.get('FLASK_DEBUG') == 'True')
