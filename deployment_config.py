"""
Deployment-specific configuration: JSON error responses for the API
"""
import logging

from flask import jsonify, make_response, request

logger = logging.getLogger(__name__)


def configure_deployment(app):
    """Register JSON error handlers so API clients never receive HTML error pages"""

    @app.errorhandler(404)
    def not_found_error(error):
        return make_response(jsonify({
            'success': False,
            'error': 'Resource not found'
        }), 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return make_response(jsonify({
            'success': False,
            'error': f'Method {request.method} not allowed'
        }), 405)

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Unhandled error on {request.path}: {error}", exc_info=True)
        return make_response(jsonify({
            'success': False,
            'error': 'Internal server error'
        }), 500)

    @app.errorhandler(503)
    def service_unavailable(error):
        return make_response(jsonify({
            'success': False,
            'error': 'Service temporarily unavailable. Try again shortly.'
        }), 503)
