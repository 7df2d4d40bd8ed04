import os
import secrets
from flask import Flask, jsonify, request
from flask_wtf.csrf import CSRFProtect, CSRFError
from werkzeug.exceptions import HTTPException
from logging_helper import LoggingHelper, LogType

# Get logger instances
logger = LoggingHelper.get_logger(LogType.MAIN)
from constants import FALSE_VALUES
from database import get_database
from error_handler import ConfigurationError, ValidationError, validate_environment_variable
from helpers.response_helpers import error_response, success_response
from helpers.sort_context import init_sort_helpers
from routes.contacts_routes import bp as contacts_bp, init_contacts_routes


def _is_api_path(path: str) -> bool:
    return path.startswith('/api/') or path.startswith('/health')


app = Flask(__name__)

# ============================================================================
# FLASK CONFIGURATION
# ============================================================================

def _get_secret_key() -> str:
    """Get secret key from env or generate a per-process one."""
    env_key = os.environ.get('FLASK_SECRET_KEY')
    if env_key:
        return env_key

    logger.warning("FLASK_SECRET_KEY not set. Using a per-process key; sort state resets on restart.")
    return secrets.token_hex(32)

app.config['SECRET_KEY'] = _get_secret_key()

# Sort order validation: off keeps whatever the client sends, on rejects anything but asc/desc
app.config['SORT_STRICT_ORDER'] = validate_environment_variable(
    'SORT_STRICT_ORDER',
    default=False,
    converter=lambda value: value.strip().lower() not in FALSE_VALUES
)

# SECURITY: Enable CSRF protection for all POST/PUT/DELETE requests
csrf = CSRFProtect(app)

init_sort_helpers(app)

@app.errorhandler(CSRFError)
def handle_csrf_error(e):
    """Handle CSRF validation errors with helpful message."""
    logger.warning(f"CSRF validation failed: {e.description}")
    return jsonify({'error': 'CSRF validation failed', 'message': e.description}), 400

# ============================================================================
# REQUEST LOGGING
# ============================================================================

@app.before_request
def log_request_info():
    """Log incoming requests."""
    logger.debug(f"INCOMING REQUEST: {request.method} {request.path}")
    logger.debug(f"  Query string: {request.query_string.decode('utf-8')}")

# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.errorhandler(ValidationError)
def handle_validation_error(e):
    """Rejected request data (e.g. sort_order outside asc/desc in strict mode)."""
    logger.warning(f"Validation failed on {request.path}: {e}")
    if _is_api_path(request.path):
        return error_response(str(e), 400)
    return f"Bad request: {e}", 400

@app.errorhandler(ConfigurationError)
def handle_configuration_error(e):
    """Sort helpers misused by a view or template."""
    LoggingHelper.log_error_with_trace(f"Sort helper misconfigured on {request.path}", e)
    if _is_api_path(request.path):
        return error_response('Internal server error', 500)
    return "Internal server error", 500

@app.errorhandler(404)
def not_found_error(e):
    """Handle 404 Not Found errors."""
    logger.debug(f"Not found: {request.path}")
    if _is_api_path(request.path):
        return error_response('Not found', 404)
    return "Not found", 404

@app.errorhandler(Exception)
def handle_exception(e):
    """Catch-all error handler - returns JSON for API routes, plain text for pages."""
    if isinstance(e, HTTPException):
        return e

    LoggingHelper.log_error_with_trace(f"Unhandled exception on {request.path}", e)
    if _is_api_path(request.path):
        return error_response('Internal server error', 500)
    return "Internal server error", 500

# ============================================================================
# ROUTES
# ============================================================================

@app.route('/health')
def health():
    """Liveness check."""
    return success_response(status='ok')

db = get_database()
init_contacts_routes(db)
app.register_blueprint(contacts_bp)

logger.info("Table sort demo application initialized and ready")

# Only run the development server if executed directly (not via WSGI)
if __name__ == '__main__':
    host = os.getenv('HOST', '127.0.0.1')
    port = int(os.getenv('PORT', '5000'))

    if host == '0.0.0.0':
        logger.warning("Binding to 0.0.0.0 exposes the app to the network.")

    logger.info(f"Starting Flask development server on {host}:{port}")
    logger.warning("Using Flask development server. For production, use a WSGI server like Gunicorn.")

    try:
        app.run(host=host, port=port, debug=False, threaded=True)
    except Exception as e:
        LoggingHelper.log_error_with_trace("Flask failed to start", e)
        raise
