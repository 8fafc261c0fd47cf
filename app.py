# app.py
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix
import logging
import sys
import time

from config import Config
from routes.bible import bible_bp
from storage import get_store

# Configure logging to output to stdout
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def create_app():
    app = Flask(__name__)

    # Use ProxyFix to handle proxy headers when deployed behind one
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    app.json.sort_keys = False  # Keep canonical key order in chapter responses
    app.json.compact = True
    app.url_map.strict_slashes = False

    # The corpus is public, read-only data
    CORS(app, resources={
        r"/api/*": {
            "origins": "*",
            "methods": ["GET", "OPTIONS"],
            "allow_headers": ["Content-Type"],
        }
    })

    app.register_blueprint(bible_bp, url_prefix='/api/bible')

    @app.route('/health', methods=['GET'])
    def health():
        """Health check that also reports what the output tree holds"""
        store = get_store()
        try:
            translations = store.list_translations()
            return jsonify({
                'status': 'healthy' if store.root.is_dir() else 'degraded',
                'output_dir': str(store.root),
                'translations': len(translations),
                'timestamp': time.time()
            })
        except Exception as e:
            logger.error(f"Health check failed: {str(e)}")
            return jsonify({
                'status': 'unhealthy',
                'error': str(e),
                'timestamp': time.time()
            }), 500

    return app


app = create_app()

if __name__ == '__main__':
    logger.info("Starting Flask server...")
    app.run(debug=True, port=Config.PORT)
