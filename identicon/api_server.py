#!/usr/bin/env python3
"""
Identicon API Server
Renders identicons on demand, or writes them to the results folder.
"""

from __future__ import annotations
import logging
from pathlib import Path
from flask import Flask, Response, jsonify, request
from flask_cors import CORS

from . import config
from .exceptions import IdenticonWriteError
from .pipeline.generate_identicon import generate, render
from .services.identicon_service import IdenticonService
from .services.storage_service import StorageService

logger = logging.getLogger(__name__)


def create_app(results_folder: str | Path | None = None) -> Flask:
    """Build the Flask app; `results_folder` overrides RESULTS_FOLDER."""
    app = Flask(__name__)
    CORS(app)  # Enable CORS for frontend communication

    app.config['RESULTS_FOLDER'] = str(results_folder or config.RESULTS_FOLDER)
    Path(app.config['RESULTS_FOLDER']).mkdir(parents=True, exist_ok=True)

    @app.route('/api/identicon/<path:value>', methods=['GET'])
    def get_identicon(value):
        """Render an identicon in memory and return it as image/png."""
        png = render(value)
        return Response(png, mimetype='image/png')

    @app.route('/api/identicon', methods=['POST'])
    def create_identicon():
        """Generate `<input>.png` in the results folder."""
        payload = request.get_json(silent=True)
        value = payload.get('input') if isinstance(payload, dict) else None
        if not isinstance(value, str):
            return jsonify({'success': False, 'message': "JSON body needs a string 'input'"}), 400

        storage_service = StorageService(app.config['RESULTS_FOLDER'])
        if not storage_service.stays_in_output_dir(value):
            logger.warning(f"Rejected identicon input outside results folder: {value!r}")
            return jsonify({'success': False, 'message': "'input' must not contain a path"}), 400

        try:
            path = generate(value, storage_service=storage_service)
        except IdenticonWriteError as e:
            logger.error(f"Identicon write error: {e}")
            return jsonify({'success': False, 'message': e.reason, 'errno': e.errno}), 500

        image = IdenticonService().build(value)
        logger.info(f"Generated identicon for {value!r} at {path}")
        return jsonify({
            'success': True,
            'path': str(path),
            'color': list(image.color),
            'cells': len(image.pixel_map),
        })

    @app.route('/api/health', methods=['GET'])
    def health_check():
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'message': 'Identicon API is running',
            'results_folder': app.config['RESULTS_FOLDER'],
        })

    @app.errorhandler(400)
    def bad_request(e):
        """Handle bad request error."""
        return jsonify({'error': 'Bad request'}), 400

    @app.errorhandler(404)
    def not_found(e):
        """Handle unknown routes."""
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(500)
    def internal_error(e):
        """Handle internal server error."""
        logger.error(f"Internal server error: {e}")
        return jsonify({'error': 'Internal server error'}), 500

    return app


def main() -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )
    app = create_app()
    logger.info(f"Starting Identicon API on {config.API_HOST}:{config.API_PORT}")
    logger.info(f"Results directory: {app.config['RESULTS_FOLDER']}")
    app.run(host=config.API_HOST, port=config.API_PORT, debug=False)


if __name__ == '__main__':
    main()
