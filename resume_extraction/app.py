# HTTP surface for the resume extraction engine
import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.utils import secure_filename

from .config import Settings
from .document_processor import SUPPORTED_EXTENSIONS, extract_and_parse_document
from .errors import MissingResumeTextError, UnsupportedDocumentError
from .resume_parser import extract_and_parse_resume

logger = logging.getLogger(__name__)


def _error(message: str, status: int):
    return jsonify({'status': 'error', 'message': message}), status


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or Settings.from_env()

    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = settings.max_content_length
    CORS(app, origins=settings.cors_origins)

    @app.route('/api/extract', methods=['POST'])
    def extract():
        """Extract structured data from pasted text or an uploaded document"""
        try:
            if 'resume_file' in request.files and request.files['resume_file'].filename != '':
                resume_file = request.files['resume_file']
                filename = secure_filename(resume_file.filename) or 'resume'
                result = extract_and_parse_document(resume_file.read(), filename)
                logger.info(f"Resume extracted from {filename}: {len(result.data.experience)} jobs, "
                            f"{len(result.data.education)} degrees, {len(result.data.skills)} skills")
                return jsonify({'status': 'success', **result.to_dict()})

            payload = request.get_json(silent=True) or {}
            text = payload.get('text') if isinstance(payload, dict) else None
            if text is None:
                text = request.form.get('text')
            if text is not None and not isinstance(text, str):
                return _error('Field "text" must be a string', 400)
            data = extract_and_parse_resume(text)
            return jsonify({'status': 'success', 'wordCount': data.word_count, 'data': data.to_dict()})

        except MissingResumeTextError:
            return _error('No resume provided. Please paste text or upload a file.', 400)
        except UnsupportedDocumentError as e:
            return _error(f"{e}. Supported: {', '.join(SUPPORTED_EXTENSIONS)}", 400)

    @app.route('/api/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify({'status': 'healthy', 'message': 'Resume extraction service is running'})

    @app.errorhandler(404)
    def not_found_error(error):
        return _error('Endpoint not found', 404)

    @app.errorhandler(413)
    def too_large_error(error):
        return _error(f'File too large (max {settings.max_upload_mb}MB)', 413)

    @app.errorhandler(500)
    def internal_error(error):
        return _error('Internal server error', 500)

    return app


def main():
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    logger.info(f"Starting resume extraction service on http://{settings.host}:{settings.port}")
    create_app(settings).run(host=settings.host, port=settings.port)


if __name__ == '__main__':
    main()
