import os
import logging
import traceback
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, request, jsonify
from flask_cors import CORS

from coauthor_network.core import (
    AnalyzerConfig, CoauthorAnalyzer, MalformedRecordError,
    NoAuthorsInIntervalError, UnknownAuthorError,
)
from coauthor_network.core.models import ranked_to_dicts

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

load_dotenv()

app = Flask(__name__)

CORS(app, resources={
    r"/api/*": {
        "origins": [
            "http://localhost:5000",
            "http://127.0.0.1:5000"
        ],
        "methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["Content-Type"],
        "supports_credentials": False
    }
})

# Configuration
config = AnalyzerConfig.from_env()
analyzer = CoauthorAnalyzer(config)

if config.data_file:
    try:
        analyzer.load_file(config.data_file)
    except (OSError, MalformedRecordError) as e:
        logger.error(f"Failed to load {config.data_file} on startup: {e}")


class BadRequest(ValueError):
    """Invalid or missing request parameter."""


def _int_arg(name: str, default: Optional[int] = None, required: bool = False) -> Optional[int]:
    """Read an integer query parameter."""
    raw = request.args.get(name)
    if raw is None or raw == "":
        if required:
            raise BadRequest(f"{name} parameter is required")
        return default
    try:
        return int(raw)
    except ValueError:
        raise BadRequest(f"{name} must be an integer, got {raw!r}")


def _error(message: str, status: int):
    return jsonify({
        'status': 'error',
        'error': message
    }), status


def _success(data):
    return jsonify({
        'status': 'success',
        'data': data
    })


@app.errorhandler(BadRequest)
def handle_bad_request(error):
    return _error(str(error), 400)


@app.errorhandler(UnknownAuthorError)
def handle_unknown_author(error):
    return _error(str(error), 404)


@app.errorhandler(NoAuthorsInIntervalError)
def handle_no_authors(error):
    return _error(str(error), 404)


@app.errorhandler(ValueError)
def handle_value_error(error):
    return _error(str(error), 400)


@app.route('/', methods=['GET'])
def index():
    """Root endpoint - API information"""
    return jsonify({
        'service': 'Co-authorship Network API',
        'version': '1.0.0',
        'status': 'running',
        'endpoints': {
            'health': '/api/health',
            'load': '/api/load (POST)',
            'statistics': '/api/statistics',
            'year_table': '/api/year-table',
            'authors_by_initial': '/api/authors?initial=<char>',
            'author': '/api/authors/<name>',
            'top_coauthors': '/api/authors/<name>/top-coauthors?k=',
            'authors_in_interval': '/api/interval/authors?min_year=&max_year=',
            'top_publishers': '/api/interval/top-publishers?min_year=&max_year=&k=',
            'top_pairs': '/api/interval/top-pairs?min_year=&max_year=&k=',
            'network_statistics': '/api/network/statistics?min_year=&max_year='
        },
        'documentation': 'Access API endpoints under /api/'
    })


@app.route('/api/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now().isoformat(),
        'data_file': analyzer.current_file,
        'publications': analyzer.network.publication_count,
        'authors': len(analyzer.index)
    })


def _is_allowed_path(path: str) -> bool:
    """Only the configured data file or files under the configured data directory may be loaded."""
    resolved = Path(path).resolve()
    if config.data_file and resolved == Path(config.data_file).resolve():
        return True
    if config.data_dir:
        try:
            resolved.relative_to(Path(config.data_dir).resolve())
            return True
        except ValueError:
            return False
    return False


@app.route('/api/load', methods=['POST'])
def load():
    """
    Load (or reload) a data file

    Request body:
    {
        "path": str (optional, default: configured data file; otherwise must
                     lie under COAUTHOR_DATA_DIR)
    }
    """
    data = request.get_json(silent=True) or {}
    path = data.get('path') or config.data_file

    if not path:
        return _error('path parameter is required', 400)

    if not _is_allowed_path(path):
        logger.warning(f"Rejected load request outside the data directory: path={path}")
        return _error('path is outside the configured data directory', 403)

    logger.info(f"Received load request: path={path}")

    try:
        count = analyzer.load_file(path)
    except FileNotFoundError:
        return _error(f'Data file not found: {path}', 404)
    except MalformedRecordError as e:
        logger.error(f"Failed to load {path}: {e}")
        return _error(f'Malformed data file at line {e.line_number}', 422)

    return _success({
        'file': analyzer.current_file,
        'publications': count,
        'authors': len(analyzer.index)
    })


@app.route('/api/statistics', methods=['GET'])
def statistics():
    return _success(analyzer.statistics_summary())


@app.route('/api/year-table', methods=['GET'])
def year_table():
    rows = [{'year': year, 'publications': count} for year, count in analyzer.year_table().items()]
    return _success(rows)


@app.route('/api/authors', methods=['GET'])
def authors_by_initial():
    """
    Authors whose name starts with a character

    Query parameters:
    - initial: str (required, single character)
    """
    initial = request.args.get('initial')
    if not initial:
        raise BadRequest('initial parameter is required')
    return _success(analyzer.authors_starting_with(initial))


@app.route('/api/authors/<name>/top-coauthors', methods=['GET'])
def top_coauthors(name: str):
    k = _int_arg('k')
    return _success(ranked_to_dicts(analyzer.top_coauthors(name, k), key_name='coauthor'))


@app.route('/api/authors/<name>', methods=['GET'])
def author_details(name: str):
    """Per-author publication counts and coauthor weights"""
    info = analyzer.author(name)
    partners = info.partnership_info()
    return _success({
        'name': info.name,
        'solo_publications': info.solo_publications,
        'joint_publications': info.joint_publications,
        'total_publications': info.total_publications,
        'only_solo': info.only_solo(),
        'never_solo': info.never_solo(),
        'total_coauthors': info.total_coauthors(),
        'total_collaborations': partners.total,
        'coauthors': dict(sorted(info.coauthors.items()))
    })


@app.route('/api/interval/authors', methods=['GET'])
def authors_in_interval():
    min_year = _int_arg('min_year', required=True)
    max_year = _int_arg('max_year', required=True)
    return _success(analyzer.authors_in_interval(min_year, max_year))


@app.route('/api/interval/top-publishers', methods=['GET'])
def top_publishers():
    min_year = _int_arg('min_year', required=True)
    max_year = _int_arg('max_year', required=True)
    k = _int_arg('k')
    return _success(ranked_to_dicts(analyzer.top_publishers(min_year, max_year, k)))


@app.route('/api/interval/top-pairs', methods=['GET'])
def top_pairs():
    min_year = _int_arg('min_year', required=True)
    max_year = _int_arg('max_year', required=True)
    k = _int_arg('k')
    return _success(ranked_to_dicts(analyzer.top_pairs(min_year, max_year, k), key_name='pair'))


@app.route('/api/network/statistics', methods=['GET'])
def network_statistics():
    min_year = _int_arg('min_year')
    max_year = _int_arg('max_year')
    return _success(analyzer.get_network_statistics(min_year, max_year))


@app.errorhandler(404)
def not_found(error):
    return _error('Endpoint not found', 404)


@app.errorhandler(500)
def internal_error(error):
    logger.error(f"Unhandled error: {error}")
    logger.error(traceback.format_exc())
    return _error('Internal server error', 500)


if __name__ == '__main__':
    logger.info("Starting Flask API server...")
    logger.info(f"Data file: {config.data_file}")

    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('DEBUG', 'False').lower() == 'true'

    app.run(host='0.0.0.0', port=port, debug=debug)
