from flask import Flask, Response, current_app, jsonify, request, send_from_directory
from flask_cors import CORS
from config import Config
import logging

from database.catalog import CatalogStore
from services.movie_query import (
    InvalidMovieError, MoviesNotFoundError, add_movie, query_movies
)

from metrics import (
    metrics_endpoint, track_request,
    MOVIES_ADDED_COUNT, INVALID_MOVIE_COUNT, GENRE_QUERY_COUNT
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


WELCOME_MESSAGE = 'Welcome to the Movie Recommendation Service. Choose a genre to get started!'


def text_response(message, status=200):
    return Response(message, status=status, mimetype='text/plain')


def get_store():
    return current_app.extensions['catalog']


def create_app(config=Config, store=None):
    """
    Build the Flask app around a CatalogStore.

    The store lives as long as the app; pass one in to share or seed it,
    otherwise a fresh seeded store is created.
    """
    app = Flask(__name__, static_folder=config.STATIC_FOLDER, static_url_path='')
    app.config.from_object(config)
    CORS(app, send_wildcard=True)

    if store is None:
        store = CatalogStore(live_genres=app.config['LIVE_GENRES'])
    app.extensions['catalog'] = store

    @app.route('/')
    @track_request
    def home():
        return send_from_directory(app.static_folder, 'index.html')

    @app.route('/genres')
    @track_request
    def genres():
        genre_list = get_store().genres()

        if not genre_list:
            return text_response('No genres available', 404)

        return jsonify(genre_list)

    @app.route('/movies')
    @track_request
    def movies():
        genre = request.args.get('genre')

        try:
            result = query_movies(get_store(), genre)
        except MoviesNotFoundError as e:
            GENRE_QUERY_COUNT.labels(result='not_found').inc()
            return text_response(str(e), 404)

        if genre:
            GENRE_QUERY_COUNT.labels(result='found').inc()

        return jsonify(result)

    @app.route('/addMovie', methods=['POST'])
    @track_request
    def add_movie_endpoint():
        data = request.get_json(silent=True)

        try:
            add_movie(get_store(), data)
        except InvalidMovieError as e:
            INVALID_MOVIE_COUNT.inc()
            return text_response(str(e), 400)

        MOVIES_ADDED_COUNT.inc()
        return text_response('Movie added successfully', 201)

    @app.route('/info')
    @track_request
    def info():
        return text_response(WELCOME_MESSAGE)

    if app.config['METRICS_ENABLED']:
        @app.route('/metrics')
        def metrics():
            return metrics_endpoint()

    # Unknown paths (404) and known paths with the wrong method (405)
    @app.errorhandler(404)
    @app.errorhandler(405)
    def invalid_request(error):
        return text_response('Invalid request', 400)

    return app


app = create_app()


def main():
    logger.info(f"Server running on port {Config.PORT}")
    app.run(
        host=Config.HOST,
        port=Config.PORT,
        debug=Config.DEBUG
    )


if __name__ == '__main__':
    main()
