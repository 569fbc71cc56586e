"""Movie listing, genre filtering and additions over a CatalogStore"""
import logging


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('title', 'genre', 'year')


class MovieQueryError(Exception):
    """Base class for catalog request failures"""


class MoviesNotFoundError(MovieQueryError):

    def __init__(self, genre):
        self.genre = genre
        super().__init__(f'No movies found for genre: {genre}')


class InvalidMovieError(MovieQueryError):

    def __init__(self, missing_fields):
        self.missing_fields = list(missing_fields)
        super().__init__('Invalid movie data')


def with_director(store, movie):
    return {**movie, 'director': store.lookup_director(movie.get('title'))}


def query_movies(store, genre=None):
    """
    List movies, optionally restricted to one genre

    Args:
        store: CatalogStore
        genre: exact, case-sensitive genre name; None or '' means all movies

    Returns:
        list: movie dicts, each with a 'director' record attached

    Raises:
        MoviesNotFoundError: the genre matched no movie
    """
    movies = store.list_movies()

    if genre:
        movies = [movie for movie in movies if movie.get('genre') == genre]
        if not movies:
            logger.warning(f"No movies found for genre '{genre}'")
            raise MoviesNotFoundError(genre)

    return [with_director(store, movie) for movie in movies]


def is_present(value):
    # None, '', 0, False and empty containers all count as missing
    return bool(value)


def missing_fields(data):
    if not isinstance(data, dict):
        return list(REQUIRED_FIELDS)
    return [field for field in REQUIRED_FIELDS if not is_present(data.get(field))]


def add_movie(store, data):
    """
    Append a movie to the catalog as received

    Raises:
        InvalidMovieError: title, genre or year is missing
    """
    missing = missing_fields(data)
    if missing:
        logger.warning(f"Rejected movie, missing fields: {', '.join(missing)}")
        raise InvalidMovieError(missing)

    store.add_movie(data)
    logger.info(f"Added movie '{data['title']}' ({data['genre']}, {data['year']})")
    return data
