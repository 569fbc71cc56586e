from .movie_query import (
    MovieQueryError,
    MoviesNotFoundError,
    InvalidMovieError,
    query_movies,
    add_movie
)

__all__ = [
    'MovieQueryError',
    'MoviesNotFoundError',
    'InvalidMovieError',
    'query_movies',
    'add_movie'
]
