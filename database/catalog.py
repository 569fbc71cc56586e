"""In-memory movie catalog"""
import copy
import threading

from database.seed_movies import SEED_MOVIES, SEED_DIRECTORS


UNKNOWN_DIRECTOR = {
    'name': 'Unknown',
    'age': 'Unknown',
    'awards': ['Unknown']
}


def derive_genres(movies):
    """Distinct genres in order of first appearance"""
    genres = []
    for movie in movies:
        # Added records may carry unhashable genres, so compare by value
        genre = movie.get('genre')
        if genre not in genres:
            genres.append(genre)
    return genres


class CatalogStore:
    """
    Movies plus a title-keyed map of directors, held for the process lifetime.

    Genres are derived once at construction unless live_genres is set, in
    which case every call to genres() recomputes them from the current movies.
    """

    def __init__(self, movies=None, directors=None, live_genres=False):
        if movies is None:
            movies = SEED_MOVIES
        if directors is None:
            directors = SEED_DIRECTORS

        self._movies = copy.deepcopy(list(movies))
        self._directors = copy.deepcopy(dict(directors))
        self._lock = threading.Lock()
        self.live_genres = live_genres
        self._genres = derive_genres(self._movies)

    def __len__(self):
        with self._lock:
            return len(self._movies)

    def list_movies(self):
        with self._lock:
            return list(self._movies)

    def add_movie(self, movie):
        with self._lock:
            self._movies.append(movie)

    def lookup_director(self, title):
        if not isinstance(title, str):
            return copy.deepcopy(UNKNOWN_DIRECTOR)
        return copy.deepcopy(self._directors.get(title, UNKNOWN_DIRECTOR))

    def genres(self):
        if self.live_genres:
            return derive_genres(self.list_movies())
        return list(self._genres)
