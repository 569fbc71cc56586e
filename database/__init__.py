from .catalog import CatalogStore, UNKNOWN_DIRECTOR, derive_genres
from .seed_movies import SEED_MOVIES, SEED_DIRECTORS

__all__ = [
    'CatalogStore',
    'UNKNOWN_DIRECTOR',
    'derive_genres',
    'SEED_MOVIES',
    'SEED_DIRECTORS'
]
