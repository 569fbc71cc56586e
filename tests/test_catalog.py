import os
import sys
import threading

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database.catalog import CatalogStore, UNKNOWN_DIRECTOR, derive_genres
from database.seed_movies import SEED_MOVIES, SEED_DIRECTORS


def test_seed_catalog():
    store = CatalogStore()

    assert len(store) == len(SEED_MOVIES) == 12
    assert store.list_movies() == SEED_MOVIES
    assert set(SEED_DIRECTORS) == {movie['title'] for movie in SEED_MOVIES}


def test_stores_do_not_share_state():
    first = CatalogStore()
    second = CatalogStore()

    first.add_movie({'title': 'X', 'genre': 'Action', 'year': 2020})

    assert len(first) == 13
    assert len(second) == 12
    assert len(SEED_MOVIES) == 12


def test_add_movie_appends_without_dedup():
    store = CatalogStore()
    movie = {'title': 'John Wick', 'genre': 'Action', 'year': 2014}

    store.add_movie(movie)

    movies = store.list_movies()
    assert movies[-1] is movie
    assert [m['title'] for m in movies].count('John Wick') == 2


def test_list_movies_returns_snapshot():
    store = CatalogStore()
    snapshot = store.list_movies()

    store.add_movie({'title': 'X', 'genre': 'Action', 'year': 2020})

    assert len(snapshot) == 12


def test_lookup_director_known_title():
    store = CatalogStore()

    director = store.lookup_director('Parasite')

    assert director['name'] == 'Bong Joon-ho'
    assert director['age'] == 53
    assert director['awards'] == [
        'Academy Award for Best Picture',
        'Academy Award for Best Director'
    ]


def test_lookup_director_unknown_title():
    store = CatalogStore()

    director = store.lookup_director('Not A Movie')

    assert director == {'name': 'Unknown', 'age': 'Unknown', 'awards': ['Unknown']}
    director['awards'].append('mutated')
    assert UNKNOWN_DIRECTOR['awards'] == ['Unknown']


def test_derive_genres_first_seen_order():
    movies = [
        {'title': 'a', 'genre': 'Drama'},
        {'title': 'b', 'genre': 'Action'},
        {'title': 'c', 'genre': 'Drama'},
        {'title': 'd', 'genre': 'Comedy'},
    ]

    assert derive_genres(movies) == ['Drama', 'Action', 'Comedy']


def test_genres_frozen_at_startup():
    store = CatalogStore()

    store.add_movie({'title': 'It', 'genre': 'Horror', 'year': 2017})

    assert store.genres() == ['Action', 'Comedy', 'Drama']


def test_genres_live_when_enabled():
    store = CatalogStore(live_genres=True)

    store.add_movie({'title': 'It', 'genre': 'Horror', 'year': 2017})

    assert store.genres() == ['Action', 'Comedy', 'Drama', 'Horror']


def test_empty_catalog_has_no_genres():
    store = CatalogStore(movies=[], directors={})

    assert store.genres() == []
    assert len(store) == 0


def test_lookup_director_unhashable_title():
    store = CatalogStore()

    assert store.lookup_director(['X']) == UNKNOWN_DIRECTOR
    assert store.lookup_director({'name': 'X'}) == UNKNOWN_DIRECTOR


def test_live_genres_with_unhashable_genre():
    store = CatalogStore(live_genres=True)

    store.add_movie({'title': 'X', 'genre': ['Action'], 'year': 2020})
    store.add_movie({'title': 'Y', 'genre': ['Action'], 'year': 2021})

    assert store.genres() == ['Action', 'Comedy', 'Drama', ['Action']]


def test_concurrent_add_movie():
    store = CatalogStore()
    writers = 8
    per_writer = 200
    snapshots = []
    done = threading.Event()

    def write(writer_id):
        for i in range(per_writer):
            store.add_movie({'title': f'{writer_id}-{i}', 'genre': 'Action', 'year': 2020})

    def read():
        while not done.is_set() and len(snapshots) < 500:
            snapshots.append(store.list_movies())

    reader = threading.Thread(target=read)
    reader.start()
    threads = [threading.Thread(target=write, args=(n,)) for n in range(writers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    done.set()
    reader.join()

    assert len(store) == 12 + writers * per_writer

    final = store.list_movies()
    for snapshot in snapshots:
        assert 12 <= len(snapshot) <= len(final)
        assert snapshot == final[:len(snapshot)]

    titles = [movie['title'] for movie in final[12:]]
    assert len(set(titles)) == writers * per_writer
