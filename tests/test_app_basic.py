import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


def test_imports():
    try:
        import app  # noqa: F401
        import config  # noqa: F401
        import metrics  # noqa: F401
        assert True
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")


def test_package_modules():
    try:
        from database import catalog  # noqa: F401
        from database import seed_movies  # noqa: F401
        from services import movie_query  # noqa: F401
        assert True
    except ImportError as e:
        pytest.fail(f"Package module import failed: {e}")


def test_module_level_app_has_catalog():
    import app

    assert 'catalog' in app.app.extensions
    assert len(app.app.extensions['catalog']) == 12
