import os

from dotenv import load_dotenv

load_dotenv()


BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '3000'))
    DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'


    STATIC_FOLDER = os.getenv('STATIC_FOLDER', os.path.join(BASE_DIR, 'public'))


    # Recompute /genres from the live catalog instead of the startup snapshot
    LIVE_GENRES = os.getenv('LIVE_GENRES', 'False').lower() == 'true'


    METRICS_ENABLED = os.getenv('METRICS_ENABLED', 'False').lower() == 'true'
