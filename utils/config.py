"""
Application configuration loaded from the environment (.env supported)
"""
import os
from dotenv import load_dotenv

load_dotenv()

CONFIG = {
    'ARTISTS_URL': os.getenv('ARTISTS_API_URL', 'https://groupietrackers.herokuapp.com/api/artists'),
    'RELATIONS_URL': os.getenv('RELATIONS_API_URL', 'https://groupietrackers.herokuapp.com/api/relation'),
    'PORT': 8080,
    'DEFAULT_MIN_YEAR': 0,
    'DEFAULT_MAX_YEAR': 9999,
    'TEMPLATE': 'index.html',
}
