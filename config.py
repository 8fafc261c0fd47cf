# config.py
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

load_dotenv()


def _resolve(path_value):
    path = Path(path_value)
    return path if path.is_absolute() else BASE_DIR / path


class Config:
    DATA_DIR = _resolve(os.getenv('BIBLE_DATA_DIR', 'data'))
    OUTPUT_DIR = _resolve(os.getenv('BIBLE_OUTPUT_DIR', os.path.join('public', 'bibles')))

    # Upstream dataset locations, relative to DATA_DIR
    KJV1611_SOURCE_DIR = DATA_DIR / 'kjv-1611' / 'Bible-kjv-1611-main'
    SCROLLMAPPER_SOURCE_DIR = DATA_DIR / 'scrollmapper' / 'bible_databases-master' / 'formats' / 'json'
    WEB_USFM_DIR = DATA_DIR / 'web' / 'usfm'
    OEB_USFM_DIR = DATA_DIR / 'oeb' / 'Open-English-Bible-master' / 'artifacts' / 'us' / 'usfm'

    BIBLE_API_BASE = os.getenv('BIBLE_API_BASE', 'https://bible-api.com').rstrip('/')
    BIBLE_API_TIMEOUT = float(os.getenv('BIBLE_API_TIMEOUT', '30'))

    # bible-api.com asks clients to stay under 15 requests per 30 seconds
    RATE_LIMIT_REQUESTS = int(os.getenv('RATE_LIMIT_REQUESTS', '15'))
    RATE_LIMIT_WINDOW_MS = int(os.getenv('RATE_LIMIT_WINDOW_MS', '30000'))
    RATE_LIMIT_MARGIN_MS = int(os.getenv('RATE_LIMIT_MARGIN_MS', '100'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    PORT = int(os.getenv('PORT', '5001'))
