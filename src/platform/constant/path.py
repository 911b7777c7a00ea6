from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# Default drop folder scanned by script/ingest_venue_maps.py
MAP_INBOX_DIR = BASE_DIR / 'venue_maps'
