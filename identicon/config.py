"""
Runtime settings, read from the environment (and an optional .env file).

Grid, cell and canvas sizes are fixed and live next to the code that uses
them; only deployment concerns are configurable here.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

OUTPUT_DIR = os.getenv("IDENTICON_OUTPUT_DIR", ".")
BATCH_WORKERS = int(os.getenv("IDENTICON_BATCH_WORKERS", "4"))
LOG_LEVEL = os.getenv("IDENTICON_LOG_LEVEL", "INFO")

RESULTS_FOLDER = os.getenv("RESULTS_FOLDER", "data/identicons")
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "5000"))

LOG_FORMAT = '%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'
