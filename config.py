import os
from dotenv import load_dotenv
from constants import BandwidthBound

# Load environment (.env file if present)
load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
SOFTWARE_CATALOG_PATH = os.getenv(
    'SOFTWARE_CATALOG_PATH', os.path.join(BASE_DIR, 'data', 'softwares.json')
)
# Fails at import time on an unknown bound
DEFAULT_BANDWIDTH_BOUND = BandwidthBound(os.getenv('DEFAULT_BANDWIDTH_BOUND', 'ideal'))
DEFAULT_NETWORK_BOUND = os.getenv('DEFAULT_NETWORK_BOUND', 'upper')
