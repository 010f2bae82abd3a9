"""Configuration settings for the pack allocator"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Server Configuration
HOST = os.getenv('PACK_ALLOCATOR_HOST', '0.0.0.0')
PORT = int(os.getenv('PACK_ALLOCATOR_PORT', '8080'))
SHUTDOWN_TIMEOUT = float(os.getenv('PACK_ALLOCATOR_SHUTDOWN_TIMEOUT', '5.0'))
LOG_LEVEL = os.getenv('PACK_ALLOCATOR_LOG_LEVEL', 'INFO')

# Frontend
API_BASE_URL = os.getenv('PACK_ALLOCATOR_API_URL', 'http://localhost:8080')

# Query parameters
ORDER_QTY_PARAM = 'order_qty'
PACK_SIZES_PARAM = 'pack_sizes'

# Pack sizes used when a request does not name any (empty disables the fallback)
DEFAULT_PACK_SIZES = os.getenv('PACK_ALLOCATOR_DEFAULT_PACK_SIZES', '250,500,1000,2000,5000')

# File paths
DATA_DIR = './data'
OUTPUT_FILE = os.getenv(
    'PACK_ALLOCATOR_OUTPUT_FILE', os.path.join(DATA_DIR, 'shipment_results.json')
)


class Settings:
    """Server settings, overridable per app instance"""

    def __init__(self, host: str = HOST, port: int = PORT,
                 shutdown_timeout: float = SHUTDOWN_TIMEOUT,
                 default_pack_sizes: str = DEFAULT_PACK_SIZES,
                 log_level: str = LOG_LEVEL):
        self.host = host
        self.port = port
        self.shutdown_timeout = shutdown_timeout
        self.default_pack_sizes = default_pack_sizes
        self.log_level = log_level

    def __repr__(self) -> str:
        return f"Settings({self.host}:{self.port}, default_pack_sizes={self.default_pack_sizes!r})"
