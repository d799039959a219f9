import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# PDF Services Credentials (CLI defaults only)
PDF_SERVICES_CLIENT_ID = os.getenv('PDF_SERVICES_CLIENT_ID')
PDF_SERVICES_CLIENT_SECRET = os.getenv('PDF_SERVICES_CLIENT_SECRET')

# PDF Services client configuration (milliseconds)
PDF_SERVICES_CONNECT_TIMEOUT = int(os.getenv('PDF_SERVICES_CONNECT_TIMEOUT', '10000'))
PDF_SERVICES_READ_TIMEOUT = int(os.getenv('PDF_SERVICES_READ_TIMEOUT', '60000'))
PDF_SERVICES_TOKEN_URL = os.getenv('PDF_SERVICES_TOKEN_URL', 'https://pdf-services.adobe.io/token')

# Logging Configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_DIR = Path(os.getenv('LOG_DIR', 'data/output/logs'))
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def get_config() -> Dict[str, Any]:
    """Get complete configuration dictionary"""
    return {
        "pdf_services": {
            "client_id": PDF_SERVICES_CLIENT_ID,
            "connect_timeout": PDF_SERVICES_CONNECT_TIMEOUT,
            "read_timeout": PDF_SERVICES_READ_TIMEOUT,
            "token_url": PDF_SERVICES_TOKEN_URL,
        },
        "logging": {
            "level": LOG_LEVEL,
            "format": LOG_FORMAT,
        },
        "paths": {
            "logs": LOG_DIR,
        }
    }
