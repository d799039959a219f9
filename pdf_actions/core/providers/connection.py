"""
Credential check against the PDF Services token endpoint
"""

from typing import Optional, Tuple

import requests
from loguru import logger

from ... import __version__
from ...config.settings import PDF_SERVICES_TOKEN_URL
from ..structures import Credentials


def check_credentials(
    credentials: Credentials,
    token_url: Optional[str] = None,
    timeout: int = 30
) -> Tuple[bool, str]:
    """
    Test that the client id and secret are accepted by PDF Services

    Args:
        credentials: Client id and secret to check
        token_url: Token endpoint, defaults to PDF_SERVICES_TOKEN_URL
        timeout: Request timeout in seconds

    Returns:
        Tuple of (success, message)
    """
    url = token_url or PDF_SERVICES_TOKEN_URL

    try:
        with requests.Session() as session:
            session.headers.update({'User-Agent': f'pdf-actions/{__version__}'})
            response = session.post(
                url,
                data={
                    'client_id': credentials.client_id,
                    'client_secret': credentials.client_secret
                },
                timeout=timeout
            )
    except requests.exceptions.RequestException as e:
        logger.warning(f"Credential check could not reach {url}: {e}")
        return False, f"Connection failed: {e}"

    if response.status_code != 200:
        return False, f"Token endpoint returned status {response.status_code}"

    try:
        body = response.json()
    except ValueError:
        return False, "Token endpoint returned an invalid response"

    if not isinstance(body, dict) or not body.get('access_token'):
        return False, "Token endpoint did not return an access token"

    return True, "Credentials accepted"
