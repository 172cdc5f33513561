"""
HTTP Basic authentication - pure checks shared by every protected route.
"""
import base64
import binascii
import hmac
import logging
from typing import Optional, Tuple

from .config import Settings

logger = logging.getLogger(__name__)

BASIC_PREFIX = "Basic "
REALM = "Protected Area"
WWW_AUTHENTICATE = f'Basic realm="{REALM}"'

AUTH_REQUIRED = "Authentication required"
INVALID_CREDENTIALS = "Invalid credentials"


def extract_basic_credentials(auth_header: str) -> Optional[Tuple[str, str]]:
    """
    Decode the username/password pair from a Basic Authorization header.

    The payload after "Basic " is Base64-decoded and split on the first colon,
    so passwords may themselves contain colons. Missing "=" padding is
    tolerated, as many clients strip it.

    Returns:
        (username, password), or None when the header has no Basic prefix,
        the payload cannot be decoded, or it contains no colon.
    """
    if not auth_header or not auth_header.startswith(BASIC_PREFIX):
        return None

    payload = auth_header[len(BASIC_PREFIX):].strip()
    payload += "=" * (-len(payload) % 4)

    try:
        decoded = base64.b64decode(payload).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.debug(f"Undecodable Basic credentials: {e}")
        return None

    if ":" not in decoded:
        return None

    username, password = decoded.split(":", 1)
    return username, password


def _matches(supplied: str, expected: Optional[str]) -> bool:
    if expected is None:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def check_basic_auth(auth_header: Optional[str], settings: Settings) -> Optional[str]:
    """
    Evaluate an Authorization header against the configured credentials.

    Args:
        auth_header: raw Authorization header value, None when absent
        settings: configuration snapshot holding the expected credentials

    Returns:
        None if authenticated, otherwise the error message for the client.
    """
    if not auth_header or not auth_header.startswith(BASIC_PREFIX):
        return AUTH_REQUIRED

    credentials = extract_basic_credentials(auth_header)
    if credentials is None:
        return INVALID_CREDENTIALS

    username, password = credentials
    # Evaluate both so a wrong username costs the same as a wrong password
    username_ok = _matches(username, settings.username)
    password_ok = _matches(password, settings.password)
    if username_ok and password_ok:
        return None
    return INVALID_CREDENTIALS
