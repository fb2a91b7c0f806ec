import base64
import re
import secrets

from src.platform.config.core_setting import settings


_NON_ALPHANUMERIC = re.compile(r'[^A-Za-z0-9]')


def generate_qr_code(length: int | None = None) -> str:
    """Random URL-safe alphanumeric entry token."""
    length = length or settings.QR_CODE_LENGTH
    token = ''
    while len(token) < length:
        raw = base64.urlsafe_b64encode(secrets.token_bytes(16)).decode('ascii')
        token += _NON_ALPHANUMERIC.sub('', raw)
    return token[:length]
