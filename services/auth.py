"""Mock login check against the fixed credential pairs in domain.constants."""
import logging
from typing import Optional, Iterable, Tuple

from domain.constants import CREDENTIALS

logger = logging.getLogger(__name__)


def authenticate(username: str, password: str, credentials: Iterable[Tuple[str, str]] = CREDENTIALS) -> Optional[str]:
    """Return the accepted username, or None when the pair is rejected."""
    user = (username or '').strip()
    if any(user == u and password == p for u, p in credentials):
        logger.info("Login accepted for %s", user)
        return user
    logger.warning("Login rejected for %r", user)
    return None
