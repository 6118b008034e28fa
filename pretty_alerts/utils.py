import logging
from datetime import datetime, timezone
from typing import Optional

from .constants import DEBUG_MODE, LOG_LEVEL

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(debug: bool = DEBUG_MODE, level_name: str = LOG_LEVEL) -> int:
    """
    Configura o logging raiz do processo.

    DEBUG_MODE/DEBUG=true sempre vence; caso contrário usa LOG_LEVEL
    (debug|info|warn|error). Valores desconhecidos caem para INFO.
    """
    level = logging.DEBUG if debug else _LOG_LEVELS.get((level_name or "").lower(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(level)
    return level


def _is_meaningful(value) -> bool:
    if value is None:
        return False
    return str(value).strip() != ""


def strip_trailing_slash(url: Optional[str]) -> str:
    if not url:
        return ""
    return url[:-1] if url.endswith("/") else url


def truncate(text: Optional[str], limit: int, ellipsis: str = "…") -> str:
    """Corta o texto para caber em `limit` caracteres, terminando com reticências."""
    if text is None:
        return ""
    if len(text) <= limit:
        return text
    if limit <= len(ellipsis):
        return text[:limit]
    return text[: limit - len(ellipsis)] + ellipsis


def utc_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def format_timestamp(timestamp) -> str:
    if not timestamp:
        return 'N/A'
    if isinstance(timestamp, datetime):
        return timestamp.strftime('%Y-%m-%d %H:%M:%S')
    return str(timestamp).replace('Z', '').replace('T', ' ')
