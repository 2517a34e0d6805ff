"""
Redis connection string utilities.

Two forms are accepted:

- URL form understood by redis-py: ``redis://[[user]:password@]host[:port][/db]``,
  ``rediss://...`` or ``unix:///path/to/socket.sock``.
- Endpoint form: ``host[:port][,key=value...]`` with the keys ``user``,
  ``password``, ``ssl``, ``connectTimeout`` and ``syncTimeout`` (milliseconds).
"""

import logging
import re
from dataclasses import dataclass
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

logger = logging.getLogger(__name__)

DEFAULT_PORT = 6379
URL_SCHEMES = ("redis", "rediss", "unix")
REDACTED = "***"

_URL_PASSWORD_PATTERN = re.compile(r"(?P<prefix>\b(?:redis|rediss|unix)://[^:/@\s]*:)[^\s/?#]+@")
_ENDPOINT_PASSWORD_PATTERN = re.compile(r"(?P<prefix>\bpassword=)[^,\s]+", re.IGNORECASE)


@dataclass(frozen=True)
class RedisEndpoint:
    """Connection parameters parsed from an endpoint-form connection string."""

    host: str
    port: int = DEFAULT_PORT
    username: str | None = None
    password: str | None = None
    ssl: bool = False
    connect_timeout: float | None = None
    socket_timeout: float | None = None


def is_url(connection_string: str) -> bool:
    """Return True when the connection string uses a redis-py URL scheme."""
    scheme, sep, _ = connection_string.partition("://")
    return bool(sep) and scheme.lower() in URL_SCHEMES


def with_database(url: str, db_number: int) -> str:
    """
    Return the URL with its database replaced by ``db_number``.

    redis-py lets the URL override keyword arguments, so the database has to be
    rewritten in the URL itself.
    """
    parts = urlsplit(url)
    if parts.scheme.lower() == "unix":
        # Socket paths carry the database as a query parameter
        base, _, query = url.partition("?")
        params = [(k, v) for k, v in parse_qsl(query) if k.lower() != "db"]
        params.append(("db", str(db_number)))
        return f"{base}?{urlencode(params)}"
    return urlunsplit(parts._replace(path=f"/{db_number}"))


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def _parse_millis(value: str) -> float:
    return int(value.strip()) / 1000.0


def parse_endpoint(connection_string: str) -> RedisEndpoint:
    """
    Parse an endpoint-form connection string.

    Only the first endpoint is used when several are listed.

    Args:
        connection_string: e.g. ``"cache.local:6380,password=secret,ssl=true"``

    Returns:
        The parsed endpoint

    Raises:
        ValueError: If no host is given or a port or timeout is not numeric
    """
    endpoints: list[str] = []
    settings: dict[str, str] = {}
    for part in connection_string.split(","):
        part = part.strip()
        if not part:
            continue
        key, sep, value = part.partition("=")
        if sep:
            settings[key.strip().lower()] = value
        else:
            endpoints.append(part)

    if not endpoints:
        raise ValueError("connection string does not name a redis host")
    if len(endpoints) > 1:
        logger.debug("Using first of %d endpoints: %s", len(endpoints), endpoints[0])

    host, sep, port = endpoints[0].rpartition(":")
    if not sep:
        host, port = endpoints[0], str(DEFAULT_PORT)

    endpoint = RedisEndpoint(
        host=host,
        port=int(port),
        username=settings.pop("user", None),
        password=settings.pop("password", None),
        ssl=_parse_bool(settings.pop("ssl", "false")),
        connect_timeout=(
            _parse_millis(settings.pop("connecttimeout"))
            if "connecttimeout" in settings
            else None
        ),
        socket_timeout=(
            _parse_millis(settings.pop("synctimeout")) if "synctimeout" in settings else None
        ),
    )
    for unknown in settings:
        logger.debug("Ignoring unsupported connection string option: %s", unknown)
    return endpoint


def mask_connection_string(connection_string: str | None) -> str:
    """Redact any password embedded in a connection string."""
    if not connection_string:
        return ""
    masked = _URL_PASSWORD_PATTERN.sub(rf"\g<prefix>{REDACTED}@", connection_string)
    return _ENDPOINT_PASSWORD_PATTERN.sub(rf"\g<prefix>{REDACTED}", masked)
