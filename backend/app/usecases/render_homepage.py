"""Use case for assembling the STOPS project homepage."""
import logging
from pathlib import Path
from typing import Optional

import httpx

from app.config import Settings, settings as default_settings
from app.pages import stops
from app.services.fragment_client import fetch_fragment
from app.utils.host import split_host

logger = logging.getLogger(__name__)


def read_tail_file(path: Path) -> bytes:
    """Bytes of the file appended after </html>; missing file -> b""."""
    try:
        return path.read_bytes()
    except OSError as e:
        logger.warning(f"Tail file {path} not readable: {type(e).__name__}: {e}")
        return b""


def execute(
    host: str,
    client: httpx.Client,
    settings: Optional[Settings] = None,
) -> bytes:
    """
    Render the homepage for a request addressed to ``host``.

    Args:
        host: Raw Host header of the request
        client: HTTP client used for the title fragment fetch
        settings: Settings to use (defaults to the application settings)

    Returns:
        XML declaration and XHTML document, followed by the tail file bytes
    """
    settings = settings or default_settings
    parts = split_host(host)
    logger.info(f"Rendering homepage for group={parts.group_name!r} domain={parts.domain!r}")

    out = bytearray()
    out += stops.render_head(parts, settings.THEME_ROOT).encode("utf-8")
    out += fetch_fragment(
        client,
        parts,
        path=settings.FRAGMENT_PATH,
        chunk_size=settings.FRAGMENT_CHUNK_SIZE,
    )
    out += stops.render_body(parts).encode("utf-8")
    out += read_tail_file(settings.tail_file_path)
    return bytes(out)
