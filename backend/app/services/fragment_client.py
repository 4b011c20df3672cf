"""Client for the forge's per-project title fragment service."""
import logging
from typing import Iterator, Optional

import httpx
from fastapi import Depends

from app.config import Settings, get_settings
from app.utils.host import HostParts

logger = logging.getLogger(__name__)


def build_client(timeout: Optional[float] = None) -> httpx.Client:
    """HTTP client for fragment fetches (plain HTTP, redirects followed)."""
    return httpx.Client(timeout=timeout, follow_redirects=True)


def get_fragment_client(settings: Settings = Depends(get_settings)) -> Iterator[httpx.Client]:
    """FastAPI dependency: one client per request, closed afterwards."""
    with build_client(settings.FRAGMENT_TIMEOUT_SEC) as client:
        yield client


def fetch_fragment(
    client: httpx.Client,
    parts: HostParts,
    path: str = "/export/projtitl.php",
    chunk_size: int = 8192,
) -> bytes:
    """Fetch the project title fragment for ``parts``.

    The body is read to the end in ``chunk_size`` pieces and returned as-is.
    Any failure to open or read the stream yields ``b""``; the page renders
    without the fragment.
    """
    url = parts.fragment_url(path)
    if not parts.domain:
        logger.warning("No forge domain in host %r; skipping fragment", parts.group_name)
        return b""
    contents = bytearray()
    try:
        with client.stream("GET", url) as response:
            response.raise_for_status()
            for chunk in response.iter_bytes(chunk_size=chunk_size):
                contents.extend(chunk)
    # ValueError covers URL parse failures such as invalid IDNA labels
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        logger.warning(
            "Fragment fetch failed for %s: %s: %s", url, type(e).__name__, e,
            extra={"url": url, "host": parts.group_name},
        )
        return b""
    logger.debug("Fetched fragment from %s (%d bytes)", url, len(contents))
    return bytes(contents)
