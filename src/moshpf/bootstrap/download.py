"""HTTPS download of release archives.

Redirects are not followed by urllib; ``download_file`` follows 301/302
itself so the hop count is bounded and every other status is an error.
"""

from __future__ import annotations

import http.client
import shutil
import ssl
from pathlib import Path
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import urljoin, urlparse
from urllib.request import HTTPRedirectHandler, HTTPSHandler, Request, build_opener

from moshpf.core.errors import DownloadError
from moshpf.core.logging import get_logger

LOGGER = get_logger(__name__)

REDIRECT_STATUSES = frozenset({301, 302})
DEFAULT_MAX_REDIRECTS = 10
CHUNK_SIZE = 64 * 1024
USER_AGENT = "moshpf-launcher"


class _NoRedirectHandler(HTTPRedirectHandler):
    """Hand redirect responses back to the caller unfollowed."""

    def redirect_request(self, req, fp, code, msg, headers, newurl):  # type: ignore[override]
        return None


def secure_urlopen(url: str) -> Any:
    """Open an HTTPS URL without following redirects.

    Error statuses are returned rather than raised: ``HTTPError`` is itself a
    response object carrying the status code and headers.

    Raises:
        DownloadError: If the URL is not HTTPS.
        URLError: On DNS, connection or TLS failures.
    """
    if urlparse(url).scheme != "https":
        raise DownloadError(f"Refusing non-HTTPS download URL: {url}", url=url)

    opener = build_opener(
        _NoRedirectHandler(),
        HTTPSHandler(context=ssl.create_default_context()),
    )
    request = Request(url, headers={"User-Agent": USER_AGENT})
    try:
        return opener.open(request)  # nosec B310
    except HTTPError as e:
        return e


def download_file(
    url: str,
    dest: Path,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
) -> str:
    """Download ``url`` to ``dest``, following 301/302 redirects.

    Args:
        url: HTTPS URL to fetch.
        dest: File to stream the response body into.
        max_redirects: Maximum number of redirect hops to follow.

    Returns:
        The URL the body was finally served from.

    Raises:
        DownloadError: On network failure, a status other than 200/301/302,
            a redirect without a Location header, or too many redirects.
    """
    current = url
    for _ in range(max_redirects + 1):
        LOGGER.debug(f"GET {current}")
        try:
            response = secure_urlopen(current)
        except URLError as e:
            raise DownloadError(
                f"Failed to download {current}: {e.reason}", url=current
            ) from e

        with response:
            status = response.getcode()

            if status in REDIRECT_STATUSES:
                location = response.headers.get("Location")
                if not location:
                    raise DownloadError(
                        f"Failed to download: {status} without Location header",
                        url=current,
                        status=status,
                    )
                current = urljoin(current, location)
                LOGGER.debug(f"Redirected ({status}) to {current}")
                continue

            if status != 200:
                raise DownloadError(
                    f"Failed to download: {status}", url=current, status=status
                )

            try:
                with open(dest, "wb") as f:
                    shutil.copyfileobj(response, f, CHUNK_SIZE)
            except (http.client.HTTPException, ConnectionError, ssl.SSLError, TimeoutError) as e:
                raise DownloadError(
                    f"Failed to download {current}: {e}", url=current, status=status
                ) from e

        LOGGER.debug(f"Saved {current} to {dest}")
        return current

    raise DownloadError(
        f"Failed to download {url}: more than {max_redirects} redirects", url=url
    )
