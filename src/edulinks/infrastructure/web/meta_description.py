from __future__ import annotations

import html.parser
import http.client
import logging
import urllib.error
import urllib.parse
import urllib.request

logger = logging.getLogger(__name__)

USER_AGENT = "edulinks-describe/1.0"
MAX_BODY_BYTES = 512 * 1024


class _MetaDescriptionParser(html.parser.HTMLParser):
    """Collect ``<meta name="description">`` and ``og:description`` content."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.description: str | None = None
        self.og_description: str | None = None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag.lower() != "meta":
            return
        amap = {k.lower(): (v or "") for k, v in attrs}
        content = " ".join(amap.get("content", "").split())
        if not content:
            return
        if amap.get("name", "").lower() == "description" and self.description is None:
            self.description = content
        elif amap.get("property", "").lower() == "og:description" and self.og_description is None:
            self.og_description = content


def extract_meta_description(html_text: str) -> str | None:
    parser = _MetaDescriptionParser()
    parser.feed(html_text)
    parser.close()
    return parser.description or parser.og_description


def fetch_meta_description(url: str, *, timeout: float = 10.0) -> str | None:
    """Fetch ``url`` and return its meta description, or None on any failure."""
    scheme = urllib.parse.urlparse(url.strip()).scheme.lower()
    if scheme not in {"http", "https"}:
        return None

    request = urllib.request.Request(
        url.strip(),
        headers={
            "User-Agent": USER_AGENT,
            "Accept": "text/html,application/xhtml+xml",
        },
    )
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            charset = response.headers.get_content_charset() or "utf-8"
            body = response.read(MAX_BODY_BYTES).decode(charset, errors="replace")
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError, LookupError) as exc:
        logger.debug("No description for %s: %s", url, exc)
        return None

    return extract_meta_description(body)
