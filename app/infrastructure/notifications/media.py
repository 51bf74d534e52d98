"""Public URLs for uploaded incident media.

Uploaded files are stored under ``/objects/<key>`` and served from the
application's public domain. Gateways need an absolute https URL to attach
them to a WhatsApp message.
"""

from typing import List, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()

OBJECTS_PREFIX = "/objects/"


class MediaUrlBuilder:
    """Rewrites local media paths into publicly reachable URLs.

    Args:
        public_domains: Domains serving the application; the first one is used.

    Example:
        builder = MediaUrlBuilder(["blast.example.co.id"])
        builder.public_url("/objects/uploads/abc.jpg")
        # "https://blast.example.co.id/objects/uploads/abc.jpg"
    """

    def __init__(self, public_domains: List[str]):
        self._domain = public_domains[0] if public_domains else None

    @property
    def is_configured(self) -> bool:
        return self._domain is not None

    def public_url(self, media_path: Optional[str]) -> Optional[str]:
        """Return the public URL for ``media_path``, or None when unavailable."""
        if not media_path:
            return None

        if media_path.startswith(("http://", "https://")):
            return media_path

        if self._domain is None:
            logger.warning(
                "media_url_unavailable",
                media_path=media_path,
                reason="no public domain configured",
            )
            return None

        key = media_path
        if key.startswith(OBJECTS_PREFIX):
            key = key[len(OBJECTS_PREFIX) :]
        key = key.lstrip("/")

        domain = self._domain
        if "://" in domain:
            domain = domain.split("://", 1)[1]
        domain = domain.rstrip("/")

        return f"https://{domain}{OBJECTS_PREFIX}{key}"
