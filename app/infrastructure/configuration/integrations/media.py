"""Media hosting settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class MediaSettings(IntegrationSettings):
    """Public hosting of uploaded incident media.

    Environment Variables:
        PUBLIC_DOMAINS: Comma-separated list of public domains serving
            ``/objects/...`` paths. The first entry is used to build media URLs.
    """

    PUBLIC_DOMAINS: str = Field(default="", alias="PUBLIC_DOMAINS")

    @property
    def domains(self) -> List[str]:
        return [d.strip() for d in self.PUBLIC_DOMAINS.split(",") if d.strip()]
