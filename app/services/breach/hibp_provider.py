import logging
from typing import List

import requests

from app.core.settings import (
    DEFAULT_HIBP_PASSWORD_API,
    DEFAULT_HIBP_TIMEOUT_SECONDS,
    DEFAULT_HIBP_USER_AGENT,
    Settings,
)
from app.services.breach.base import BreachProvider, BreachServiceUnavailable, RangeRecord

logger = logging.getLogger(__name__)


def parse_range_response(body: str) -> List[RangeRecord]:
    """
    Parses ``SUFFIX:COUNT`` lines. Blank and malformed lines are skipped.
    """
    records = []
    for line in body.splitlines():
        line = line.strip()
        if not line or ":" not in line:
            continue

        hash_suffix, count = line.split(":", 1)
        try:
            records.append(RangeRecord(suffix=hash_suffix.strip(), count=int(count.strip())))
        except ValueError:
            logger.debug("Skipping malformed range record")
    return records


class HIBPProvider(BreachProvider):
    """
    Have I Been Pwned "Pwned Passwords" range API.
    No API key is needed for password lookups.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_HIBP_PASSWORD_API,
        timeout: float = DEFAULT_HIBP_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_HIBP_USER_AGENT,
        add_padding: bool = True,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

        self.headers = {"user-agent": user_agent}
        if add_padding:
            self.headers["Add-Padding"] = "true"

    @classmethod
    def from_settings(cls, settings: Settings) -> "HIBPProvider":
        return cls(
            api_url=settings.hibp_password_api,
            timeout=settings.hibp_timeout_seconds,
            user_agent=settings.hibp_user_agent,
            add_padding=settings.hibp_add_padding,
        )

    def fetch_range(self, prefix: str) -> List[RangeRecord]:
        try:
            resp = requests.get(
                f"{self.api_url}/{prefix}",
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("HIBP range request failed: %s", exc.__class__.__name__)
            raise BreachServiceUnavailable("Password breach service unavailable") from exc

        if resp.status_code != 200:
            logger.error("HIBP range request returned status %s", resp.status_code)
            raise BreachServiceUnavailable("Password breach service unavailable")

        records = parse_range_response(resp.text)
        logger.debug("HIBP range %s returned %d records", prefix, len(records))
        return records
