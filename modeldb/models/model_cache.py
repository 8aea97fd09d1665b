"""Edge cache entry model."""

import json
import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from modeldb.consts import EDGE_CACHE_HEADERS
from modeldb.models.common import _utc_now

_MAX_AGE_PATTERN = re.compile(r"max-age=(\d+)")


class CachedResponse(BaseModel):
    """A JSON response body stored in the edge cache."""

    body: str
    headers: dict[str, str] = Field(default_factory=lambda: dict(EDGE_CACHE_HEADERS))
    stored_at: datetime = Field(default_factory=_utc_now)

    @classmethod
    def from_payload(cls, payload: Any) -> "CachedResponse":
        """Build a cacheable response from a JSON-ready payload."""
        return cls(body=json.dumps(payload, ensure_ascii=False))

    @property
    def max_age(self) -> int | None:
        """Freshness lifetime in seconds from Cache-Control, if any."""
        match = _MAX_AGE_PATTERN.search(self.headers.get("Cache-Control", ""))
        return int(match.group(1)) if match else None

    def is_fresh(self, now: datetime | None = None) -> bool:
        max_age = self.max_age
        if max_age is None:
            return True
        now = now or _utc_now()
        return (now - self.stored_at).total_seconds() <= max_age

    def read_json(self) -> Any:
        """Decode the body. Raises json.JSONDecodeError on a corrupt entry."""
        return json.loads(self.body)
