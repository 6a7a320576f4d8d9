"""
Spreadsheet webhook sync.
Best-effort push of unsynced clock entries to an external sheet endpoint.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
import structlog

from ..core.constants import DEFAULT_SYNC_TIMEOUT_SECONDS
from ..entries.model import TimeEntry
from ..entries.repository import EntryRepository

log = structlog.get_logger(__name__)


def entry_payload(entry: TimeEntry) -> Dict[str, Any]:
    loc = entry.location
    return {
        "id": entry.entry_id,
        "userId": entry.user_id,
        "userName": entry.user_name,
        "timestamp": entry.timestamp.isoformat(),
        "type": entry.kind.value,
        "latitude": loc.latitude if loc else None,
        "longitude": loc.longitude if loc else None,
        "locationLabel": entry.location_label,
    }


class SheetsWebhookSync:
    """Push pending entries once; failures are logged and left for the next push."""

    def __init__(
        self,
        url: Optional[str],
        entries: EntryRepository,
        *,
        client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_SYNC_TIMEOUT_SECONDS,
    ):
        self._url = (url or "").strip()
        self._entries = entries
        self._client = client
        self._timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self._url)

    def push_pending(self) -> int:
        if not self.enabled:
            return 0

        pending = self._entries.list_unsynced()
        if not pending:
            return 0

        client = self._client or httpx.Client(timeout=self._timeout)
        pushed = 0
        try:
            for entry in pending:
                try:
                    response = client.post(self._url, json=entry_payload(entry))
                    response.raise_for_status()
                except (httpx.HTTPError, httpx.InvalidURL) as exc:
                    log.warning("sheets_sync_failed", entry_id=entry.entry_id, error=str(exc))
                    break
                self._entries.mark_synced(entry.entry_id)
                pushed += 1
        finally:
            if self._client is None:
                client.close()

        log.info("sheets_sync_done", pushed=pushed, pending=len(pending) - pushed)
        return pushed
