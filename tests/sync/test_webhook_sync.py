from __future__ import annotations

import json
from datetime import datetime

import httpx

from control_horari.entries.model import Location
from control_horari.sync.webhook import SheetsWebhookSync, entry_payload

URL = "https://sheets.example.test/hook"


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_disabled_without_url(entries_repo, entry):
    entries_repo.add(entry("IN", datetime(2026, 3, 2, 8, 0)))
    sync = SheetsWebhookSync("", entries_repo)

    assert not sync.enabled
    assert sync.push_pending() == 0
    assert len(entries_repo.list_unsynced()) == 1


def test_pushes_and_marks_synced(entries_repo, entry):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={"ok": True})

    entries_repo.add(entry("IN", datetime(2026, 3, 2, 8, 0), location=Location(41.1, 1.2), label="Obra"))
    entries_repo.add(entry("OUT", datetime(2026, 3, 2, 16, 0)))
    sync = SheetsWebhookSync(URL, entries_repo, client=_client(handler))

    assert sync.push_pending() == 2
    assert entries_repo.list_unsynced() == []
    assert seen[0]["type"] == "IN"
    assert seen[0]["latitude"] == 41.1
    assert seen[0]["locationLabel"] == "Obra"
    assert seen[1]["latitude"] is None

    # Nothing left to send.
    assert sync.push_pending() == 0


def test_failure_stops_without_raising_or_retrying(entries_repo, entry):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500)

    entries_repo.add(entry("IN", datetime(2026, 3, 2, 8, 0)))
    entries_repo.add(entry("OUT", datetime(2026, 3, 2, 16, 0)))
    sync = SheetsWebhookSync(URL, entries_repo, client=_client(handler))

    assert sync.push_pending() == 0
    assert len(calls) == 1
    assert len(entries_repo.list_unsynced()) == 2


def test_transport_error_is_swallowed(entries_repo, entry):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    entries_repo.add(entry("IN", datetime(2026, 3, 2, 8, 0)))
    sync = SheetsWebhookSync(URL, entries_repo, client=_client(handler))

    assert sync.push_pending() == 0


def test_payload_shape(entry):
    payload = entry_payload(entry("IN", datetime(2026, 3, 2, 8, 0, 5)))

    assert payload["timestamp"] == "2026-03-02T08:00:05"
    assert payload["userName"] == "Jordi"
    assert set(payload) == {"id", "userId", "userName", "timestamp", "type", "latitude", "longitude", "locationLabel"}


def test_malformed_url_is_logged_not_raised(entries_repo, entry):
    entries_repo.add(entry("IN", datetime(2026, 3, 2, 8, 0)))
    sync = SheetsWebhookSync("http://sheet.example:notaport/hook", entries_repo)

    assert sync.push_pending() == 0
    assert len(entries_repo.list_unsynced()) == 1
