# Backends are the seam where a real delivery channel replaces the simulated
# delay, so cancellation and failure mapping are checked here.

import threading
import time

import pytest
import requests

import config
from services import contact_backend
from services.contact_backend import (
    SimulatedContactBackend,
    SubmissionCancelled,
    SubmissionError,
    SubmissionTask,
    WebhookContactBackend,
    get_contact_backend,
)


class _FakeResponse:
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")


def test_simulated_backend_waits_the_delay() -> None:
    task = SimulatedContactBackend(delay_seconds=0.05).submit({"fullName": "A"})

    started = time.monotonic()
    task.wait()

    assert time.monotonic() - started >= 0.04
    assert task.done
    assert not task.cancelled


def test_simulated_backend_defaults_to_configured_delay(monkeypatch) -> None:
    monkeypatch.setattr(config, "SUBMIT_DELAY_SECONDS", 0.25)
    assert SimulatedContactBackend().delay_seconds == 0.25


def test_cancel_before_wait_raises() -> None:
    task = SimulatedContactBackend(delay_seconds=5).submit({})
    task.cancel()

    with pytest.raises(SubmissionCancelled):
        task.wait()


def test_cancel_interrupts_pending_delay() -> None:
    task = SimulatedContactBackend(delay_seconds=5).submit({})
    threading.Timer(0.05, task.cancel).start()

    started = time.monotonic()
    with pytest.raises(SubmissionCancelled):
        task.wait()
    assert time.monotonic() - started < 2


def test_cancelled_is_a_submission_error() -> None:
    assert issubclass(SubmissionCancelled, SubmissionError)


def test_task_reports_done_after_failure() -> None:
    def work(cancel_event):
        raise SubmissionError("nope")

    task = SubmissionTask(work)
    with pytest.raises(SubmissionError):
        task.wait()
    assert task.done


def test_webhook_posts_json_payload(monkeypatch) -> None:
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append((url, json, timeout))
        return _FakeResponse(204)

    monkeypatch.setattr(contact_backend.requests, "post", fake_post)
    backend = WebhookContactBackend("https://hooks.example.com/contact", timeout=3)

    backend.submit({"fullName": "A"}).wait()

    assert calls == [("https://hooks.example.com/contact", {"fullName": "A"}, 3)]


def test_webhook_http_error_becomes_submission_error(monkeypatch) -> None:
    monkeypatch.setattr(contact_backend.requests, "post", lambda *a, **k: _FakeResponse(502))
    backend = WebhookContactBackend("https://hooks.example.com/contact")

    with pytest.raises(SubmissionError):
        backend.submit({}).wait()


def test_webhook_connection_error_becomes_submission_error(monkeypatch) -> None:
    def refuse(*args, **kwargs):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(contact_backend.requests, "post", refuse)

    with pytest.raises(SubmissionError) as excinfo:
        WebhookContactBackend("https://hooks.example.com/contact").submit({}).wait()
    assert isinstance(excinfo.value.__cause__, requests.exceptions.ConnectionError)


def test_factory_picks_backend_from_config(monkeypatch) -> None:
    monkeypatch.setattr(config, "CONTACT_WEBHOOK_URL", "")
    assert isinstance(get_contact_backend(), SimulatedContactBackend)

    monkeypatch.setattr(config, "CONTACT_WEBHOOK_URL", "https://hooks.example.com/contact")
    backend = get_contact_backend()
    assert isinstance(backend, WebhookContactBackend)
    assert backend.url == "https://hooks.example.com/contact"
