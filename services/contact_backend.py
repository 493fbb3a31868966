"""
Contact form delivery backends.

The page ships with a simulated backend that waits a fixed delay and never
fails. A webhook backend can be attached through CONTACT_WEBHOOK_URL without
changing how the contact form drives a submission.
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional

import requests

import config

logger = logging.getLogger(__name__)


class SubmissionError(Exception):
    """Raised when a contact submission could not be delivered"""

    def __init__(self, message: str = None):
        self.message = message or "Contact submission failed"
        super().__init__(self.message)


class SubmissionCancelled(SubmissionError):
    """Raised by SubmissionTask.wait() when the task was cancelled"""

    def __init__(self, message: str = None):
        super().__init__(message or "Contact submission was cancelled")


class SubmissionTask:
    """
    A single in-flight submission that can be cancelled.

    The work runs when wait() is called and receives the cancel event, so
    timed work can return early once cancel() is called from elsewhere.
    """

    def __init__(self, work: Callable[[threading.Event], None]):
        self._work = work
        self._cancel_event = threading.Event()
        self._done = False

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    @property
    def done(self) -> bool:
        return self._done

    def cancel(self) -> None:
        self._cancel_event.set()

    def wait(self) -> None:
        """Run the work to completion; raises SubmissionError on failure"""
        if self.cancelled:
            raise SubmissionCancelled()
        try:
            self._work(self._cancel_event)
        finally:
            self._done = True
        if self.cancelled:
            raise SubmissionCancelled()


class ContactBackend:
    """Base class for contact submission backends"""

    name = "base"

    def submit(self, payload: Dict[str, Any]) -> SubmissionTask:
        raise NotImplementedError


class SimulatedContactBackend(ContactBackend):
    """Pretends to deliver the message after a fixed delay. Never fails."""

    name = "simulated"

    def __init__(self, delay_seconds: Optional[float] = None):
        self.delay_seconds = config.SUBMIT_DELAY_SECONDS if delay_seconds is None else delay_seconds

    def submit(self, payload: Dict[str, Any]) -> SubmissionTask:
        def work(cancel_event: threading.Event) -> None:
            cancel_event.wait(self.delay_seconds)

        return SubmissionTask(work)


class WebhookContactBackend(ContactBackend):
    """
    Delivers submissions as JSON to a webhook URL.

    Usage:
        backend = WebhookContactBackend("https://hooks.example.com/contact")
        backend.submit(submission.to_payload()).wait()
    """

    name = "webhook"

    def __init__(self, url: str, timeout: Optional[float] = None):
        self.url = url
        self.timeout = config.CONTACT_WEBHOOK_TIMEOUT if timeout is None else timeout

    def _post(self, payload: Dict[str, Any]) -> None:
        try:
            response = requests.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning("Contact webhook request failed: %s", type(e).__name__)
            raise SubmissionError(f"Webhook delivery failed: {e}") from e

    def submit(self, payload: Dict[str, Any]) -> SubmissionTask:
        def work(cancel_event: threading.Event) -> None:
            self._post(payload)

        return SubmissionTask(work)


def get_contact_backend() -> ContactBackend:
    """Pick the webhook backend when configured, otherwise the simulated one"""
    if config.CONTACT_WEBHOOK_URL:
        return WebhookContactBackend(config.CONTACT_WEBHOOK_URL)
    return SimulatedContactBackend()
