"""
Contact Form - submission lifecycle for the landing page.

Owns the contact form's state: field values, the formatted phone mirror,
per-field validation errors and the submission status. State lives in a
mutable mapping supplied by the page (st.session_state at runtime), so the
controller can be driven from widget callbacks and from tests alike.

Lifecycle:
    IDLE/SUCCESS/ERROR -> SUBMITTING -> SUCCESS | ERROR

A submit spans two script runs. The button callback validates and enters
SUBMITTING; the page then renders "Sending…" with the button disabled and
calls process_pending() to deliver. Clearing the fields after success is
deferred to the top of the next run, before the widgets exist again.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, MutableMapping, Optional

from config import (
    CONTACT_METHODS,
    SUCCESS_MESSAGE,
    ERROR_MESSAGE,
    SUBMIT_LABEL,
    SUBMITTING_LABEL,
)
from services.contact_backend import ContactBackend, SubmissionError
from utils.phone import format_phone_input

logger = logging.getLogger(__name__)


class ContactMethod(Enum):
    """How the client would like to be contacted"""
    EMAIL = "Email"
    PHONE = "Phone"
    TEXT = "Text"


# Session state keys for each form control, by wire name
FIELD_KEYS = {
    "fullName": "contact_full_name",
    "email": "contact_email",
    "phone": "contact_phone",
    "preferredContactMethod": "contact_preferred_method",
    "message": "contact_message",
}
REQUIRED_FIELDS = ("fullName", "email", "preferredContactMethod", "message")

STATUS_KEY = "contact_status"
ERRORS_KEY = "contact_errors"
PENDING_KEY = "contact_pending_payload"
CLEAR_PENDING_KEY = "contact_clear_pending"

FIELD_LABELS = {
    "fullName": "Full Name",
    "email": "Email",
    "phone": "Phone",
    "preferredContactMethod": "Preferred Contact Method",
    "message": "Message",
}


def is_valid_email(email: str) -> bool:
    """
    Basic email format validation.

    Stricter than a browser's type=email check: the domain needs a dotted
    TLD, so addresses like user@localhost are rejected.
    """
    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return bool(re.match(pattern, email))


def validate_contact_values(values: Dict[str, Optional[str]]) -> Dict[str, str]:
    """
    Check form values the way the browser's form validity would.

    Returns a mapping of field name -> error message; empty when valid.
    Phone is optional and never produces an error.
    """
    errors = {}

    for name in REQUIRED_FIELDS:
        value = values.get(name)
        if value is None or not str(value).strip():
            errors[name] = f"{FIELD_LABELS[name]} is required."

    email = (values.get("email") or "").strip()
    if "email" not in errors and not is_valid_email(email):
        errors["email"] = "Please enter a valid email address."

    method = values.get("preferredContactMethod")
    if "preferredContactMethod" not in errors and method not in CONTACT_METHODS:
        errors["preferredContactMethod"] = "Please choose Email, Phone or Text."

    return errors


@dataclass(frozen=True)
class ContactSubmission:
    """A validated contact request"""
    full_name: str
    email: str
    preferred_contact_method: ContactMethod
    message: str
    phone: str = ""

    @classmethod
    def from_values(cls, values: Dict[str, Optional[str]]) -> "ContactSubmission":
        return cls(
            full_name=values["fullName"].strip(),
            email=values["email"].strip(),
            preferred_contact_method=ContactMethod(values["preferredContactMethod"]),
            message=values["message"].strip(),
            phone=(values.get("phone") or "").strip(),
        )

    def to_payload(self) -> Dict[str, str]:
        """Serialize using the form's field names"""
        payload = {
            "fullName": self.full_name,
            "email": self.email,
            "preferredContactMethod": self.preferred_contact_method.value,
            "message": self.message,
        }
        if self.phone:
            payload["phone"] = self.phone
        return payload


class SubmissionPhase(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class SubmissionStatus:
    """Outcome of the latest submit attempt, with its user-facing message"""
    phase: SubmissionPhase = SubmissionPhase.IDLE
    message: str = ""

    @property
    def is_submitting(self) -> bool:
        return self.phase is SubmissionPhase.SUBMITTING

    def reset(self) -> None:
        self.phase = SubmissionPhase.IDLE
        self.message = ""

    def begin(self) -> bool:
        """Enter SUBMITTING; refused while a submission is already in flight"""
        if self.is_submitting:
            return False
        self.phase = SubmissionPhase.SUBMITTING
        self.message = ""
        return True

    def succeed(self, message: str) -> None:
        self.phase = SubmissionPhase.SUCCESS
        self.message = message

    def fail(self, message: str) -> None:
        self.phase = SubmissionPhase.ERROR
        self.message = message


class ContactFormController:
    """
    Page-level owner of the contact form state.

    Usage:
        controller = ContactFormController(st.session_state, get_contact_backend())
        controller.apply_pending_clear()
        st.text_input("Phone", key=FIELD_KEYS["phone"], on_change=controller.on_phone_change)
        st.button(controller.submit_label, on_click=controller.submit,
                  disabled=controller.status.is_submitting)
        if controller.process_pending():
            st.rerun()
    """

    def __init__(self, state: MutableMapping, backend: ContactBackend):
        self.state = state
        self.backend = backend
        if STATUS_KEY not in self.state:
            self.state[STATUS_KEY] = SubmissionStatus()
        if ERRORS_KEY not in self.state:
            self.state[ERRORS_KEY] = {}

    @property
    def status(self) -> SubmissionStatus:
        return self.state[STATUS_KEY]

    @property
    def errors(self) -> Dict[str, str]:
        return self.state[ERRORS_KEY]

    @property
    def phone_value(self) -> str:
        return self.state.get(FIELD_KEYS["phone"]) or ""

    @property
    def submit_label(self) -> str:
        return SUBMITTING_LABEL if self.status.is_submitting else SUBMIT_LABEL

    @property
    def status_role(self) -> Optional[str]:
        """ARIA role for the status region; None while idle"""
        phase = self.status.phase
        if phase is SubmissionPhase.ERROR:
            return "alert"
        if phase is SubmissionPhase.SUCCESS:
            return "status"
        return None

    def values(self) -> Dict[str, Optional[str]]:
        return {name: self.state.get(key) for name, key in FIELD_KEYS.items()}

    def on_phone_change(self) -> None:
        """Reformat the phone mirror after each edit"""
        self.state[FIELD_KEYS["phone"]] = format_phone_input(self.phone_value)

    def clear_fields(self) -> None:
        for name, key in FIELD_KEYS.items():
            # Selectbox with no selection shows the placeholder
            self.state[key] = None if name == "preferredContactMethod" else ""

    def apply_pending_clear(self) -> bool:
        """Clear the fields if the last run delivered a message. Call before drawing widgets."""
        if not self.state.get(CLEAR_PENDING_KEY):
            return False
        self.state[CLEAR_PENDING_KEY] = False
        self.clear_fields()
        return True

    def submit(self) -> bool:
        """
        Handle a click on the submit control.

        Returns True when the attempt entered SUBMITTING; delivery happens
        later in process_pending(). Invalid input records field errors and
        leaves every field untouched.
        """
        status = self.status
        if status.is_submitting:
            logger.info("Ignoring contact submit while a submission is in flight")
            return False

        status.reset()

        values = self.values()
        errors = validate_contact_values(values)
        self.state[ERRORS_KEY] = errors
        if errors:
            logger.debug("Contact form rejected; invalid fields: %s", sorted(errors))
            return False

        submission = ContactSubmission.from_values(values)
        self.state[PENDING_KEY] = submission.to_payload()
        status.begin()
        return True

    def process_pending(self) -> bool:
        """
        Deliver the submission recorded by submit().

        Returns True once the attempt has finished, either way, and the
        page should rerun to show the outcome.
        """
        status = self.status
        if not status.is_submitting:
            return False

        payload = self.state.get(PENDING_KEY)
        self.state[PENDING_KEY] = None
        if payload is None:
            # SUBMITTING without a payload can't complete; let the user retry
            logger.warning("Contact submission lost its payload")
            status.reset()
            return True

        logger.info("Submitting contact request via %s backend", self.backend.name)
        try:
            self.backend.submit(payload).wait()
        except SubmissionError as e:
            logger.warning("Contact submission failed: %s", e.message)
            status.fail(ERROR_MESSAGE)
            return True
        except Exception:
            # Release SUBMITTING so the user can retry
            status.fail(ERROR_MESSAGE)
            raise

        self.state[CLEAR_PENDING_KEY] = True
        status.succeed(SUCCESS_MESSAGE)
        logger.info("Contact request delivered")
        return True
