"""
Form handling shared by the printer pages.

Every form rendered by the admin pages carries a hidden ``session`` field
holding a random per-session token kept in the signed Flask session. A
submission is accepted only when it sends that token back.

Usage:
    form = get_form_data()     # FormDataInvalidError if empty
    validate_form(form)        # FormValidationError if the token is wrong
"""

import hmac
import secrets
from typing import Dict

from flask import current_app, request, session

from core.exceptions import FormDataInvalidError, FormValidationError
from services.printer_service import PrinterService
from logging_config import get_logger


# Module logger
logger = get_logger(__name__)

# Hidden form field and Flask session key for the anti-forgery token
FORM_TOKEN_FIELD = "session"
SESSION_TOKEN_KEY = "form_token"

# Banner shown after a successful POST
CHANGES_SAVED = "Changes saved."


def form_token() -> str:
    """Return the current session's form token, creating it on first use."""
    token = session.get(SESSION_TOKEN_KEY)
    if not token:
        token = secrets.token_hex(16)
        session[SESSION_TOKEN_KEY] = token
    return token


def get_form_data() -> Dict[str, str]:
    """
    Parse the submitted form into a flat field -> value mapping.

    Repeated keys keep their last value.

    Raises:
        FormDataInvalidError: If the submission has no fields
    """
    source = request.form if request.method == "POST" else request.args
    form = {name: values[-1] for name, values in source.lists() if values}
    if not form:
        logger.warning(f"Empty form submission to {request.path}")
        raise FormDataInvalidError()
    return form


def validate_form(form: Dict[str, str]) -> None:
    """
    Check the anti-forgery token of a submission.

    Raises:
        FormValidationError: If the token is missing or does not match
    """
    expected = session.get(SESSION_TOKEN_KEY)
    submitted = form.get(FORM_TOKEN_FIELD, "")
    if not expected or not hmac.compare_digest(str(expected), submitted):
        logger.warning(f"Rejected form submission to {request.path}: bad session token")
        raise FormValidationError()


def get_printer() -> PrinterService:
    """The printer served by this application."""
    return current_app.config["PRINTER_SERVICE"]
