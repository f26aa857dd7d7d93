"""
Calculator form endpoints.

Serves the HTML page and handles its form submissions. Validation errors
are shown on the page instead of being returned as HTTP errors.
"""

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from digitmath.api.dependencies import enforce_factorial_limit, get_factorial_service
from digitmath.api.page import render_page
from digitmath.domain.digits import DigitArrayInteger
from digitmath.domain.errors import InvalidInput
from digitmath.domain.validation import require_int, require_string

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculator"])


def handle_submission(data: Mapping[str, Any]) -> tuple[str | None, str | None]:
    """
    Dispatch a form submission on its ``action`` field.

    Returns:
        (result, error) pair; at most one of them is set. Both are None
        when the action is missing or unknown.
    """
    action = data.get("action")

    try:
        if action == "multiply":
            a = DigitArrayInteger.from_string(require_string(data, "a"))
            b = DigitArrayInteger.from_string(require_string(data, "b"))
            return a.multiply(b).to_string(), None

        if action == "factorial":
            n = require_int(data, "n")
            enforce_factorial_limit(n)
            return get_factorial_service().calculate(n).to_string(), None
    except InvalidInput as e:
        logger.info(f"Rejected {action} submission: {e}")
        return None, str(e)

    return None, None


@router.get("/", response_class=HTMLResponse)
async def show_form() -> HTMLResponse:
    """Render the empty calculator page."""
    return HTMLResponse(render_page())


@router.post("/", response_class=HTMLResponse)
async def submit_form(request: Request) -> HTMLResponse:
    """
    Handle a calculator form submission.

    The arithmetic runs in the threadpool so a long multiplication or a
    large factorial does not block the event loop.
    """
    form = await request.form()
    data = {key: value for key, value in form.items()}

    result, error = await run_in_threadpool(handle_submission, data)
    return HTMLResponse(render_page(result=result, error=error))
