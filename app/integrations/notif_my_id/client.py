"""notif.my.id WhatsApp gateway client."""

from typing import Optional

import requests

from infrastructure.logging import get_module_logger

logger = get_module_logger()

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


def build_send_form(
    api_key: str, number: str, text: str, media_url: Optional[str] = None
) -> dict:
    """Build the form fields of a send request.

    Parameters:
    api_key: Gateway API key
    number: Recipient digits, country-code prefixed, without "+"
    text: Message text
    media_url: Optional public URL of an attachment
    """
    form = {
        "apikey": api_key,
        "number": number,
        "text": text,
        "action": "send",
    }
    if media_url:
        form["media"] = media_url
    return form


def post_message(
    url: str,
    api_key: str,
    number: str,
    text: str,
    media_url: Optional[str] = None,
    timeout: float = 30,
) -> requests.Response:
    """Post a send request to the gateway and return the raw response.

    Transport errors (timeouts, connection failures) propagate to the caller.
    """
    form = build_send_form(api_key, number, text, media_url)
    response = requests.post(url, data=form, headers=FORM_HEADERS, timeout=timeout)
    logger.debug(
        "notif_request_completed",
        number=number,
        response_code=response.status_code,
    )
    return response
