import logging
import re
from typing import Optional
import httpx
from apertium_translator.models import ApertiumConfig
from apertium_translator.clients.errors import (
    ERROR_PREFIX,
    ReadError,
    ServiceError,
    TransportError,
)

logger = logging.getLogger(__name__)

ENCODING = "UTF-8"
# Zero-width no-break space, which the upstream service prepends to responses
ZERO_WIDTH_NO_BREAK_SPACE = "\ufeff"
# Only these end a line; U+2028, U+2029 and U+0085 are legal inside JSON strings
LINE_TERMINATOR = re.compile(r"\r\n|\r|\n")
API_KEY_PARAM = re.compile(r"([?&]key=)[^&]*")


def normalize(line: str) -> str:
    """Removes every U+FEFF marker from the line."""
    return line.replace(ZERO_WIDTH_NO_BREAK_SPACE, "")


def build_headers(referrer: Optional[str] = None) -> dict:
    headers = {
        "Content-Type": f"text/plain; charset={ENCODING}",
        "Accept-Charset": ENCODING,
    }
    if referrer is not None:
        headers["referer"] = referrer
    return headers


def redact(url: str) -> str:
    """Masks the API key value in a query URL so it can be logged."""
    return API_KEY_PARAM.sub(r"\1***", url)


def _read_body(response: httpx.Response) -> str:
    """Drains the body line by line; lines are joined without a separator."""
    # The service always answers in UTF-8, whatever the declared charset says
    response.encoding = ENCODING
    try:
        text = "".join(response.iter_text())
        return "".join(normalize(line) for line in LINE_TERMINATOR.split(text))
    except Exception as e:
        raise ReadError(f"{ERROR_PREFIX} Error reading translation stream.") from e


def fetch(url: str, config: ApertiumConfig) -> str:
    """
    Sends a GET to url and returns the normalized body text.
    The body is read in full before the status is checked, since error
    responses carry the service's explanation.
    """
    headers = build_headers(config.referrer)
    logger.info(f"GET {redact(url)}")
    try:
        # A fresh client per call: one connection, released on every exit path
        with httpx.Client(timeout=config.timeout) as client:
            with client.stream("GET", url, headers=headers) as response:
                body = _read_body(response)
    except httpx.RequestError as e:
        logger.error(f"Apertium API network error: {str(e)}")
        raise TransportError(f"Apertium API network error: {str(e)}") from e

    if response.status_code != 200:
        logger.error(f"Apertium API failed with status {response.status_code}.")
        raise ServiceError(f"Error from Apertium API: {body}", status_code=response.status_code)
    return body
