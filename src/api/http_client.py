# src/api/http_client.py
import logging
from typing import Any

import requests

from src.config import HTTP_TIMEOUT_S, HTTP_USER_AGENT
from src.utils import report_error

logger = logging.getLogger("weatherwidget")


def http_get_json(
    url: str, params: dict[str, Any] | None = None, timeout: float = HTTP_TIMEOUT_S
) -> Any:
    """
    Yksi GET-pyyntö, joka palauttaa JSON-rungon.

    Ei uudelleenyrityksiä: virheet (requests.RequestException, HTTPError,
    JSONDecodeError) raportoidaan ja heitetään eteenpäin kutsujalle.
    """
    headers = {"User-Agent": HTTP_USER_AGENT}
    try:
        resp = requests.get(url, params=params, timeout=timeout, headers=headers)
        resp.raise_for_status()
        return resp.json()
    except Exception as e:
        report_error(f"http_get_json: {url}", e)
        raise
