"""
HTTP session creation for the command-line fetcher.

The extraction engine itself never touches the network; this module only
serves the CLI when a source is given as an ``http(s)://`` URL.
"""

import random

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from js_outlinks.config import MAX_RETRIES, REQUEST_TIMEOUT, USER_AGENTS
from js_outlinks.utils.log import log


def build_session(verify_ssl: bool = True) -> requests.Session:
    """Return a ``requests.Session`` with retry logic on 5xx and a
    randomised User-Agent."""
    session = requests.Session()
    retry = Retry(
        total=MAX_RETRIES,
        backoff_factor=0.5,
        status_forcelist=[500, 502, 503, 504],
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": random.choice(USER_AGENTS),
        "Accept": (
            "application/javascript,text/javascript,text/html,"
            "application/xhtml+xml,*/*;q=0.8"
        ),
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate",
    })
    return session


def fetch_text(session: requests.Session, url: str) -> tuple[str, str]:
    """
    GET *url* and return ``(text, content_type)``.

    Raises ``requests.RequestException`` on connection errors and non-2xx
    responses.
    """
    log.info("[FETCH] %s", url)
    resp = session.get(url, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    return resp.text, resp.headers.get("Content-Type", "")
