from datetime import date
from typing import List, Optional

import requests

from .config import get_settings
from .errors import FetchError
from .logging_setup import get_logger
from .logic.csv_parser import parse_csv_text
from .logic.records import TaxRecord, map_rows

logger = get_logger(__name__)


def fetch_csv_text(
    url: Optional[str] = None,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    Download the published sheet as CSV text.
    Raises FetchError on network failure or a non-2xx response.
    """
    settings = get_settings()
    url = url or settings.csv_url
    timeout = timeout if timeout is not None else settings.fetch_timeout
    http = session or requests

    try:
        resp = http.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"ไม่สามารถเข้าถึงข้อมูล Google Sheet ได้: {e}") from e

    if not resp.ok:
        raise FetchError(
            f"ไม่สามารถเข้าถึงข้อมูล Google Sheet ได้ (HTTP {resp.status_code})",
            status_code=resp.status_code,
        )

    # Published sheets are UTF-8 but the header is not always declared
    resp.encoding = "utf-8"
    return resp.text


def load_tax_records(
    url: Optional[str] = None,
    session: Optional[requests.Session] = None,
    today: Optional[date] = None,
) -> List[TaxRecord]:
    """
    Fetch -> parse -> map. Raises FetchError when the sheet cannot be fetched,
    so callers that cache results can skip caching a failed load.
    """
    csv_text = fetch_csv_text(url=url, session=session)
    records = map_rows(parse_csv_text(csv_text), today=today)
    logger.info("Loaded %d tax records", len(records))
    return records


def fetch_tax_records(
    url: Optional[str] = None,
    session: Optional[requests.Session] = None,
    today: Optional[date] = None,
) -> List[TaxRecord]:
    """
    Same as load_tax_records, but returns an empty list on any failure;
    errors never propagate to the caller.
    """
    try:
        return load_tax_records(url=url, session=session, today=today)
    except FetchError as e:
        logger.error("Fetch Error: %s", e)
    except Exception:
        logger.exception("Unexpected error while loading tax records")
    return []
