import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .logging_setup import get_logger

# Try to import streamlit if available (for st.secrets on Cloud)
try:
    import streamlit as st
except ImportError:
    st = None  # when running plain Python scripts

logger = get_logger(__name__)


PUBLISHED_ID = "2PACX-1vS4Glk-fDP3vCXezi1JOG5LUFWCjpLFvvYzG55I-t6G346SlyAdCSj-qJ3DuhBl1w"
GID = "1515609245"
CSV_URL_TEMPLATE = "https://docs.google.com/spreadsheets/d/e/{published_id}/pub?gid={gid}&single=true&output=csv"


@dataclass(frozen=True)
class Settings:
    csv_url: str
    fetch_timeout: float = 15.0
    cache_ttl: int = 300
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    log_level: str = "INFO"


_settings: Optional[Settings] = None


def _secret(key: str) -> Optional[str]:
    """
    Look a key up in st.secrets first, then in the environment.
    st.secrets raises when no secrets.toml exists, which is the normal case locally.
    """
    if st is not None and hasattr(st, "secrets"):
        try:
            if key in st.secrets:
                return str(st.secrets[key])
        except Exception as e:
            logger.debug("st.secrets unavailable (%s), falling back to environment", e)
    value = os.getenv(key)
    if value is None:
        return None
    value = value.strip()
    # Hosting dashboards sometimes wrap values in quotes
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1].strip()
    return value or None


def _number(key: str, default, cast):
    raw = _secret(key)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, using default %s", key, raw, default)
        return default


def _build_csv_url() -> str:
    override = _secret("D7_CSV_URL")
    if override:
        return override
    return CSV_URL_TEMPLATE.format(
        published_id=_secret("D7_SHEET_PUBLISHED_ID") or PUBLISHED_ID,
        gid=_secret("D7_SHEET_GID") or GID,
    )


def get_settings() -> Settings:
    """
    Returns a singleton Settings object.
    Works both:
    - locally (reads from .env)
    - on Streamlit Cloud (reads from st.secrets)
    """
    global _settings
    if _settings is not None:
        return _settings

    load_dotenv()

    _settings = Settings(
        csv_url=_build_csv_url(),
        fetch_timeout=_number("D7_FETCH_TIMEOUT", 15.0, float),
        cache_ttl=_number("D7_CACHE_TTL", 300, int),
        openai_api_key=_secret("OPENAI_API_KEY") or "",
        openai_model=_secret("D7_OPENAI_MODEL") or "gpt-4o-mini",
        log_level=(_secret("D7_LOG_LEVEL") or "INFO").upper(),
    )
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
