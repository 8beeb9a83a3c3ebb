"""Shared fixtures for the D7 engine tests.

Settings are a process-wide singleton that reads st.secrets and the
environment, so every test starts from a clean singleton with the D7/OpenAI
variables removed and Streamlit secrets disabled.
"""

from __future__ import annotations

import textwrap
from datetime import date

import pytest

from d7_engine import config

_ENV_KEYS = (
    "D7_CSV_URL",
    "D7_SHEET_PUBLISHED_ID",
    "D7_SHEET_GID",
    "D7_FETCH_TIMEOUT",
    "D7_CACHE_TTL",
    "D7_OPENAI_MODEL",
    "D7_LOG_LEVEL",
    "OPENAI_API_KEY",
)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "st", None)
    monkeypatch.setattr(config, "load_dotenv", lambda *a, **k: False)
    config.reset_settings()
    yield
    config.reset_settings()


@pytest.fixture
def today() -> date:
    return date(2025, 1, 31)


HEADER = (
    "ประเภทธุรกิจ,กฟฟ.,วันที่เอกสาร,วันที่ผ่านรายการ,เลขที่เอกสารตั้งหนี้,ปี/เดือน,"
    "เลขที่เอกสารชำระเงิน,วันที่ชำระเงิน,เลขที่ใบกำกับภาษี,ชื่อผู้ขาย/ผู้ให้บริการ,"
    "เลขประจำตัว,มูลค่าฐานภาษี,มูลค่าภาษีซื้อ,มูลค่าสินค้า,สถานะรายการ"
)


@pytest.fixture
def sample_csv() -> str:
    body = textwrap.dedent(
        """
        ไฟฟ้า,กฟจ.นครปฐม,05/01/2025,06/01/2025,DOC-001,2025/01,PAY-001,01/01/2568,INV-001,"บริษัท เอ, จำกัด",0105551234567,"1,000.00",70.00,"1,070.00",จ่ายชำระเงินแล้ว
        ธุรกิจเสริม,กฟอ.สามพราน,10/12/2024,11/12/2024,DOC-002,2024/12,PAY-002,01/11/2024,INV-002,บริษัท บี,0105559999999,"20,000.50","1,400.04","21,400.54",ยังไม่จ่ายชำระเงิน
        ,,,,,,,,,,,,,,

        ไฟฟ้า,กฟอ.บางเลน,20/01/2025,21/01/2025,DOC-003,2025/01,PAY-003,,INV-003,ร้าน ซี,3100100123456,abc,,500,
        short,row,only
        """
    ).strip("\n")
    return HEADER + "\n" + body + "\n"
