# logic/insights.py
from __future__ import annotations

from typing import Any, Optional

from openai import OpenAI

from ..config import Settings, get_settings
from ..errors import InsightsError
from ..logging_setup import get_logger
from .stats import SummaryStats

logger = get_logger(__name__)

SYSTEM_INSTRUCTION = (
    "คุณคือผู้เชี่ยวชาญบัญชีและการเงินของการไฟฟ้าส่วนภูมิภาคเขต 3 ภาคกลาง "
    "ที่มีบุคลิกน่าเชื่อถือ สุขุม และเก่งวิเคราะห์ข้อมูลภาษี"
)
PROMPT_PREFIX = "วิเคราะห์สถานะภาษีคงค้างนี้และให้คำแนะนำ 3 ข้อเชิงรุกสำหรับผู้บริหาร: "

EMPTY_RESPONSE_TEXT = "ไม่สามารถวิเคราะห์ได้"
FAILURE_TEXT = "ระบบวิเคราะห์ขัดข้อง"
PLACEHOLDER_TEXT = "คลิก 'เริ่มการวิเคราะห์ AI' เพื่อรับข้อมูลเชิงลึกและคำแนะนำเชิงกลยุทธ์จากระบบอัจฉริยะ"


def build_summary_text(stats: SummaryStats) -> str:
    return (
        f"รายการทั้งหมด {stats.total_records:,} รายการ, "
        f"รวมมูลค่าฐานภาษี {stats.total_base_value:,.2f} บาท, "
        f"ภาษีซื้อรวม {stats.total_vat:,.2f} บาท, "
        f"รวมมูลค่าสินค้า {stats.total_product_value:,.2f} บาท, "
        f"วันคงค้างเฉลี่ย {stats.average_aging:.0f} วัน, "
        f"รายการเกินกำหนด {stats.overdue_count:,} รายการ"
    )


def _make_client(settings: Settings) -> Any:
    if not settings.openai_api_key:
        raise InsightsError("OPENAI_API_KEY not found. Check .env or Streamlit secrets.")
    return OpenAI(api_key=settings.openai_api_key)


def generate_insights(
    stats: SummaryStats,
    client: Any = None,
    settings: Optional[Settings] = None,
) -> Optional[str]:
    """
    Ask the model for three executive recommendations based on the summary.
    Returns None when there is nothing to analyze and a fixed fallback string
    when the call fails. A single attempt, no retries.
    """
    if stats.total_records == 0:
        return None

    settings = settings or get_settings()
    summary_text = build_summary_text(stats)

    try:
        client = client or _make_client(settings)
        resp = client.responses.create(
            model=settings.openai_model,
            instructions=SYSTEM_INSTRUCTION,
            input=PROMPT_PREFIX + summary_text,
        )
        text = (getattr(resp, "output_text", "") or "").strip()
    except Exception as e:
        logger.error("AI insights request failed: %s", e)
        return FAILURE_TEXT

    if not text:
        logger.warning("AI insights response contained no text")
        return EMPTY_RESPONSE_TEXT
    return text
