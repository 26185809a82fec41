import json
import math
import logging
from typing import Any, Dict, List, Optional

from scamguard.core.assessment import RiskAssessment
from scamguard.core.rules import MAX_INDICATORS

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE = 0.5
DEFAULT_RISK_SCORE = 50
DEFAULT_CATEGORY = "unknown"
DEFAULT_EXPLANATION = "AI analysis completed"


def _as_float(value: Any, default: float) -> float:
    if isinstance(value, bool) or value is None:
        return default
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    # json.loads accepts NaN, Infinity and overflowing literals
    return result if math.isfinite(result) else default


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def _as_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def parse_ai_response(content: str) -> Optional[Dict[str, Any]]:
    """
    Pull the JSON object out of a model reply.

    Models often wrap the object in prose or code fences, so everything
    between the first '{' and the last '}' is decoded.
    """
    if not content:
        return None

    start_idx = content.find("{")
    end_idx = content.rfind("}")
    if start_idx == -1 or end_idx <= start_idx:
        logger.warning("AI reply did not contain a JSON object")
        return None

    try:
        parsed = json.loads(content[start_idx:end_idx + 1])
    except json.JSONDecodeError as e:
        logger.warning(f"AI reply JSON could not be decoded: {e}")
        return None

    return parsed if isinstance(parsed, dict) else None


def format_ai_result(raw: Dict[str, Any]) -> RiskAssessment:
    """
    Normalize an upstream AI classification into a RiskAssessment.

    Missing fields get neutral defaults; confidence and riskScore are
    clamped into their valid ranges.
    """
    raw = raw or {}

    confidence = _as_float(raw.get("confidence"), DEFAULT_CONFIDENCE)
    confidence = min(1.0, max(0.0, confidence))

    risk_score = int(round(_as_float(raw.get("riskScore"), DEFAULT_RISK_SCORE)))
    risk_score = min(100, max(0, risk_score))

    return RiskAssessment(
        is_scam=_as_bool(raw.get("isScam")),
        confidence=confidence,
        category=str(raw.get("category") or DEFAULT_CATEGORY),
        risk_score=risk_score,
        explanation=str(raw.get("explanation") or DEFAULT_EXPLANATION),
        indicators=_as_str_list(raw.get("indicators"))[:MAX_INDICATORS],
        recommendations=_as_str_list(raw.get("recommendations")),
        detection_method="ai",
    )
