from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Any, Literal

# Score bands shared by categories, recommendations and explanations
FRAUD_THRESHOLD = 80
PHISHING_THRESHOLD = 60
SUSPICIOUS_THRESHOLD = 40
LOW_RISK_THRESHOLD = 20

SCAM_THRESHOLD = PHISHING_THRESHOLD


class RiskAssessment(BaseModel):
    """
    Result of a single scan, produced either by the heuristic scorer
    or by the AI classifier. Serialized with camelCase keys.
    """
    is_scam: bool = Field(alias="isScam")
    confidence: float = Field(ge=0.0, le=1.0)
    category: str
    risk_score: int = Field(alias="riskScore", ge=0, le=100)
    explanation: str
    indicators: List[str] = []
    recommendations: List[str] = []
    detection_method: Literal["heuristic", "ai"] = Field(alias="detectionMethod")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def category_for_score(score: int) -> str:
    """Map a 0-100 risk score onto its category band"""
    if score >= FRAUD_THRESHOLD:
        return "fraud"
    if score >= PHISHING_THRESHOLD:
        return "phishing"
    if score >= SUSPICIOUS_THRESHOLD:
        return "suspicious"
    if score >= LOW_RISK_THRESHOLD:
        return "low_risk"
    return "safe"
