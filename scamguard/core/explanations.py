from typing import List, Sequence

from scamguard.core.assessment import (
    FRAUD_THRESHOLD,
    PHISHING_THRESHOLD,
    SUSPICIOUS_THRESHOLD,
    LOW_RISK_THRESHOLD,
)
from scamguard.core.rules import ContentType

RECOMMENDATIONS = {
    'critical': [
        "Do not respond, click any links, or make any payments.",
        "Report this content to the platform or the relevant authorities.",
        "Block the sender and delete the message.",
    ],
    'high': [
        "Avoid clicking links or downloading attachments.",
        "Verify the sender through an official channel before taking any action.",
        "Never share passwords, OTPs, or banking details.",
    ],
    'medium': [
        "Proceed with caution and verify the source independently.",
        "Do not share personal or financial information.",
    ],
    'low': [
        "Content appears mostly safe, but stay alert for unusual requests.",
    ],
    'safe': [
        "No action needed. Content appears safe.",
    ],
}


def _summarize(indicators: Sequence[str], count: int) -> str:
    picked = [i for i in list(indicators)[:count] if i]
    return ", ".join(picked) if picked else "no specific indicators"


def generate_explanation(risk_score: int, indicators: Sequence[str], content_type) -> str:
    """
    Build the human-readable explanation for a risk score.

    Args:
        risk_score: Score in the 0-100 range
        indicators: Triggered indicators in evaluation order
        content_type: ContentType (or raw value) of the scanned content

    Returns:
        One templated sentence for the score band
    """
    label = ContentType.parse(content_type).label
    indicators = indicators or []

    if risk_score >= FRAUD_THRESHOLD:
        return f"High-risk {label} detected. Multiple scam indicators found: {_summarize(indicators, 3)}."
    if risk_score >= PHISHING_THRESHOLD:
        return f"Moderate-risk {label}. Several warning signs detected: {_summarize(indicators, 2)}."
    if risk_score >= SUSPICIOUS_THRESHOLD:
        return f"Low-risk {label} with some suspicious elements: {_summarize(indicators, 1)}."
    if risk_score >= LOW_RISK_THRESHOLD:
        return f"Mostly safe {label} with minor concerns: {_summarize(indicators, 1)}."
    if indicators:
        return f"Safe {label}. Only minor signals found: {_summarize(indicators, 1)}."
    return f"Safe {label}. No significant scam indicators detected."


def recommendations_for(risk_score: int) -> List[str]:
    """Fixed recommendation list for the score band (independent of category)"""
    if risk_score >= 80:
        band = 'critical'
    elif risk_score >= 60:
        band = 'high'
    elif risk_score >= 40:
        band = 'medium'
    elif risk_score >= 20:
        band = 'low'
    else:
        band = 'safe'
    return list(RECOMMENDATIONS[band])
