import logging
from typing import Optional

import requests

from scamguard.config import settings
from scamguard.core.ai_adapter import parse_ai_response, format_ai_result
from scamguard.core.assessment import RiskAssessment
from scamguard.core.rules import ContentType

logger = logging.getLogger(__name__)

SYSTEM_PROMPTS = {
    ContentType.TEXT: (
        "You are a scam detection expert. Analyze messages for fraud, phishing, "
        "impersonation and social engineering. Respond with STRICT JSON only."
    ),
    ContentType.URL: (
        "You are a URL security analyst specializing in phishing detection. "
        "Inspect the URL for typosquatting, deceptive subdomains, shortened links "
        "and suspicious TLDs. Respond with STRICT JSON only."
    ),
    ContentType.JOB_OFFER: (
        "You are an employment fraud investigator. Analyze job offers for fake "
        "recruiters, advance-fee schemes and money mule recruitment. "
        "Respond with STRICT JSON only."
    ),
    ContentType.INVOICE: (
        "You are an accounts-payable fraud analyst. Analyze invoices for business "
        "email compromise, fake vendors and fraudulent billing. "
        "Respond with STRICT JSON only."
    ),
}

FOCUS = {
    ContentType.TEXT: "urgency, threats, requests for money or personal information",
    ContentType.URL: "suspicious domains, typosquatting, shortened URLs, embedded credentials",
    ContentType.JOB_OFFER: "upfront payments, personal information requests, too-good-to-be-true salaries",
    ContentType.INVOICE: "changed bank details, unusual payment methods, pressure tactics, mismatched details",
}

RESPONSE_FORMAT = (
    '{"isScam": boolean, "confidence": number between 0 and 1, '
    '"category": "fraud"|"phishing"|"suspicious"|"low_risk"|"safe", '
    '"riskScore": integer between 0 and 100, "explanation": "short explanation", '
    '"indicators": ["indicator"], "recommendations": ["recommendation"]}'
)


def get_system_prompt(content_type) -> str:
    return SYSTEM_PROMPTS[ContentType.parse(content_type)]


def get_user_prompt(content: str, content_type) -> str:
    content_type = ContentType.parse(content_type)
    return (
        f"Analyze this {content_type.label} for potential scams or fraud:\n\n"
        f"{content}\n\n"
        f"Look for: {FOCUS[content_type]}.\n"
        f"Respond in this exact JSON format: {RESPONSE_FORMAT}"
    )


class AIClassifier:
    def __init__(self, api_key: Optional[str] = None, api_url: Optional[str] = None,
                 model: Optional[str] = None, timeout: Optional[int] = None):
        """
        Client for an OpenAI-compatible chat completions endpoint

        Args:
            api_key: Bearer token; the classifier is disabled without one
            api_url: Chat completions URL
            model: Model name sent with each request
            timeout: Request timeout in seconds
        """
        self.api_key = api_key if api_key is not None else settings.AI_API_KEY
        self.api_url = api_url or settings.AI_API_URL
        self.model = model or settings.AI_MODEL
        self.timeout = timeout or settings.AI_TIMEOUT

        # Reuse TCP connections across scans
        self.http_session = requests.Session()
        self.http_session.headers.update({
            'User-Agent': f'ScamGuard/{settings.VERSION}',
            'Content-Type': 'application/json',
        })

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def classify(self, content: str, content_type) -> Optional[RiskAssessment]:
        """
        Ask the model for an assessment.

        Returns:
            RiskAssessment with detection_method "ai", or None when the call
            fails, times out, or the reply cannot be used
        """
        if not self.enabled:
            return None

        content_type = ContentType.parse(content_type)
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": get_system_prompt(content_type)},
                {"role": "user", "content": get_user_prompt(content, content_type)},
            ],
            "temperature": settings.AI_TEMPERATURE,
            "max_tokens": settings.AI_MAX_TOKENS,
        }

        try:
            response = self.http_session.post(
                self.api_url,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
        except requests.Timeout:
            logger.warning(f"AI classifier timed out after {self.timeout}s")
            return None
        except requests.RequestException as e:
            logger.error(f"AI classifier request failed: {e}")
            return None

        if response.status_code != 200:
            logger.warning(f"AI classifier error ({response.status_code}): {response.text[:200]}")
            return None

        try:
            message = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected AI response shape: {e}")
            return None

        parsed = parse_ai_response(message)
        if parsed is None:
            return None

        return format_ai_result(parsed)
