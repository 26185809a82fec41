import time
import logging
from typing import Optional, Tuple

from scamguard.core.assessment import RiskAssessment
from scamguard.core.rules import ContentType
from scamguard.core.scam_scorer import ScamScorer
from scamguard.services.ai_classifier import AIClassifier

logger = logging.getLogger(__name__)


def build_job_offer_text(description: str, title: Optional[str] = None, company: Optional[str] = None,
                         contact: Optional[str] = None, salary: Optional[str] = None) -> str:
    """Flatten job offer fields into the text that gets scanned"""
    return (
        f"Job Title: {title or 'Not specified'}\n"
        f"Company: {company or 'Not specified'}\n"
        f"Contact: {contact or 'Not specified'}\n"
        f"Salary: {salary or 'Not specified'}\n"
        f"Description: {description}"
    )


class DetectionService:
    def __init__(self, ai_classifier: Optional[AIClassifier] = None, scorer: Optional[ScamScorer] = None):
        self.ai_classifier = ai_classifier or AIClassifier()
        self.scorer = scorer or ScamScorer()

    def analyze(self, content: str, content_type=ContentType.TEXT) -> Tuple[RiskAssessment, float]:
        """
        Try the AI classifier first, fall back to the heuristic scorer.

        Returns:
            (assessment, processing time in seconds)
        """
        start_time = time.time()
        content_type = ContentType.parse(content_type)

        result = None
        if self.ai_classifier.enabled:
            try:
                result = self.ai_classifier.classify(content, content_type)
            except Exception as e:
                logger.error(f"AI classification failed: {e}")
                result = None
            if result is None:
                logger.warning(f"AI classification unavailable for {content_type.value}, using heuristics")

        if result is None:
            result = self.scorer.evaluate(content, content_type)

        processing_time = time.time() - start_time
        logger.info(
            f"{content_type.value} analyzed via {result.detection_method} "
            f"- score {result.risk_score} ({result.category}) in {processing_time:.3f}s"
        )
        return result, processing_time

    def analyze_text(self, text: str) -> Tuple[RiskAssessment, float]:
        return self.analyze(text, ContentType.TEXT)

    def analyze_url(self, url: str) -> Tuple[RiskAssessment, float]:
        return self.analyze(url, ContentType.URL)

    def analyze_job_offer(self, job_text: str) -> Tuple[RiskAssessment, float]:
        return self.analyze(job_text, ContentType.JOB_OFFER)

    def analyze_invoice(self, invoice_text: str) -> Tuple[RiskAssessment, float]:
        return self.analyze(invoice_text, ContentType.INVOICE)
