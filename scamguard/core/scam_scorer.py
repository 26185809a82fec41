import re
import logging
from typing import List, Optional, Tuple

from scamguard.core import rules
from scamguard.core.rules import ContentType, PatternRule
from scamguard.core.assessment import RiskAssessment, SCAM_THRESHOLD, category_for_score
from scamguard.core.explanations import generate_explanation, recommendations_for

logger = logging.getLogger(__name__)


class ScamScorer:
    def __init__(self):
        """
        Heuristic scam scorer. Stateless: the rule tables are shared,
        immutable module data, so one instance can serve any number of callers.
        """
        self.universal_rules = rules.UNIVERSAL_RULES
        self.type_specific_rules = rules.TYPE_SPECIFIC_RULES
        self.named_text_rules = rules.NAMED_TEXT_RULES
        self.suspicious_domain_rules = rules.SUSPICIOUS_DOMAIN_RULES
        self.new_tlds = rules.NEW_TLD_KEYWORDS
        self.domain_pattern = re.compile(rules.DOMAIN_PATTERN)

    def evaluate(self, text: str, content_type=ContentType.TEXT) -> RiskAssessment:
        """
        Score a piece of content.

        Args:
            text: Raw content; never mutated, only a lowercased copy is searched
            content_type: ContentType or raw value; unknown values are scored as text

        Returns:
            RiskAssessment with detection_method "heuristic"
        """
        if text is None:
            text = ""
        elif not isinstance(text, str):
            text = str(text)

        content_type = ContentType.parse(content_type)
        normalized = text.lower()

        score = 0
        indicators: List[str] = []

        # ===== 1. UNIVERSAL PATTERNS =====
        score += self._apply(self.universal_rules, normalized, indicators)

        # ===== 2. TYPE-SPECIFIC PATTERNS =====
        score += self._apply(self.type_specific_rules.get(content_type, ()), normalized, indicators)

        # ===== 3. NAMED TYPE RULES =====
        if content_type == ContentType.URL:
            score += self._score_domain(normalized, indicators)
        else:
            score += self._apply(self.named_text_rules.get(content_type, ()), normalized, indicators)

        # ===== 4. LENGTH =====
        if len(text) < rules.SHORT_TEXT_LIMIT:
            score += rules.SHORT_TEXT_WEIGHT
            indicators.append(rules.SHORT_TEXT_INDICATOR)

        risk_score = max(0, min(score, 100))
        indicators = indicators[:rules.MAX_INDICATORS]

        return RiskAssessment(
            is_scam=risk_score >= SCAM_THRESHOLD,
            confidence=risk_score / 100,
            category=category_for_score(risk_score),
            risk_score=risk_score,
            explanation=generate_explanation(risk_score, indicators, content_type),
            indicators=indicators,
            recommendations=recommendations_for(risk_score),
            detection_method="heuristic",
        )

    def extract_domain(self, normalized: str) -> Optional[str]:
        """Host of the first http(s) link, or None"""
        try:
            match = self.domain_pattern.search(normalized)
        except (re.error, TypeError) as e:
            logger.debug(f"Domain extraction failed: {e}")
            return None
        return match.group(1) if match else None

    def _apply(self, rule_set: Tuple[PatternRule, ...], haystack: str, indicators: List[str]) -> int:
        score = 0
        for rule in rule_set:
            if self._matches(rule.phrase, haystack):
                score += rule.weight
                indicators.append(rule.indicator)
        return score

    def _score_domain(self, normalized: str, indicators: List[str]) -> int:
        domain = self.extract_domain(normalized)
        if not domain:
            return 0

        score = self._apply(self.suspicious_domain_rules, domain, indicators)
        for tld in self.new_tlds:
            if self._matches(tld, domain):
                score += rules.NEW_TLD_WEIGHT
                indicators.append(rules.NEW_TLD_INDICATOR)
        return score

    @staticmethod
    def _matches(phrase: str, haystack: str) -> bool:
        # A rule that cannot be evaluated counts as a non-match
        try:
            return phrase in haystack
        except (TypeError, ValueError) as e:
            logger.debug(f"Rule '{phrase}' skipped: {e}")
            return False


default_scorer = ScamScorer()


def evaluate(text: str, content_type=ContentType.TEXT) -> RiskAssessment:
    return default_scorer.evaluate(text, content_type)
