from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class ContentType(str, Enum):
    """Kind of content submitted for a scan"""
    TEXT = "text"
    URL = "url"
    JOB_OFFER = "job_offer"
    INVOICE = "invoice"

    @classmethod
    def parse(cls, value) -> "ContentType":
        """Map any value onto a ContentType; unknown values fall back to TEXT"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.TEXT

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


@dataclass(frozen=True)
class PatternRule:
    category: str
    phrase: str
    weight: int

    @property
    def indicator(self) -> str:
        return f'{self.category}: contains "{self.phrase}"'


# ============================================================================
# WEIGHTS & FIXED INDICATORS
# ============================================================================
UNIVERSAL_WEIGHT = 5
TYPE_SPECIFIC_WEIGHT = 7
SUSPICIOUS_DOMAIN_WEIGHT = 10
NEW_TLD_WEIGHT = 5
JOB_SCAM_WEIGHT = 8
INVOICE_SCAM_WEIGHT = 9
SHORT_TEXT_WEIGHT = 15

SHORT_TEXT_LIMIT = 20
MAX_INDICATORS = 10

NEW_TLD_INDICATOR = "new_tld: uses new TLD"
SHORT_TEXT_INDICATOR = "suspicious_length: text is very short"

# Host segment of the first http(s) link, up to the first '/'
DOMAIN_PATTERN = r"https?://([^/\s]+)"

# ============================================================================
# UNIVERSAL PATTERNS (every content type, evaluated in this order)
# ============================================================================
UNIVERSAL_PATTERNS: Dict[str, Tuple[str, ...]] = {
    'urgency': (
        'urgent', 'immediately', 'immediate action', 'act now', 'right away',
        'as soon as possible', 'asap', 'limited time', 'expires', 'final notice',
        'last chance', 'within 24 hours', 'deadline', 'hurry',
    ),
    'financial': (
        'bank', 'bank account', 'wire transfer', 'western union', 'moneygram',
        'gift card', 'bitcoin', 'crypto', 'payment', 'credit card', 'debit card',
        'routing number', 'processing fee', 'refund',
    ),
    'reward': (
        'congratulations', 'you have won', 'you won', 'winner', 'prize', 'lottery',
        'free', 'claim', 'reward', 'bonus', 'cash', 'earn money', 'make money',
        'work from home', 'no experience', 'guaranteed', 'risk free',
    ),
    'threat': (
        'suspended', 'will be suspended', 'suspension', 'your account will',
        'locked', 'blocked', 'terminated', 'closed', 'legal action', 'arrest',
        'lawsuit', 'penalty', 'unauthorized', 'compromised', 'deactivated',
    ),
    'personal': (
        'password', 'social security', 'ssn', 'date of birth', 'pin number',
        'login', 'sign in', 'verify your identity', 'personal information',
        'account number', 'maiden name', 'otp', 'credentials', 'your account',
    ),
    'suspicious': (
        'click here', 'click', 'here to verify', 'verify', 'confirm', 'update',
        'http://', 'bit.ly', 'tinyurl', 'unusual activity', 'dear customer',
        'secure', 'account', 'link',
    ),
}

# ============================================================================
# TYPE-SPECIFIC PATTERNS (labeled "type_specific")
# ============================================================================
TYPE_SPECIFIC_PATTERNS: Dict[ContentType, Tuple[str, ...]] = {
    ContentType.URL: (
        'http://', 'bit.ly', 'tinyurl', 'goo.gl', 'ow.ly', 'is.gd', '@',
        'login', 'signin', 'verify', 'secure', 'account', 'update', 'confirm',
        'webscr', 'redirect', 'ipfs',
    ),
    ContentType.JOB_OFFER: (
        'work from home', 'no experience', 'registration fee', 'training fee',
        'upfront', 'starter kit', 'data entry', 'mystery shopper',
        'envelope stuffing', 'commission only', 'pay per click',
        'unlimited earning', 'be your own boss', 'weekly pay', 'whatsapp',
        'telegram',
    ),
    ContentType.INVOICE: (
        'invoice', 'overdue', 'past due', 'amount due', 'payment due',
        'due immediately', 'late fee', 'wire', 'remit', 'bank details', 'swift',
        'iban', 'tax id', 'vat number', 'purchase order',
    ),
}

# ============================================================================
# NAMED TYPE RULES
# ============================================================================
# Matched against the extracted domain, not the whole text
SUSPICIOUS_DOMAIN_KEYWORDS: Tuple[str, ...] = (
    'secure', 'account', 'verify', 'login', 'signin', 'update', 'bank',
    'paypal', 'amazon', 'apple', 'microsoft', 'netflix', 'free', 'prize',
    'win', 'bonus', 'gift', 'lucky', 'claim', 'reward',
)

NEW_TLD_KEYWORDS: Tuple[str, ...] = ('xyz', 'top', 'club')

JOB_SCAM_PHRASES: Tuple[str, ...] = (
    'upfront payment', 'registration fee', 'training fee', 'equipment fee',
    'background check fee', 'pay for training', 'send money', 'bank details',
    'cash a check', 'reshipping', 'no interview', 'hired immediately',
    'earn $', 'pay $', 'from home', 'per day from home',
)

INVOICE_SCAM_PHRASES: Tuple[str, ...] = (
    'new bank account', 'changed bank details', 'bank details have changed',
    'updated bank details', 'immediate payment', 'pay immediately',
    'final notice', 'account will be closed', 'legal action',
    'collections agency', 'gift card', 'wire transfer', 'payment in crypto',
)


def _build(category: str, phrases: Tuple[str, ...], weight: int) -> Tuple[PatternRule, ...]:
    return tuple(PatternRule(category, phrase, weight) for phrase in phrases)


UNIVERSAL_RULES: Tuple[PatternRule, ...] = tuple(
    rule
    for category, phrases in UNIVERSAL_PATTERNS.items()
    for rule in _build(category, phrases, UNIVERSAL_WEIGHT)
)

TYPE_SPECIFIC_RULES: Dict[ContentType, Tuple[PatternRule, ...]] = {
    content_type: _build('type_specific', phrases, TYPE_SPECIFIC_WEIGHT)
    for content_type, phrases in TYPE_SPECIFIC_PATTERNS.items()
}

SUSPICIOUS_DOMAIN_RULES = _build('suspicious_domain', SUSPICIOUS_DOMAIN_KEYWORDS, SUSPICIOUS_DOMAIN_WEIGHT)

NAMED_TEXT_RULES: Dict[ContentType, Tuple[PatternRule, ...]] = {
    ContentType.JOB_OFFER: _build('job_scam', JOB_SCAM_PHRASES, JOB_SCAM_WEIGHT),
    ContentType.INVOICE: _build('invoice_scam', INVOICE_SCAM_PHRASES, INVOICE_SCAM_WEIGHT),
}
