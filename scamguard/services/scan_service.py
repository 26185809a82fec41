import math
import logging
from typing import Dict, List, Optional, Tuple
from sqlalchemy import func, desc
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from scamguard.config import settings
from scamguard.core.rules import ContentType
from scamguard.models import Scan
from scamguard.services.detection_service import DetectionService

logger = logging.getLogger(__name__)

ENGLISH_WORDS = ['the', 'be', 'to', 'of', 'and', 'a', 'in', 'that', 'have']
HINDI_WORDS = ['और', 'है', 'की', 'से', 'को', 'में', 'यह', 'नहीं', 'तो']


def risk_level(score: int) -> str:
    if score >= 80:
        return 'critical'
    if score >= 60:
        return 'high'
    if score >= 40:
        return 'medium'
    if score >= 20:
        return 'low'
    return 'safe'


def detect_language(text: str) -> str:
    """Rough en/hi guess from common words"""
    text_lower = (text or '').lower()
    eng_count = sum(1 for word in ENGLISH_WORDS if word in text_lower)
    hin_count = sum(1 for word in HINDI_WORDS if word in text)
    return 'hi' if hin_count > eng_count else 'en'


def truncate_content(content: str, limit: int) -> str:
    if len(content) <= limit:
        return content
    return content[:limit] + "..."


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


class ScanService:
    def __init__(self, db: Session, detector: Optional[DetectionService] = None):
        self.db = db
        self.detector = detector or DetectionService()

    def create_scan(self, content: str, content_type=ContentType.TEXT,
                    source: Optional[str] = None, extra: Optional[Dict] = None) -> Scan:
        """Analyze content and store the result"""
        content_type = ContentType.parse(content_type)
        result, processing_time = self.detector.analyze(content, content_type)

        scan = Scan(
            content_type=content_type.value,
            content=truncate_content(content, settings.MAX_STORED_CONTENT),
            content_length=len(content),
            language=detect_language(content),
            source=source,
            extra=extra or {},
            is_scam=result.is_scam,
            confidence=result.confidence,
            category=result.category,
            risk_score=result.risk_score,
            risk_level=risk_level(result.risk_score),
            explanation=result.explanation,
            indicators=list(result.indicators),
            recommendations=list(result.recommendations),
            detection_method=result.detection_method,
            processing_time=processing_time,
        )

        try:
            self.db.add(scan)
            self.db.commit()
            self.db.refresh(scan)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save {content_type.value} scan: {e}")
            raise

        logger.info(f"Scan {scan.id} saved - {content_type.value}, score {scan.risk_score}")
        return scan

    def list_scans(self, page: int = 1, limit: int = 20,
                   content_type: Optional[str] = None) -> Tuple[List[Scan], int]:
        """Newest first; returns (items, total)"""
        query = self.db.query(Scan).filter(Scan.is_active.is_(True))
        if content_type:
            query = query.filter(Scan.content_type == ContentType.parse(content_type).value)

        total = query.count()
        items = (
            query.order_by(desc(Scan.created_at), desc(Scan.id))
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return items, total

    def get_scan(self, scan_id: int) -> Optional[Scan]:
        return (
            self.db.query(Scan)
            .filter(Scan.id == scan_id, Scan.is_active.is_(True))
            .first()
        )

    def delete_scan(self, scan_id: int) -> bool:
        scan = self.get_scan(scan_id)
        if not scan:
            return False
        scan.is_active = False
        self.db.commit()
        logger.info(f"Scan {scan_id} deleted")
        return True

    def get_statistics(self) -> Dict:
        active = self.db.query(Scan).filter(Scan.is_active.is_(True))

        total = active.count()
        scams = active.filter(Scan.is_scam.is_(True)).count()
        avg_score = active.with_entities(func.avg(Scan.risk_score)).scalar() or 0
        avg_time = active.with_entities(func.avg(Scan.processing_time)).scalar() or 0

        by_category = dict(
            active.with_entities(Scan.category, func.count(Scan.id)).group_by(Scan.category).all()
        )
        by_type = dict(
            active.with_entities(Scan.content_type, func.count(Scan.id)).group_by(Scan.content_type).all()
        )

        recent = active.order_by(desc(Scan.created_at), desc(Scan.id)).limit(10).all()

        return {
            "total_scans": total,
            "scams_detected": scams,
            "by_category": by_category,
            "by_type": by_type,
            "avg_risk_score": round(float(avg_score), 2),
            "avg_processing_time": round(float(avg_time), 4),
            "recent_scans": [serialize_scan(s, include_content=False) for s in recent],
        }


def serialize_scan(scan: Scan, include_content: bool = True) -> Dict:
    data = {
        "id": scan.id,
        "type": scan.content_type,
        "risk_score": scan.risk_score,
        "risk_level": scan.risk_level,
        "result": scan.result(),
        "metadata": {
            "length": scan.content_length,
            "language": scan.language,
            "source": scan.source,
            "processing_time": scan.processing_time,
            **(scan.extra or {}),
        },
        "created_at": scan.created_at,
    }
    if include_content:
        data["content"] = scan.content
    return data
