from sqlalchemy import Column, Integer, String, DateTime, JSON, Float, Text, Boolean
from datetime import datetime
from scamguard.database import Base

class Scan(Base):
    __tablename__ = "scans"

    id = Column(Integer, primary_key=True, index=True)

    # Submitted Content
    content_type = Column(String(20), index=True)
    content = Column(Text)
    content_length = Column(Integer, default=0)
    language = Column(String(8), default="en")
    source = Column(String(255), nullable=True)
    extra = Column(JSON, default=dict)

    # Assessment
    is_scam = Column(Boolean, default=False, index=True)
    confidence = Column(Float, default=0.0)
    category = Column(String(50), index=True)
    risk_score = Column(Integer, default=0, index=True)
    risk_level = Column(String(20))
    explanation = Column(Text)
    indicators = Column(JSON, default=list)
    recommendations = Column(JSON, default=list)
    detection_method = Column(String(20))

    processing_time = Column(Float)
    is_active = Column(Boolean, default=True, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def result(self) -> dict:
        """Stored assessment in the API's camelCase shape"""
        return {
            "isScam": self.is_scam,
            "confidence": self.confidence,
            "category": self.category,
            "riskScore": self.risk_score,
            "explanation": self.explanation,
            "indicators": self.indicators or [],
            "recommendations": self.recommendations or [],
            "detectionMethod": self.detection_method,
        }
