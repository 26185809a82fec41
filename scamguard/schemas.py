from pydantic import BaseModel, Field, AnyHttpUrl
from typing import Optional, List, Dict, Any
from datetime import datetime

# ==========================================
# 📥 INPUT MODELS
# ==========================================

class TextScanRequest(BaseModel):
    text: str = Field(..., min_length=10, max_length=10000)

class UrlScanRequest(BaseModel):
    url: AnyHttpUrl

class JobOfferScanRequest(BaseModel):
    title: Optional[str] = Field(None, max_length=200)
    description: str = Field(..., min_length=20, max_length=5000)
    company: Optional[str] = Field(None, max_length=100)
    contact: Optional[str] = Field(None, max_length=200)
    salary: Optional[str] = Field(None, max_length=100)

class InvoiceScanRequest(BaseModel):
    """Invoice text as produced by an upstream OCR step"""
    text: str = Field(..., min_length=10, max_length=10000)
    source: Optional[str] = Field(None, max_length=255)

# ==========================================
# 📤 RESPONSE MODELS
# ==========================================

class ScanResponse(BaseModel):
    status: str = "success"
    scan_id: int
    result: Dict[str, Any]
    processing_time: float

class ScanRecord(BaseModel):
    id: int
    type: str
    risk_score: int
    risk_level: Optional[str] = None
    result: Dict[str, Any]
    metadata: Dict[str, Any] = {}
    content: Optional[str] = None
    created_at: Optional[datetime] = None

class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int

class ScanHistoryResponse(BaseModel):
    scans: List[ScanRecord]
    pagination: Pagination

class StatisticsResponse(BaseModel):
    total_scans: int
    scams_detected: int
    by_category: Dict[str, int]
    by_type: Dict[str, int]
    avg_risk_score: float
    avg_processing_time: float
    recent_scans: List[ScanRecord]
