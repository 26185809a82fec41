import logging
from functools import lru_cache
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
from datetime import datetime

from scamguard.config import settings
from scamguard.core.rules import ContentType
from scamguard.database import get_db
from scamguard.models import Scan
from scamguard.schemas import (
    TextScanRequest,
    UrlScanRequest,
    JobOfferScanRequest,
    InvoiceScanRequest,
    ScanResponse,
    ScanHistoryResponse,
    StatisticsResponse,
)
from scamguard.services.detection_service import DetectionService, build_job_offer_text
from scamguard.services.scan_service import ScanService, serialize_scan, page_count

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache()
def get_detector() -> DetectionService:
    return DetectionService()


def get_scan_service(
    db: Session = Depends(get_db),
    detector: DetectionService = Depends(get_detector),
) -> ScanService:
    return ScanService(db, detector=detector)


def _scan_response(scan: Scan) -> ScanResponse:
    return ScanResponse(
        scan_id=scan.id,
        result=scan.result(),
        processing_time=round(scan.processing_time or 0.0, 4),
    )


def _run_scan(service: ScanService, content: str, content_type: ContentType, **kwargs) -> ScanResponse:
    try:
        scan = service.create_scan(content, content_type, **kwargs)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail=f"{content_type.label.capitalize()} scan failed")
    return _scan_response(scan)

# ============================================================================
# SCAN ENDPOINTS
# ============================================================================

@router.post("/scan/text", response_model=ScanResponse)
def scan_text(request: TextScanRequest, service: ScanService = Depends(get_scan_service)):
    return _run_scan(service, request.text, ContentType.TEXT)


@router.post("/scan/url", response_model=ScanResponse)
def scan_url(request: UrlScanRequest, service: ScanService = Depends(get_scan_service)):
    return _run_scan(service, str(request.url), ContentType.URL)


@router.post("/scan/job-offer", response_model=ScanResponse)
def scan_job_offer(request: JobOfferScanRequest, service: ScanService = Depends(get_scan_service)):
    job_text = build_job_offer_text(
        request.description,
        title=request.title,
        company=request.company,
        contact=request.contact,
        salary=request.salary,
    )
    extra = {
        "title": request.title,
        "company": request.company,
        "contact": request.contact,
        "salary": request.salary,
    }
    return _run_scan(service, job_text, ContentType.JOB_OFFER, extra=extra)


@router.post("/scan/invoice", response_model=ScanResponse)
def scan_invoice(request: InvoiceScanRequest, service: ScanService = Depends(get_scan_service)):
    return _run_scan(service, request.text, ContentType.INVOICE, source=request.source)

# ============================================================================
# HISTORY ENDPOINTS
# ============================================================================

@router.get("/scans", response_model=ScanHistoryResponse)
def list_scans(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    type: Optional[ContentType] = None,
    service: ScanService = Depends(get_scan_service),
):
    scans, total = service.list_scans(page=page, limit=limit, content_type=type)
    return {
        "scans": [serialize_scan(s) for s in scans],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": page_count(total, limit),
        },
    }


@router.get("/scans/{scan_id}", response_model=dict)
def get_scan(scan_id: int, service: ScanService = Depends(get_scan_service)):
    scan = service.get_scan(scan_id)
    if not scan:
        raise HTTPException(status_code=404, detail="Scan not found")
    return serialize_scan(scan)


@router.delete("/scans/{scan_id}")
def delete_scan(scan_id: int, service: ScanService = Depends(get_scan_service)):
    if not service.delete_scan(scan_id):
        raise HTTPException(status_code=404, detail="Scan not found")
    return {"status": "success", "message": f"Scan {scan_id} deleted"}

# ============================================================================
# STATISTICS & HEALTH
# ============================================================================

@router.get("/statistics", response_model=StatisticsResponse)
def get_statistics(service: ScanService = Depends(get_scan_service)):
    return service.get_statistics()


@router.get("/health")
def health_check():
    return {"status": "healthy", "timestamp": datetime.utcnow(), "service": settings.APP_NAME}
