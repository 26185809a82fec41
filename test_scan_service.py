import pytest

from scamguard.config import settings
from scamguard.services.scan_service import (
    ScanService,
    risk_level,
    detect_language,
    truncate_content,
    page_count,
    serialize_scan,
)

PHISHING_TEXT = "URGENT: Your account will be suspended. Click here to verify: http://secure-bank-update.com"
SAFE_TEXT = "Hello, please find attached the quarterly report for your review."


@pytest.fixture
def service(db_session, heuristic_detector):
    return ScanService(db_session, detector=heuristic_detector)


class TestHelpers:
    @pytest.mark.parametrize("score, level", [
        (95, 'critical'), (80, 'critical'), (60, 'high'), (59, 'medium'),
        (40, 'medium'), (20, 'low'), (19, 'safe'), (0, 'safe'),
    ])
    def test_risk_level(self, score, level):
        assert risk_level(score) == level

    def test_detect_language(self):
        assert detect_language("Please pay the invoice and send the receipt") == 'en'
        assert detect_language("आपका खाता बंद है और यह नहीं तो") == 'hi'
        assert detect_language("") == 'en'

    def test_truncate_content(self):
        assert truncate_content("short", 10) == "short"
        assert truncate_content("x" * 12, 10) == "x" * 10 + "..."

    def test_page_count(self):
        assert page_count(0, 20) == 0
        assert page_count(21, 20) == 2
        assert page_count(40, 20) == 2


class TestScanService:
    def test_create_scan_stores_assessment(self, service):
        scan = service.create_scan(PHISHING_TEXT, "text")

        assert scan.id is not None
        assert scan.content_type == "text"
        assert scan.risk_score == 70
        assert scan.risk_level == "high"
        assert scan.category == "phishing"
        assert scan.is_scam is True
        assert scan.detection_method == "heuristic"
        assert scan.content_length == len(PHISHING_TEXT)
        assert scan.result()["riskScore"] == 70

    def test_long_content_is_truncated(self, service):
        text = "a" * (settings.MAX_STORED_CONTENT + 500)
        scan = service.create_scan(text, "text")

        assert scan.content == "a" * settings.MAX_STORED_CONTENT + "..."
        assert scan.content_length == len(text)

    def test_unknown_type_is_stored_as_text(self, service):
        scan = service.create_scan(SAFE_TEXT, "sms")
        assert scan.content_type == "text"

    def test_list_scans_pagination_and_filter(self, service):
        for n in range(5):
            service.create_scan(f"{SAFE_TEXT} #{n}", "text")
        service.create_scan("http://free-prize-win-now.xyz/claim", "url")

        items, total = service.list_scans(page=1, limit=4)
        assert total == 6
        assert len(items) == 4
        assert items[0].content_type == "url"

        items, total = service.list_scans(page=2, limit=4)
        assert len(items) == 2

        items, total = service.list_scans(content_type="url")
        assert total == 1
        assert items[0].content_type == "url"

    def test_delete_hides_scan(self, service):
        scan = service.create_scan(SAFE_TEXT, "text")

        assert service.delete_scan(scan.id) is True
        assert service.get_scan(scan.id) is None
        assert service.list_scans()[1] == 0
        assert service.delete_scan(scan.id) is False

    def test_statistics(self, service):
        service.create_scan(PHISHING_TEXT, "text")
        service.create_scan(SAFE_TEXT, "text")
        service.create_scan("http://free-prize-win-now.xyz/claim", "url")

        stats = service.get_statistics()

        assert stats["total_scans"] == 3
        assert stats["scams_detected"] == 2
        assert stats["by_type"] == {"text": 2, "url": 1}
        assert stats["by_category"] == {"phishing": 2, "safe": 1}
        assert stats["avg_risk_score"] == round((70 + 0 + 62) / 3, 2)
        assert len(stats["recent_scans"]) == 3
        assert "content" not in stats["recent_scans"][0]

    def test_serialize_scan_includes_metadata(self, service):
        scan = service.create_scan(SAFE_TEXT, "invoice", source="ocr-upload.pdf", extra={"pages": 2})
        data = serialize_scan(scan)

        assert data["type"] == "invoice"
        assert data["metadata"]["source"] == "ocr-upload.pdf"
        assert data["metadata"]["pages"] == 2
        assert data["metadata"]["language"] == "en"
        assert data["content"] == SAFE_TEXT
