import pytest
from pydantic import ValidationError

from scamguard.core.ai_adapter import format_ai_result, parse_ai_response


class TestFormatAIResult:
    def test_complete_result(self):
        formatted = format_ai_result({
            'isScam': True,
            'confidence': 0.85,
            'category': 'phishing',
            'riskScore': 85,
            'explanation': 'Test explanation',
            'indicators': ['test1', 'test2'],
            'recommendations': ['rec1', 'rec2'],
        })

        assert formatted.is_scam is True
        assert formatted.confidence == 0.85
        assert formatted.category == 'phishing'
        assert formatted.risk_score == 85
        assert formatted.indicators == ['test1', 'test2']
        assert formatted.recommendations == ['rec1', 'rec2']
        assert formatted.detection_method == 'ai'

    def test_missing_fields_get_defaults(self):
        formatted = format_ai_result({'isScam': False})

        assert formatted.is_scam is False
        assert formatted.confidence == 0.5
        assert formatted.category == 'unknown'
        assert formatted.risk_score == 50
        assert formatted.indicators == []
        assert formatted.recommendations == []
        assert formatted.detection_method == 'ai'

    def test_empty_or_none(self):
        assert format_ai_result({}).risk_score == 50
        assert format_ai_result(None).category == 'unknown'

    @pytest.mark.parametrize("raw, confidence, risk_score", [
        ({'confidence': 1.7, 'riskScore': 150}, 1.0, 100),
        ({'confidence': -0.2, 'riskScore': -5}, 0.0, 0),
        ({'confidence': '0.9', 'riskScore': '72'}, 0.9, 72),
        ({'confidence': 'high', 'riskScore': None}, 0.5, 50),
        ({'confidence': True, 'riskScore': 64.6}, 0.5, 65),
        ({'confidence': float('nan'), 'riskScore': float('inf')}, 0.5, 50),
        ({'confidence': float('inf'), 'riskScore': float('-inf')}, 0.5, 50),
        ({'confidence': 'NaN', 'riskScore': float('nan')}, 0.5, 50),
        ({'confidence': 0.7, 'riskScore': 10 ** 400}, 0.7, 50),
    ])
    def test_values_are_clamped(self, raw, confidence, risk_score):
        formatted = format_ai_result(raw)

        assert formatted.confidence == confidence
        assert formatted.risk_score == risk_score

    @pytest.mark.parametrize("reply", [
        '{"confidence": NaN, "riskScore": Infinity}',
        '{"confidence": -Infinity, "riskScore": -Infinity}',
        '{"confidence": 1e400, "riskScore": 1e400}',
    ])
    def test_non_finite_json_numbers_use_defaults(self, reply):
        formatted = format_ai_result(parse_ai_response(reply))

        assert formatted.confidence == 0.5
        assert formatted.risk_score == 50

    @pytest.mark.parametrize("value, expected", [
        (True, True), (False, False),
        ("true", True), ("TRUE", True), ("false", False), ("yes", False),
        (1, False), (None, False),
    ])
    def test_is_scam_accepts_only_booleans(self, value, expected):
        assert format_ai_result({'isScam': value}).is_scam is expected

    def test_indicators_are_limited(self):
        formatted = format_ai_result({'indicators': [f"i{n}" for n in range(15)]})
        assert len(formatted.indicators) == 10

    def test_non_list_indicators_are_dropped(self):
        assert format_ai_result({'indicators': 'urgency'}).indicators == []

    def test_camel_case_output(self):
        data = format_ai_result({'isScam': True, 'riskScore': 90}).to_dict()

        assert data['isScam'] is True
        assert data['riskScore'] == 90
        assert data['detectionMethod'] == 'ai'

    def test_result_is_immutable(self):
        formatted = format_ai_result({'riskScore': 90})

        with pytest.raises(ValidationError):
            formatted.risk_score = 10


class TestParseAIResponse:
    def test_plain_json(self):
        assert parse_ai_response('{"isScam": true, "riskScore": 90}') == {'isScam': True, 'riskScore': 90}

    def test_json_wrapped_in_prose(self):
        content = 'Here is my analysis:\n```json\n{"isScam": false, "riskScore": 10}\n```\nStay safe!'
        assert parse_ai_response(content) == {'isScam': False, 'riskScore': 10}

    @pytest.mark.parametrize("content", [
        "",
        None,
        "no json here",
        "{not valid json}",
        "} backwards {",
        "[1, 2, 3]",
    ])
    def test_unusable_replies(self, content):
        assert parse_ai_response(content) is None
