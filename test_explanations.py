import pytest

from scamguard.core.explanations import generate_explanation, recommendations_for, RECOMMENDATIONS


class TestGenerateExplanation:
    def test_high_risk(self):
        explanation = generate_explanation(85, ['urgency', 'financial'], 'url')

        assert 'High-risk' in explanation
        assert 'url' in explanation
        assert explanation == "High-risk url detected. Multiple scam indicators found: urgency, financial."

    def test_safe_without_indicators(self):
        explanation = generate_explanation(15, [], 'text')

        assert 'Safe' in explanation
        assert explanation == "Safe text. No significant scam indicators detected."

    def test_safe_with_indicators(self):
        explanation = generate_explanation(15, ['suspicious_length: text is very short'], 'text')

        assert explanation == "Safe text. Only minor signals found: suspicious_length: text is very short."

    @pytest.mark.parametrize("score, prefix", [
        (100, "High-risk"),
        (80, "High-risk"),
        (79, "Moderate-risk"),
        (60, "Moderate-risk"),
        (59, "Low-risk"),
        (40, "Low-risk"),
        (39, "Mostly safe"),
        (20, "Mostly safe"),
        (19, "Safe"),
        (0, "Safe"),
    ])
    def test_band_boundaries(self, score, prefix):
        assert generate_explanation(score, ['a', 'b', 'c', 'd'], 'text').startswith(prefix)

    def test_indicator_slices_per_band(self):
        indicators = ['one', 'two', 'three', 'four']

        assert generate_explanation(90, indicators, 'text').endswith("one, two, three.")
        assert generate_explanation(65, indicators, 'text').endswith("one, two.")
        assert generate_explanation(45, indicators, 'text').endswith("one.")
        assert generate_explanation(25, indicators, 'text').endswith("one.")

    def test_empty_indicators_in_risky_band(self):
        assert generate_explanation(70, [], 'invoice') == (
            "Moderate-risk invoice. Several warning signs detected: no specific indicators."
        )

    def test_content_type_label(self):
        assert "job offer" in generate_explanation(50, ['x'], 'job_offer')
        assert "Low-risk text" in generate_explanation(50, ['x'], 'something-else')


class TestRecommendations:
    @pytest.mark.parametrize("score, band", [
        (100, 'critical'), (80, 'critical'),
        (79, 'high'), (60, 'high'),
        (59, 'medium'), (40, 'medium'),
        (39, 'low'), (20, 'low'),
        (19, 'safe'), (0, 'safe'),
    ])
    def test_bands(self, score, band):
        assert recommendations_for(score) == RECOMMENDATIONS[band]

    def test_returns_a_copy(self):
        recommendations_for(90).append("mutated")
        assert "mutated" not in RECOMMENDATIONS['critical']
