#!/usr/bin/env python3
"""
Tests for totals, classification, insights and executive summaries.
"""

import unittest

from core.config_loader import RecommendationThresholds, ScoringConfig
from core.scorer import aggregate as aggregation
from core.scorer.models import (
    BehavioralProfile,
    EvaluationState,
    Flag,
    Recommendation,
    RiskLevel,
    SectionScores,
    Severity,
)


class TestCalculatePercentage(unittest.TestCase):

    def test_rounds_half_up(self):
        self.assertEqual(aggregation.calculate_percentage(30, 122), 25)
        self.assertEqual(aggregation.calculate_percentage(101, 122), 83)
        self.assertEqual(aggregation.calculate_percentage(61, 122), 50)
        # 0.5 rounds up, not to even
        self.assertEqual(aggregation.calculate_percentage(1, 200), 1)
        self.assertEqual(aggregation.calculate_percentage(5, 200), 3)

    def test_zero_maximum(self):
        self.assertEqual(aggregation.calculate_percentage(10, 0), 0)


class TestClassify(unittest.TestCase):

    def setUp(self):
        self.thresholds = RecommendationThresholds()

    def test_boundaries_are_inclusive(self):
        cases = {
            100: (Recommendation.HIRE, RiskLevel.LOW),
            80: (Recommendation.HIRE, RiskLevel.LOW),
            79: (Recommendation.HIRE_WITH_RESERVATIONS, RiskLevel.MEDIUM_LOW),
            65: (Recommendation.HIRE_WITH_RESERVATIONS, RiskLevel.MEDIUM_LOW),
            64: (Recommendation.SECOND_INTERVIEW, RiskLevel.MEDIUM),
            50: (Recommendation.SECOND_INTERVIEW, RiskLevel.MEDIUM),
            49: (Recommendation.REJECT, RiskLevel.HIGH),
            0: (Recommendation.REJECT, RiskLevel.HIGH),
        }
        for percentage, expected in cases.items():
            with self.subTest(percentage=percentage):
                self.assertEqual(aggregation.classify(percentage, self.thresholds), expected)

    def test_custom_thresholds(self):
        thresholds = RecommendationThresholds(hire=90, hire_with_reservations=70, second_interview=40)
        self.assertEqual(aggregation.classify(85, thresholds)[0], Recommendation.HIRE_WITH_RESERVATIONS)
        self.assertEqual(aggregation.classify(45, thresholds)[0], Recommendation.SECOND_INTERVIEW)


class TestProfileInsights(unittest.TestCase):

    def test_high_and_low_axes(self):
        insights = aggregation.profile_insights(BehavioralProfile(D=7, I=5, S=2, C=4), ScoringConfig())
        self.assertEqual(insights, [
            "Tends to be dominant and direct",
            "May struggle with routine tasks",
        ])

    def test_mid_range_profile_has_no_insights(self):
        insights = aggregation.profile_insights(BehavioralProfile(5, 5, 5, 5), ScoringConfig())
        self.assertEqual(insights, [])


class TestAggregate(unittest.TestCase):

    def setUp(self):
        self.config = ScoringConfig()
        self.profile = BehavioralProfile(3, 5, 8, 7)

    def test_tier_message(self):
        scores = SectionScores(behavioral=40, preference=30, ethics=25, aptitude=27.0)
        result = aggregation.aggregate(scores, self.profile, [], self.config, EvaluationState.SCORED)

        self.assertEqual(result.total_score, 122)
        self.assertEqual(result.percentage, 100)
        self.assertEqual(result.recommendation, Recommendation.HIRE)
        self.assertEqual(result.message, aggregation.TIER_MESSAGES[Recommendation.HIRE])
        self.assertEqual(result.dominant_type, "SC")
        self.assertEqual(result.details['max_total'], 122)

    def test_critical_flag_overrides_percentage(self):
        scores = SectionScores(behavioral=40, preference=30, ethics=25, aptitude=27.0)
        flags = [Flag(Severity.CRITICAL, 'ethics', "Takes leftover material without permission - theft", 4)]
        result = aggregation.aggregate(scores, self.profile, flags, self.config, EvaluationState.SCORED)

        self.assertEqual(result.percentage, 100)
        self.assertEqual(result.recommendation, Recommendation.REJECT)
        self.assertEqual(result.risk_level, RiskLevel.HIGH)
        self.assertEqual(result.message, aggregation.CRITICAL_MESSAGE)
        self.assertEqual(result.details['critical_flag_count'], 1)

    def test_warnings_do_not_change_tier(self):
        scores = SectionScores(behavioral=40, preference=30, ethics=25, aptitude=27.0)
        flags = [Flag(Severity.WARNING, 'ethics', "Unethical answer in scenario 2", 2)]
        result = aggregation.aggregate(scores, self.profile, flags, self.config, EvaluationState.SCORED)
        self.assertEqual(result.recommendation, Recommendation.HIRE)


class TestExecutiveSummary(unittest.TestCase):

    def setUp(self):
        self.config = ScoringConfig()

    def _result(self, scores, profile, flags=()):
        return aggregation.aggregate(scores, profile, list(flags), self.config, EvaluationState.SCORED)

    def test_strong_candidate(self):
        result = self._result(
            SectionScores(behavioral=36, preference=30, ethics=25, aptitude=27.0),
            BehavioralProfile(3, 5, 8, 8),
        )
        summary = aggregation.build_executive_summary(result, self.config)

        self.assertEqual(summary.total_score, "118/122")
        self.assertEqual(summary.percentage, "97%")
        self.assertEqual(summary.strengths, (
            "Behavioral profile well suited to the role",
            "Excellent work attitudes",
            "High integrity and work ethic",
            "Good technical knowledge",
            "High stability and reliability",
            "Oriented to quality and rules",
        ))
        self.assertEqual(summary.weaknesses, ())

    def test_weak_candidate(self):
        result = self._result(
            SectionScores(behavioral=10, preference=12, ethics=10, aptitude=4.5),
            BehavioralProfile(8, 0, 2, 0),
        )
        summary = aggregation.build_executive_summary(result, self.config)

        self.assertEqual(summary.strengths, ())
        self.assertEqual(summary.weaknesses, (
            "Behavioral profile not aligned with the role",
            "Questionable work attitudes",
            "Possible ethical issues",
            "Insufficient technical knowledge",
            "May conflict with authority",
            "Low tolerance for routine",
        ))
        self.assertEqual(summary.total_score, "36.5/122")

    def test_to_dict_uses_plain_values(self):
        result = self._result(SectionScores(40, 30, 25, 27.0), BehavioralProfile(3, 5, 8, 7))
        data = aggregation.build_executive_summary(result, self.config).to_dict()
        self.assertEqual(data['recommendation'], "HIRE")
        self.assertEqual(data['risk_level'], "LOW")
        self.assertIsInstance(data['strengths'], list)

    def test_summary_limits_come_from_configuration(self):
        scores = SectionScores(behavioral=19, preference=30, ethics=25, aptitude=27.0)
        profile = BehavioralProfile(3, 0, 5, 2)
        default = aggregation.build_executive_summary(self._result(scores, profile), self.config)
        self.assertEqual(default.weaknesses, ("Behavioral profile not aligned with the role",))

        self.config = ScoringConfig(
            strength_ratios={"behavioral": 0.4, "preference": 0.8, "ethics": 0.9, "aptitude": 0.7},
            weakness_ratios={"behavioral": 0.4, "preference": 0.5, "ethics": 0.6, "aptitude": 0.5},
            summary_high_above=4,
            summary_low_below=6,
        )
        summary = aggregation.build_executive_summary(self._result(scores, profile), self.config)

        self.assertEqual(summary.strengths, (
            "Behavioral profile well suited to the role",
            "Excellent work attitudes",
            "High integrity and work ethic",
            "Good technical knowledge",
            "High stability and reliability",
        ))
        self.assertEqual(summary.weaknesses, ("Low tolerance for routine",))

    def test_sections_without_ratio_are_skipped(self):
        self.config = ScoringConfig(strength_ratios={"ethics": 0.9}, weakness_ratios={})
        result = self._result(
            SectionScores(behavioral=0, preference=30, ethics=25, aptitude=0.0),
            BehavioralProfile(3, 5, 6, 6),
        )
        summary = aggregation.build_executive_summary(result, self.config)

        self.assertEqual(summary.strengths, ("High integrity and work ethic",))
        self.assertEqual(summary.weaknesses, ())


if __name__ == '__main__':
    unittest.main()
