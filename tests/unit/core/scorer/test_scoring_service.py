#!/usr/bin/env python3
"""
Test suite for ScoringService end to end.
"""

import json
import unittest

from core.config_loader import RecommendationThresholds, ScoringConfig
from core.scorer import (
    AnswerSet,
    EvaluationState,
    Recommendation,
    RiskLevel,
    ScoringService,
    Severity,
)
from core.scorer.service import InvalidTransitionError, _Evaluation
from tests.fixtures.answer_fixtures import answers_with, perfect_answers


class TestScoringService(unittest.TestCase):
    """Test ScoringService on complete and partial submissions."""

    def setUp(self):
        self.service = ScoringService()

    def test_perfect_answers(self):
        result = self.service.evaluate(perfect_answers())

        self.assertEqual(result.state, EvaluationState.SCORED)
        self.assertEqual(result.section_scores.to_dict(), {
            'behavioral': 19,
            'preference': 30,
            'ethics': 25,
            'aptitude': 27.0,
        })
        self.assertEqual(result.total_score, 101)
        self.assertEqual(result.max_score, 122)
        self.assertEqual(result.percentage, 83)
        self.assertEqual(result.recommendation, Recommendation.HIRE)
        self.assertEqual(result.risk_level, RiskLevel.LOW)
        self.assertEqual(result.dominant_type, "SD")
        self.assertEqual(result.flags, ())
        self.assertEqual(result.insights, (
            "May find it hard to make quick decisions",
            "Prefers to work independently",
            "May be less detail-oriented or careless",
        ))

    def test_perfect_answers_summary(self):
        result = self.service.evaluate(perfect_answers())
        summary = self.service.summarize(result)

        self.assertEqual(summary.total_score, "101/122")
        self.assertEqual(summary.percentage, "83%")
        self.assertEqual(summary.flag_count, 0)
        self.assertEqual(summary.strengths, (
            "Excellent work attitudes",
            "High integrity and work ethic",
            "Good technical knowledge",
        ))
        self.assertEqual(summary.weaknesses, ("Behavioral profile not aligned with the role",))

    def test_disqualifying_ethics_answer(self):
        result = self.service.evaluate(answers_with(ethics={"1": "A"}))

        self.assertEqual(result.state, EvaluationState.DISQUALIFIED)
        self.assertTrue(result.disqualified)
        self.assertEqual(result.recommendation, Recommendation.REJECT)
        self.assertEqual(result.risk_level, RiskLevel.HIGH)
        self.assertEqual(result.total_score, 0)
        self.assertEqual(result.percentage, 0)
        self.assertIsNone(result.section_scores.behavioral)
        self.assertIsNone(result.profile)
        self.assertEqual(result.reason, "disqualified by critical flags")

        critical = result.critical_flags
        self.assertGreaterEqual(len(critical), 1)
        self.assertTrue(any("tax evasion" in f.description for f in critical))

    def test_disqualified_summary_lists_critical_flags(self):
        result = self.service.evaluate(answers_with(preference={"11": "disagree"}))
        summary = self.service.summarize(result)

        self.assertEqual(summary.strengths, ())
        self.assertEqual(summary.weaknesses, ("Would not help an injured coworker",))
        self.assertEqual(summary.dominant_type, "")

    def test_empty_answer_set(self):
        result = self.service.evaluate({})

        self.assertEqual(result.section_scores.to_dict(), {
            'behavioral': 0,
            'preference': 30,
            'ethics': 0,
            'aptitude': 0.0,
        })
        self.assertEqual(result.total_score, 30)
        self.assertEqual(result.percentage, 25)
        self.assertEqual(result.recommendation, Recommendation.REJECT)
        self.assertEqual(result.risk_level, RiskLevel.HIGH)
        self.assertEqual(result.message, "Candidate does not meet the minimum requirements")

        warnings = [f for f in result.flags if f.severity == Severity.WARNING]
        self.assertEqual([f.section for f in warnings], ['behavioral', 'ethics', 'ethics', 'ethics'])
        self.assertEqual([f.question for f in warnings if f.section == 'ethics'], [2, 3, 5])

    def test_all_agree_preferences_produce_no_preference_flags(self):
        result = self.service.evaluate(answers_with(preference={"7": "strongly_disagree"}))
        self.assertEqual(result.section_scores.preference, 30)
        self.assertFalse([f for f in result.flags if f.section == 'preference'])

    def test_strongly_disagree_on_safety_statement_disqualifies(self):
        result = self.service.evaluate(answers_with(preference={"5": "StronglyDisagree"}))

        self.assertEqual(result.state, EvaluationState.DISQUALIFIED)
        self.assertEqual(result.recommendation, Recommendation.REJECT)
        self.assertEqual(result.risk_level, RiskLevel.HIGH)
        self.assertEqual(
            [(f.section, f.question) for f in result.critical_flags],
            [('preference', 5)],
        )

    def test_total_disagreement_code_disqualifies(self):
        result = self.service.evaluate(answers_with(preference={"13": "TD"}))
        self.assertTrue(result.disqualified)
        self.assertEqual([f.question for f in result.critical_flags], [13])

    def test_strongly_agree_on_negative_statement_deducts_and_warns(self):
        result = self.service.evaluate(answers_with(preference={"7": "StronglyAgree"}))

        self.assertEqual(result.state, EvaluationState.SCORED)
        self.assertEqual(result.section_scores.preference, 28)
        warnings = [f for f in result.flags if f.section == 'preference']
        self.assertEqual(len(warnings), 1)
        self.assertEqual(warnings[0].severity, Severity.WARNING)
        self.assertEqual(warnings[0].question, 7)
        self.assertEqual(warnings[0].description, "May prefer working alone, could affect teamwork")

    def test_accepts_answer_set_instance(self):
        answers = AnswerSet.from_raw(perfect_answers())
        self.assertEqual(self.service.evaluate(answers), self.service.evaluate(perfect_answers()))

    def test_evaluate_many(self):
        results = self.service.evaluate_many({
            'a': perfect_answers(),
            'b': {},
        })
        self.assertEqual(results['a'].recommendation, Recommendation.HIRE)
        self.assertEqual(results['b'].recommendation, Recommendation.REJECT)

    def test_custom_configuration(self):
        config = ScoringConfig(thresholds=RecommendationThresholds(hire=90, hire_with_reservations=80))
        result = ScoringService(config).evaluate(perfect_answers())
        self.assertEqual(result.recommendation, Recommendation.HIRE_WITH_RESERVATIONS)


class TestScoringProperties(unittest.TestCase):

    def setUp(self):
        self.service = ScoringService()

    def test_repeated_evaluation_is_identical(self):
        raw = answers_with(ethics={"2": "A"}, aptitude={"3": 1})
        first = json.dumps(self.service.evaluate(raw).to_dict(), sort_keys=True)
        for _ in range(3):
            self.assertEqual(json.dumps(self.service.evaluate(raw).to_dict(), sort_keys=True), first)

    def test_disqualification_always_rejects(self):
        for overrides in (
            {'ethics': {"1": "A"}},
            {'ethics': {"4": "A"}},
            {'preference': {"5": "disagree"}},
            {'preference': {"13": "strongly_disagree"}},
        ):
            with self.subTest(overrides=overrides):
                result = self.service.evaluate(answers_with(**overrides))
                self.assertEqual(result.recommendation, Recommendation.REJECT)
                self.assertEqual(result.risk_level, RiskLevel.HIGH)

    def test_scores_stay_within_bounds(self):
        maxima = ScoringConfig().section_maxima.model_dump()
        submissions = [
            {},
            perfect_answers(),
            {"aptitude": {str(q): 4 for q in range(1, 30)}},
            {"preference": {str(q): "strongly_disagree" for q in range(1, 16) if q not in (5, 11, 13)}},
            {"behavioral": {str(q): {"most": "C"} for q in range(1, 11)}},
        ]
        for raw in submissions:
            result = self.service.evaluate(raw)
            for section, value in result.section_scores.to_dict().items():
                self.assertGreaterEqual(value, 0)
                self.assertLessEqual(value, maxima[section])
            self.assertLessEqual(result.total_score, 122)
            self.assertTrue(0 <= result.percentage <= 100)

    def test_more_agreement_never_lowers_preference(self):
        levels = ["strongly_disagree", "disagree", "neutral", "agree", "strongly_agree"]
        for question in ("1", "2", "15"):
            scores = [
                self.service.evaluate(answers_with(preference={question: level})).section_scores.preference
                for level in levels
            ]
            self.assertEqual(scores, sorted(scores))


class TestEvaluationStateMachine(unittest.TestCase):

    def setUp(self):
        self.evaluation = _Evaluation(AnswerSet(), ScoringConfig())

    def test_starts_pending(self):
        self.assertEqual(self.evaluation.state, EvaluationState.PENDING)

    def test_scored_is_terminal(self):
        self.evaluation.score()
        self.assertEqual(self.evaluation.state, EvaluationState.SCORED)
        with self.assertRaises(InvalidTransitionError):
            self.evaluation.disqualify()

    def test_disqualified_is_terminal(self):
        self.evaluation.disqualify()
        with self.assertRaises(InvalidTransitionError):
            self.evaluation.transition(EvaluationState.SCORED)


if __name__ == '__main__':
    unittest.main()
