#!/usr/bin/env python3
"""
Tests for the command line entry point.
"""

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

import yaml
from sqlalchemy import create_engine, inspect

import main
from tests.fixtures.answer_fixtures import perfect_answers


class TestMainCli(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write(self, name, content):
        path = os.path.join(self.tmp.name, name)
        with open(path, 'w') as f:
            f.write(content)
        return path

    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main.main(argv)
        return code, out.getvalue()

    def test_score_prints_result(self):
        answers = self._write("answers.json", json.dumps(perfect_answers()))

        code, output = self._run(["score", answers, "--config", os.path.join(self.tmp.name, "none.yaml")])

        self.assertEqual(code, 0)
        data = json.loads(output)
        self.assertEqual(data['result']['recommendation'], "HIRE")
        self.assertEqual(data['result']['percentage'], 83)
        self.assertNotIn('summary', data)

    def test_score_with_summary(self):
        answers = self._write("answers.json", "{}")

        code, output = self._run(["score", answers, "--summary"])

        self.assertEqual(code, 0)
        data = json.loads(output)
        self.assertEqual(data['summary']['percentage'], "25%")
        self.assertEqual(data['summary']['recommendation'], "REJECT")

    def test_score_uses_config_file(self):
        answers = self._write("answers.json", json.dumps(perfect_answers()))
        config = self._write("config.yaml", yaml.dump({
            "scoring": {"thresholds": {"hire": 95, "hire_with_reservations": 80, "second_interview": 50}}
        }))

        _, output = self._run(["score", answers, "--config", config])
        self.assertEqual(json.loads(output)['result']['recommendation'], "HIRE_WITH_RESERVATIONS")

    def test_score_missing_or_invalid_file(self):
        self.assertEqual(self._run(["score", os.path.join(self.tmp.name, "missing.json")])[0], 1)
        broken = self._write("broken.json", "{not json")
        self.assertEqual(self._run(["score", broken])[0], 1)

    def test_init_db_creates_tables(self):
        db_path = os.path.join(self.tmp.name, "cli.db")
        config = self._write("config.yaml", yaml.dump({"database": {"url": f"sqlite:///{db_path}"}}))

        env = {k: v for k, v in os.environ.items() if k != "DATABASE_URL"}
        with patch.dict(os.environ, env, clear=True):
            code, _ = self._run(["init-db", "--config", config])

        self.assertEqual(code, 0)
        engine = create_engine(f"sqlite:///{db_path}")
        tables = set(inspect(engine).get_table_names())
        engine.dispose()
        self.assertTrue({"candidates", "candidate_answers", "evaluation_results", "app_settings"} <= tables)


if __name__ == '__main__':
    unittest.main()
