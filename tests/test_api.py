import os
import sys
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

# Keep API tests deterministic and fast by default.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")
os.environ.setdefault("AI_PROVIDER", "disabled")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from clarify.ai.types import GenerationError  # noqa: E402
from clarify.core import security  # noqa: E402
from clarify.core.rate_limit import limiter  # noqa: E402
from clarify.main import app  # noqa: E402
from clarify.services.insights_service import (  # noqa: E402
    SUMMARY_FALLBACK,
    InsightService,
    get_insight_service,
)


class CannedGenerator:
    def __init__(self, response):
        self.response = response

    def complete(self, prompt, *, json_mode=False):
        return self.response


class BrokenGenerator:
    def complete(self, prompt, *, json_mode=False):
        raise GenerationError("service down", code="generator_error")


class AnalyzeApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        limiter.enabled = False
        cls.client = TestClient(app)
        cls.payload = {
            "resume_text": "Experienced with React.js and Docker.",
            "job_description_text": "React.js required. Node.js is a plus.",
        }

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_analyze_contract_shape(self):
        response = self.client.post("/v1/analyze", json=self.payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["score"], 65)
        self.assertEqual(body["totalJDKeywords"], 2)
        self.assertEqual(body["matchedKeywords"], 1)
        self.assertEqual(body["impactScore"], 100)
        self.assertEqual(body["weakWordsFound"], [])
        self.assertEqual(
            body["calculationBreakdown"],
            {"hardSkillsScore": 50, "softSignalsScore": 100, "phrasesScore": 100},
        )

        first = body["results"][0]
        self.assertEqual(first["text"], "react.js")
        self.assertEqual(first["category"], "Core Competency")
        self.assertEqual(first["countInJD"], 1)
        self.assertEqual(first["countInResume"], 1)
        self.assertEqual(first["status"], "Found")
        self.assertEqual(first["significance"], "Required")
        self.assertEqual(first["significanceReason"], "Hard requirement.")
        self.assertEqual(body["results"][1]["status"], "Missing")

    def test_camel_case_request_fields_are_accepted(self):
        response = self.client.post(
            "/v1/analyze",
            json={
                "resumeText": self.payload["resume_text"],
                "jobDescriptionText": self.payload["job_description_text"],
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["score"], 65)

    def test_blank_inputs_return_400(self):
        response = self.client.post("/v1/analyze", json={"resume_text": "  ", "job_description_text": "\n"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("detail", response.json())

    def test_oversized_input_is_rejected(self):
        response = self.client.post(
            "/v1/analyze",
            json={"resume_text": "x" * 60000, "job_description_text": "python"},
        )
        self.assertEqual(response.status_code, 422)

    def test_api_key_is_enforced_when_configured(self):
        with patch.object(security, "settings", replace(security.settings, api_key="secret")):
            denied = self.client.post("/v1/analyze", json=self.payload)
            allowed = self.client.post("/v1/analyze", json=self.payload, headers={"X-API-Key": "secret"})
        self.assertEqual(denied.status_code, 401)
        self.assertEqual(allowed.status_code, 200)


class InsightsApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        limiter.enabled = False
        cls.client = TestClient(app)

    def test_summary_with_generator(self):
        service = InsightService(CannedGenerator("Solid match. Add Node.js."))
        with patch("clarify.api.v1.insights.get_insight_service", return_value=service):
            response = self.client.post(
                "/v1/insights/summary",
                json={"resume_text": "resume", "job_description_text": "jd", "score": 65},
            )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"summary": "Solid match. Add Node.js.", "generated": True})

    def test_generator_failures_return_fallbacks(self):
        service = InsightService(BrokenGenerator())
        with patch("clarify.api.v1.insights.get_insight_service", return_value=service):
            summary = self.client.post(
                "/v1/insights/summary",
                json={"resume_text": "resume", "job_description_text": "jd", "score": 65},
            )
            traps = self.client.post(
                "/v1/insights/interview-traps",
                json={"missing_keywords": ["node.js"], "job_description_text": "jd"},
            )
            pathway = self.client.post("/v1/insights/learning-pathway", json={"skill": "node.js"})
            rewrite = self.client.post(
                "/v1/insights/rewrite-bullet",
                json={"bullet": "Worked on APIs", "keyword": "node.js", "job_description_text": "jd"},
            )
            audit = self.client.post("/v1/insights/signal-audit", json={"resume_text": "resume"})

        self.assertEqual(summary.json(), {"summary": SUMMARY_FALLBACK, "generated": False})
        self.assertEqual(traps.json(), {"traps": []})
        self.assertEqual(pathway.json(), {"pathway": None})
        self.assertEqual(rewrite.json()["generated"], False)
        self.assertEqual(audit.json(), {"audit": None})
        for response in (summary, traps, pathway, rewrite, audit):
            self.assertEqual(response.status_code, 200)

    def test_unknown_provider_still_answers_with_fallbacks(self):
        get_insight_service.cache_clear()
        try:
            with patch.dict(os.environ, {"AI_PROVIDER": "anthropic"}):
                response = self.client.post(
                    "/v1/insights/summary",
                    json={"resume_text": "resume", "job_description_text": "jd", "score": 65},
                )
        finally:
            get_insight_service.cache_clear()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"summary": SUMMARY_FALLBACK, "generated": False})

    def test_interview_traps_use_camel_case(self):
        service = InsightService(
            CannedGenerator('{"traps": [{"question": "Q?", "reason": "R", "suggestedAnswer": "A"}]}')
        )
        with patch("clarify.api.v1.insights.get_insight_service", return_value=service):
            response = self.client.post(
                "/v1/insights/interview-traps",
                json={"missing_keywords": ["node.js"], "job_description_text": "jd"},
            )
        self.assertEqual(response.json(), {"traps": [{"question": "Q?", "reason": "R", "suggestedAnswer": "A"}]})


if __name__ == "__main__":
    unittest.main()
