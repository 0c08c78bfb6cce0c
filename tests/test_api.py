"""Tests for the HTTP service."""

import json

import pytest
from fastapi.testclient import TestClient

from resume_builder.ai.exceptions import (
    AIConfigurationError, ModelNotFoundError, RateLimitError
)
from service.app import create_app
from service.config import Settings


@pytest.fixture
def api(stub_client):
    settings = Settings(_env_file=None, ai_api_key="test-key")
    return TestClient(create_app(settings, ai_client=stub_client))


@pytest.mark.integration
class TestScoreEndpoints:

    def test_health(self, api):
        response = api.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["ai_provider"] == "openai"

    def test_ats_score(self, api, full_resume_dict):
        response = api.post("/api/ats-score", json={"resume": full_resume_dict, "keywords": ["python", "react"]})

        assert response.status_code == 200
        assert response.json() == {
            "score": 95,
            "keywordMatch": 50,
            "missingSections": [],
            "suggestions": [],
            "formattingScore": 100,
            "keywordsEvaluated": True,
        }

    def test_ats_score_empty_resume(self, api):
        data = api.post("/api/ats-score", json={"resume": {}}).json()

        assert data["score"] == 0
        assert data["keywordMatch"] == 75
        assert data["keywordsEvaluated"] is False
        assert len(data["suggestions"]) == 5

    def test_ats_score_requires_resume(self, api):
        assert api.post("/api/ats-score", json={}).status_code == 422

    def test_ats_check(self, api, stub_client, full_resume_dict):
        stub_client.generate_text.return_value = json.dumps(full_resume_dict)

        response = api.post("/api/ats-check", json={"resumeText": "Jane Doe ..."})

        assert response.status_code == 200
        body = response.json()
        assert body["resume"]["personalInfo"]["fullName"] == "Jane Doe"
        assert body["analysis"]["score"] == 90


@pytest.mark.integration
class TestAIEndpoints:

    def test_parse_resume(self, api, stub_client):
        stub_client.generate_text.return_value = '{"title": "SRE", "personalInfo": {"fullName": "Kim"}}'

        response = api.post("/api/parse-resume", json={"resumeText": "Kim, SRE"})

        assert response.status_code == 200
        assert response.json()["resume"]["title"] == "SRE"

    def test_parse_resume_empty_text(self, api):
        response = api.post("/api/parse-resume", json={"resumeText": " "})

        assert response.status_code == 400
        assert response.json() == {"error": "Resume text is required"}

    def test_import_resume_text_file(self, api, stub_client):
        stub_client.generate_text.return_value = '{"personalInfo": {"fullName": "Kim"}}'

        response = api.post(
            "/api/import-resume",
            files={"file": ("resume.txt", b"Kim\nSRE at Initech", "text/plain")},
        )

        assert response.status_code == 200
        assert response.json()["filename"] == "resume.txt"
        assert response.json()["resume"]["personalInfo"]["fullName"] == "Kim"
        _, user_prompt = stub_client.generate_text.call_args.args
        assert "SRE at Initech" in user_prompt

    def test_import_resume_bad_pdf(self, api, stub_client):
        response = api.post(
            "/api/import-resume",
            files={"file": ("resume.pdf", b"not a pdf", "application/pdf")},
        )

        assert response.status_code == 400
        assert "PDF parse failed" in response.json()["error"]
        stub_client.generate_text.assert_not_called()

    def test_suggest_bullets(self, api, stub_client):
        stub_client.generate_text.return_value = "1. Led on-call rotation\n2. Cut MTTR by 35%"

        response = api.post("/api/ai-suggest-bullets", json={
            "position": "SRE", "company": "Initech", "existingBullets": []
        })

        assert response.status_code == 200
        assert response.json() == {"bullets": ["Led on-call rotation", "Cut MTTR by 35%"]}

    def test_suggest_skills(self, api, stub_client, full_resume_dict):
        stub_client.generate_text.return_value = '{"skills": [{"category": "Cloud", "items": ["AWS", "GCP"]}]}'

        response = api.post("/api/ai-suggest-skills", json={"resume": full_resume_dict})

        assert response.status_code == 200
        skills = response.json()["skills"]
        assert len(skills) == 1
        assert skills[0]["category"] == "Cloud"
        assert skills[0]["items"] == ["GCP"]

    def test_analyze_job(self, api, stub_client, full_resume_dict):
        stub_client.generate_text.return_value = json.dumps({
            "jobTitle": "SRE", "keywordMatchPercentage": 70, "missingKeywords": ["Kafka"]
        })

        response = api.post("/api/analyze-job", json={
            "jobDescription": "SRE with Kafka", "resume": full_resume_dict
        })

        assert response.status_code == 200
        assert response.json()["jobTitle"] == "SRE"
        assert response.json()["missingKeywords"] == ["Kafka"]


@pytest.mark.integration
class TestErrorResponses:

    def test_rate_limited(self, api, stub_client):
        stub_client.generate_text.side_effect = RateLimitError(
            'AI quota/rate limit exceeded. Please check your plan/billing and try again.'
        )

        response = api.post("/api/ai-suggest-bullets", json={"position": "SRE"})

        assert response.status_code == 429
        assert "rate limit" in response.json()["error"]

    def test_model_not_found(self, api, stub_client):
        stub_client.generate_text.side_effect = ModelNotFoundError(
            "AI model 'gpt-9' was not found for provider 'openai'.",
            model="gpt-9",
            available_models=["gpt-4o-mini"],
        )

        response = api.post("/api/parse-resume", json={"resumeText": "Kim"})

        assert response.status_code == 404
        assert response.json()["availableModels"] == ["gpt-4o-mini"]

    def test_not_configured(self, api, stub_client):
        stub_client.generate_text.side_effect = AIConfigurationError('AI_API_KEY is not configured')

        response = api.post("/api/analyze-job", json={"jobDescription": "SRE", "resume": {}})

        assert response.status_code == 500
        assert response.json() == {"error": "AI_API_KEY is not configured"}

    def test_invalid_model_output(self, api, stub_client):
        stub_client.generate_text.return_value = "not json at all"

        response = api.post("/api/ai-suggest-skills", json={"resume": {}})

        assert response.status_code == 502
        assert response.json() == {"error": "AI returned invalid JSON"}
