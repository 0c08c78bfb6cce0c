"""Shared fixtures for the resume builder tests."""

import copy
from unittest.mock import MagicMock

import pytest

from resume_builder.config import AIConfig
from resume_builder.models import Resume


FULL_RESUME = {
    "title": "Backend Engineer",
    "personalInfo": {
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "phone": "+1 555 0100",
        "location": "Austin, TX",
        "linkedin": "linkedin.com/in/janedoe",
        "summary": "Backend engineer with eight years of experience building payment and billing platforms.",
    },
    "education": [
        {
            "id": "edu1",
            "institution": "University of Texas",
            "degree": "BSc",
            "field": "Computer Science",
            "startDate": "2010",
            "endDate": "2014",
        }
    ],
    "experience": [
        {
            "id": "exp1",
            "company": "Acme Payments",
            "position": "Senior Engineer",
            "location": "Austin, TX",
            "startDate": "2019",
            "endDate": "",
            "current": True,
            "bullets": [
                "Led migration of billing services to Kubernetes",
                "Cut invoice latency by 40%",
                "Mentored four engineers",
            ],
        },
        {
            "id": "exp2",
            "company": "Globex",
            "position": "Software Engineer",
            "location": "Dallas, TX",
            "startDate": "2014",
            "endDate": "2019",
            "current": False,
            "bullets": [
                "Wrote the settlement batch jobs",
                "Owned the ledger database schema",
                "Handled 10+ partner integrations",
            ],
        },
    ],
    "projects": [
        {
            "id": "proj1",
            "name": "ledgerlite",
            "description": "Double-entry bookkeeping library",
            "technologies": ["Python", "PostgreSQL"],
            "bullets": [],
        }
    ],
    "skills": [
        {"id": "sk1", "category": "Languages", "items": ["Python", "Go", "SQL", "TypeScript", "Bash"]},
        {"id": "sk2", "category": "Tools", "items": ["Docker", "Kubernetes", "AWS", "Terraform", "PostgreSQL"]},
    ],
}


@pytest.fixture
def full_resume_dict():
    """A complete resume scoring 90 without keywords."""
    return copy.deepcopy(FULL_RESUME)


@pytest.fixture
def full_resume(full_resume_dict):
    return Resume.from_dict(full_resume_dict)


@pytest.fixture
def ai_config():
    return AIConfig(provider="openai", api_key="test-key")


@pytest.fixture
def stub_client(ai_config):
    """Stand-in for AITextClient; set generate_text.return_value per test."""
    client = MagicMock()
    client.config = ai_config
    return client


def make_response(status_code=200, json_data=None, text="", headers=None):
    """Build a fake requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.headers = headers or {}
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = json_data
    return response


def chat_response(content, status_code=200):
    """OpenAI-style chat completion body."""
    return make_response(
        status_code,
        json_data={"choices": [{"message": {"role": "assistant", "content": content}}]},
    )
