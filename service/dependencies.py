# service/dependencies.py

from fastapi import Request

from resume_builder.ai.client import AITextClient


def get_ai_client(request: Request) -> AITextClient:
    """AI text client shared by all requests"""
    return request.app.state.ai_client
