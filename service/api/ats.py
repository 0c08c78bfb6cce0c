# service/api/ats.py

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
import logging

from resume_builder.models import Resume
from resume_builder.ats.scorer import calculate_ats_score
from resume_builder.ai.client import AITextClient
from resume_builder.ai.resume_parser import ResumeParser
from service.dependencies import get_ai_client

logger = logging.getLogger(__name__)

router = APIRouter()


class ScoreRequest(BaseModel):
    resume: Dict[str, Any]
    keywords: Optional[List[str]] = None


class CheckRequest(BaseModel):
    resume_text: str = Field(..., alias="resumeText")
    keywords: Optional[List[str]] = None

    class Config:
        populate_by_name = True


@router.post("/ats-score")
async def ats_score(payload: ScoreRequest) -> Dict[str, Any]:
    """Score a structured resume"""
    logger.info("Calculating ATS score for resume")

    resume = Resume.from_dict(payload.resume)
    report = calculate_ats_score(resume, payload.keywords)

    logger.info(f"ATS Analysis: {report.score}/100, missing: {report.missing_sections}")
    return report.to_dict()


@router.post("/ats-check")
async def ats_check(
    payload: CheckRequest,
    client: AITextClient = Depends(get_ai_client)
) -> Dict[str, Any]:
    """Parse pasted resume text with AI, then score it"""
    parser = ResumeParser(client)
    resume = await run_in_threadpool(parser.parse, payload.resume_text)
    report = calculate_ats_score(resume, payload.keywords)

    logger.info(f"ATS check: {report.score}/100")
    return {
        "resume": resume.to_dict(),
        "analysis": report.to_dict(),
    }
