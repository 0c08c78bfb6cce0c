# service/api/ai.py

from fastapi import APIRouter, Depends, UploadFile, File
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
import logging

from resume_builder.models import Resume
from resume_builder.importer import extract_text
from resume_builder.ai.client import AITextClient
from resume_builder.ai.resume_parser import ResumeParser
from resume_builder.ai.bullet_suggester import BulletSuggester
from resume_builder.ai.skill_suggester import SkillSuggester
from resume_builder.ai.job_analyzer import JobAnalyzer
from service.dependencies import get_ai_client

logger = logging.getLogger(__name__)

router = APIRouter()


class ParseResumeRequest(BaseModel):
    resume_text: str = Field(..., alias="resumeText")

    class Config:
        populate_by_name = True


class SuggestBulletsRequest(BaseModel):
    position: str
    company: Optional[str] = None
    existing_bullets: Optional[List[str]] = Field(None, alias="existingBullets")

    class Config:
        populate_by_name = True


class SuggestSkillsRequest(BaseModel):
    resume: Dict[str, Any] = Field(default_factory=dict)


class AnalyzeJobRequest(BaseModel):
    job_description: str = Field(..., alias="jobDescription")
    resume: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        populate_by_name = True


@router.post("/parse-resume")
async def parse_resume(
    payload: ParseResumeRequest,
    client: AITextClient = Depends(get_ai_client)
) -> Dict[str, Any]:
    """Structure pasted resume text"""
    parser = ResumeParser(client)
    resume = await run_in_threadpool(parser.parse, payload.resume_text)
    return {"resume": resume.to_dict()}


@router.post("/import-resume")
async def import_resume(
    file: UploadFile = File(...),
    client: AITextClient = Depends(get_ai_client)
) -> Dict[str, Any]:
    """Extract text from an uploaded file and structure it"""
    data = await file.read()
    text = await run_in_threadpool(extract_text, file.filename, data)

    parser = ResumeParser(client)
    resume = await run_in_threadpool(parser.parse, text)
    return {
        "filename": file.filename,
        "resume": resume.to_dict(),
    }


@router.post("/ai-suggest-bullets")
async def suggest_bullets(
    payload: SuggestBulletsRequest,
    client: AITextClient = Depends(get_ai_client)
) -> Dict[str, Any]:
    """Bullet point suggestions for a position"""
    suggester = BulletSuggester(client)
    bullets = await run_in_threadpool(
        suggester.suggest,
        payload.position,
        payload.company,
        payload.existing_bullets
    )
    return {"bullets": bullets}


@router.post("/ai-suggest-skills")
async def suggest_skills(
    payload: SuggestSkillsRequest,
    client: AITextClient = Depends(get_ai_client)
) -> Dict[str, Any]:
    """Skill suggestions that complement the resume"""
    suggester = SkillSuggester(client)
    skills = await run_in_threadpool(suggester.suggest, Resume.from_dict(payload.resume))
    return {"skills": [s.to_dict() for s in skills]}


@router.post("/analyze-job")
async def analyze_job(
    payload: AnalyzeJobRequest,
    client: AITextClient = Depends(get_ai_client)
) -> Dict[str, Any]:
    """Keyword analysis of a job description against the resume"""
    analyzer = JobAnalyzer(client)
    analysis = await run_in_threadpool(
        analyzer.analyze,
        payload.job_description,
        Resume.from_dict(payload.resume)
    )
    return analysis.to_dict()
