# resume_builder/ai/prompts.py
"""
Prompts for the AI features

Each builder returns (system_prompt, user_prompt).
"""

import json
from typing import Any, Dict, List, Optional, Tuple

RESUME_JSON_SHAPE = """{
  "title": "Resume title based on the person's target role",
  "personalInfo": {
    "fullName": "",
    "email": "",
    "phone": "",
    "location": "",
    "linkedin": "",
    "website": "",
    "summary": ""
  },
  "education": [
    {"id": "unique_id", "institution": "", "degree": "", "field": "", "startDate": "", "endDate": "", "gpa": ""}
  ],
  "experience": [
    {"id": "unique_id", "company": "", "position": "", "location": "", "startDate": "", "endDate": "", "current": false, "bullets": [""]}
  ],
  "projects": [
    {"id": "unique_id", "name": "", "description": "", "technologies": [], "url": "", "bullets": [""]}
  ],
  "skills": [
    {"id": "unique_id", "category": "", "items": []}
  ]
}"""

JOB_ANALYSIS_SHAPE = """{
  "jobTitle": "extracted job title from description",
  "company": "company name if mentioned",
  "requiredKeywords": ["list", "of", "important", "keywords", "from", "job", "description"],
  "matchedKeywords": ["keywords", "already", "in", "resume"],
  "missingKeywords": ["important", "keywords", "not", "in", "resume"],
  "keywordMatchPercentage": 65,
  "suggestions": [
    {
      "type": "add_skill",
      "keyword": "keyword to add",
      "reason": "Why this keyword is important",
      "where": "Where to add it (skills, experience, summary)"
    }
  ],
  "bulletImprovements": [
    {
      "original": "original bullet point from resume",
      "improved": "improved version with better keywords",
      "addedKeywords": ["keywords", "added"]
    }
  ],
  "summaryRecommendation": "A tailored professional summary for this job"
}"""

SKILLS_SHAPE = """{
  "skills": [
    { "category": "Programming Languages", "items": ["..."] },
    { "category": "Frameworks & Libraries", "items": ["..."] },
    { "category": "Tools & Technologies", "items": ["..."] },
    { "category": "Databases", "items": ["..."] },
    { "category": "Soft Skills", "items": ["..."] }
  ]
}"""

JSON_ONLY = "Return ONLY valid JSON, no markdown formatting or code blocks."


def parse_resume_prompts(resume_text: str) -> Tuple[str, str]:
    system_prompt = (
        "You are an expert resume parser. Extract structured information "
        "from resume text and return it as JSON."
    )
    user_prompt = f"""Parse this resume and extract the information into a structured format.
Return a JSON object with this structure:
{RESUME_JSON_SHAPE}

Resume text:
{resume_text}

{JSON_ONLY}"""
    return system_prompt, user_prompt


def suggest_bullets_prompts(
    position: str,
    company: Optional[str] = None,
    existing_bullets: Optional[List[str]] = None
) -> Tuple[str, str]:
    system_prompt = """You are an expert resume writer specializing in creating impactful, ATS-friendly bullet points.
Generate professional resume bullet points that:
- Start with strong action verbs
- Include quantifiable achievements when possible
- Use industry-specific keywords
- Are concise (under 20 words each)
- Follow the STAR method (Situation, Task, Action, Result)"""

    context = ''
    if existing_bullets:
        context = f"Consider these existing bullets for context: {'; '.join(existing_bullets)}"

    user_prompt = f"""Generate 4-5 professional resume bullet points for a {position} position at {company or 'a company'}.
{context}

Return ONLY the bullet points, one per line, without bullet symbols or numbering."""
    return system_prompt, user_prompt


def suggest_skills_prompts(
    target_role: str,
    context: Dict[str, Any]
) -> Tuple[str, str]:
    system_prompt = "You are an expert resume writer and ATS optimization specialist."
    user_prompt = f"""Suggest resume skills to add based on the candidate's background.

TARGET ROLE (if known): {target_role or 'Unknown'}

RESUME CONTEXT (JSON):
{json.dumps(context, indent=2, ensure_ascii=False)}

Return a JSON object with this exact structure:
{SKILLS_SHAPE}

Rules:
- Suggest 3-6 categories.
- 4-8 skills per category.
- Skills must be ATS-friendly (exact names), no sentences.
- Avoid duplicates and avoid skills already in existingSkills.
- Return ONLY valid JSON."""
    return system_prompt, user_prompt


def analyze_job_prompts(
    job_description: str,
    resume: Dict[str, Any]
) -> Tuple[str, str]:
    system_prompt = (
        "You are an expert ATS optimization specialist and career coach. "
        "Analyze job descriptions and resumes to provide actionable keyword "
        "optimization suggestions."
    )
    user_prompt = f"""Analyze this job description and compare it with the resume to identify optimization opportunities.

JOB DESCRIPTION:
{job_description}

RESUME DATA:
{json.dumps(resume, indent=2, ensure_ascii=False)}

Return a JSON object with this exact structure:
{JOB_ANALYSIS_SHAPE}

{JSON_ONLY}"""
    return system_prompt, user_prompt
