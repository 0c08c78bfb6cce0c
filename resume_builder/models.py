# resume_builder/models.py
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any
import json
import uuid

# Title the editor gives a new resume
DEFAULT_TITLE = "Untitled Resume"


def generate_id() -> str:
    """Short random identifier for new list entries"""
    return uuid.uuid4().hex[:13]


def _text(value: Any) -> str:
    """Coerce a JSON value to a string field ('' for null)"""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _text_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [_text(item) for item in value]


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


@dataclass
class PersonalInfo:
    """Contact details and summary"""
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: Optional[str] = None
    website: Optional[str] = None
    summary: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'PersonalInfo':
        data = data if isinstance(data, dict) else {}
        return cls(
            full_name=_text(data.get('fullName')),
            email=_text(data.get('email')),
            phone=_text(data.get('phone')),
            location=_text(data.get('location')),
            linkedin=_optional_text(data.get('linkedin')),
            website=_optional_text(data.get('website')),
            summary=_optional_text(data.get('summary')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            'fullName': self.full_name,
            'email': self.email,
            'phone': self.phone,
            'location': self.location,
            'linkedin': self.linkedin,
            'website': self.website,
            'summary': self.summary,
        })


@dataclass
class Education:
    """Education entry"""
    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: Optional[str] = None
    highlights: List[str] = field(default_factory=list)
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Education':
        return cls(
            id=_optional_text(data.get('id')),
            institution=_text(data.get('institution')),
            degree=_text(data.get('degree')),
            field_of_study=_text(data.get('field')),
            start_date=_text(data.get('startDate')),
            end_date=_text(data.get('endDate')),
            gpa=_optional_text(data.get('gpa')),
            highlights=_text_list(data.get('highlights')),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'institution': self.institution,
            'degree': self.degree,
            'field': self.field_of_study,
            'startDate': self.start_date,
            'endDate': self.end_date,
            'gpa': self.gpa,
        }
        if self.highlights:
            data['highlights'] = list(self.highlights)
        return _drop_none(data)


@dataclass
class Experience:
    """Work experience entry"""
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    bullets: List[str] = field(default_factory=list)
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Experience':
        return cls(
            id=_optional_text(data.get('id')),
            company=_text(data.get('company')),
            position=_text(data.get('position')),
            location=_text(data.get('location')),
            start_date=_text(data.get('startDate')),
            end_date=_text(data.get('endDate')),
            current=bool(data.get('current', False)),
            bullets=_text_list(data.get('bullets')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            'id': self.id,
            'company': self.company,
            'position': self.position,
            'location': self.location,
            'startDate': self.start_date,
            'endDate': self.end_date,
            'current': self.current,
            'bullets': list(self.bullets),
        })


@dataclass
class Project:
    """Project entry"""
    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)
    url: Optional[str] = None
    bullets: List[str] = field(default_factory=list)
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Project':
        return cls(
            id=_optional_text(data.get('id')),
            name=_text(data.get('name')),
            description=_text(data.get('description')),
            technologies=_text_list(data.get('technologies')),
            url=_optional_text(data.get('url')),
            bullets=_text_list(data.get('bullets')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'technologies': list(self.technologies),
            'url': self.url,
            'bullets': list(self.bullets),
        })


@dataclass
class SkillCategory:
    """Labelled group of skills"""
    category: str = ""
    items: List[str] = field(default_factory=list)
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SkillCategory':
        return cls(
            id=_optional_text(data.get('id')),
            category=_text(data.get('category')),
            items=_text_list(data.get('items')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            'id': self.id,
            'category': self.category,
            'items': list(self.items),
        })


@dataclass
class Resume:
    """Complete resume aggregate edited by the builder"""
    title: Optional[str] = None
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    education: List[Education] = field(default_factory=list)
    experience: List[Experience] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    skills: List[SkillCategory] = field(default_factory=list)

    # Storage metadata, carried through untouched
    id: Optional[str] = None
    ats_score: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Resume':
        """
        Build a resume from its camelCase JSON shape

        Unknown keys are ignored, missing keys fall back to defaults and
        non-object list entries are skipped. A missing title or entry id
        stays None; nothing is generated, so keyword matching only sees
        what was sent.
        """
        data = data if isinstance(data, dict) else {}

        def entries(key: str) -> List[Dict[str, Any]]:
            value = data.get(key)
            if not isinstance(value, list):
                return []
            return [item for item in value if isinstance(item, dict)]

        ats_score = data.get('atsScore')
        return cls(
            id=_optional_text(data.get('id')),
            title=_optional_text(data.get('title')),
            personal_info=PersonalInfo.from_dict(data.get('personalInfo')),
            education=[Education.from_dict(e) for e in entries('education')],
            experience=[Experience.from_dict(e) for e in entries('experience')],
            projects=[Project.from_dict(p) for p in entries('projects')],
            skills=[SkillCategory.from_dict(s) for s in entries('skills')],
            ats_score=ats_score if isinstance(ats_score, int) else None,
            created_at=_optional_text(data.get('createdAt')),
            updated_at=_optional_text(data.get('updatedAt')),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase JSON shape"""
        data = {
            'id': self.id,
            'title': self.title,
            'personalInfo': self.personal_info.to_dict(),
            'education': [e.to_dict() for e in self.education],
            'experience': [e.to_dict() for e in self.experience],
            'projects': [p.to_dict() for p in self.projects],
            'skills': [s.to_dict() for s in self.skills],
            'atsScore': self.ats_score,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }
        return _drop_none(data)

    def to_json_text(self) -> str:
        """Compact JSON text of the whole resume"""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(',', ':'))

    def all_bullets(self) -> List[str]:
        """Experience bullets in display order"""
        bullets = []
        for exp in self.experience:
            bullets.extend(exp.bullets)
        return bullets

    def all_skills(self) -> List[str]:
        """Skill names across all categories, blanks removed"""
        return [
            item.strip()
            for category in self.skills
            for item in category.items
            if item.strip()
        ]

    def __repr__(self):
        return f"<Resume: {self.personal_info.full_name or self.title} | {len(self.all_bullets())} bullets>"


def empty_resume() -> Resume:
    """Blank resume the editor starts from"""
    return Resume(
        title=DEFAULT_TITLE,
        personal_info=PersonalInfo(linkedin="", website="", summary=""),
    )
