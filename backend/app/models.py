from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case in Python; both accepted on input
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ParseRequest(CamelModel):
    candidate_id: Optional[str] = None
    file_path: Optional[str] = None


class ExperienceItem(CamelModel):
    title: Optional[str] = None
    company: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    text: Optional[str] = None


class EducationItem(CamelModel):
    degree: Optional[str] = None
    school: Optional[str] = None
    year: Optional[str] = None


class Sections(CamelModel):
    titles: List[str] = Field(default_factory=list)
    summary: Optional[str] = None
    skills_raw: List[str] = Field(default_factory=list)
    experience: List[ExperienceItem] = Field(default_factory=list)
    education: List[EducationItem] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    location: Optional[str] = None


class ParseResponse(CamelModel):
    candidate_id: Optional[str] = None
    sections: Sections = Field(default_factory=Sections)


class ScoreCriteria(CamelModel):
    qualified_if_any_title_contains: Optional[List[str]] = None


class ScoreRequest(CamelModel):
    candidate_id: Optional[str] = None
    title: Optional[str] = None
    criteria: Optional[ScoreCriteria] = None


class ScoreResponse(CamelModel):
    qualified: bool
    matched_title: Optional[str] = None
    rule_match: bool
    semantic_score: float
    rationale: str
