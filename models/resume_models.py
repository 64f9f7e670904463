from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Domain(str, Enum):
    SOFTWARE = "software"
    MARKETING = "marketing"
    FINANCE = "finance"
    HEALTHCARE = "healthcare"


class Template(str, Enum):
    """Visual template choice. Only used for presentation and export."""

    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"
    PROFESSIONAL = "professional"


class Severity(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Category(str, Enum):
    SKILLS = "skills"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    FORMATTING = "formatting"


class MatchingStrategy(str, Enum):
    TOKEN = "token"  # keyword must equal a whitespace-delimited token
    SUBSTRING = "substring"  # keyword may appear anywhere in the text


class SessionState(str, Enum):
    IDLE = "idle"
    FILE_SELECTED = "file_selected"
    ANALYZING = "analyzing"
    RESULTS_READY = "results_ready"
    REVIEWED = "reviewed"


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    severity: Severity
    message: str
    detail: Optional[str] = None


class CategorySuggestions(BaseModel):
    """Suggestions for every category; all four are always present"""

    model_config = ConfigDict(frozen=True)

    skills: Tuple[Suggestion, ...] = ()
    experience: Tuple[Suggestion, ...] = ()
    education: Tuple[Suggestion, ...] = ()
    formatting: Tuple[Suggestion, ...] = ()

    def __getitem__(self, category: Category) -> Tuple[Suggestion, ...]:
        return getattr(self, Category(category).value)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    match_score: int = Field(ge=0, le=100)
    suggestions: CategorySuggestions
    matched_keywords: Tuple[str, ...] = ()


class EnhancementReport(BaseModel):
    filename: Optional[str] = None
    domain: Domain
    template: Template
    analysis: AnalysisResult


class TextAnalysisRequest(BaseModel):
    resume_text: str
    job_description: str
    domain: Domain = Domain.SOFTWARE
    template: Template = Template.MODERN


class SessionStatus(BaseModel):
    session_id: str
    state: SessionState
    filename: Optional[str] = None
    domain: Optional[Domain] = None
    template: Optional[Template] = None
    result: Optional[AnalysisResult] = None
    can_download: bool = False


class DownloadResponse(BaseModel):
    session_id: str
    template: Template
    exported: bool  # always False: export produces no document
    message: str
