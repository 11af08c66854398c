from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing import Dict, List, Literal, Optional


SectionName = Literal[
    "contact",
    "summary",
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
    "awards",
    "languages",
    "volunteer",
    "publications",
    "interests",
    "references",
]
CategoryName = Literal["structure", "technicalSkills", "workExperience", "education", "formatting"]
FeedbackType = Literal["success", "warning", "error"]
Impact = Literal["high", "medium", "low"]
FileType = Literal["pdf", "docx", "txt"]

FEEDBACK_ICONS: Dict[str, str] = {
    "success": "✅",
    "warning": "⚠️",
    "error": "❌",
}

CATEGORY_LABELS: Dict[str, str] = {
    "structure": "CV Structure & Sections",
    "technicalSkills": "Technical Skills",
    "workExperience": "Work Experience Content",
    "education": "Education",
    "formatting": "Formatting & Readability",
}

CATEGORY_DESCRIPTIONS: Dict[str, str] = {
    "structure": "Presence and organization of key CV sections",
    "technicalSkills": "Technical competencies and skill keywords",
    "workExperience": "Quality and presentation of work experience",
    "education": "Educational background and qualifications",
    "formatting": "Overall readability and professional appearance",
}


class DetectedSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: SectionName
    content: str = Field(..., description="Section text, header line included")
    start_line: int = Field(..., ge=0, description="Index of the header line in the normalized text")
    end_line: int = Field(..., ge=0, description="Index of the last line belonging to the section")
    confidence: float = Field(default=0.9, gt=0.0, le=1.0)


class SkillMatch(BaseModel):
    count: int = 0
    found: List[str] = Field(default_factory=list)


class VerbMatch(BaseModel):
    count: int = 0
    found: List[str] = Field(default_factory=list)


class QuantificationMatch(BaseModel):
    count: int = 0
    examples: List[str] = Field(default_factory=list, description="First 10 matches, in pattern order")


class SocialProfiles(BaseModel):
    linkedin: bool = False
    github: bool = False
    portfolio: bool = False
    profiles: List[str] = Field(default_factory=list)


class ContactInfo(BaseModel):
    has_email: bool = False
    has_phone: bool = False
    has_linkedin: bool = False
    has_github: bool = False
    has_location: bool = False
    completeness: int = Field(default=0, ge=0, le=100, description="Weighted completeness percentage")


class YearsOfExperience(BaseModel):
    total_years: int = 0
    statements: List[str] = Field(default_factory=list)


class FeedbackItem(BaseModel):
    """One explanation of a point awarded or withheld by a scoring rule."""
    type: FeedbackType
    message: str
    tag: str = Field(..., description="Rule that produced this item (e.g. 'action_verbs', 'linkedin')")

    @computed_field
    @property
    def icon(self) -> str:
        return FEEDBACK_ICONS[self.type]

    @computed_field
    @property
    def passed(self) -> bool:
        return self.type == "success"


class CategoryScore(BaseModel):
    category: CategoryName
    score: int = Field(..., ge=0)
    max_score: int = Field(..., gt=0)
    feedback: List[FeedbackItem] = Field(default_factory=list)

    @computed_field
    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self.category]

    @computed_field
    @property
    def description(self) -> str:
        return CATEGORY_DESCRIPTIONS[self.category]


class Recommendation(BaseModel):
    priority: int = Field(..., ge=1, description="1-based, ascending")
    title: str
    description: str
    category: CategoryName
    impact: Impact


class ResultMetadata(BaseModel):
    word_count: int
    line_count: int
    estimated_pages: int
    sections_detected: List[SectionName] = Field(default_factory=list)
    years_of_experience: int = 0
    contact_completeness: int = 0
    social_profiles: List[str] = Field(default_factory=list)
    skills_found: List[str] = Field(default_factory=list)
    version: str


class ScoreResult(BaseModel):
    total_score: int = Field(..., ge=0, le=100)
    max_score: int = 100
    breakdown: Dict[CategoryName, CategoryScore]
    recommendations: List[Recommendation] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list, description="General advice, independent of individual rules")
    grade: str
    message: str
    metadata: ResultMetadata


class ParsedDocument(BaseModel):
    """Input handed to the scoring core by the extraction collaborator."""
    text: str
    word_count: Optional[int] = Field(default=None, ge=0, description="Counted from text when omitted")
    sections: Optional[List[DetectedSection]] = Field(
        default=None,
        description="Pre-detected sections; None means the core detects them",
    )
    file_type: Optional[FileType] = None


class FileInfo(BaseModel):
    file_name: str
    file_size: int
    file_type: FileType
    processed_at: str = Field(..., description="ISO-8601 UTC timestamp")
    processing_time_ms: float


class ScoreResponse(BaseModel):
    success: bool = True
    result: ScoreResult
    file: FileInfo
