"""
Pydantic Schemas - Records, Request/Response Validation

All API request and response schemas in one file for simplicity.
Stored records (profiles, jobs, matches, service orders) use the same
models the API returns.
"""

from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import Optional, List, Any, Dict
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class EducationLevel(str, Enum):
    none = "none"
    primary = "primary"
    secondary = "secondary"
    vocational = "vocational"
    bachelor = "bachelor"
    master = "master"
    phd = "phd"


class Difficulty(str, Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


class ServiceType(str, Enum):
    basic_match = "basic_match"
    detailed_analysis = "detailed_analysis"
    full_guidance = "full_guidance"
    premium_support = "premium_support"


class PaymentStatus(str, Enum):
    pending = "pending"
    completed = "completed"
    failed = "failed"


class DocumentType(str, Enum):
    cover_letter = "cover_letter"
    resume_summary = "resume_summary"
    action_plan = "action_plan"


class ChatRole(str, Enum):
    user = "user"
    assistant = "assistant"


# ============================================================
# SHARED PIECES
# ============================================================

class SalaryRange(BaseModel):
    min: float = Field(..., ge=0)
    max: float = Field(..., ge=0)
    currency: str = "USD"

    @model_validator(mode="after")
    def check_order(self):
        if self.max < self.min:
            raise ValueError("max must be greater than or equal to min")
        return self


class WorkExperience(BaseModel):
    title: str
    industry: str
    years_of_experience: float = Field(0, ge=0)
    description: Optional[str] = None


class RequiredStep(BaseModel):
    step: int
    title: str
    description: str = ""
    estimated_time: str = ""
    cost: float = 0


# ============================================================
# USER PROFILE SCHEMAS
# ============================================================

class UserProfileCreate(BaseModel):
    email: EmailStr
    full_name: str = Field(..., min_length=2, max_length=100)
    age: int = Field(..., ge=16, le=80)
    nationality: str = Field(..., min_length=2)
    current_location: str = Field(..., min_length=2)
    languages: List[str] = Field(..., min_length=1)
    education: EducationLevel
    work_experience: List[WorkExperience] = []
    skills: List[str] = Field(..., min_length=1)
    preferred_countries: List[str] = Field(..., min_length=1)
    preferred_industries: List[str] = Field(..., min_length=1)
    salary_expectation: SalaryRange
    willing_to_relocate: bool = True
    has_passport: bool = False


class UserProfileUpdate(BaseModel):
    email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(None, min_length=2, max_length=100)
    age: Optional[int] = Field(None, ge=16, le=80)
    nationality: Optional[str] = Field(None, min_length=2)
    current_location: Optional[str] = Field(None, min_length=2)
    languages: Optional[List[str]] = Field(None, min_length=1)
    education: Optional[EducationLevel] = None
    work_experience: Optional[List[WorkExperience]] = None
    skills: Optional[List[str]] = Field(None, min_length=1)
    preferred_countries: Optional[List[str]] = Field(None, min_length=1)
    preferred_industries: Optional[List[str]] = Field(None, min_length=1)
    salary_expectation: Optional[SalaryRange] = None
    willing_to_relocate: Optional[bool] = None
    has_passport: Optional[bool] = None


class UserProfile(UserProfileCreate):
    id: str
    created_at: datetime


# ============================================================
# JOB OPPORTUNITY SCHEMAS
# ============================================================

class JobOpportunityCreate(BaseModel):
    title: str = Field(..., min_length=2, max_length=200)
    company: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    industry: str = Field(..., min_length=1)
    description: str
    requirements: List[str] = []
    salary: SalaryRange
    languages_required: List[str] = []
    visa_sponsorship: bool = False
    experience_required: int = Field(0, ge=0)
    education_required: EducationLevel = EducationLevel.none
    is_active: bool = True


class JobOpportunityUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=2, max_length=200)
    company: Optional[str] = Field(None, min_length=1)
    country: Optional[str] = Field(None, min_length=1)
    city: Optional[str] = Field(None, min_length=1)
    industry: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    requirements: Optional[List[str]] = None
    salary: Optional[SalaryRange] = None
    languages_required: Optional[List[str]] = None
    visa_sponsorship: Optional[bool] = None
    experience_required: Optional[int] = Field(None, ge=0)
    education_required: Optional[EducationLevel] = None
    is_active: Optional[bool] = None


class JobOpportunity(JobOpportunityCreate):
    id: str
    created_at: datetime


# ============================================================
# JOB MATCH SCHEMAS
# ============================================================

class JobMatchCreate(BaseModel):
    user_id: str
    job_id: str
    match_score: int = Field(..., ge=0, le=100)
    match_analysis: str
    required_steps: List[RequiredStep] = []
    overall_difficulty: Difficulty = Difficulty.medium
    success_probability: int = Field(..., ge=0, le=100)


class JobMatch(JobMatchCreate):
    id: str
    created_at: datetime


class JobMatchWithJob(JobMatch):
    job: Optional[JobOpportunity] = None


class MatchJobsRequest(BaseModel):
    user_id: Optional[str] = None


class MatchJobsResponse(BaseModel):
    matches: List[JobMatchWithJob]


# ============================================================
# CHAT SCHEMAS
# ============================================================

class ChatTurn(BaseModel):
    role: ChatRole
    content: str


class ChatRequest(BaseModel):
    message: Optional[str] = None
    context: Optional[Any] = None
    history: List[ChatTurn] = []


class ChatResponse(BaseModel):
    message: str
    timestamp: datetime


# ============================================================
# DOCUMENT SCHEMAS
# ============================================================

class DocumentRequest(BaseModel):
    user_id: str
    job_id: str
    document_type: DocumentType = DocumentType.cover_letter


class DocumentResponse(BaseModel):
    document_type: DocumentType
    title: str
    content: str
    ai_generated: bool
    generated_at: datetime


# ============================================================
# PRICING SCHEMAS
# ============================================================

class PricingTier(BaseModel):
    id: str
    name: str
    price: int
    currency: str = "usd"
    features: List[str]
    description: str
    service_type: ServiceType


class ServiceOrderCreate(BaseModel):
    user_id: str
    tier_id: str


class ServiceOrderStatusUpdate(BaseModel):
    status: PaymentStatus
    payment_id: Optional[str] = None


class ServiceOrder(BaseModel):
    id: str
    user_id: str
    service_type: ServiceType
    price: int = Field(..., ge=0)
    currency: str = "usd"
    features: List[str]
    is_active: bool = True
    payment_id: Optional[str] = None
    status: PaymentStatus = PaymentStatus.pending
    created_at: datetime


# ============================================================
# ANALYTICS SCHEMAS
# ============================================================

class CountEntry(BaseModel):
    name: str
    count: int


class JobStatsResponse(BaseModel):
    total_jobs: int
    visa_sponsorship_jobs: int
    visa_sponsorship_percentage: int
    top_countries: List[CountEntry]
    top_industries: List[CountEntry]


# ============================================================
# ORGANIZE SCHEMAS
# ============================================================

class UploadedFileInfo(BaseModel):
    filename: str
    content_type: str = ""
    size: int = 0
    size_label: str = "0 Bytes"


class OrganizeSuggestion(BaseModel):
    id: int
    title: str
    description: str
    type: str
    confidence: int
    files: int
    action: str


class OrganizeResponse(BaseModel):
    files: List[UploadedFileInfo]
    suggestions: List[OrganizeSuggestion]


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True


class HealthResponse(BaseModel):
    status: str
    ai: str
    records: Dict[str, int]
