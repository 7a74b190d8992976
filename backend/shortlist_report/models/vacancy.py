"""
Report input records - vacancy, candidates and raters

Records accept both the REST wire names (camelCase) and snake_case names.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class CandidateStatus(str, Enum):
    """Candidate status"""
    GENERAL_LIST = "general_list"
    LONG_LIST = "long_list"
    FOR_REVIEW = "for_review"
    DISQUALIFIED = "disqualified"


class GenderBucket(str, Enum):
    """Normalized gender bucket"""
    MALE = "Male"
    FEMALE = "Female"
    LGBTQI = "LGBTQI+"
    OTHER = "Other"


class VacancyScope(str, Enum):
    """Which vacancies a rater is assigned to"""
    NONE = "none"
    ALL = "all"
    ASSIGNMENT = "assignment"        # all vacancies of one assignment
    SPECIFIC = "specific"            # explicit item numbers


class Vacancy(BaseModel):
    """Job vacancy"""
    item_number: str = Field(..., alias="itemNumber")
    position: str | None = None
    assignment: str | None = None
    salary_grade: int | None = Field(default=None, alias="salaryGrade")

    model_config = {"populate_by_name": True, "frozen": True}


class Candidate(BaseModel):
    """Applicant for a vacancy"""
    full_name: str | None = Field(default=None, alias="fullName")
    status: CandidateStatus = CandidateStatus.GENERAL_LIST
    gender: str | None = None
    item_number: str | None = Field(default=None, alias="itemNumber")

    model_config = {"populate_by_name": True}

    @property
    def display_name(self) -> str:
        return self.full_name or "N/A"


class Signatory(BaseModel):
    """Rater printed in the "Noted by" section"""
    name: str | None = None
    position: str | None = None
    designation: str | None = None


class Rater(BaseModel):
    """Board member user record (upstream)"""
    name: str | None = None
    user_type: str = Field(default="rater", alias="userType")
    rater_type: str | None = Field(default=None, alias="raterType")
    position: str | None = None
    designation: str | None = None
    assigned_vacancies: VacancyScope = Field(default=VacancyScope.NONE, alias="assignedVacancies")
    assigned_assignment: str | None = Field(default=None, alias="assignedAssignment")
    assigned_item_numbers: list[str] = Field(default_factory=list, alias="assignedItemNumbers")

    model_config = {"populate_by_name": True}

    def covers(self, vacancy: Vacancy) -> bool:
        """Whether this rater's assignment scope includes the vacancy"""
        if self.assigned_vacancies == VacancyScope.ALL:
            return True
        if self.assigned_vacancies == VacancyScope.ASSIGNMENT:
            return bool(self.assigned_assignment) and self.assigned_assignment == vacancy.assignment
        if self.assigned_vacancies == VacancyScope.SPECIFIC:
            return vacancy.item_number in self.assigned_item_numbers
        return False

    def to_signatory(self) -> Signatory:
        return Signatory(name=self.name, position=self.position, designation=self.designation)
