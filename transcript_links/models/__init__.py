"""Domain models for the transcript link validator.

This package contains the domain model classes used throughout the application:
sheet rows, parsed year ranges / school facts, issue records and results.
"""

from .config_models import ValidatorConfig
from .issue_record import IssueRecord
from .issues import Gap, InvalidType, IssueSet, MissingLink, MissingSchoolName, MissingType, Overlap
from .row_data import Row
from .validation_result import ValidationResult
from .year_range import SchoolFact, YearRange

__all__ = [
    # Configuration models
    "ValidatorConfig",
    # Sheet models
    "Row",
    "YearRange",
    "SchoolFact",
    # Issue models
    "IssueSet",
    "MissingSchoolName",
    "MissingLink",
    "MissingType",
    "InvalidType",
    "Gap",
    "Overlap",
    "IssueRecord",
    # Results
    "ValidationResult",
]
