"""データモデル"""

from app.models.clinic import (
    Availability,
    Clinic,
    DentalClinic,
    ErrorResponse,
    SearchParams,
    VetClinic,
)

__all__ = [
    "Availability",
    "Clinic",
    "DentalClinic",
    "ErrorResponse",
    "SearchParams",
    "VetClinic",
]
