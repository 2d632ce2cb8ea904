"""Domain models package for ThreadPilot.

This package exports all Pydantic domain models with strict validation
and immutability.
"""

from .base import BaseModelConfig, IdentifiableModel
from .identifiers import PersonalIdentificationNumber, RegistrationNumber
from .insurance import Insurance, InsuranceType
from .vehicle import Vehicle

__all__ = [
    # Base models
    "BaseModelConfig",
    "IdentifiableModel",
    # Value objects
    "PersonalIdentificationNumber",
    "RegistrationNumber",
    # Insurance models
    "Insurance",
    "InsuranceType",
    # Vehicle models
    "Vehicle",
]
