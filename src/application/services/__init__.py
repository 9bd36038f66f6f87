"""
Application Services

Responsibility:
    Orchestration services that coordinate domain services and
    infrastructure components.

Contains:
    - MatchingUseCase: id-based candidate search and match confirmation

Does NOT contain:
    - Domain business logic (use Domain services)
    - Direct infrastructure calls (use dependency injection)
"""

from src.application.services.matching_use_case import MatchingUseCase

__all__ = ["MatchingUseCase"]
