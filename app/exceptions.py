"""
Custom exception hierarchy for the TalentScope analytics service.
"""

from typing import Dict, Any

class TalentScopeException(Exception):
    """Base exception for TalentScope application."""
    def __init__(self, message: str, context: Dict[str, Any] = None):
        super().__init__(message)
        self.context = context or {}

class InvalidInputError(TalentScopeException):
    """Raised when scoring or aggregation input is outside its documented range."""
    pass

class ConfigurationError(TalentScopeException):
    """Raised when there are configuration issues."""
    pass

class CollaboratorError(TalentScopeException):
    """Base exception for failures of external interview-data services."""
    pass

class RecordsFetchError(CollaboratorError):
    """Raised when interview records or results cannot be fetched."""
    pass

class ApprovalActionError(CollaboratorError):
    """Raised when the approval endpoint rejects or fails an action."""
    pass
