"""
Custom exceptions and error codes for the RecipeBox application.

This module provides:
- Structured error codes for categorized error handling
- Custom exception classes for specific failure scenarios
- Error response schema for consistent API responses
"""
from enum import Enum
from typing import Optional, Dict, Any, List
from pydantic import BaseModel


class ErrorCode(str, Enum):
    """
    Application-wide error codes for categorized error handling.

    Format: CATEGORY_SPECIFIC_ERROR
    Categories:
    - INGEST_*: Recipe file ingestion errors
    - RECIPE_*: Recipe related errors
    - INGREDIENT_*: Ingredient related errors
    - VALIDATION_*: Input validation errors
    - DATABASE_*: Database operation errors
    - EXTERNAL_*: External service errors
    """

    # Ingestion errors
    INGEST_PATH_RESOLUTION_FAILED = "INGEST_PATH_RESOLUTION_FAILED"
    INGEST_FILE_NOT_FOUND = "INGEST_FILE_NOT_FOUND"
    INGEST_FILE_PERMISSION_DENIED = "INGEST_FILE_PERMISSION_DENIED"
    INGEST_FILE_UNREADABLE = "INGEST_FILE_UNREADABLE"

    # Recipe-related errors
    RECIPE_NOT_FOUND = "RECIPE_NOT_FOUND"
    RECIPE_CREATE_FAILED = "RECIPE_CREATE_FAILED"
    RECIPE_UPDATE_FAILED = "RECIPE_UPDATE_FAILED"

    # Ingredient-related errors
    INGREDIENT_NOT_FOUND = "INGREDIENT_NOT_FOUND"
    INGREDIENT_ADD_FAILED = "INGREDIENT_ADD_FAILED"
    INGREDIENT_UPDATE_FAILED = "INGREDIENT_UPDATE_FAILED"

    # Validation errors
    VALIDATION_MISSING_FIELD = "VALIDATION_MISSING_FIELD"

    # Database errors
    DATABASE_QUERY_ERROR = "DATABASE_QUERY_ERROR"

    # External service errors
    EXTERNAL_LLM_FAILED = "EXTERNAL_LLM_FAILED"
    EXTERNAL_LLM_NOT_CONFIGURED = "EXTERNAL_LLM_NOT_CONFIGURED"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse(BaseModel):
    """Structured error response for API errors."""
    error_code: ErrorCode
    message: str
    details: Optional[Dict[str, Any]] = None

    model_config = {"use_enum_values": True}


class RecipeBoxError(Exception):
    """
    Base exception for all RecipeBox application errors.

    Provides structured error information for consistent error handling.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_response(self) -> ErrorResponse:
        """Convert exception to ErrorResponse for API output."""
        return ErrorResponse(
            error_code=self.error_code,
            message=self.message,
            details=self.details if self.details else None,
        )


# Ingestion-related exceptions

class PathResolutionError(RecipeBoxError):
    """Raised when a recipe file path cannot be turned into an absolute path."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Cannot resolve recipe file path '{path}': {reason}",
            error_code=ErrorCode.INGEST_PATH_RESOLUTION_FAILED,
            details={"path": path, "reason": reason},
            status_code=400,
        )


class FileReadError(RecipeBoxError):
    """Raised when a recipe file cannot be read as text."""

    NOT_FOUND = "not_found"
    PERMISSION = "permission"
    NOT_A_FILE = "not_a_file"
    DECODE = "decode"

    _CODES = {
        NOT_FOUND: (ErrorCode.INGEST_FILE_NOT_FOUND, 404),
        PERMISSION: (ErrorCode.INGEST_FILE_PERMISSION_DENIED, 403),
        NOT_A_FILE: (ErrorCode.INGEST_FILE_UNREADABLE, 422),
        DECODE: (ErrorCode.INGEST_FILE_UNREADABLE, 422),
    }

    def __init__(self, path: str, reason: str, message: str = None):
        error_code, status_code = self._CODES.get(
            reason, (ErrorCode.INGEST_FILE_UNREADABLE, 422)
        )
        self.reason = reason
        super().__init__(
            message=message or f"Cannot read recipe file '{path}' ({reason})",
            error_code=error_code,
            details={"path": path, "reason": reason},
            status_code=status_code,
        )


# Record-level exceptions

class ValidationError(RecipeBoxError):
    """Raised when records are missing a required field."""

    def __init__(self, field: str, indices: List[int], resource_type: str = "recipe"):
        super().__init__(
            message=(
                f"{len(indices)} {resource_type} record(s) missing required field "
                f"'{field}'; the batch was rejected"
            ),
            error_code=ErrorCode.VALIDATION_MISSING_FIELD,
            details={
                "field": field,
                "resource_type": resource_type,
                "indices": indices,
            },
            status_code=422,
        )


class PersistenceError(RecipeBoxError):
    """Raised when the database rejects a write."""

    def __init__(self, operation: str, reason: str, details: Dict[str, Any] = None):
        base_details = {"operation": operation, "reason": reason}
        if details:
            base_details.update(details)
        super().__init__(
            message=f"Database {operation} failed: {reason}",
            error_code=ErrorCode.DATABASE_QUERY_ERROR,
            details=base_details,
            status_code=500,
        )


# Resource lookup exceptions

class RecipeNotFoundError(RecipeBoxError):
    """Raised when a recipe is not found."""

    def __init__(self, recipe_id: str):
        super().__init__(
            message=f"Recipe '{recipe_id}' not found",
            error_code=ErrorCode.RECIPE_NOT_FOUND,
            details={"recipe_id": recipe_id},
            status_code=404,
        )


class IngredientNotFoundError(RecipeBoxError):
    """Raised when an ingredient is not found."""

    def __init__(self, ingredient_id: str):
        super().__init__(
            message=f"Ingredient '{ingredient_id}' not found",
            error_code=ErrorCode.INGREDIENT_NOT_FOUND,
            details={"ingredient_id": ingredient_id},
            status_code=404,
        )


# External service exceptions

class ChatCompletionError(RecipeBoxError):
    """Raised when the language model call fails."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Cooking assistant is unavailable: {reason}",
            error_code=ErrorCode.EXTERNAL_LLM_FAILED,
            details={"reason": reason},
            status_code=502,
        )


class LLMNotConfiguredError(RecipeBoxError):
    """Raised when no language model API key is configured."""

    def __init__(self):
        super().__init__(
            message="Cooking assistant is not configured. Please set OPENAI_API_KEY.",
            error_code=ErrorCode.EXTERNAL_LLM_NOT_CONFIGURED,
            status_code=503,
        )
