from typing import List

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """DTO for error responses"""
    error: str


class ValidationErrorDetail(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """DTO for 400 responses produced by request validation"""
    error: str = "Validation failed"
    details: List[ValidationErrorDetail]


class MessageResponse(BaseModel):
    success: bool = True
    message: str
