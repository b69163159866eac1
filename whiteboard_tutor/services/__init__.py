"""
Services for Whiteboard Tutor
"""

from .response_parser import VerificationResult, clean_markdown, parse_verification_response
from .gemini_service import (
    AIServiceError,
    QuestionGenerationError,
    HintGenerationError,
    VerificationError,
    GeminiService,
)

__all__ = [
    'VerificationResult',
    'clean_markdown',
    'parse_verification_response',
    'AIServiceError',
    'QuestionGenerationError',
    'HintGenerationError',
    'VerificationError',
    'GeminiService',
]
