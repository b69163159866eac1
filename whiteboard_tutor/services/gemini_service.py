"""
GeminiService - question generation, hints and answer verification

Each call sends one prompt (optionally with the captured whiteboard image)
to a Gemini model and waits for the reply. There is no retry: failures are
logged and re-raised as AIServiceError subclasses carrying a user-facing
message.
"""

import base64
import binascii
import logging
from typing import Any, Dict, List, Optional, Union

import google.generativeai as genai

from ..config import Config
from .prompts import build_hint_prompt, build_question_prompt, build_verify_prompt
from .response_parser import (
    VerificationResult,
    clean_markdown,
    parse_verification_response,
    strip_data_url,
)

logger = logging.getLogger(__name__)


class AIServiceError(Exception):
    """Base error for generative AI calls."""
    pass


class QuestionGenerationError(AIServiceError):
    """Raised when a question could not be generated."""
    pass


class HintGenerationError(AIServiceError):
    """Raised when a hint could not be generated."""
    pass


class VerificationError(AIServiceError):
    """Raised when an answer could not be verified."""
    pass


Content = Union[str, List[Any]]


def build_image_part(image_base64: str, mime_type: str = 'image/png') -> Dict[str, Any]:
    """
    Build an inline image part from base64 PNG data.

    Raises:
        ValueError: if the data is not valid base64
    """
    try:
        data = base64.b64decode(strip_data_url(image_base64), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 image data: {e}") from e
    return {'mime_type': mime_type, 'data': data}


def _response_text(response) -> str:
    """
    Read the text of a model response.

    Blocked or truncated candidates can make response.text raise, so fall
    back to the first candidate's first part.
    """
    try:
        return response.text
    except ValueError:
        try:
            return response.candidates[0].content.parts[0].text
        except (AttributeError, IndexError) as e:
            raise ValueError("Model returned no text") from e


class GeminiService:
    """
    Client for the three tutoring calls.

    Usage:
        service = GeminiService(api_key=Config.get_api_key())
        question = service.generate_question("Maths", 9)
        hint = service.generate_hint(question, board_png_base64)
        result = service.verify_answer(question, board_png_base64)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: str = Config.GEMINI_MODEL,
        model=None
    ):
        self._model_name = model_name
        if model is None:
            if api_key is None:
                api_key = Config.get_api_key()
            if not api_key:
                logger.warning(f"No Gemini API key configured (set {Config.API_KEY_ENV_VAR})")
            genai.configure(api_key=api_key)
            model = genai.GenerativeModel(model_name)
        self._model = model

    @property
    def model_name(self) -> str:
        return self._model_name

    def _generate(self, contents: Content) -> str:
        response = self._model.generate_content(contents)
        return _response_text(response)

    # ==================== Tutoring Calls ====================

    def generate_question(self, subject: str, class_level: int) -> str:
        """
        Generate one new question for a subject and class.

        Raises:
            QuestionGenerationError: on any provider or network failure
        """
        try:
            prompt = build_question_prompt(subject, class_level)
            question = self._generate(prompt).strip()
            if not question:
                raise ValueError("Model returned an empty question")
            logger.info(f"Generated question: {question}")
            return question
        except Exception as e:
            logger.error(f"Error generating question: {e}")
            raise QuestionGenerationError(
                "Failed to generate question. Please check your API key and internet connection."
            ) from e

    def generate_hint(self, question: str, image_base64: Optional[str] = None) -> str:
        """
        Generate a hint, reading the student's board when an image is given.

        Images shorter than Config.MIN_CAPTURE_LENGTH are treated as absent
        and a general "where to start" hint is produced instead.

        Raises:
            HintGenerationError: on any provider or network failure
        """
        has_work = bool(image_base64) and len(image_base64) > Config.MIN_CAPTURE_LENGTH
        logger.info(f"Generating {'contextual' if has_work else 'general'} hint")

        try:
            prompt = build_hint_prompt(question, with_work=has_work)
            if has_work:
                contents: Content = [prompt, build_image_part(image_base64)]
            else:
                contents = prompt
            hint = self._generate(contents).strip()
            logger.info(f"Generated hint: {hint}")
            return clean_markdown(hint)
        except Exception as e:
            logger.error(f"Error generating hint: {e}")
            raise HintGenerationError("Failed to generate hint. Please try again.") from e

    def verify_answer(self, question: str, image_base64: str) -> VerificationResult:
        """
        Grade the handwritten solution in image_base64.

        Raises:
            VerificationError: on any provider or network failure. Unusual
            reply formats do not raise, see parse_verification_response.
        """
        logger.info(f"Verifying answer (image data length: {len(image_base64 or '')})")
        try:
            contents = [build_verify_prompt(question), build_image_part(image_base64)]
            response_text = self._generate(contents)
        except Exception as e:
            logger.error(f"Error verifying answer: {e}")
            raise VerificationError("Failed to verify answer. Please try again.") from e

        logger.debug(f"Verification reply: {response_text}")
        return parse_verification_response(response_text)


__all__ = [
    'AIServiceError',
    'QuestionGenerationError',
    'HintGenerationError',
    'VerificationError',
    'GeminiService',
    'build_image_part',
]
