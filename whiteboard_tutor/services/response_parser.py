"""
Parsing helpers for generative model replies.

Model replies are free text. The verification reply is asked to be JSON but
often arrives wrapped in code fences, with raw control characters or with
broken escaping, so parsing degrades step by step and never raises.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class VerificationResult:
    """Outcome of grading a handwritten solution."""
    is_correct: bool
    feedback: str
    correct_answer: Optional[str] = None


_DATA_URL_PREFIX = re.compile(r'^data:image/\w+;base64,')
_FENCED_JSON = re.compile(r'```(?:json)?\s*(\{[\s\S]*\})\s*```')
_BARE_JSON = re.compile(r'(\{[\s\S]*\})')
_CONTROL_CHARS = re.compile(r'[\x00-\x1f]')
_FEEDBACK_FIELD = re.compile(r'"feedback"\s*:\s*"([^"]*(?:\\.[^"]*)*)"')
_ANSWER_FIELD = re.compile(r'"correctAnswer"\s*:\s*"([^"]*(?:\\.[^"]*)*)"')


def clean_markdown(text: Optional[str]) -> Optional[str]:
    """
    Strip markdown formatting from model output.

    Removes bold, italic, inline code, code fences and heading markers,
    then collapses all whitespace to single spaces.
    """
    if not text:
        return text

    text = re.sub(r'\*\*(.+?)\*\*', r'\1', text)
    text = re.sub(r'__(.+?)__', r'\1', text)
    text = re.sub(r'\*(.+?)\*', r'\1', text)
    text = re.sub(r'_(.+?)_', r'\1', text)
    text = re.sub(r'`(.+?)`', r'\1', text)
    text = re.sub(r'```[\s\S]*?```', lambda m: m.group(0).replace('```', ''), text)
    text = re.sub(r'^#+\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\s+', ' ', text)
    return text.strip()


def strip_data_url(image_base64: str) -> str:
    """Remove a 'data:image/...;base64,' prefix if present."""
    return _DATA_URL_PREFIX.sub('', image_base64 or '')


def extract_json_block(text: str) -> Optional[str]:
    """Find the JSON object in a reply, preferring a fenced block."""
    match = _FENCED_JSON.search(text) or _BARE_JSON.search(text)
    return match.group(1) if match else None


def _keyword_verdict(text: str) -> bool:
    lowered = text.lower()
    return 'correct' in lowered and 'incorrect' not in lowered


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == 'true'
    return value is True


def _optional_answer(value) -> Optional[str]:
    if value is None:
        return None
    cleaned = clean_markdown(str(value))
    return cleaned or None


def parse_verification_response(response_text: str) -> VerificationResult:
    """
    Turn a verification reply into a VerificationResult.

    Order of attempts:
    1. JSON object (fenced or bare) with control characters removed
    2. Field-by-field regex extraction from the broken JSON
    3. Keyword verdict over the whole reply
    """
    response_text = response_text or ''
    json_string = extract_json_block(response_text)

    if json_string is None:
        logger.warning("Verification reply had no JSON object, using keyword fallback")
        return VerificationResult(
            is_correct=_keyword_verdict(response_text),
            feedback=clean_markdown(response_text) or '',
            correct_answer=None
        )

    json_string = _CONTROL_CHARS.sub('', json_string)

    try:
        data = json.loads(json_string)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    except ValueError as e:
        logger.warning(f"Verification JSON did not parse ({e}), extracting fields manually")
        feedback_match = _FEEDBACK_FIELD.search(json_string)
        answer_match = _ANSWER_FIELD.search(json_string)

        feedback = feedback_match.group(1).replace('\\n', '\n') if feedback_match else response_text
        answer = answer_match.group(1).replace('\\n', '\n') if answer_match else None

        return VerificationResult(
            is_correct=('"isCorrect": true' in json_string or '"isCorrect":true' in json_string),
            feedback=clean_markdown(feedback) or '',
            correct_answer=_optional_answer(answer)
        )

    return VerificationResult(
        is_correct=_as_bool(data.get('isCorrect')),
        feedback=clean_markdown(str(data.get('feedback') or '')) or '',
        correct_answer=_optional_answer(data.get('correctAnswer'))
    )


__all__ = [
    'VerificationResult',
    'clean_markdown',
    'strip_data_url',
    'extract_json_block',
    'parse_verification_response',
]
