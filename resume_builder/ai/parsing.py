# resume_builder/ai/parsing.py
import json
import logging
import re
from typing import Any, Dict, List, Optional

from resume_builder.ai.exceptions import InvalidAIResponseError

logger = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r'```(?:json)?[ \t]*\n?', re.IGNORECASE)
_BULLET_MARKER = re.compile(r'^(?:[-•*]\s*|\d+[.)]\s+)')


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences the model wrapped around its answer"""
    return _FENCE_PATTERN.sub('', text or '').strip()


def extract_json_object(text: str) -> Optional[str]:
    """
    Return the first balanced top-level {...} block in text

    Braces inside JSON strings are ignored. Returns None when no complete
    object is found.
    """
    start = text.find('{')
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == '\\':
                    escaped = True
                elif ch == '"':
                    in_string = False
            elif ch == '"':
                in_string = True
            elif ch == '{':
                depth += 1
            elif ch == '}':
                depth -= 1
                if depth == 0:
                    return text[start:i + 1]
        # Unbalanced from this brace; try the next one
        start = text.find('{', start + 1)
    return None


def parse_json_response(text: str) -> Dict[str, Any]:
    """
    Parse model output as a JSON object

    Raises:
        InvalidAIResponseError: If no JSON object can be recovered
    """
    content = strip_code_fences(text)
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        block = extract_json_object(content)
        if block is None:
            logger.error(f"AI returned invalid JSON: {content[:200]}")
            raise InvalidAIResponseError('AI returned invalid JSON')
        try:
            data = json.loads(block)
        except json.JSONDecodeError as e:
            logger.error(f"AI returned invalid JSON: {block[:200]}")
            raise InvalidAIResponseError('AI returned invalid JSON') from e

    if not isinstance(data, dict):
        raise InvalidAIResponseError('AI returned invalid JSON: expected an object')
    return data


def clean_bullet(text: str) -> str:
    """Clean up one AI-generated bullet"""
    text = text.strip().strip('"\'')

    # Remove markdown formatting
    text = re.sub(r'\*\*(.*?)\*\*', r'\1', text)

    # Remove bullet markers and numbering
    text = _BULLET_MARKER.sub('', text)

    return text.strip()


def clean_bullet_lines(text: str) -> List[str]:
    """One bullet per non-empty line of model output"""
    bullets = []
    for line in strip_code_fences(text).splitlines():
        bullet = clean_bullet(line)
        if bullet:
            bullets.append(bullet)
    return bullets
