"""
Description:
Extract a JSON array of questions from raw generation provider output.
The provider is asked for a bare JSON array but often wraps it in markdown code
fences or surrounds it with prose. Parsing happens in two stages: the fence-stripped
text as a whole, then the balanced [...] blocks found in the raw text. The first
block that decodes to a list of objects wins, so a stray "[3]" in the prose does
not hide the real array after it.

Arguments:
- text: The raw text returned by the provider.

Returns:
- The decoded JSON value. Usually a list, but callers must check.

Dependencies:
- json: For decoding.
- interview_prep.constants.regex_patterns: For the precompiled code fence pattern.
- interview_prep.errors.exceptions: ParseError when neither stage succeeds.
- loguru: For logging parse failures.

Author: @kcaparas1630

"""
import json
from typing import Any, Optional, Tuple
from loguru import logger
from interview_prep.constants.regex_patterns import REGEX_PATTERNS
from interview_prep.errors.exceptions import ParseError

def strip_code_fences(text: str) -> str:
    """Remove ```json and ``` markers anywhere in the text."""
    text = REGEX_PATTERNS['json_fence'].sub('', text)
    text = REGEX_PATTERNS['code_fence'].sub('', text)
    return text.strip()

def _balanced_span(text: str, start: int = 0) -> Optional[Tuple[int, int]]:
    start = text.find('[', start)
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        char = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == '[':
            depth += 1
        elif char == ']':
            depth -= 1
            if depth == 0:
                return start, i + 1
    return None

def find_balanced_array(text: str, start: int = 0) -> Optional[str]:
    """
    Return the first balanced [...] substring of text at or after start, or None.

    Brackets inside JSON string literals are ignored so that a question like
    "What does arr[0] return?" does not end the match early.
    """
    span = _balanced_span(text, start)
    if span is None:
        return None
    return text[span[0]:span[1]]

def _is_object_list(value: Any) -> bool:
    return isinstance(value, list) and any(isinstance(item, dict) for item in value)

def extract_json_array(text: str) -> Any:
    if text is None:
        raise ParseError("AI response was empty", raw_text=text)

    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse AI response directly: {e}")
        logger.debug(f"Raw text: {text}")

    first_decoded = None
    found = False
    position = 0
    while True:
        span = _balanced_span(text, position)
        if span is None:
            break
        try:
            value = json.loads(text[span[0]:span[1]])
        except json.JSONDecodeError as e:
            logger.debug(f"Skipping unparseable bracket block: {e}")
            position = span[0] + 1
            continue
        if _is_object_list(value):
            return value
        if not found:
            first_decoded, found = value, True
        position = span[1]

    if found:
        return first_decoded

    logger.error("No parseable JSON array in AI response")
    raise ParseError("Failed to parse questions from AI response", raw_text=text)
