"""
Description:
This module contains precompiled regex patterns for cleaning generation provider output
and classifying provider errors.

Dependencies:
- re: Python's built-in regular expression module for pattern matching.

Author: @kcaparas1630

"""

import re

# Compile regex patterns once for better performance
REGEX_PATTERNS = {
    'json_fence': re.compile(r"```json\n?"),
    'code_fence': re.compile(r"```\n?"),
    'quota_error': re.compile(r"quota|rate limit|429", re.IGNORECASE),
}
