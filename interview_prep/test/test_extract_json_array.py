"""
Test JSON Array Extraction Module

This module tests that question arrays are recovered from provider output that
is fenced, padded with prose, or not JSON at all.

Dependencies:
- pytest: For testing framework
- interview_prep.helper.extract_json_array: The module being tested

Author: @kcaparas1630
"""

import pytest
from interview_prep.errors.exceptions import ParseError
from interview_prep.helper.extract_json_array import extract_json_array, find_balanced_array, strip_code_fences

class TestStripCodeFences:
    """Test code fence removal."""

    def test_json_fence(self):
        assert strip_code_fences('```json\n[1, 2]\n```') == '[1, 2]'

    def test_plain_fence(self):
        assert strip_code_fences('```\n[1, 2]\n```') == '[1, 2]'

    def test_no_fence(self):
        assert strip_code_fences('  [1, 2]  ') == '[1, 2]'

class TestFindBalancedArray:
    """Test secondary extraction of the first balanced array."""

    def test_array_inside_prose(self):
        text = 'Here are your questions: [{"question": "Q"}] Hope this helps!'
        assert find_balanced_array(text) == '[{"question": "Q"}]'

    def test_nested_arrays(self):
        assert find_balanced_array('x [[1], [2]] y') == '[[1], [2]]'

    def test_brackets_inside_strings_are_ignored(self):
        text = 'Sure: [{"question": "What does arr[0] return?", "category": "Arrays"}] done'
        assert find_balanced_array(text) == '[{"question": "What does arr[0] return?", "category": "Arrays"}]'

    def test_escaped_quotes_inside_strings(self):
        text = '[{"question": "Say \\"hi]\\" please"}] tail'
        assert find_balanced_array(text) == '[{"question": "Say \\"hi]\\" please"}]'

    def test_start_offset(self):
        assert find_balanced_array('[3] then [{"question": "Q"}]', start=1) == '[{"question": "Q"}]'

    def test_no_array(self):
        assert find_balanced_array('no brackets here') is None

    def test_unbalanced_array(self):
        assert find_balanced_array('[{"question": "Q"}') is None

class TestExtractJsonArray:
    """Test the two-stage parse."""

    def test_fenced_response(self):
        text = '```json\n[{"question":"Q","category":"C"}]\n```'
        assert extract_json_array(text) == [{"question": "Q", "category": "C"}]

    def test_bare_response(self):
        assert extract_json_array('[{"question":"Q","category":"C"}]') == [{"question": "Q", "category": "C"}]

    def test_prose_wrapped_response(self):
        text = 'Okay, here are the questions you asked for:\n[{"question":"Q","category":"C"}]\nGood luck!'
        assert extract_json_array(text) == [{"question": "Q", "category": "C"}]

    def test_bracketed_number_before_array_is_skipped(self):
        text = 'Here are [3] questions:\n[{"question":"A","category":"B"}]'
        assert extract_json_array(text) == [{"question": "A", "category": "B"}]

    def test_unparseable_block_before_array_is_skipped(self):
        text = 'See [note] below. [{"question":"A","category":"B"}]'
        assert extract_json_array(text) == [{"question": "A", "category": "B"}]

    def test_first_decodable_block_when_none_hold_objects(self):
        assert extract_json_array("Counts: [3] and [4, 5]") == [3]

    def test_non_array_json_is_returned_as_is(self):
        """Shape checking belongs to the caller."""
        assert extract_json_array('{"questions": []}') == {"questions": []}

    @pytest.mark.parametrize("text", [
        "I'm sorry, I can't help with that.",
        "",
        "[not json at all]",
        "[{\"question\": \"Q\",}",
    ])
    def test_unparseable_response_raises(self, text):
        with pytest.raises(ParseError):
            extract_json_array(text)

    def test_none_raises(self):
        with pytest.raises(ParseError, match="empty"):
            extract_json_array(None)

    def test_parse_error_keeps_raw_text(self):
        with pytest.raises(ParseError) as exc_info:
            extract_json_array("nothing useful")
        assert exc_info.value.raw_text == "nothing useful"
