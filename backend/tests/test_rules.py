"""
CodeBoard Backend: Rule Table Unit Tests
=========================================

What we test:
    ✅ Default table shape and stable ordering
    ✅ Configuration defects are rejected when the table is built
    ✅ Patterns are case-insensitive and pluggable through TextPattern
"""

import pytest

from codeboard.classifier import DEFAULT_RULE_TABLE, LanguageRule, RuleTable, classify
from codeboard.classifier.patterns import RegexPattern, TextPattern, regex


class SubstringPattern:
    """A non-regex TextPattern used to check the matching seam."""

    def __init__(self, needle):
        self.needle = needle

    def matches(self, text):
        return self.needle in text


class TestDefaultTable:

    def test_order_is_stable(self):
        assert DEFAULT_RULE_TABLE.names == (
            "fortran", "rust", "go", "java", "kotlin", "swift", "python", "cpp",
            "c", "sql", "html", "css", "typescript", "react", "javascript",
            "json", "shell",
        )
        assert [r.name for r in DEFAULT_RULE_TABLE] == list(DEFAULT_RULE_TABLE.names)

    def test_priorities_are_positive(self):
        assert all(rule.priority > 0 for rule in DEFAULT_RULE_TABLE)

    def test_lookup(self):
        assert "python" in DEFAULT_RULE_TABLE
        assert DEFAULT_RULE_TABLE.get("python").priority == 7
        assert DEFAULT_RULE_TABLE.get("cobol") is None
        assert "cobol" not in DEFAULT_RULE_TABLE

    def test_known_exclusions(self):
        assert len(DEFAULT_RULE_TABLE.get("python").exclusion_patterns) == 1
        assert len(DEFAULT_RULE_TABLE.get("c").exclusion_patterns) == 3
        assert len(DEFAULT_RULE_TABLE.get("css").exclusion_patterns) == 1
        assert DEFAULT_RULE_TABLE.get("java").exclusion_patterns == ()


class TestTableValidation:

    def test_duplicate_name_rejected(self):
        rule = LanguageRule(name="x", signature_patterns=(regex("x"),), priority=1)
        with pytest.raises(ValueError, match="Duplicate"):
            RuleTable([rule, rule])

    @pytest.mark.parametrize("priority", [0, -3])
    def test_non_positive_priority_rejected(self, priority):
        rule = LanguageRule(name="x", signature_patterns=(regex("x"),), priority=priority)
        with pytest.raises(ValueError, match="priority"):
            RuleTable([rule])

    def test_rule_without_signatures_rejected(self):
        with pytest.raises(ValueError, match="signature"):
            RuleTable([LanguageRule(name="x", signature_patterns=(), priority=1)])


class TestPatterns:

    def test_regex_is_case_insensitive(self):
        assert regex("select").matches("SELECT * FROM t")

    def test_regex_searches_anywhere(self):
        assert regex(r"std::").matches("int main() { std::cout; }")
        assert not regex(r"std::").matches("stdio")

    def test_regex_is_a_text_pattern(self):
        pattern = regex("a")
        assert isinstance(pattern, RegexPattern)
        assert isinstance(pattern, TextPattern)
        assert pattern.source == "a"

    def test_custom_pattern_plugs_into_table(self):
        table = RuleTable([
            LanguageRule(name="pascal", signature_patterns=(SubstringPattern("begin"),), priority=2),
        ])
        assert classify("begin end.", table) == "pascal"
