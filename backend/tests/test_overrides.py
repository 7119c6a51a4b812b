"""
CodeBoard Backend: Fenced-Code Override Unit Tests
===================================================

What we test:
    ✅ Short tags map to canonical identifiers
    ✅ Unknown tags pass through lowercased
    ✅ Only a fence at the start of a line counts
    ✅ A declared tag beats pattern scoring
"""

import pytest

from codeboard.classifier import DetectionMethod, detect_language, resolve_override
from codeboard.classifier.overrides import aliases_for, normalize_language


class TestResolveOverride:

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("py", "python"),
            ("ts", "typescript"),
            ("rs", "rust"),
            ("js", "javascript"),
            ("sh", "shell"),
            ("c++", "cpp"),
            ("C#", "csharp"),
            ("f90", "fortran"),
            ("python", "python"),
        ],
    )
    def test_alias_table(self, tag, expected):
        assert resolve_override(f"```{tag}\nbody\n```") == expected

    def test_unknown_tag_is_lowercased(self):
        assert resolve_override("```Elixir\nIO.puts 1\n```") == "elixir"

    def test_no_fence(self):
        assert resolve_override("def foo(): pass") is None
        assert resolve_override("") is None

    def test_fence_without_tag(self):
        assert resolve_override("```\nfn main() {}\n```") is None

    def test_fence_must_start_a_line(self):
        assert resolve_override("inline ```py marker") is None

    def test_indented_fence(self):
        assert resolve_override("  ```js\nconsole.log(1)\n  ```") == "javascript"

    def test_fence_after_prose(self):
        text = "Here is the handler:\n```go\nfunc main() {}\n```"
        assert resolve_override(text) == "go"

    def test_first_tagged_fence_wins(self):
        text = "```py\nx = 1\n```\n\n```rs\nfn main() {}\n```"
        assert resolve_override(text) == "python"


class TestOverridePrecedence:

    def test_fenced_rust(self):
        result = detect_language("```rs\nfn main() {}\n```")
        assert result.language == "rust"
        assert result.method is DetectionMethod.OVERRIDE
        assert result.display_label == "Rust"

    def test_tag_beats_scorer(self):
        text = "```python\npublic class Foo { public static void main(String[] args) {} }\n```"
        assert detect_language(text).language == "python"


class TestNormalize:

    def test_normalize_strips_and_lowercases(self):
        assert normalize_language("  PY ") == "python"
        assert normalize_language("Haskell") == "haskell"

    def test_aliases_for(self):
        assert aliases_for("python") == ["py", "python3"]
        assert aliases_for("fortran") == ["f", "f90"]
        assert aliases_for("sql") == []
