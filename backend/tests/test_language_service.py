"""
CodeBoard Backend: Language Service Unit Tests
===============================================

What we test:
    ✅ Detection through the service, with configured and explicit styles
    ✅ Declared language takes precedence and is normalized
    ✅ Content size limit and label style validation
    ✅ Rule-table listing and lookup (including NotFoundError)
"""

import pytest

from codeboard.classifier import DetectionMethod
from codeboard.config import settings
from codeboard.exceptions import NotFoundError, ValidationError


class TestDetect:

    def test_detects_from_content(self, service, snippets):
        result = service.detect(snippets["java"])
        assert result.language == "java"
        assert result.display_label == "Java"
        assert result.method is DetectionMethod.SCORER

    def test_configured_style_is_default(self, service, snippets, monkeypatch):
        monkeypatch.setattr(settings, "label_style", "emoji")
        assert service.detect(snippets["python"]).display_label == "🐍 Python"

    def test_explicit_style_overrides_config(self, service, snippets, monkeypatch):
        monkeypatch.setattr(settings, "label_style", "emoji")
        assert service.detect(snippets["python"], label_style="plain").display_label == "Python"

    def test_unknown_style_rejected(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service.detect("x", label_style="fancy")
        assert exc_info.value.field == "label_style"


class TestDeclaredLanguage:

    def test_declared_language_wins(self, service, snippets):
        result = service.detect(snippets["java"], declared_language="py")
        assert result.language == "python"
        assert result.method is DetectionMethod.DECLARED

    def test_declared_unknown_language_kept(self, service):
        result = service.detect("anything", declared_language="Haskell")
        assert result.language == "haskell"
        assert result.display_label == "haskell"

    @pytest.mark.parametrize("declared", [None, "", "   "])
    def test_blank_declared_language_detects(self, service, snippets, declared):
        result = service.detect(snippets["rust"], declared_language=declared)
        assert result.language == "rust"
        assert result.method is DetectionMethod.SCORER


class TestContentLimit:

    def test_content_over_limit_rejected(self, service, monkeypatch):
        monkeypatch.setattr(settings, "max_content_length", 1000)
        with pytest.raises(ValidationError) as exc_info:
            service.detect("x" * 1001)
        assert exc_info.value.field == "content"
        assert exc_info.value.context["max_length"] == 1000

    def test_content_at_limit_accepted(self, service, monkeypatch):
        monkeypatch.setattr(settings, "max_content_length", 1000)
        assert service.detect("a" * 1000).language == "text"


class TestListing:

    def test_list_languages(self, service):
        result = service.list_languages()
        assert result.total_count == 17
        assert result.languages[0].name == "fortran"
        assert result.languages[-1].name == "shell"

    def test_language_info(self, service):
        info = service.get_language("python")
        assert info.display_label == "Python"
        assert info.priority == 7
        assert info.signature_count == 7
        assert info.exclusion_count == 1
        assert "py" in info.aliases

    def test_lookup_by_alias(self, service):
        assert service.get_language("rs").name == "rust"

    def test_unknown_language(self, service):
        with pytest.raises(NotFoundError):
            service.get_language("cobol")
