"""
CodeBoard Backend: Language Labels
===================================

What:  Maps language identifiers to the strings shown next to a snippet.
How:   Two fixed lookup tables, one per label style:

       plain  "Python", "C++", "Text"          (canonical)
       emoji  "🐍 Python", "🔵 C++", "📄 Text"  (legacy cards)

       Identifiers missing from a table are echoed back, with the generic
       tag glyph in emoji style.
"""

from typing import Dict

PLAIN = "plain"
EMOJI = "emoji"
LABEL_STYLES = frozenset({PLAIN, EMOJI})

TAG_GLYPH = "🏷️"

DISPLAY_NAMES: Dict[str, str] = {
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "react": "React",
    "python": "Python",
    "java": "Java",
    "cpp": "C++",
    "c": "C",
    "csharp": "C#",
    "php": "PHP",
    "ruby": "Ruby",
    "go": "Go",
    "rust": "Rust",
    "swift": "Swift",
    "kotlin": "Kotlin",
    "scala": "Scala",
    "fortran": "Fortran",
    "html": "HTML",
    "css": "CSS",
    "scss": "SCSS",
    "less": "LESS",
    "sql": "SQL",
    "json": "JSON",
    "xml": "XML",
    "yaml": "YAML",
    "bash": "Bash",
    "shell": "Shell",
    "powershell": "PowerShell",
    "dockerfile": "Dockerfile",
    "markdown": "Markdown",
    "plaintext": "Text",
    "text": "Text",
    "code": "Code",
}

EMOJI_LABELS: Dict[str, str] = {
    "javascript": "🟨 JavaScript",
    "typescript": "🔷 TypeScript",
    "react": "⚛️ React",
    "python": "🐍 Python",
    "java": "☕ Java",
    "cpp": "🔵 C++",
    "c": "🔵 C",
    "csharp": "🟦 C#",
    "php": "🐘 PHP",
    "ruby": "💎 Ruby",
    "go": "🐹 Go",
    "rust": "🦀 Rust",
    "swift": "🍎 Swift",
    "kotlin": "🅺 Kotlin",
    "scala": "🎼 Scala",
    "fortran": "🧮 Fortran",
    "html": "🌐 HTML",
    "css": "🎨 CSS",
    "scss": "🎨 SCSS",
    "less": "🎨 LESS",
    "sql": "🗄️ SQL",
    "json": "📋 JSON",
    "xml": "📄 XML",
    "yaml": "⚙️ YAML",
    "bash": "🐚 Bash",
    "shell": "🐚 Shell",
    "powershell": "🔷 PowerShell",
    "dockerfile": "🐳 Dockerfile",
    "markdown": "📝 Markdown",
    "plaintext": "📄 Text",
    "text": "📄 Text",
    "code": "💻 Code",
}


def format_label(language: str, style: str = PLAIN) -> str:
    """Display string for `language`; unknown styles render as plain."""
    if style == EMOJI:
        return EMOJI_LABELS.get(language, f"{TAG_GLYPH} {language}")
    return DISPLAY_NAMES.get(language, language)
