"""
CodeBoard Backend: Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the test suite.
How:   pytest auto-discovers this file; fixtures are function-scoped.

Fixtures:
    ├── service:      Fresh LanguageService over the default rule table
    ├── snippets:     Representative pasted snippets keyed by language
    └── test_client:  HTTPX AsyncClient bound to the FastAPI app
"""

import os

# Pin settings before any codeboard import reads the environment.
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LABEL_STYLE"] = "plain"
os.environ["MAX_CONTENT_LENGTH"] = "100000"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from codeboard.services.language_service import LanguageService


@pytest.fixture
def service():
    return LanguageService()


@pytest.fixture
def snippets():
    """Pasted snippets with the language each should be detected as."""
    return {
        "python": "def foo():\n    print('hi')",
        "java": "public class Foo { public static void main(String[] args) {} }",
        "rust": "fn main() {\n    let mut x = 5;\n}",
        "go": 'package main\n\nimport "fmt"\n\nfunc main() {\n\tfmt.Println("hi")\n}',
        "sql": "SELECT id, name FROM users WHERE id = 1 ORDER BY name",
        "shell": '#!/bin/bash\necho "hello"\nexport PATH=/usr/bin',
        "html": "<!DOCTYPE html>\n<html>\n<body><div>Hi</div></body>\n</html>",
        "json": '{"name": "codeboard", "version": 1}',
        "typescript": "interface User {\n  name: string;\n  age: number;\n}",
    }


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from codeboard.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
