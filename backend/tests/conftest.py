"""Shared test fixtures and helpers for catalog-search tests.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import json
import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import logfire
import pytest

from catalog_search.embeddings import VectorStore

# Ensure provider keys are present during test collection to avoid import errors.
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = (
    "FakeEmbeddingProvider",
    "TestEnv",
    "keyword_embedding",
)


class TestEnv:
    """Helper for managing environment variables in tests."""

    __test__ = False  # Prevent pytest from collecting this class

    def __init__(self) -> None:
        self.envars: dict[str, str | None] = {}

    def set(self, name: str, value: str) -> None:
        """Set an environment variable, saving the original value."""
        self.envars[name] = os.getenv(name)
        os.environ[name] = value

    def remove(self, name: str) -> None:
        """Remove an environment variable, saving the original value."""
        self.envars[name] = os.environ.pop(name, None)

    def reset(self) -> None:
        """Reset all modified environment variables to original values."""
        for name, value in self.envars.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value


def keyword_embedding(text: str) -> list[float]:
    """Map texts mentioning a watch to ``[1, 0]`` and everything else to ``[0, 1]``."""
    return [1.0, 0.0] if "Watch" in text else [0.0, 1.0]


@dataclass
class FakeEmbeddingProvider:
    """In-process embedding provider that records every call."""

    embed: Callable[[str], list[float]] = keyword_embedding
    document_calls: list[list[str]] = field(default_factory=list)
    query_calls: list[str] = field(default_factory=list)

    async def embed_documents(self, texts: Sequence[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        return [self.embed(text) for text in texts]

    async def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self.embed(text)


@pytest.fixture(scope="session", autouse=True)
def _configure_logfire() -> None:
    """Keep logfire local during tests."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def env() -> Iterator[TestEnv]:
    """Fixture for managing environment variables in tests."""
    test_env = TestEnv()
    yield test_env
    test_env.reset()


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def store() -> VectorStore:
    """Provide an empty vector store."""
    return VectorStore()


@pytest.fixture
def provider() -> FakeEmbeddingProvider:
    """Provide a keyword-based fake embedding provider."""
    return FakeEmbeddingProvider()


@pytest.fixture
def watch_catalog() -> list[dict[str, Any]]:
    """Single-product catalog used by end-to-end tests."""
    return [{"id": "p1", "name": "Watch", "description": "Steel watch", "price": 500}]


@pytest.fixture
def catalog_file(tmp_path: Path, watch_catalog: list[dict[str, Any]]) -> Path:
    """Write the watch catalog to a temporary JSON file."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps(watch_catalog), encoding="utf-8")
    return path


@pytest.fixture
def provider_factory() -> type[FakeEmbeddingProvider]:
    """Provide the fake provider class for tests that need custom embeddings."""
    return FakeEmbeddingProvider
