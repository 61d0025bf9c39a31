"""Shared test fixtures."""

import pytest

from model_catalog.schemas.model import Model


@pytest.fixture
def make_model():
    """Factory building a valid Model, overriding any field."""

    def _make(model_id: str = "llama-3.1-8b-instant", **overrides) -> Model:
        fields = {
            "id": model_id,
            "object": "model",
            "created": 1693721698,
            "owned_by": "Meta",
            "active": True,
            "context_window": 131072,
        }
        fields.update(overrides)
        return Model(**fields)

    return _make


@pytest.fixture
def model_payload():
    """A decoded model-listing payload as returned by the provider."""
    return {
        "object": "list",
        "data": [
            {
                "id": "llama-3.1-8b-instant",
                "object": "model",
                "created": 1693721698,
                "owned_by": "Meta",
                "active": True,
                "context_window": 131072,
                "public_apps": None,
                "max_completion_tokens": 131072,
            },
            {
                "id": "whisper-large-v3",
                "object": "model",
                "created": 1693721698,
                "owned_by": "OpenAI",
                "active": True,
                "context_window": 448,
                "public_apps": None,
                "max_completion_tokens": 448,
            },
            {
                "id": "playai-tts",
                "object": "model",
                "created": 1740682117,
                "owned_by": "PlayAI",
                "active": True,
                "context_window": 8192,
                "public_apps": ["playground"],
                "max_completion_tokens": 8192,
            },
            {
                "id": "llama-guard-3-8b",
                "object": "model",
                "created": 1693721698,
                "owned_by": "Meta",
                "active": False,
                "context_window": 8192,
                "public_apps": None,
            },
        ],
    }
