# Shared fixtures: a scripted model client and an app wired to it.

import pytest
from fastapi.testclient import TestClient

from pickbot.app import app, get_generator
from pickbot.generate import OptionGenerator

FOUR = '["one option here", "two option here", "three option here", "four option here"]'


class ScriptedClient:
    """Returns canned text (or raises) and records every call."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.model = "scripted"
        self.calls = []

    def generate(self, messages, params):
        self.calls.append((messages, params))
        if self.error is not None:
            raise self.error
        return self.text, {"engine": "scripted"}


@pytest.fixture
def scripted():
    return ScriptedClient


@pytest.fixture
def use_model():
    """Install a model client behind /api/chat; defaults to a valid JSON answer."""
    holder = {}

    def use(model_client):
        holder["gen"] = OptionGenerator(model_client=model_client)
        return model_client

    use(ScriptedClient(FOUR))
    app.dependency_overrides[get_generator] = lambda: holder["gen"]
    yield use
    app.dependency_overrides.clear()


@pytest.fixture
def client(use_model):
    return TestClient(app)
