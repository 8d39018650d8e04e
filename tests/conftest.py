import pytest

from snippetmind.config import ModelConfig
from snippetmind.serve.api import create_app


class FakeClient:
    """Stands in for ModelClient; records every prompt it is given"""

    def __init__(self, text="", image=None, error=None):
        self.text = text
        self.image = image
        self.error = error
        self.prompts = []

    def generate_text(self, prompt):
        self.prompts.append(prompt)
        if isinstance(self.error, Exception):
            raise self.error
        if self.error:
            return None, self.error
        return self.text, None

    def generate_image(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            return None, self.error
        return self.image, None


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def config():
    return ModelConfig(api_key="test-key")


@pytest.fixture
def app(config, fake_client):
    app = create_app(config=config, client=fake_client)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def http(app):
    return app.test_client()
