from types import SimpleNamespace

import pytest

from deepread.config import Settings

ENV_VARS = ("OPENAI_API_KEY", "OPENAI_MODEL", "REPO_URL", "DIGEST_OUTPUT_DIR", "DIGEST_MAX_TOKENS")


def make_page(articles: int, title: str = "每日深读 - 测试") -> str:
    body = "\n".join(f"<article><h3>条目 {i}</h3></article>" for i in range(articles))
    return f"<!doctype html>\n<html><head><title>{title}</title></head><body>\n{body}\n</body></html>"


class FakeProducer:
    """Replays canned responses and records the prompts it was given."""

    def __init__(self, *responses, available=True):
        self.responses = list(responses)
        self.available = available
        self.calls = []

    def generate(self, system_prompt, user_prompt):
        self.calls.append((system_prompt, user_prompt))
        if not self.responses:
            return None
        return self.responses.pop(0)


class FakeCompletions:
    def __init__(self, content=None, error=None, choices=True):
        self.content = content
        self.error = error
        self.choices = choices
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        if not self.choices:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(completions: FakeCompletions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings(tmp_path):
    return Settings(api_key=None, base_url="https://example.com", output_dir=tmp_path)
