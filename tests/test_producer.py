import httpx
import openai

from deepread.producer import OfflineProducer, OpenAIProducer

from conftest import FakeCompletions, fake_client


def test_no_key_means_unavailable(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("client must not be built without a key")

    monkeypatch.setattr("deepread.producer.OpenAI", boom)
    producer = OpenAIProducer(api_key=None, model="gpt-4o")
    assert not producer.available
    assert producer.generate("sys", "user") is None


def test_sends_chat_request():
    completions = FakeCompletions(content="  <html></html>\n")
    producer = OpenAIProducer("sk-test", "gpt-4o-mini", max_tokens=1234, client=fake_client(completions))

    assert producer.generate("sys", "user") == "<html></html>"
    assert completions.kwargs == {
        "model": "gpt-4o-mini",
        "messages": [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "user"},
        ],
        "temperature": 0.2,
        "max_tokens": 1234,
    }


def test_api_error_maps_to_none():
    completions = FakeCompletions(error=openai.OpenAIError("connection reset"))
    producer = OpenAIProducer("sk-test", "gpt-4o", client=fake_client(completions))
    assert producer.generate("sys", "user") is None


def test_error_status_maps_to_none():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(500, request=request, json={"error": {"message": "server error"}})
    error = openai.APIStatusError("server error", response=response, body=None)
    producer = OpenAIProducer("sk-test", "gpt-4o", client=fake_client(FakeCompletions(error=error)))

    assert producer.generate("sys", "user") is None


def test_injected_client_without_key_is_unavailable():
    completions = FakeCompletions(content="<html></html>")
    producer = OpenAIProducer(None, "gpt-4o", client=fake_client(completions))

    assert not producer.available
    assert producer.generate("sys", "user") is None
    assert completions.kwargs is None


def test_empty_response_is_empty_string():
    producer = OpenAIProducer("sk-test", "gpt-4o", client=fake_client(FakeCompletions(content=None)))
    assert producer.generate("sys", "user") == ""

    producer = OpenAIProducer("sk-test", "gpt-4o", client=fake_client(FakeCompletions(choices=False)))
    assert producer.generate("sys", "user") == ""


def test_offline_producer():
    producer = OfflineProducer()
    assert not producer.available
    assert producer.generate("sys", "user") is None
