# FILE: tests/test_gemini_provider.py

from types import SimpleNamespace

import pytest

from ownshot.config import Settings
from ownshot.errors import ProviderConfigurationError
from ownshot.providers.gemini import GeminiImageProvider, get_image_provider, reset_image_provider


def inline_part(data, mime_type="image/png"):
    return SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type=mime_type), text=None)


def text_part(text):
    return SimpleNamespace(inline_data=None, text=text)


def response_with(parts):
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))])


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def generate_content(self, model, contents, config):
        self.requests.append({"model": model, "contents": contents, "config": config})
        if self.error:
            raise self.error
        return self.response


def make_provider(models):
    return GeminiImageProvider(
        api_key="test-key",
        model="image-model",
        analysis_model="analysis-model",
        client=SimpleNamespace(models=models)
    )


def generate(provider, aspect_ratio="match", image_size="2K"):
    return provider.generate(b"input", "image/jpeg", "make it nice", aspect_ratio, image_size, "corr")


def test_last_inline_image_is_returned():
    models = FakeModels(response_with([
        text_part("thinking"),
        inline_part(b"draft"),
        inline_part(b"final", "image/webp"),
    ]))

    result = generate(make_provider(models))

    assert result.success
    assert result.image_data == b"final"
    assert result.mime_type == "image/webp"


def test_request_carries_image_prompt_and_config():
    models = FakeModels(response_with([inline_part(b"final")]))

    generate(make_provider(models), aspect_ratio="16:9", image_size="4K")

    request = models.requests[0]
    assert request["model"] == "image-model"
    assert request["contents"][1] == "make it nice"
    assert request["config"].response_modalities == ["TEXT", "IMAGE"]
    assert request["config"].image_config.aspect_ratio == "16:9"
    assert request["config"].image_config.image_size == "4K"


def test_match_omits_aspect_ratio():
    models = FakeModels(response_with([inline_part(b"final")]))

    generate(make_provider(models), aspect_ratio="match")

    assert models.requests[0]["config"].image_config.aspect_ratio is None


@pytest.mark.parametrize("response, error", [
    (SimpleNamespace(candidates=[]), "No response from Gemini"),
    (response_with([]), "No content parts in response"),
    (response_with([text_part("sorry")]), "No image data in response"),
])
def test_empty_responses_fail(response, error):
    result = generate(make_provider(FakeModels(response)))

    assert not result.success
    assert result.error == error


def test_sdk_error_becomes_failed_result_without_retry():
    models = FakeModels(error=RuntimeError("quota exceeded"))

    result = generate(make_provider(models))

    assert not result.success
    assert result.error == "quota exceeded"
    assert len(models.requests) == 1


def test_generate_text_uses_analysis_model():
    models = FakeModels(response_with([text_part('{"productType": "box"}')]))

    text = make_provider(models).generate_text(b"input", "image/png", "analyze")

    assert text == '{"productType": "box"}'
    assert models.requests[0]["model"] == "analysis-model"


def test_missing_api_key_is_a_configuration_error(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setattr("ownshot.providers.gemini.get_settings", lambda: Settings(_env_file=None))
    reset_image_provider()

    try:
        with pytest.raises(ProviderConfigurationError) as exc_info:
            get_image_provider()
        assert exc_info.value.status_code == 503
    finally:
        reset_image_provider()


def test_provider_is_built_once(monkeypatch):
    monkeypatch.setattr(
        "ownshot.providers.gemini.get_settings",
        lambda: Settings(_env_file=None, GEMINI_API_KEY="test-key")
    )
    reset_image_provider()

    try:
        provider = get_image_provider()
        assert isinstance(provider, GeminiImageProvider)
        assert get_image_provider() is provider
    finally:
        reset_image_provider()
