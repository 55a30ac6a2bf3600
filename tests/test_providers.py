import unittest
from types import SimpleNamespace
from typing import Any, Dict, List

from linguascribe.core.config import LinguaScribeConfig
from linguascribe.exceptions import ProviderError
from linguascribe.models.media import MediaPayload
from linguascribe.providers import (
    AnthropicProvider, GeminiProvider, OpenAIProvider, OpenRouterProvider,
    create_provider, get_available_providers, supports_media
)


def media_messages(media: MediaPayload) -> List[Dict[str, Any]]:
    return [
        {"role": "system", "content": "You are a transcriptionist."},
        {
            "role": "user",
            "content": [
                {"type": "media", "media": media},
                {"type": "text", "text": "Transcribe the audio from this file."}
            ]
        }
    ]


class RecordingCall:
    """Async callable that records its keyword arguments and returns a canned response."""

    def __init__(self, response: Any = None, error: Exception = None):
        self.response = response
        self.error = error
        self.kwargs: List[Dict[str, Any]] = []

    async def __call__(self, **kwargs):
        self.kwargs.append(kwargs)
        if self.error:
            raise self.error
        return self.response


def chat_completion(text: str):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


class TestProviderFactory(unittest.TestCase):
    def test_create_provider_maps_names(self):
        expected = {
            "gemini": GeminiProvider,
            "openai": OpenAIProvider,
            "openrouter": OpenRouterProvider,
            "anthropic": AnthropicProvider,
        }
        for name, provider_class in expected.items():
            config = LinguaScribeConfig(provider=name, **{f"{name}_api_key": "test-key"})
            provider = create_provider(config)
            self.assertIsInstance(provider, provider_class)
            self.assertEqual(provider.name, name)

        self.assertEqual(sorted(get_available_providers()), sorted(expected))

    def test_create_provider_rejects_unknown_name(self):
        config = LinguaScribeConfig(gemini_api_key="test-key")
        config.provider = "whisper"
        with self.assertRaises(ValueError):
            create_provider(config)

    def test_media_support(self):
        self.assertTrue(supports_media("gemini"))
        self.assertTrue(supports_media("openrouter"))
        self.assertFalse(supports_media("anthropic"))


class TestGeminiProvider(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.config = LinguaScribeConfig(provider="gemini", gemini_api_key="test-key")
        self.provider = GeminiProvider(self.config)

    def test_media_becomes_inline_bytes(self):
        media = MediaPayload.from_bytes(b"ID3audio", "audio/mpeg")
        _, conversation = self.provider._split_system_message(media_messages(media))

        contents = self.provider._prepare_gemini_contents(conversation)

        self.assertEqual(len(contents), 1)
        self.assertEqual(contents[0].role, "user")
        media_part, text_part = contents[0].parts
        self.assertEqual(media_part.inline_data.mime_type, "audio/mpeg")
        self.assertEqual(media_part.inline_data.data, b"ID3audio")
        self.assertEqual(text_part.text, "Transcribe the audio from this file.")

    def test_assistant_role_maps_to_model(self):
        contents = self.provider._prepare_gemini_contents([
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
        ])
        self.assertEqual([c.role for c in contents], ["user", "model"])

    async def test_multimodal_call_uses_media_model_and_system_instruction(self):
        call = RecordingCall(SimpleNamespace(text="  hello world \n"))
        self.provider.client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=call)))

        media = MediaPayload.from_bytes(b"RIFF", "audio/wav")
        result = await self.provider.process_multimodal_messages(media_messages(media), max_tokens=100, temperature=0.0)

        self.assertEqual(result, "hello world")
        sent = call.kwargs[0]
        self.assertEqual(sent["model"], self.config.media_model)
        self.assertEqual(sent["config"].max_output_tokens, 100)
        self.assertEqual(sent["config"].system_instruction, "You are a transcriptionist.")
        self.assertEqual(self.provider.get_stats()["calls"], 1)

    async def test_sdk_error_becomes_provider_error(self):
        call = RecordingCall(error=RuntimeError("quota exceeded"))
        self.provider.client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=call)))

        with self.assertRaises(ProviderError) as ctx:
            await self.provider.process_text_messages([{"role": "user", "content": "hi"}])
        self.assertEqual(ctx.exception.provider, "gemini")
        self.assertIn("quota exceeded", str(ctx.exception))


class TestOpenAIProvider(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.config = LinguaScribeConfig(provider="openai", openai_api_key="test-key")
        self.provider = OpenAIProvider(self.config)

    def test_audio_becomes_input_audio(self):
        media = MediaPayload.from_bytes(b"ID3audio", "audio/mpeg")

        messages = self.provider._prepare_openai_messages(media_messages(media))

        self.assertEqual(messages[0]["role"], "system")
        audio_part, text_part = messages[1]["content"]
        self.assertEqual(audio_part, {
            "type": "input_audio",
            "input_audio": {"data": media.data, "format": "mp3"}
        })
        self.assertEqual(text_part["type"], "text")

    def test_video_is_rejected(self):
        media = MediaPayload.from_bytes(b"\x00\x00\x00\x18ftyp", "video/mp4")
        with self.assertRaises(ProviderError):
            self.provider._prepare_openai_messages(media_messages(media))

    def test_unsupported_audio_format_is_rejected(self):
        media = MediaPayload.from_bytes(b"OggS", "audio/ogg")
        with self.assertRaises(ProviderError):
            self.provider._prepare_openai_messages(media_messages(media))

    async def test_multimodal_call_uses_media_model(self):
        call = RecordingCall(chat_completion(" transcript "))
        self.provider.client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=call)))

        media = MediaPayload.from_bytes(b"RIFF", "audio/wav")
        result = await self.provider.process_multimodal_messages(media_messages(media))

        self.assertEqual(result, "transcript")
        self.assertEqual(call.kwargs[0]["model"], self.config.media_model)
        self.assertEqual(call.kwargs[0]["messages"][1]["content"][0]["input_audio"]["format"], "wav")

    async def test_video_error_is_not_rewrapped(self):
        call = RecordingCall(chat_completion("unused"))
        self.provider.client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=call)))

        media = MediaPayload.from_bytes(b"\x00", "video/mp4")
        with self.assertRaises(ProviderError) as ctx:
            await self.provider.process_multimodal_messages(media_messages(media))

        self.assertIn("does not accept video", str(ctx.exception))
        self.assertEqual(call.kwargs, [])


class TestOpenRouterProvider(unittest.TestCase):
    def setUp(self):
        config = LinguaScribeConfig(provider="openrouter", openrouter_api_key="test-key")
        self.provider = OpenRouterProvider(config)

    def test_video_becomes_data_uri(self):
        media = MediaPayload.from_bytes(b"\x1aE\xdf\xa3", "video/webm")

        messages = self.provider._prepare_openai_messages(media_messages(media))

        video_part = messages[1]["content"][0]
        self.assertEqual(video_part["type"], "video_url")
        self.assertEqual(video_part["video_url"]["url"], media.to_data_uri())

    def test_extra_audio_formats(self):
        media = MediaPayload.from_bytes(b"OggS", "audio/ogg")

        messages = self.provider._prepare_openai_messages(media_messages(media))

        self.assertEqual(messages[1]["content"][0]["input_audio"]["format"], "ogg")

    def test_base_url(self):
        self.assertIn("openrouter.ai", str(self.provider.client.base_url))


class TestAnthropicProvider(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.config = LinguaScribeConfig(provider="anthropic", anthropic_api_key="test-key")
        self.provider = AnthropicProvider(self.config)

    async def test_media_is_rejected(self):
        media = MediaPayload.from_bytes(b"ID3audio", "audio/mpeg")
        with self.assertRaises(ProviderError) as ctx:
            await self.provider.process_multimodal_messages(media_messages(media))
        self.assertEqual(ctx.exception.provider, "anthropic")

    async def test_text_call_sends_system_separately(self):
        response = SimpleNamespace(content=[
            SimpleNamespace(type="text", text="Short "),
            SimpleNamespace(type="text", text="summary."),
        ])
        call = RecordingCall(response)
        self.provider.client = SimpleNamespace(messages=SimpleNamespace(create=call))

        result = await self.provider.process_text_messages([
            {"role": "system", "content": "You summarize."},
            {"role": "user", "content": "Long text"},
        ], max_tokens=50)

        self.assertEqual(result, "Short summary.")
        sent = call.kwargs[0]
        self.assertEqual(sent["system"], "You summarize.")
        self.assertEqual(sent["messages"], [{"role": "user", "content": "Long text"}])
        self.assertEqual(sent["max_tokens"], 50)


if __name__ == "__main__":
    unittest.main()
