"""Tests for structured profile extraction: AI tier, heuristic fallback and the sync wrapper."""

import asyncio
from unittest import mock

import pytest

from conftest import FailingClient, FakeCompletionClient
from resume_match_ai.cv_pipeline.ai_client import AICompletionClient
from resume_match_ai.cv_pipeline.cv_extractor import (
    CV_EXTRACTION_PROMPT,
    build_extraction_prompt,
    extract_candidate_profile,
    extract_candidate_profile_async,
)
from resume_match_ai.cv_pipeline.fallback_parser import (
    basic_parse,
    extract_basic_email,
    extract_basic_name,
    extract_basic_phone,
    extract_basic_skills,
)
from resume_match_ai.errors import AIServiceError


class TestFallbackParser:
    def test_name_skips_contact_lines(self):
        lines = ["jane@example.com", "+91 98765 43210", "Phone: 123", "Jane Doe", "Engineer"]
        assert extract_basic_name(lines) == "Jane Doe"

    def test_name_only_scans_first_lines(self):
        lines = ["a@b.co"] * 5 + ["Jane Doe"]
        assert extract_basic_name(lines) is None

    def test_email_strips_trailing_punctuation(self):
        assert extract_basic_email("Contact: Jane.Doe@Example.com, thanks") == "jane.doe@example.com"

    def test_phone_ignores_year_ranges(self):
        assert extract_basic_phone("Acme (2019 - 2024)\nCall +91 98765 43210") == "+91 98765 43210"

    def test_skills_are_whole_words(self, sample_resume):
        skills = extract_basic_skills(sample_resume)
        assert skills == ["JavaScript", "React", "Node.js", "HTML", "CSS", "Git"]
        assert "Java" not in skills

    def test_basic_parse_metadata(self, sample_resume):
        draft = basic_parse(sample_resume, "timeout")
        assert draft["name"] == "Jane Doe"
        assert draft["parsing"]["model"] == "basic_parser"
        assert draft["parsing"]["confidence"] == 0.3
        error = draft["parsing"]["errors"][0]
        assert error["severity"] == "medium"
        assert error["error"].endswith("timeout")


class TestExtractionPrompt:
    def test_resume_text_is_truncated(self):
        prompt = build_extraction_prompt("a" * 20000)
        assert len(prompt) == len(CV_EXTRACTION_PROMPT) + 12000


class TestExtractCandidateProfile:
    def test_ai_tier(self, sample_resume, ai_client):
        profile = asyncio.run(extract_candidate_profile_async(sample_resume, ai_client))
        assert profile.parsing.model == "fake-model"
        assert profile.parsing.confidence == 0.8
        assert profile.parsing.errors == []
        assert profile.email == "jane.doe@example.com"
        assert profile.current_role == "Frontend Developer"
        assert sample_resume.strip()[:50] in ai_client.prompts[0]

    def test_unreachable_endpoint_falls_back(self, sample_resume, failing_client):
        profile = asyncio.run(extract_candidate_profile_async(sample_resume, failing_client))
        assert failing_client.calls == 1
        assert profile.parsing.model == "basic_parser"
        assert profile.parsing.confidence == 0.3
        assert profile.parsing.errors[0].severity == "medium"
        assert profile.name == "Jane Doe"
        assert profile.email == "jane.doe@example.com"
        assert profile.phone == "+91 98765 43210"
        assert "React" in profile.skills

    def test_unexpected_client_error_falls_back(self, sample_resume):
        profile = asyncio.run(extract_candidate_profile_async(sample_resume, FailingClient(RuntimeError("boom"))))
        assert profile.parsing.model == "basic_parser"

    @pytest.mark.parametrize("response", ["Sorry, I cannot help with that.", "[1, 2]", '{"name": '])
    def test_unparseable_response_falls_back(self, sample_resume, response):
        profile = asyncio.run(extract_candidate_profile_async(sample_resume, FakeCompletionClient(response)))
        assert profile.parsing.model == "basic_parser"

    def test_missing_api_key_falls_back_without_network(self, sample_resume):
        client = AICompletionClient(api_key="")
        assert client.configured is False
        with mock.patch("resume_match_ai.cv_pipeline.ai_client.AsyncOpenAI") as openai_cls:
            profile = asyncio.run(extract_candidate_profile_async(sample_resume, client))
        openai_cls.assert_not_called()
        assert profile.parsing.model == "basic_parser"
        assert "OPENAI_API_KEY" in profile.parsing.errors[0].error

    def test_empty_text_never_raises(self, failing_client):
        profile = asyncio.run(extract_candidate_profile_async("", failing_client))
        assert profile.skills == []
        assert profile.parsing.model == "basic_parser"

    def test_sync_wrapper(self, sample_resume, ai_client):
        profile = extract_candidate_profile(sample_resume, ai_client)
        assert profile.parsing.model == "fake-model"


class TestAICompletionClient:
    def test_request_parameters(self):
        completion = mock.MagicMock()
        completion.choices = [mock.MagicMock()]
        completion.choices[0].message.content = '{"name": "Jane"}'
        openai_client = mock.MagicMock()
        openai_client.chat.completions.create = mock.AsyncMock(return_value=completion)
        openai_client.close = mock.AsyncMock()

        with mock.patch("resume_match_ai.cv_pipeline.ai_client.AsyncOpenAI", return_value=openai_client) as openai_cls:
            client = AICompletionClient(api_key="sk-test", model="gpt-test", timeout=5)
            text = asyncio.run(client.complete("prompt"))

        assert text == '{"name": "Jane"}'
        openai_cls.assert_called_once_with(api_key="sk-test", timeout=5, max_retries=0)
        kwargs = openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["temperature"] == 0.1
        assert kwargs["max_tokens"] == 4096
        openai_client.close.assert_awaited_once()

    def test_empty_content_is_an_error(self):
        completion = mock.MagicMock()
        completion.choices = []
        openai_client = mock.MagicMock()
        openai_client.chat.completions.create = mock.AsyncMock(return_value=completion)
        openai_client.close = mock.AsyncMock()

        with mock.patch("resume_match_ai.cv_pipeline.ai_client.AsyncOpenAI", return_value=openai_client):
            with pytest.raises(AIServiceError):
                asyncio.run(AICompletionClient(api_key="sk-test").complete("prompt"))
