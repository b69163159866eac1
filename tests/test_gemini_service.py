import base64

import pytest

from whiteboard_tutor.services.gemini_service import (
    GeminiService,
    HintGenerationError,
    QuestionGenerationError,
    VerificationError,
    build_image_part,
)

IMAGE_BYTES = b"\x89PNG" + bytes(120)
IMAGE_B64 = base64.b64encode(IMAGE_BYTES).decode("ascii")


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeModel:
    """Records generate_content calls and replies with canned text"""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate_content(self, contents):
        self.calls.append(contents)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.reply)


def make_service(**kwargs):
    model = FakeModel(**kwargs)
    return GeminiService(model=model), model


def test_build_image_part_decodes_data_url():
    part = build_image_part("data:image/png;base64," + IMAGE_B64)
    assert part == {"mime_type": "image/png", "data": IMAGE_BYTES}


def test_build_image_part_rejects_garbage():
    with pytest.raises(ValueError):
        build_image_part("not base64!!")


class TestGenerateQuestion:

    def test_returns_stripped_text(self):
        service, model = make_service(reply="  Solve for x: 3x + 5 = 20\n")

        assert service.generate_question("Maths", 9) == "Solve for x: 3x + 5 = 20"
        assert "Class 9" in model.calls[0]

    def test_provider_error_wrapped(self):
        service, _ = make_service(error=RuntimeError("network down"))

        with pytest.raises(QuestionGenerationError, match="check your API key"):
            service.generate_question("Maths", 9)

    def test_empty_reply_is_an_error(self):
        service, _ = make_service(reply="   ")

        with pytest.raises(QuestionGenerationError):
            service.generate_question("Maths", 8)


class TestGenerateHint:

    def test_with_image_sends_contextual_prompt(self):
        service, model = make_service(reply="**Start** by isolating x.")

        hint = service.generate_hint("Solve 2x = 8", IMAGE_B64)

        prompt, image_part = model.calls[0]
        assert "STUDENT'S CURRENT WORK" in prompt
        assert image_part["data"] == IMAGE_BYTES
        assert hint == "Start by isolating x."

    def test_without_image_sends_text_only(self):
        service, model = make_service(reply="Think about inverse operations.")

        service.generate_hint("Solve 2x = 8")

        assert isinstance(model.calls[0], str)
        assert "STUDENT'S CURRENT WORK" not in model.calls[0]

    def test_short_image_treated_as_missing(self):
        service, model = make_service(reply="Hint")

        service.generate_hint("Solve 2x = 8", "QUJD")

        assert isinstance(model.calls[0], str)

    def test_provider_error_wrapped(self):
        service, _ = make_service(error=RuntimeError("boom"))

        with pytest.raises(HintGenerationError, match="Failed to generate hint"):
            service.generate_hint("Solve 2x = 8")


class TestVerifyAnswer:

    def test_parses_reply(self):
        service, model = make_service(
            reply='```json\n{"isCorrect": true, "feedback": "Nice", "correctAnswer": "x = 4"}\n```'
        )

        result = service.verify_answer("Solve 2x = 8", IMAGE_B64)

        assert result.is_correct is True
        assert result.feedback == "Nice"
        assert result.correct_answer == "x = 4"
        prompt, image_part = model.calls[0]
        assert "Solve 2x = 8" in prompt
        assert image_part["mime_type"] == "image/png"

    def test_provider_error_wrapped(self):
        service, _ = make_service(error=RuntimeError("quota"))

        with pytest.raises(VerificationError, match="Failed to verify answer"):
            service.verify_answer("Solve 2x = 8", IMAGE_B64)

    def test_bad_image_wrapped(self):
        service, model = make_service(reply="{}")

        with pytest.raises(VerificationError):
            service.verify_answer("Solve 2x = 8", "%%%")
        assert model.calls == []


def test_blocked_response_falls_back_to_candidate_text():
    class Part:
        text = "Fallback question?"

    class Content:
        parts = [Part()]

    class Candidate:
        content = Content()

    class BlockedResponse:
        candidates = [Candidate()]

        @property
        def text(self):
            raise ValueError("response.text quick accessor failed")

    class Model:
        def generate_content(self, contents):
            return BlockedResponse()

    service = GeminiService(model=Model())
    assert service.generate_question("Maths", 10) == "Fallback question?"
