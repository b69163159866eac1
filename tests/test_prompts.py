from whiteboard_tutor.services.prompts import (
    QUESTION_TOPICS,
    build_hint_prompt,
    build_question_prompt,
    build_verify_prompt,
)


def test_question_prompt_fills_placeholders():
    prompt = build_question_prompt("Maths", 9, topic="profit and loss", request_id=42)

    assert "mathematics teacher" in prompt
    assert "Class 9 students" in prompt
    assert "Focus on: profit and loss" in prompt
    assert "Request ID: 42" in prompt


def test_question_prompt_picks_a_known_topic():
    prompt = build_question_prompt("Maths", 8)
    assert any(f"Focus on: {topic}" in prompt for topic in QUESTION_TOPICS)


def test_hint_prompt_variants():
    contextual = build_hint_prompt("Solve 2x = 8", with_work=True)
    general = build_hint_prompt("Solve 2x = 8", with_work=False)

    assert "Solve 2x = 8" in contextual and "Solve 2x = 8" in general
    assert "STUDENT'S CURRENT WORK" in contextual
    assert "STUDENT'S CURRENT WORK" not in general
    assert "where to START" in general


def test_verify_prompt_keeps_literal_json_braces():
    prompt = build_verify_prompt("Find x")
    assert '"isCorrect": true' in prompt
    assert "{\n" in prompt
    assert "Find x" in prompt
