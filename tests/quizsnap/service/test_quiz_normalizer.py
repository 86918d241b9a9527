import json

import pytest

from src.quizsnap.errors import MalformedGenerationError
from src.quizsnap.service.quiz_normalizer import (
    DEFAULT_EXPLANATION,
    DEFAULT_QUESTION,
    clean_option,
    normalize_question,
    normalize_questions,
    parse_questions,
    strip_code_fence,
)

VALID_ENTRY = {
    "question": "What is the powerhouse of the cell?",
    "options": ["Mitochondria", "Nucleus", "Ribosome", "Golgi apparatus"],
    "answer": "Mitochondria",
    "explanation": "Mitochondria produce most of the cell's ATP.",
}


@pytest.mark.parametrize("raw, expected", [
    ("A. Mitochondria", "Mitochondria"),
    ("b) Nucleus", "Nucleus"),
    ("C: Ribosome", "Ribosome"),
    ("d- Golgi apparatus", "Golgi apparatus"),
    ("A.Mitochondria", "Mitochondria"),
    ("  B.   Nucleus  ", "Nucleus"),
    ("Mitochondria", "Mitochondria"),
    ("E. Not an enumeration", "E. Not an enumeration"),
    ("Apple", "Apple"),
])
def test_clean_option_strips_letter_prefixes(raw, expected):
    assert clean_option(raw) == expected


@pytest.mark.parametrize("raw", ["A. B. Nested", " c) value", "Plain text", "D-Day", "", "a:"])
def test_clean_option_is_idempotent(raw):
    once = clean_option(raw)
    assert clean_option(once) == once


def test_clean_option_handles_non_strings():
    assert clean_option(None) == ""
    assert clean_option(42) == "42"


def test_strip_code_fence_variants():
    payload = '[{"question": "q"}]'
    assert strip_code_fence(f"```json\n{payload}\n```") == payload
    assert strip_code_fence(f"```\n{payload}\n```") == payload
    assert strip_code_fence(f"  {payload}  ") == payload
    assert strip_code_fence(f"{payload}\n```") == payload


def test_parse_questions_accepts_fenced_array():
    content = f"```json\n{json.dumps([VALID_ENTRY])}\n```"
    assert parse_questions(content) == [VALID_ENTRY]


@pytest.mark.parametrize("content", [
    "Here is your quiz!",
    "[]",
    '{"question": "not a list"}',
    "```json\n[{\"question\": \n```",
])
def test_parse_questions_rejects_unusable_replies(content):
    with pytest.raises(MalformedGenerationError) as exc_info:
        parse_questions(content)
    assert exc_info.value.message == "Failed to parse quiz response"
    assert exc_info.value.status_code == 500


def test_normalize_question_keeps_valid_entry():
    question = normalize_question(VALID_ENTRY)
    assert question.to_dict() == VALID_ENTRY


def test_normalize_question_cleans_options_and_answer():
    entry = dict(VALID_ENTRY, options=["A. Mitochondria", "B. Nucleus", "C. Ribosome", "D. Golgi apparatus"],
                 answer="A. Mitochondria")
    question = normalize_question(entry)
    assert question.options == ["Mitochondria", "Nucleus", "Ribosome", "Golgi apparatus"]
    assert question.answer == "Mitochondria"


def test_normalize_question_pads_missing_options():
    entry = dict(VALID_ENTRY, options=["Mitochondria", "Nucleus"])
    question = normalize_question(entry)
    assert question.options == ["Mitochondria", "Nucleus", "Option 3", "Option 4"]


def test_normalize_question_truncates_extra_options():
    entry = dict(VALID_ENTRY, options=["Mitochondria", "Nucleus", "Ribosome", "Golgi apparatus", "Lysosome"])
    assert normalize_question(entry).options == ["Mitochondria", "Nucleus", "Ribosome", "Golgi apparatus"]


def test_normalize_question_replaces_non_list_options():
    entry = dict(VALID_ENTRY, options="Mitochondria, Nucleus")
    question = normalize_question(entry)
    assert question.options == ["Option 1", "Option 2", "Option 3", "Option 4"]
    assert question.answer == "Option 1"


def test_normalize_question_falls_back_to_first_option():
    entry = dict(VALID_ENTRY, answer="Endoplasmic reticulum")
    assert normalize_question(entry).answer == "Mitochondria"


def test_normalize_question_answer_given_as_letter_falls_back():
    """A bare letter is not an option text, so the first option is used."""
    entry = dict(VALID_ENTRY, answer="c")
    assert normalize_question(entry).answer == "Mitochondria"


def test_normalize_question_fills_missing_text():
    question = normalize_question({"options": ["1", "2", "3", "4"], "answer": "2"})
    assert question.question == DEFAULT_QUESTION
    assert question.explanation == DEFAULT_EXPLANATION
    assert question.answer == "2"


def test_normalize_question_non_object_entry():
    question = normalize_question("just a string")
    assert question.question == DEFAULT_QUESTION
    assert question.options == ["Option 1", "Option 2", "Option 3", "Option 4"]
    assert question.answer in question.options


def test_normalize_questions_caps_count_and_keeps_invariants():
    entries = [dict(VALID_ENTRY, question=f"Q{i}") for i in range(8)]
    entries[2] = {"question": "broken", "options": ["only one"], "answer": "nope"}
    normalized = normalize_questions(entries, question_count=5, option_count=4)

    assert [q.question for q in normalized] == ["Q0", "Q1", "broken", "Q3", "Q4"]
    for question in normalized:
        assert len(question.options) == 4
        assert question.answer in question.options


def test_normalize_question_padding_labels_stay_distinct():
    question = normalize_question(dict(VALID_ENTRY, options=["Option 2", "b) Option 3"], answer="Option 3"))
    assert question.options == ["Option 2", "Option 3", "Option 4", "Option 5"]
    assert len(set(question.options)) == 4
    assert question.answer == "Option 3"
