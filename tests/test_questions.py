"""Tests for templated question generation."""

import pytest

from nlp import generate_questions, run_action
from nlp_pipeline import (
    INSUFFICIENT_CONTENT,
    QUESTION_STYLES,
    QuestionGenerator,
)

LIGHT_TEXT = "Photosynthesis converts light. Plants need light."


class TestInsufficientContent:
    @pytest.mark.parametrize("style", list(QUESTION_STYLES) + ["bogus", ""])
    def test_sentinel_for_every_style(self, style):
        assert generate_questions("The and of it. Is it?", style) == INSUFFICIENT_CONTENT


class TestShortAnswer:
    def test_first_block(self):
        result = generate_questions(LIGHT_TEXT, "short answer")
        assert result.startswith("<b>SHORT ANSWER Questions:</b><br><br>")
        assert (
            '<b>Q1:</b> What is the role of "<b>light</b>" described in the text?<br>'
            "<i>Context: Photosynthesis converts light.</i><br><br>"
        ) in result

    def test_one_block_per_keyword(self):
        assert generate_questions(LIGHT_TEXT).count("<i>Context:") == 5

    def test_unknown_style_falls_back(self):
        assert generate_questions(LIGHT_TEXT, "crossword") == generate_questions(LIGHT_TEXT, "short answer")

    def test_missing_style_falls_back(self):
        assert generate_questions(LIGHT_TEXT, None) == generate_questions(LIGHT_TEXT)


class TestEssay:
    def test_prompt_without_context(self):
        result = generate_questions(LIGHT_TEXT, "essay")
        assert result.startswith("<b>ESSAY Questions:</b><br><br>")
        assert (
            '<b>Q1:</b> Discuss the significance of "<b>light</b>" '
            "in the context of the text provided.<br><br>"
        ) in result
        assert "Context:" not in result


class TestMultipleChoice:
    def test_options_wrap_around(self):
        cards = QuestionGenerator.build_cards("alpha beta gamma.", "multiple choice")
        assert [card.options for card in cards] == [
            ["alpha", "beta", "gamma"],
            ["beta", "gamma", "alpha"],
            ["gamma", "alpha", "beta"],
        ]

    def test_rendered_block(self):
        result = generate_questions("alpha beta gamma.", "multiple choice")
        assert result == (
            "<b>MULTIPLE CHOICE Questions:</b><br><br>"
            '<b>Q1:</b> Which concept is related to: "alpha beta gamma...."?<br>'
            "A) alpha <br> B) beta <br> C) gamma<br><br>"
            '<b>Q2:</b> Which concept is related to: "alpha beta gamma...."?<br>'
            "A) beta <br> B) gamma <br> C) alpha<br><br>"
            '<b>Q3:</b> Which concept is related to: "alpha beta gamma...."?<br>'
            "A) gamma <br> B) alpha <br> C) beta<br><br>"
        )

    def test_snippet_truncated_to_forty_characters(self):
        text = "Mitochondria produce energy through cellular respiration in every cell."
        card = QuestionGenerator.build_cards(text, "multiple choice")[0]
        assert card.prompt == f'Which concept is related to: "{text[:40]}..."?'

    def test_style_matched_case_insensitively(self):
        assert generate_questions(LIGHT_TEXT, " Multiple Choice ").startswith(
            "<b>MULTIPLE CHOICE Questions:</b>"
        )


class TestBuildCards:
    def test_keywords_without_context_skipped(self):
        # ranked: cats, purr, bark, dogs, sleep; "bark" only in the unterminated tail
        cards = QuestionGenerator.build_cards("Cats purr. Dogs sleep and cats purr. bark bark")
        assert [card.keyword for card in cards] == ["cats", "purr", "dogs", "sleep"]
        assert [card.number for card in cards] == [1, 2, 4, 5]

    def test_skipped_keyword_leaves_gap_in_labels(self):
        result = generate_questions("Cats purr. Dogs sleep and cats purr. bark bark", "essay")
        assert "<b>Q3:</b>" not in result
        assert '<b>Q4:</b> Discuss the significance of "<b>dogs</b>"' in result
        assert '<b>Q5:</b> Discuss the significance of "<b>sleep</b>"' in result

    def test_at_most_five(self):
        text = "alpha bravo charlie delta echo foxtrot golf hotel."
        assert len(QuestionGenerator.build_cards(text)) == 5

    def test_context_is_first_matching_sentence(self):
        cards = QuestionGenerator.build_cards(LIGHT_TEXT)
        assert cards[0].keyword == "light"
        assert cards[0].context == "Photosynthesis converts light."

    def test_idempotent(self):
        assert generate_questions(LIGHT_TEXT, "essay") == generate_questions(LIGHT_TEXT, "essay")


class TestRunAction:
    def test_dispatches_qa_with_style(self):
        assert run_action("qa", LIGHT_TEXT, "essay") == generate_questions(LIGHT_TEXT, "essay")

    def test_unknown_action(self):
        with pytest.raises(KeyError):
            run_action("translate", LIGHT_TEXT)
