"""Tests for keyword frequency ranking."""

from nlp_pipeline import KeywordExtractor


class TestExtractKeywords:
    def test_ranked_by_frequency(self):
        assert KeywordExtractor.extract_keywords("apple apple banana banana banana cherry") == [
            "banana", "apple", "cherry",
        ]

    def test_ties_keep_first_occurrence_order(self):
        assert KeywordExtractor.extract_keywords("zeta alpha zeta alpha beta") == ["zeta", "alpha", "beta"]

    def test_filters_stop_words_short_words_and_numbers(self):
        keywords = KeywordExtractor.extract_keywords("The cat is on 2024 mat ox ab1")
        assert keywords == ["cat", "mat", "ab1"]

    def test_case_folded(self):
        assert KeywordExtractor.extract_keywords("Rocket rocket ROCKET") == ["rocket"]

    def test_nothing_qualifies(self):
        assert KeywordExtractor.extract_keywords("a an the 42 of") == []

    def test_pets_example(self, pets_text):
        assert KeywordExtractor.extract_keywords(pets_text)[:3] == ["mammals", "pets", "cats"]


class TestKeywordFrequencies:
    def test_counts(self):
        freq = KeywordExtractor.keyword_frequencies("apple apple banana the")
        assert freq == {"apple": 2, "banana": 1}

    def test_is_candidate(self):
        assert KeywordExtractor.is_candidate("rocket")
        assert not KeywordExtractor.is_candidate("12345")
        assert not KeywordExtractor.is_candidate("ox")
        assert not KeywordExtractor.is_candidate("which")
