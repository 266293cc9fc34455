#!/usr/bin/env python3
"""
Lightweight Study-Aid Text Analysis Pipeline
Uses only Python standard library - no external ML frameworks

Design Philosophy:
- Pure Python, fully offline, deterministic output for identical input
- No TensorFlow, PyTorch, transformers, spaCy, or NLTK dependencies
- Keyword frequency is the only relevance signal

Stages: Tokenizer → Stop-word filter → Keyword ranking → {Summary | Highlight | Questions}
"""

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Set


SENTENCE_PATTERN = re.compile(r'[^.!?]+[.!?]+')
WORD_PATTERN = re.compile(r'\b\w+\b')
NUMBER_PATTERN = re.compile(r'^\d+$')

INSUFFICIENT_CONTENT = "Not enough content to generate questions."

SHORT_ANSWER = 'short answer'
MULTIPLE_CHOICE = 'multiple choice'
ESSAY = 'essay'
QUESTION_STYLES = (SHORT_ANSWER, MULTIPLE_CHOICE, ESSAY)


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


class Tokenizer:
    """Stage 1: Sentence and word segmentation"""

    @staticmethod
    def split_sentences(text: str) -> List[str]:
        """
        Split text into sentences terminated by one or more of . ! ?
        Sentences keep their surrounding whitespace. Trailing text without a
        terminator is dropped; text with no terminator at all is one sentence.
        """
        return SENTENCE_PATTERN.findall(text) or [text]

    @staticmethod
    def split_words(text: str) -> List[str]:
        """Lowercase the text and return its word-character runs"""
        return WORD_PATTERN.findall(text.lower())


class StopWordFilter:
    """Stage 2: Static English stop-word reference set"""

    STOP_WORDS = frozenset({
        "a", "about", "above", "after", "again", "against", "all", "am", "an",
        "and", "any", "are", "aren't", "as", "at", "be", "because", "been",
        "before", "being", "below", "between", "both", "but", "by", "can",
        "can't", "cannot", "could", "couldn't", "did", "didn't", "do", "does",
        "doesn't", "doing", "don't", "down", "during", "each", "few", "for",
        "from", "further", "had", "hadn't", "has", "hasn't", "have", "haven't",
        "having", "he", "he'd", "he'll", "he's", "her", "here", "here's",
        "hers", "herself", "him", "himself", "his", "how", "how's", "i", "i'd",
        "i'll", "i'm", "i've", "if", "in", "into", "is", "isn't", "it", "it's",
        "its", "itself", "let's", "me", "more", "most", "mustn't", "my",
        "myself", "no", "nor", "not", "of", "off", "on", "once", "only", "or",
        "other", "ought", "our", "ours", "ourselves", "out", "over", "own",
        "same", "shan't", "she", "she'd", "she'll", "she's", "should",
        "shouldn't", "so", "some", "such", "than", "that", "that's", "the",
        "their", "theirs", "them", "themselves", "then", "there", "there's",
        "these", "they", "they'd", "they'll", "they're", "they've", "this",
        "those", "through", "to", "too", "under", "until", "up", "very", "was",
        "wasn't", "we", "we'd", "we'll", "we're", "we've", "were", "weren't",
        "what", "what's", "when", "when's", "where", "where's", "which",
        "while", "who", "who's", "whom", "why", "why's", "with", "won't",
        "would", "wouldn't", "you", "you'd", "you'll", "you're", "you've",
        "your", "yours", "yourself", "yourselves",
    })

    @classmethod
    def is_stop_word(cls, word: str) -> bool:
        return word.lower() in cls.STOP_WORDS


class KeywordExtractor:
    """Stage 3: Frequency-ranked keyword extraction"""

    @staticmethod
    def is_candidate(word: str) -> bool:
        """Keep words longer than 2 characters that are not stop words or pure numbers"""
        return (
            len(word) > 2
            and not StopWordFilter.is_stop_word(word)
            and not NUMBER_PATTERN.match(word)
        )

    @staticmethod
    def keyword_frequencies(text: str) -> Counter:
        """
        Count qualifying words in first-seen order
        Returns: Counter(word -> frequency)
        """
        freq = Counter()
        for word in Tokenizer.split_words(text):
            if KeywordExtractor.is_candidate(word):
                freq[word] += 1
        return freq

    @staticmethod
    def extract_keywords(text: str) -> List[str]:
        """
        Rank distinct keywords by descending frequency.
        Equal frequencies keep first-occurrence order (sorted() is stable).
        Returns an empty list when nothing qualifies.
        """
        freq = KeywordExtractor.keyword_frequencies(text)
        return sorted(freq, key=freq.get, reverse=True)


@dataclass
class SentenceScore:
    index: int
    text: str
    score: float


class Summarizer:
    """Stage 4: Extractive summarization using keyword density"""

    MIN_SENTENCES = 3
    KEYWORD_SHARE = (1, 5)    # top 20% of keywords are salient
    SENTENCE_SHARE = (3, 10)  # keep 30% of sentences, at least MIN_SENTENCES

    @staticmethod
    def salient_keywords(keywords: List[str]) -> Set[str]:
        numerator, denominator = Summarizer.KEYWORD_SHARE
        return set(keywords[:_ceil_div(len(keywords) * numerator, denominator)])

    @staticmethod
    def score_sentences(sentences: List[str], salient: Set[str]) -> List[SentenceScore]:
        """Score = salient words in the sentence / total words (at least 1)"""
        scores = []
        for idx, sentence in enumerate(sentences):
            words = Tokenizer.split_words(sentence)
            hits = sum(1 for word in words if word in salient)
            scores.append(SentenceScore(idx, sentence, hits / (len(words) or 1)))
        return scores

    @staticmethod
    def selection_count(sentence_count: int) -> int:
        numerator, denominator = Summarizer.SENTENCE_SHARE
        return max(Summarizer.MIN_SENTENCES, _ceil_div(sentence_count * numerator, denominator))

    @staticmethod
    def summarize(text: str) -> str:
        """
        Generate extractive summary of the most keyword-dense sentences.
        Text with fewer than MIN_SENTENCES sentences is returned unchanged.
        """
        sentences = Tokenizer.split_sentences(text)
        if len(sentences) < Summarizer.MIN_SENTENCES:
            return text

        salient = Summarizer.salient_keywords(KeywordExtractor.extract_keywords(text))
        scores = Summarizer.score_sentences(sentences, salient)

        count = Summarizer.selection_count(len(sentences))
        top_sentences = sorted(scores, key=lambda s: s.score, reverse=True)[:count]
        top_sentences = sorted(top_sentences, key=lambda s: s.index)  # Restore order

        items = ''.join(f"<li>{s.text.strip()}</li>" for s in top_sentences)
        return f"<b>Summary:</b><br><ul>{items}</ul>"


class Highlighter:
    """Stage 5: Keyword emphasis in the original text"""

    TOP_N = 10

    @staticmethod
    def highlight(text: str) -> str:
        """
        Wrap every whole-word occurrence of the top keywords in <mark>.

        Words are matched once against the original text, so markers already
        inserted are never scanned again and the matched casing is kept.
        """
        keywords = set(KeywordExtractor.extract_keywords(text)[:Highlighter.TOP_N])

        def mark(match):
            word = match.group()
            if word.lower() in keywords:
                return f"<mark>{word}</mark>"
            return word

        highlighted = WORD_PATTERN.sub(mark, text) if keywords else text
        return highlighted.replace('\n', '<br>')


@dataclass
class QuestionCard:
    """One generated question, numbered by its keyword's rank"""
    number: int
    keyword: str
    prompt: str
    context: str = ""
    options: List[str] = field(default_factory=list)


class QuestionGenerator:
    """Stage 6: Templated question generation from keyword contexts"""

    TOP_N = 5
    SNIPPET_LENGTH = 40

    @staticmethod
    def resolve_style(style) -> str:
        """
        Match a style after trimming, ignoring case; anything unknown or
        empty means short answer. The header then names this resolved style,
        not the raw selector value, so "Essay " and "essay" render the same
        and an unrecognised value never appears in the output.
        """
        normalized = (style or '').strip().lower()
        return normalized if normalized in QUESTION_STYLES else SHORT_ANSWER

    @staticmethod
    def build_cards(text: str, style: str = SHORT_ANSWER) -> List[QuestionCard]:
        """
        Build one card per top keyword that appears in some sentence.
        Keywords without a context sentence are skipped; numbers follow
        keyword rank, so a skipped keyword leaves a gap.
        """
        style = QuestionGenerator.resolve_style(style)
        keywords = KeywordExtractor.extract_keywords(text)[:QuestionGenerator.TOP_N]
        sentences = Tokenizer.split_sentences(text)

        cards: List[QuestionCard] = []
        for i, word in enumerate(keywords):
            context = next((s for s in sentences if word in s.lower()), None)
            if context is None:
                continue
            context = context.strip()
            number = i + 1

            if style == MULTIPLE_CHOICE:
                snippet = context[:QuestionGenerator.SNIPPET_LENGTH]
                options = [keywords[(i + offset) % len(keywords)] for offset in range(3)]
                cards.append(QuestionCard(
                    number, word,
                    f'Which concept is related to: "{snippet}..."?',
                    context, options,
                ))
            elif style == ESSAY:
                cards.append(QuestionCard(
                    number, word,
                    f'Discuss the significance of "{word}" in the context of the text provided.',
                ))
            else:
                cards.append(QuestionCard(
                    number, word,
                    f'What is the role of "{word}" described in the text?',
                    context,
                ))

        return cards

    @staticmethod
    def render_card(card: QuestionCard, style: str) -> str:
        label = f"<b>Q{card.number}:</b>"
        if style == MULTIPLE_CHOICE:
            first, second, third = card.options
            return (
                f"{label} {card.prompt}<br>"
                f"A) {first} <br> B) {second} <br> C) {third}<br><br>"
            )
        emphasized = card.prompt.replace(f'"{card.keyword}"', f'"<b>{card.keyword}</b>"', 1)
        if style == ESSAY:
            return f"{label} {emphasized}<br><br>"
        return f"{label} {emphasized}<br><i>Context: {card.context}</i><br><br>"

    @staticmethod
    def generate_questions(text: str, style: str = SHORT_ANSWER) -> str:
        """
        Render question blocks under a header naming the style.
        Returns INSUFFICIENT_CONTENT when the text yields no keywords.
        """
        style = QuestionGenerator.resolve_style(style)
        if not KeywordExtractor.extract_keywords(text):
            return INSUFFICIENT_CONTENT

        content = f"<b>{style.upper()} Questions:</b><br><br>"
        for card in QuestionGenerator.build_cards(text, style):
            content += QuestionGenerator.render_card(card, style)
        return content
