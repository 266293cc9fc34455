#!/usr/bin/env python3
"""
Offline Study Aid: summary, keyword highlight and question generation
Pure Python core - no network, no persistence

Features:
- Extractive summary of the most keyword-dense sentences
- Highlighting of the top keywords inside the original text
- Short answer / multiple choice / essay question templates
- Plain-text, PDF and Anki CSV export of the results
"""

import sys
from typing import Callable, Dict, Optional

from nlp_pipeline import (
    Highlighter,
    KeywordExtractor,
    QuestionGenerator,
    SHORT_ANSWER,
    Summarizer,
)

EMPTY_INPUT_MESSAGE = 'Please enter some text first.'


def summarize(text: str) -> str:
    """Summary as an HTML list, or the text itself when it is too short"""
    return Summarizer.summarize(text)


def highlight(text: str) -> str:
    """Full text with the top keywords wrapped in <mark>"""
    return Highlighter.highlight(text)


def generate_questions(text: str, style: str = SHORT_ANSWER) -> str:
    """Question blocks for the given style, or the insufficient-content message"""
    return QuestionGenerator.generate_questions(text, style)


ACTIONS: Dict[str, Callable[[str, str], str]] = {
    'summary': lambda text, style: summarize(text),
    'highlight': lambda text, style: highlight(text),
    'qa': generate_questions,
}


def run_action(action: str, text: str, style: Optional[str] = None) -> str:
    """
    Dispatch one user action on already validated text

    Raises:
        KeyError: unknown action name
    """
    return ACTIONS[action](text, style or SHORT_ANSWER)


def format_keywords(text: str, top_n: int = 20) -> str:
    freq = KeywordExtractor.keyword_frequencies(text)
    ranked = KeywordExtractor.extract_keywords(text)[:top_n]
    if not ranked:
        return "No keywords found."
    return '\n'.join(f"  {i}. {word} ({freq[word]})" for i, word in enumerate(ranked, 1))


def read_input(path: str) -> str:
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv=None):
    """Main entry point for command-line usage"""
    import argparse

    from exporters import (
        ExportError,
        copy_to_clipboard,
        to_plain_text,
        write_deck,
        write_pdf,
    )

    parser = argparse.ArgumentParser(
        description='Offline study aid: summaries, highlights and practice questions'
    )
    parser.add_argument(
        'file',
        help="Input text file ('-' reads standard input)"
    )
    parser.add_argument(
        '--action',
        choices=sorted(ACTIONS) + ['keywords'],
        default='summary',
        help='What to generate (default: summary)'
    )
    parser.add_argument(
        '--style',
        default=SHORT_ANSWER,
        help="Question style for --action qa: 'short answer', 'multiple choice' or 'essay'"
    )
    parser.add_argument(
        '--limit',
        type=int,
        default=50000,
        help='Maximum characters to process (default: 50000, 0=no limit)'
    )
    parser.add_argument(
        '--plain',
        action='store_true',
        help='Print plain text instead of HTML markup'
    )
    parser.add_argument(
        '--pdf',
        type=str,
        help='Optional path to write the result as a PDF document'
    )
    parser.add_argument(
        '--deck',
        type=str,
        help='Optional path to write generated questions as an Anki CSV deck'
    )
    parser.add_argument(
        '--copy',
        action='store_true',
        help='Copy the plain-text result to the clipboard'
    )

    args = parser.parse_args(argv)

    try:
        text = read_input(args.file)
    except FileNotFoundError:
        print(f"Error: File '{args.file}' not found")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read '{args.file}': {e}")
        return 1

    if args.limit > 0 and len(text) > args.limit:
        text = text[:args.limit]

    text = text.strip()
    if not text:
        print(f"Error: {EMPTY_INPUT_MESSAGE}")
        return 1

    if args.action == 'keywords':
        print(format_keywords(text))
        return 0

    try:
        result = run_action(args.action, text, args.style)
    except Exception as e:
        print(f"Error processing text: {e}")
        return 1

    plain = to_plain_text(result)
    print(plain if args.plain else result)

    try:
        if args.pdf:
            write_pdf(plain, args.pdf)
            print(f"\nWrote PDF to {args.pdf}")
        if args.deck:
            cards = QuestionGenerator.build_cards(text, args.style)
            write_deck(cards, args.deck)
            print(f"Wrote {len(cards)} cards to {args.deck}")
        if args.copy:
            print("Copied!" if copy_to_clipboard(plain) else "Failed to copy")
    except ExportError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
