"""
Export collaborators for rendered study-aid output
- plain text (what the browser shows as innerText)
- paginated PDF document
- Anki-compatible CSV deck of generated questions
- system clipboard
"""

import csv
import io
import os
import re
from typing import List, Optional

import pyperclip
from fpdf import FPDF

from nlp_pipeline import QuestionCard

LINES_PER_PAGE = int(os.environ.get('STUDY_AID_LINES_PER_PAGE', '50'))

# A4 layout in millimetres
LEFT_MARGIN = 15
TOP_MARGIN = 15
LINE_HEIGHT = 5
FONT_SIZE = 11

# Only the markup the pipeline emits; anything else belongs to the user's text
PIPELINE_TAGS = re.compile(r'(?i)</?(?:b|i|mark|ul|li)>')

TYPOGRAPHIC = str.maketrans({
    '‘': "'", '’': "'", '‚': "'",
    '“': '"', '”': '"', '„': '"',
    '–': '-', '—': '-', '−': '-',
    '…': '...', '•': '*',
})


class ExportError(Exception):
    """Raised when there is nothing to export"""


def to_plain_text(markup: str) -> str:
    """Convert the HTML fragments produced by the pipeline to plain text"""
    text = re.sub(r'(?i)<br\s*/?>', '\n', markup)
    text = re.sub(r'(?i)</li>\s*', '\n', text)
    text = re.sub(r'(?i)</?ul>', '\n', text)
    text = PIPELINE_TAGS.sub('', text)
    text = re.sub(r'\n{3,}', '\n\n', text)
    return text.strip()


def pdf_safe(line: str) -> str:
    """Fold typographic punctuation to ASCII; core PDF fonts only cover Latin-1"""
    return line.translate(TYPOGRAPHIC).encode('latin-1', 'replace').decode('latin-1')


def new_document() -> FPDF:
    pdf = FPDF(unit='mm', format='A4')
    pdf.set_margins(LEFT_MARGIN, TOP_MARGIN)
    pdf.set_auto_page_break(False)
    pdf.set_font('Helvetica', size=FONT_SIZE)
    return pdf


def wrap_lines(text: str, pdf: Optional[FPDF] = None) -> List[str]:
    """
    Wrap every paragraph so each line measures at most the page's
    effective width in the document font. Blank lines are kept; words
    wider than the page are broken between characters.
    """
    pdf = pdf or new_document()

    def fits(candidate: str) -> bool:
        return pdf.get_string_width(pdf_safe(candidate)) <= pdf.epw

    lines: List[str] = []
    for paragraph in text.split('\n'):
        line = ''
        for word in paragraph.split():
            candidate = f"{line} {word}" if line else word
            if fits(candidate):
                line = candidate
                continue
            if line:
                lines.append(line)
            line = ''
            for char in word:
                if line and not fits(line + char):
                    lines.append(line)
                    line = ''
                line += char
        lines.append(line)
    return lines


def paginate(lines: List[str], lines_per_page: int = LINES_PER_PAGE) -> List[List[str]]:
    if not lines:
        return []
    return [lines[i:i + lines_per_page] for i in range(0, len(lines), lines_per_page)]


def write_pdf(content: str, output_path: Optional[str] = None) -> bytes:
    """
    Render plain text into a paginated A4 PDF
    Returns the PDF bytes; also writes them to output_path when given
    """
    if not content or not content.strip():
        raise ExportError('No content to download!')

    pdf = new_document()
    for page in paginate(wrap_lines(content.strip(), pdf)):
        pdf.add_page()
        y = TOP_MARGIN
        for line in page:
            if line:
                pdf.text(LEFT_MARGIN, y, pdf_safe(line))
            y += LINE_HEIGHT

    data = bytes(pdf.output())
    if output_path:
        with open(output_path, 'wb') as f:
            f.write(data)
    return data


def card_to_row(card: QuestionCard) -> List[str]:
    """Front/back pair for one question card"""
    front = card.prompt
    if card.options:
        first, second, third = card.options
        front = f"{front} A) {first} B) {second} C) {third}"
    back = f"{card.keyword} - {card.context}" if card.context else card.keyword
    return [front, back]


def _write_rows(f, cards: List[QuestionCard]) -> None:
    writer = csv.writer(f)
    writer.writerow(['Front', 'Back'])
    for card in cards:
        writer.writerow(card_to_row(card))


def deck_csv(cards: List[QuestionCard]) -> str:
    """Anki-importable CSV deck as a string"""
    if not cards:
        raise ExportError('No questions to export')
    buffer = io.StringIO(newline='')
    _write_rows(buffer, cards)
    return buffer.getvalue()


def write_deck(cards: List[QuestionCard], output_path: str) -> None:
    """Write cards to CSV file in Anki-importable format"""
    if not cards:
        raise ExportError('No questions to export')

    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        _write_rows(f, cards)


def copy_to_clipboard(content: str) -> bool:
    """Copy text to the system clipboard; False when no clipboard is available"""
    if not content:
        raise ExportError('No content to copy!')
    try:
        pyperclip.copy(content)
    except pyperclip.PyperclipException as e:
        print(f"Failed to copy: {e}", flush=True)
        return False
    return True
