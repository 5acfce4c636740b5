import io
from pathlib import Path

import docx
import pytest
from pptx import Presentation
from pptx.util import Inches
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

from force_tracker.parsers.docx_parser import DocxParser
from force_tracker.parsers.models import ExtractedDocument
from force_tracker.parsers.pdf_parser import PdfParser
from force_tracker.parsers.pptx_parser import PptxParser

LONG_LINE = "a" * 105


def _create_sample_pdf(path: Path) -> None:
    """Creates a deterministic single-page PDF for integration testing."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    width, height = LETTER

    text = c.beginText(40, height - 50)
    text.setFont("Helvetica", 9)

    lines = [
        "COURSE OVERVIEW",
        "",
        "INTRODUCTION:",
        "machine learning lets computers learn from data.",
        "it is used widely in industry.",
        "",
        "METHODS",
        "we train models on labelled examples.",
        LONG_LINE,
    ]

    for line in lines:
        text.textLine(line)

    c.drawText(text)
    c.showPage()
    c.save()


def _create_font_heading_pdf(path: Path) -> None:
    """A lowercase title that is only a heading because of its size and spacing."""
    c = canvas.Canvas(str(path), pagesize=LETTER)

    c.setFont("Helvetica", 20)
    c.drawString(40, 700, "big lowercase title")
    c.setFont("Helvetica", 12)
    c.drawString(40, 650, "body text follows here.")
    c.drawString(40, 636, "more body text.")

    c.showPage()
    c.save()


def _create_multipage_pdf(path: Path) -> None:
    """Creates a deterministic three-page PDF, one body line per page."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    width, height = LETTER

    for word in ("one", "two", "three"):
        text = c.beginText(40, height - 50)
        text.textLine(f"page {word} content here.")
        c.drawText(text)
        c.showPage()

    c.save()


def _create_blank_pdf(path: Path) -> None:
    c = canvas.Canvas(str(path), pagesize=LETTER)
    c.showPage()
    c.save()


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test PDFs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("pdfs")

    _create_sample_pdf(dir_path / "sample.pdf")
    _create_font_heading_pdf(dir_path / "font_heading.pdf")
    _create_multipage_pdf(dir_path / "multipage.pdf")
    _create_blank_pdf(dir_path / "blank.pdf")

    return dir_path


@pytest.fixture(scope="module")
def parsed_sample(pdf_dir: Path) -> ExtractedDocument:
    """Parse sample PDF once, reuse across tests."""
    parser = PdfParser()
    with open(pdf_dir / "sample.pdf", "rb") as f:
        return parser.parse(f)


def _docx_bytes(paragraphs: list[str]) -> bytes:
    document = docx.Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture(scope="module")
def sample_docx() -> bytes:
    return _docx_bytes(
        [
            "Overview",
            "plants convert light into chemical energy.",
            "",
            "KEY TERMS",
            "chlorophyll absorbs light.",
        ]
    )


@pytest.fixture(scope="module")
def empty_docx() -> bytes:
    return _docx_bytes([])


@pytest.fixture(scope="module")
def parsed_docx(sample_docx: bytes) -> ExtractedDocument:
    return DocxParser().parse(sample_docx)


def _pptx_bytes(slides: list[tuple[str | None, str]]) -> bytes:
    """Build a deck; a None title uses the blank layout with a text box."""
    presentation = Presentation()
    for title, body in slides:
        if title is None:
            slide = presentation.slides.add_slide(presentation.slide_layouts[6])
            box = slide.shapes.add_textbox(Inches(1), Inches(1), Inches(6), Inches(2))
            box.text_frame.text = body
            continue
        slide = presentation.slides.add_slide(presentation.slide_layouts[1])
        slide.shapes.title.text = title
        slide.placeholders[1].text = body

    buffer = io.BytesIO()
    presentation.save(buffer)
    return buffer.getvalue()


@pytest.fixture(scope="module")
def sample_pptx() -> bytes:
    return _pptx_bytes(
        [
            ("Core Components", "SEO basics\nContent marketing"),
            ("Measuring Success", "Track conversions"),
            (None, "speaker notes for the wrap-up"),
        ]
    )


@pytest.fixture(scope="module")
def empty_pptx() -> bytes:
    return _pptx_bytes([])


@pytest.fixture(scope="module")
def parsed_pptx(sample_pptx: bytes) -> ExtractedDocument:
    return PptxParser().parse(sample_pptx)


@pytest.fixture(scope="module")
def table_and_group_pptx() -> bytes:
    """One title-only slide holding a 2x2 table and a grouped text box."""
    presentation = Presentation()
    slide = presentation.slides.add_slide(presentation.slide_layouts[5])
    slide.shapes.title.text = "Glossary"

    table = slide.shapes.add_table(
        2, 2, Inches(1), Inches(2), Inches(6), Inches(1.5)
    ).table
    for row, cells in enumerate([("Term", "Meaning"), ("SEO", "search engine optimization")]):
        for column, value in enumerate(cells):
            table.cell(row, column).text = value

    group = slide.shapes.add_group_shape()
    box = group.shapes.add_textbox(Inches(1), Inches(4), Inches(4), Inches(1))
    box.text_frame.text = "grouped note"

    buffer = io.BytesIO()
    presentation.save(buffer)
    return buffer.getvalue()
