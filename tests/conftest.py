"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - pdf_factory: Builds small text-only PDFs in memory
    - book_pdf_bytes: Five-page PDF with a repeated footer and page numbers
    - book_pages: Raw page texts mirroring book_pdf_bytes
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app

PdfFactory = Callable[..., bytes]

BOOK_PAGE_COUNT = 5
REPEATED_FOOTER = "MyBook Inc."


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: list[list[str]], info: dict[str, str] | None = None) -> bytes:
    """Assemble a minimal PDF with one Helvetica text line per entry.

    Args:
        pages: Lines of text for each page. An empty list gives a blank page.
        info: Optional document info entries, e.g. {"Title": "..."}.

    Returns:
        Complete PDF file bytes with a valid xref table.
    """
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{page_id} 0 R" for page_id in page_ids)

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    for page_id, lines in zip(page_ids, pages, strict=True):
        ops = ["BT", "/F1 12 Tf", "72 720 Td"]
        for index, line in enumerate(lines):
            if index:
                ops.append("0 -18 Td")
            ops.append(f"({_escape(line)}) Tj")
        ops.append("ET")
        stream = "\n".join(ops).encode("latin-1")

        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    info_ref = ""
    if info:
        entries = " ".join(f"/{key} ({_escape(value)})" for key, value in info.items())
        objects.append(f"<< {entries} >>".encode("latin-1"))
        info_ref = f" /Info {len(objects)} 0 R"

    buffer = bytearray(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(buffer))
        buffer += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(buffer)
    buffer += f"xref\n0 {len(objects) + 1}\n".encode()
    buffer += b"0000000000 65535 f \n"
    for offset in offsets:
        buffer += f"{offset:010d} 00000 n \n".encode()
    buffer += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R{info_ref} >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()

    return bytes(buffer)


def book_page_lines(page_number: int) -> list[str]:
    """Lines of one page of the sample book."""
    return [
        REPEATED_FOOTER,
        f"Chapter {page_number} opens with a sentence unique to page {page_number}.",
        "It continues about the com-",
        f"puter on page {page_number} and nothing else.",
        str(page_number),
    ]


@pytest.fixture
def pdf_factory() -> PdfFactory:
    """Return the in-memory PDF builder."""
    return build_pdf


@pytest.fixture
def book_pages() -> list[str]:
    """Raw text of each sample book page, newline separated."""
    return ["\n".join(book_page_lines(n)) for n in range(1, BOOK_PAGE_COUNT + 1)]


@pytest.fixture
def book_pdf_bytes() -> bytes:
    """Five-page PDF whose pages all carry the same footer line."""
    return build_pdf([book_page_lines(n) for n in range(1, BOOK_PAGE_COUNT + 1)])


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
