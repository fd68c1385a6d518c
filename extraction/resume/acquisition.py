#!/usr/bin/env python3
"""
Text Acquisition - Recover raw text from a resume PDF.

Two stages:
1. Embedded text via pypdf (fast, accurate for digitally produced PDFs)
2. OCR fallback via PyMuPDF page rendering + Tesseract, only when stage 1
   yields fewer than `min_text_length` significant characters (scans)

The whole call runs against a time budget. The OCR runtime (tesseract
binary, tessdata directory) is configured once per process.
"""
import io
import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

import pymupdf
import pytesseract
from PIL import Image
from pypdf import PasswordType, PdfReader

from core.config_loader import AcquisitionConfig
from extraction.resume.exceptions import (
    DocumentReadError,
    EmptyTextError,
    ImportTimeoutError,
)
from extraction.resume.models import RawDocumentText

logger = logging.getLogger(__name__)

PdfSource = Union[str, os.PathLike, bytes, bytearray, BinaryIO]


@dataclass(frozen=True)
class OcrRuntime:
    """Process-wide OCR runtime settings; read-only once configured."""
    asset_base_path: Optional[str] = None
    tesseract_cmd: Optional[str] = None

    def tesseract_config(self) -> str:
        if self.asset_base_path:
            return f'--tessdata-dir "{self.asset_base_path}"'
        return ""


_runtime: Optional[OcrRuntime] = None
_runtime_lock = threading.Lock()


def configure_acquisition(
    asset_base_path: Optional[str] = None,
    tesseract_cmd: Optional[str] = None,
) -> OcrRuntime:
    """
    One-time initialization of the OCR runtime.

    The first call wins; later calls with different settings are ignored
    with a warning and get the active runtime back.
    """
    global _runtime
    requested = OcrRuntime(asset_base_path=asset_base_path, tesseract_cmd=tesseract_cmd)

    with _runtime_lock:
        if _runtime is not None:
            if requested != _runtime and (asset_base_path or tesseract_cmd):
                logger.warning(
                    f"Text acquisition already configured ({_runtime}); ignoring {requested}"
                )
            return _runtime

        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        _runtime = requested
        logger.debug(f"Text acquisition configured: {_runtime}")
        return _runtime


def read_source(source: PdfSource) -> bytes:
    """Load a PDF from a path, raw bytes or a binary file object."""
    try:
        if isinstance(source, (bytes, bytearray)):
            data = bytes(source)
        elif isinstance(source, (str, os.PathLike)):
            data = Path(source).read_bytes()
        else:
            data = source.read()
    except OSError as e:
        raise DocumentReadError(f"Failed to read PDF file: {e}") from e

    if not data:
        raise DocumentReadError("PDF file is empty")
    return data


def _check_cancelled(cancel: Optional[threading.Event]) -> None:
    if cancel is not None and cancel.is_set():
        raise ImportTimeoutError("Text acquisition cancelled")


@contextmanager
def rendered_page(page: "pymupdf.Page", scale: float) -> Iterator[Image.Image]:
    """Render one page to an RGB image; the raster buffers are released on exit."""
    pixmap = page.get_pixmap(matrix=pymupdf.Matrix(scale, scale), alpha=False)
    image = Image.frombytes("RGB", (pixmap.width, pixmap.height), pixmap.samples)
    try:
        yield image
    finally:
        image.close()
        del pixmap


class TextAcquisition:
    """Extract raw text from a PDF, with OCR fallback for image-only documents."""

    def __init__(self, config: Optional[AcquisitionConfig] = None):
        self.config = config or AcquisitionConfig()
        self.runtime = configure_acquisition(
            asset_base_path=self.config.asset_base_path,
            tesseract_cmd=self.config.tesseract_cmd,
        )

    def extract(self, source: PdfSource) -> str:
        """Return the document's raw text (one line break per page)."""
        return self.acquire(source).text

    def acquire(self, source: PdfSource) -> RawDocumentText:
        """
        Run text acquisition under the configured time budget.

        Raises:
            DocumentReadError: If the file is unreadable or not a PDF
            EmptyTextError: If embedded text and OCR both fall below threshold
            ImportTimeoutError: If the whole call exceeds timeout_seconds
        """
        data = read_source(source)
        cancel = threading.Event()
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="text-acquisition")

        try:
            future = executor.submit(self._acquire, data, cancel)
            return future.result(timeout=self.config.timeout_seconds)
        except FutureTimeoutError as e:
            cancel.set()
            logger.warning(f"Text acquisition timed out after {self.config.timeout_seconds}s")
            raise ImportTimeoutError(
                f"Text acquisition exceeded {self.config.timeout_seconds}s"
            ) from e
        finally:
            # The worker stops at its next page boundary once cancelled
            executor.shutdown(wait=False)

    def _acquire(self, data: bytes, cancel: threading.Event) -> RawDocumentText:
        minimum = self.config.min_text_length
        document = self.extract_embedded_text(data, cancel)

        if document.significant_length() >= minimum:
            return document

        logger.info(
            f"Embedded text too short ({document.significant_length()} < {minimum} chars), "
            f"document is likely image-only"
        )

        best = document
        if self.config.ocr_enabled:
            ocr_document = self.ocr(data, cancel)
            if ocr_document.significant_length() > document.significant_length():
                best = ocr_document

        if best.significant_length() < minimum:
            raise EmptyTextError(
                f"Only {best.significant_length()} characters could be extracted "
                f"(minimum {minimum})",
                partial_text=best.text,
            )
        return best

    def extract_embedded_text(
        self, data: bytes, cancel: Optional[threading.Event] = None
    ) -> RawDocumentText:
        """Extract the PDF's embedded text layer, page by page in order."""
        try:
            reader = PdfReader(io.BytesIO(data))
            if reader.is_encrypted:
                if reader.decrypt("") == PasswordType.NOT_DECRYPTED:
                    raise DocumentReadError("PDF is password protected")
            pages = reader.pages
            page_count = len(pages)
        except DocumentReadError:
            raise
        except Exception as e:
            raise DocumentReadError(f"Failed to open PDF: {e}") from e

        if page_count == 0:
            raise DocumentReadError("PDF file has no pages")

        pages_text = []
        for i, page in enumerate(pages):
            _check_cancelled(cancel)
            try:
                pages_text.append(page.extract_text() or "")
            except Exception as e:
                logger.warning(f"Failed to extract text from page {i + 1}: {e}")
                pages_text.append("")

        document = RawDocumentText(pages=pages_text, source="text")
        logger.debug(
            f"Extracted embedded text ({page_count} pages, "
            f"{document.significant_length()} significant chars)"
        )
        return document

    def ocr(self, data: bytes, cancel: Optional[threading.Event] = None) -> RawDocumentText:
        """
        Render each page and run Tesseract over it, sequentially.

        A missing tesseract binary yields an empty result rather than an
        error; the caller's threshold check then reports EmptyTextError.
        """
        try:
            document = pymupdf.open(stream=data, filetype="pdf")
        except Exception as e:
            raise DocumentReadError(f"Failed to open PDF for OCR: {e}") from e

        pages_text = []
        with document:
            for index, page in enumerate(document):
                _check_cancelled(cancel)
                try:
                    with rendered_page(page, self.config.ocr_scale) as image:
                        pages_text.append(self._recognize(image))
                except pytesseract.TesseractNotFoundError:
                    logger.warning("Tesseract is not installed, OCR skipped")
                    return RawDocumentText(pages=[], source="ocr")
                logger.debug(f"OCR finished for page {index + 1}")

        result = RawDocumentText(pages=pages_text, source="ocr")
        logger.info(f"OCR recovered {result.significant_length()} significant chars")
        return result

    def _recognize(self, image: Image.Image) -> str:
        languages = self.config.ocr_languages
        config = self.runtime.tesseract_config()
        try:
            return pytesseract.image_to_string(image, lang=languages, config=config)
        except pytesseract.TesseractError as e:
            # Usually a missing traineddata file; retry with the primary script only
            primary = languages.split('+')[0]
            if primary == languages:
                logger.warning(f"OCR failed: {e}")
                return ""
            logger.warning(f"OCR with '{languages}' failed ({e}), retrying with '{primary}'")
            try:
                return pytesseract.image_to_string(image, lang=primary, config=config)
            except pytesseract.TesseractError as retry_error:
                logger.warning(f"OCR failed: {retry_error}")
                return ""
