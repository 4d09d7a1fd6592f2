import io
import logging
import os
import re

import docx2txt
import pdfplumber
import PyPDF2
from docx import Document

from .errors import UnsupportedDocumentError
from .models.document import DecodedDocument, DocumentExtractionResult
from .resume_parser import extract_and_parse_resume

logger = logging.getLogger(__name__)

PDF_SUCCESS = 'pdf_success'
DOCX_SUCCESS = 'docx_success'
TEXT_SUCCESS = 'text_success'
EXTRACTION_FAILED = 'extraction_failed'

SUPPORTED_EXTENSIONS = ('.pdf', '.docx', '.txt')

_CID_RE = re.compile(r"\(cid:\d+\)")


class DocumentProcessor:
    """Decode uploaded document bytes into plain text"""

    @staticmethod
    def extract_text_from_pdf(data: bytes) -> DecodedDocument:
        """Extract text from PDF using multiple methods for robustness"""
        text = ""
        page_count = None

        # Try pdfplumber first (better for tables)
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                page_count = len(pdf.pages)
                for page in pdf.pages:
                    page_text = page.extract_text()
                    if page_text:
                        text += page_text + "\n"
        except Exception as e:
            logger.warning(f"pdfplumber failed: {e}")

        # Fallback to PyPDF2
        if not text.strip():
            try:
                reader = PyPDF2.PdfReader(io.BytesIO(data))
                page_count = len(reader.pages)
                for page in reader.pages:
                    text += (page.extract_text() or "") + "\n"
            except Exception as e:
                logger.error(f"PDF extraction failed: {e}")

        text = _CID_RE.sub("", text).strip()
        status = PDF_SUCCESS if text else EXTRACTION_FAILED
        return DecodedDocument(text=text, page_count=page_count, processing_status=status)

    @staticmethod
    def extract_text_from_docx(data: bytes) -> DecodedDocument:
        """Extract text from DOCX files"""
        try:
            # Try docx2txt first (simpler)
            text = docx2txt.process(io.BytesIO(data))
            if not text or not text.strip():
                doc = Document(io.BytesIO(data))
                text = "\n".join([para.text for para in doc.paragraphs])
        except Exception as e:
            logger.error(f"DOCX extraction failed: {e}")
            text = ""
        text = text.strip()
        status = DOCX_SUCCESS if text else EXTRACTION_FAILED
        # Word files carry no reliable page count
        return DecodedDocument(text=text, page_count=None, processing_status=status)

    @staticmethod
    def extract_text_from_txt(data: bytes) -> DecodedDocument:
        text = data.decode('utf-8', errors='replace').lstrip('\ufeff').strip()
        return DecodedDocument(text=text, page_count=1, processing_status=TEXT_SUCCESS)

    @staticmethod
    def extract_text(data: bytes, filename: str) -> DecodedDocument:
        file_ext = os.path.splitext(filename)[1].lower()
        if file_ext == '.pdf':
            return DocumentProcessor.extract_text_from_pdf(data)
        elif file_ext == '.docx':
            return DocumentProcessor.extract_text_from_docx(data)
        elif file_ext == '.txt':
            return DocumentProcessor.extract_text_from_txt(data)
        else:
            raise UnsupportedDocumentError(f"Unsupported file format: {file_ext or filename}")


def title_from_filename(filename: str) -> str:
    stem = os.path.splitext(os.path.basename(filename))[0]
    return re.sub(r'[-_]', ' ', stem).strip()


def extract_and_parse_document(data: bytes, filename: str) -> DocumentExtractionResult:
    """Decode document bytes, then run the extraction pipeline on the text"""
    decoded = DocumentProcessor.extract_text(data, filename)
    logger.info(f"Decoded {filename}: status={decoded.processing_status}, pages={decoded.page_count}")
    resume = extract_and_parse_resume(decoded.text)
    return DocumentExtractionResult(
        title=title_from_filename(filename),
        data=resume,
        page_count=decoded.page_count,
        word_count=resume.word_count,
        processing_status=decoded.processing_status,
    )
