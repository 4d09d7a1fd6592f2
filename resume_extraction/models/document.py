from dataclasses import dataclass
from typing import Any, Dict, Optional

from .resume import ExtractedResumeData


@dataclass(frozen=True)
class DecodedDocument:
    """Text handed over by the document decoder"""
    text: str
    page_count: Optional[int]
    processing_status: str  # pdf_success, docx_success, text_success, extraction_failed


@dataclass(frozen=True)
class DocumentExtractionResult:
    """Structured data plus metadata about the uploaded document"""
    title: str
    data: ExtractedResumeData
    page_count: Optional[int]
    word_count: int
    processing_status: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'pageCount': self.page_count,
            'wordCount': self.word_count,
            'processingStatus': self.processing_status,
            'data': self.data.to_dict(),
        }
