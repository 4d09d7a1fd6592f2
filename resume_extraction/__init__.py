from .document_processor import DocumentProcessor, extract_and_parse_document
from .errors import MissingResumeTextError, ResumeExtractionError, UnsupportedDocumentError
from .models import ContactInfo, EducationEntry, ExperienceEntry, ExtractedResumeData
from .resume_parser import ResumeParser, extract_and_parse_resume

__all__ = [
    "ContactInfo",
    "DocumentProcessor",
    "EducationEntry",
    "ExperienceEntry",
    "ExtractedResumeData",
    "MissingResumeTextError",
    "ResumeExtractionError",
    "ResumeParser",
    "UnsupportedDocumentError",
    "extract_and_parse_document",
    "extract_and_parse_resume",
]
