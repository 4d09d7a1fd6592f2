from .document import DecodedDocument, DocumentExtractionResult
from .resume import ContactInfo, EducationEntry, ExperienceEntry, ExtractedResumeData

__all__ = [
    "ContactInfo",
    "DecodedDocument",
    "DocumentExtractionResult",
    "EducationEntry",
    "ExperienceEntry",
    "ExtractedResumeData",
]
