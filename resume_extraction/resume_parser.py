import logging
from typing import Callable, Optional, TypeVar

from .config import DEFAULT_CONFIG, ExtractionConfig
from .contact_extractor import ContactExtractor
from .education_parser import EducationParser
from .errors import MissingResumeTextError
from .experience_parser import ExperienceParser
from .models.resume import ContactInfo, ExtractedResumeData
from .normalizer import normalize
from .section_segmenter import EDUCATION, EXPERIENCE, SKILLS, SectionSegmenter
from .skills_extractor import SkillsExtractor
from .summary_extractor import SummaryExtractor

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ResumeParser:
    """Parse resume text into structured format"""

    def __init__(self, config: ExtractionConfig = DEFAULT_CONFIG,
                 segmenter: Optional[SectionSegmenter] = None):
        self.config = config
        self.segmenter = segmenter or SectionSegmenter(config=config)
        self.contact_extractor = ContactExtractor(config)
        self.summary_extractor = SummaryExtractor(config=config)
        self.experience_parser = ExperienceParser()
        self.education_parser = EducationParser()
        self.skills_extractor = SkillsExtractor(config)

    def parse(self, text: str) -> ExtractedResumeData:
        if text is None:
            raise MissingResumeTextError("No resume text provided")
        if not isinstance(text, str):
            raise TypeError(f"Resume text must be str, not {type(text).__name__}")

        normalized = normalize(text)
        logger.debug(f"Parsing resume text ({len(normalized.paragraphs)} chars)")

        contact = self._run('contact', lambda: self.contact_extractor.extract(normalized), ContactInfo())
        zones = self._run('segmentation', lambda: self.segmenter.segment(normalized.paragraphs), {})
        summary = self._run('summary', lambda: self.summary_extractor.extract(normalized.paragraphs), '')
        experience = self._run('experience', lambda: self.experience_parser.parse(zones.get(EXPERIENCE, '')), [])
        education = self._run('education', lambda: self.education_parser.parse(zones.get(EDUCATION, '')), [])
        skills = self._run('skills', lambda: self.skills_extractor.extract(zones.get(SKILLS, '')), [])

        return ExtractedResumeData(
            contact=contact,
            summary=summary,
            experience=tuple(experience),
            education=tuple(education),
            skills=tuple(skills),
            raw_text=normalized.paragraphs,
        )

    @staticmethod
    def _run(stage: str, step: Callable[[], T], default: T) -> T:
        try:
            return step()
        except Exception:
            logger.exception(f"Resume {stage} extraction failed; leaving it empty")
            return default


_default_parser = ResumeParser()


def extract_and_parse_resume(raw_text: str) -> ExtractedResumeData:
    """Turn decoded resume text into an `ExtractedResumeData` record"""
    return _default_parser.parse(raw_text)
