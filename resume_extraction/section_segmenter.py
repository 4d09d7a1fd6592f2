"""
Coarse partitioning of resume text into labeled zones.

Each paragraph is offered to an ordered table of section rules; the first rule
whose keywords appear in the paragraph claims it. Paragraphs no rule claims
become the summary (once, if their length looks like a summary) or `other`.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from .config import DEFAULT_CONFIG, ExtractionConfig

logger = logging.getLogger(__name__)

SUMMARY = 'summary'
EXPERIENCE = 'experience'
EDUCATION = 'education'
SKILLS = 'skills'
OTHER = 'other'

SECTION_NAMES = (SUMMARY, EXPERIENCE, EDUCATION, SKILLS, OTHER)

_PARAGRAPH_BREAK = re.compile(r'\n\s*\n')


@dataclass(frozen=True)
class SectionRule:
    """Assigns a paragraph to `section` when any keyword occurs as a whole word"""
    section: str
    keywords: Sequence[str]
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        alternatives = '|'.join(re.escape(k) for k in sorted(self.keywords, key=len, reverse=True))
        object.__setattr__(self, 'pattern', re.compile(rf'\b(?:{alternatives})\b', re.IGNORECASE))

    def matches(self, paragraph: str) -> bool:
        return bool(self.keywords) and self.pattern.search(paragraph) is not None


# Precedence order matters: a paragraph naming both experience and education
# is filed under experience.
DEFAULT_RULES = (
    SectionRule(EXPERIENCE, ('work experience', 'professional experience', 'employment', 'experience')),
    SectionRule(EDUCATION, ('education', 'academic', 'degree', 'university', 'college')),
    SectionRule(SKILLS, ('skills', 'technologies', 'technical skills', 'competencies')),
)


def split_paragraphs(text: str) -> List[str]:
    return [p.strip() for p in _PARAGRAPH_BREAK.split(text) if p.strip()]


class SectionSegmenter:

    def __init__(self, rules: Iterable[SectionRule] = DEFAULT_RULES,
                 config: ExtractionConfig = DEFAULT_CONFIG):
        self.rules = tuple(rules)
        self.config = config

    def classify(self, paragraph: str) -> str:
        """Return the section claimed by the first matching rule, or `other`"""
        for rule in self.rules:
            if rule.matches(paragraph):
                return rule.section
        return OTHER

    def segment(self, text: str) -> Dict[str, str]:
        zones: Dict[str, List[str]] = {name: [] for name in SECTION_NAMES}
        for rule in self.rules:
            zones.setdefault(rule.section, [])

        for paragraph in split_paragraphs(text):
            section = self.classify(paragraph)
            if section == OTHER and self._looks_like_summary(paragraph, zones[SUMMARY]):
                section = SUMMARY
            zones[section].append(paragraph)

        logger.debug("Zones: " + ", ".join(f"{name}={len(parts)}" for name, parts in zones.items()))
        return {name: '\n\n'.join(parts) for name, parts in zones.items()}

    def _looks_like_summary(self, paragraph: str, assigned: List[str]) -> bool:
        cfg = self.config
        return not assigned and cfg.summary_zone_min_length <= len(paragraph) < cfg.summary_zone_max_length
