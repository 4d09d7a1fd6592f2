import logging
import re
from typing import List, Optional

from .config import DEFAULT_CONFIG, ExtractionConfig
from .normalizer import collapse_whitespace

logger = logging.getLogger(__name__)

SUMMARY_HEADINGS = (
    'PROFESSIONAL SUMMARY',
    'SUMMARY',
    'PROFILE',
    'OVERVIEW',
    'OBJECTIVE',
    'ABOUT',
    'CAREER OBJECTIVE',
)

_SECTION_HEADING = re.compile(
    r'^(?:(?:work|professional)\s+)?(?:experience|education|(?:technical\s+)?skills)\b\s*:?',
    re.IGNORECASE,
)
_CAPS_HEADING = re.compile(r"^[A-Z][A-Z0-9 &/,.'-]{2,}:?$")


def _heading_pattern(heading: str) -> re.Pattern:
    words = r'\s+'.join(re.escape(word) for word in heading.split())
    return re.compile(rf'^{words}\s*(?::\s*(?P<rest>.*))?$', re.IGNORECASE)


def _ends_summary(line: str) -> bool:
    if _SECTION_HEADING.match(line) and len(line) <= 40:
        return True
    letters = [ch for ch in line if ch.isalpha()]
    return len(letters) >= 3 and _CAPS_HEADING.match(line) is not None


class SummaryExtractor:
    """Find an explicitly headed summary or objective paragraph"""

    def __init__(self, headings=SUMMARY_HEADINGS, config: ExtractionConfig = DEFAULT_CONFIG):
        self.headings = tuple(headings)
        self.config = config
        self._patterns = [(h, _heading_pattern(h)) for h in self.headings]

    def extract(self, text: str) -> str:
        lines = [line.strip() for line in text.split('\n')]
        for heading, pattern in self._patterns:
            for index, line in enumerate(lines):
                match = pattern.match(line)
                if not match:
                    continue
                summary = self._capture(match.group('rest'), lines[index + 1:])
                if self._acceptable(summary):
                    logger.debug(f"Summary found under heading {heading!r} ({len(summary)} chars)")
                    return summary
        return ''

    def _capture(self, inline: Optional[str], following: List[str]) -> str:
        body = [inline] if inline else []
        for line in following:
            if _ends_summary(line):
                break
            body.append(line)
        return collapse_whitespace(' '.join(body))

    def _acceptable(self, summary: str) -> bool:
        return len(summary) > self.config.summary_min_length
