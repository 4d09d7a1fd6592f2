import logging
import re
from typing import List, NamedTuple, Optional, Tuple

from .models.resume import ExperienceEntry
from .normalizer import collapse_whitespace

logger = logging.getLogger(__name__)

PRESENT = 'Present'

ROLE_KEYWORDS = ('Engineer', 'Developer', 'Manager', 'Analyst', 'Specialist', 'Coordinator',
                 'Director', 'Lead', 'Senior', 'Junior', 'Intern')
ORGANIZATION_KEYWORDS = ('Inc', 'LLC', 'Corp', 'Corporation', 'Company', 'Technologies', 'Systems')

BULLET_CHARS = '•●▪◦‣·*-–'

_YEAR = re.compile(r'\b(?:19|20)\d{2}\b')
_ONGOING = re.compile(r'\b(?:present|current|now)\b', re.IGNORECASE)
_DATE_LINE = re.compile(r'\b(?:(?:19|20)\d{2}|present)\b', re.IGNORECASE)
_PARENTHETICAL = re.compile(r'\([^)]*\)')
_SEPARATOR = re.compile(r'\s+(?:at|@|\||-|–|—)\s+')
_TRAILING_DATES = re.compile(r'[\s,(|–-]*\b(?:(?:19|20)\d{2}|present)\b.*$', re.IGNORECASE)


def _keyword_pattern(keywords) -> re.Pattern:
    # Title case or all caps; lowercase prose such as "led the senior team" stays out
    variants = sorted({k for k in keywords} | {k.upper() for k in keywords}, key=len, reverse=True)
    return re.compile(r'\b(?:%s)\b' % '|'.join(re.escape(v) for v in variants))


_ROLE = _keyword_pattern(ROLE_KEYWORDS)
_ORGANIZATION = _keyword_pattern(ORGANIZATION_KEYWORDS)


def strip_bullet(line: str) -> str:
    return line.strip().lstrip(BULLET_CHARS).strip()


def resolve_date_range(text: str) -> Tuple[str, str]:
    """Turn a free-form date fragment into (start_date, end_date)"""
    years = _YEAR.findall(text)
    if _ONGOING.search(text):
        return (years[0] if years else ''), PRESENT
    if len(years) >= 2:
        return years[0], years[-1]
    if len(years) == 1:
        return years[0], years[0]
    return '', ''


class _Anchor(NamedTuple):
    title_at: int
    title: str
    company: str
    dates: str
    body_at: int


class ExperienceParser:
    """Split an experience zone into job entries.

    An entry is a title line (role keyword), then the next line naming an
    organization, then the next line carrying a year or "Present", then
    description lines up to the title line of the next entry. A title line
    that also names the organization ("Developer at Acme Inc, 2019 - 2021")
    supplies both.
    """

    def parse(self, zone: str) -> List[ExperienceEntry]:
        lines = [strip_bullet(line) for line in zone.split('\n')]
        lines = [line for line in lines if line]

        anchors: List[_Anchor] = []
        index = 0
        while index < len(lines):
            anchor = self._match_entry(lines, index)
            if anchor is None:
                index += 1
                continue
            anchors.append(anchor)
            index = anchor.body_at

        entries = []
        for position, anchor in enumerate(anchors):
            body_end = anchors[position + 1].title_at if position + 1 < len(anchors) else len(lines)
            start_date, end_date = resolve_date_range(anchor.dates)
            entries.append(ExperienceEntry(
                title=anchor.title,
                company=anchor.company,
                start_date=start_date,
                end_date=end_date,
                description=collapse_whitespace(' '.join(lines[anchor.body_at:body_end])),
            ))
        logger.debug(f"Experience entries found: {len(entries)}")
        return entries

    def _match_entry(self, lines: List[str], index: int) -> Optional[_Anchor]:
        line = lines[index]
        if not _ROLE.search(line):
            return None

        combined = _split_combined(line)
        if combined is not None:
            title, company = combined
            if _DATE_LINE.search(line):
                return _Anchor(index, title, company, line, index + 1)
            return self._with_dates(lines, index, title, company, company_at=index)

        for cursor in range(index + 1, len(lines)):
            if _ORGANIZATION.search(lines[cursor]):
                return self._with_dates(lines, index, line, lines[cursor], company_at=cursor)
            if _ROLE.search(lines[cursor]):
                return None
        return None

    def _with_dates(self, lines: List[str], index: int, title: str, company: str, company_at: int) -> _Anchor:
        # The date may share the company line ("Acme Inc | 2019 - 2021")
        search_from = company_at if company_at > index else index + 1
        for cursor in range(search_from, len(lines)):
            if cursor != company_at and _ROLE.search(lines[cursor]):
                break
            if _DATE_LINE.search(lines[cursor]):
                return _Anchor(index, title, company, lines[cursor], cursor + 1)
        return _Anchor(index, title, company, '', company_at + 1)


def _split_combined(line: str) -> Optional[Tuple[str, str]]:
    """Split "Role - Company Inc (2019 - 2021)" style lines into (role, company)"""
    if not _ORGANIZATION.search(line):
        return None
    parts = [part.strip() for part in _SEPARATOR.split(_PARENTHETICAL.sub(' ', line)) if part.strip()]
    for at, part in enumerate(parts):
        if not _ROLE.search(part):
            continue
        for other in parts[at + 1:]:
            if _ORGANIZATION.search(other):
                company = _TRAILING_DATES.sub('', other).strip(' ,|')
                return part, company or other
        break
    return None
