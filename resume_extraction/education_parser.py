import logging
import re
from typing import List, Optional, Tuple

from .experience_parser import strip_bullet
from .models.resume import EducationEntry

logger = logging.getLogger(__name__)

_DEGREE = re.compile(
    r"\b(?:Bachelor|Master|Associate)(?:'?s)?\b|\bPh\.?\s?D\b|\b[BM]\.\s?[AS]\b",
    re.IGNORECASE,
)
_INSTITUTION = re.compile(r'\b(?:University|College|Institute)\b', re.IGNORECASE)
_GRADUATION_YEAR = re.compile(r'\b20\d{2}\b')
_GPA = re.compile(r'\bGPA\b\s*[:\-]?\s*(\d\.\d{1,2})|(\d\.\d{1,2})\s*(?:/\s*\d\.\d{1,2}\s*)?GPA\b', re.IGNORECASE)
_SEPARATOR = re.compile(r'\s*[,|–—]\s*|\s+-\s+')


def _split_degree_and_school(line: str) -> Optional[Tuple[str, str]]:
    """Split "B.S. in Biology, State University" into its degree and school"""
    parts = [part for part in _SEPARATOR.split(line) if part]
    degree = next((p for p in parts if _DEGREE.search(p)), None)
    school = next((p for p in parts if _INSTITUTION.search(p) and p != degree), None)
    if degree and school:
        return degree, school
    return None


class EducationParser:
    """Split an education zone into credential entries.

    A degree line, the next line naming an institution, then the next line
    carrying a 20xx year. A GPA anywhere inside the entry is attached.
    """

    def parse(self, zone: str) -> List[EducationEntry]:
        lines = [strip_bullet(line) for line in zone.split('\n')]
        lines = [line for line in lines if line]
        starts = [i for i, line in enumerate(lines) if _DEGREE.search(line)]

        entries = []
        for position, start in enumerate(starts):
            end = starts[position + 1] if position + 1 < len(starts) else len(lines)
            entry = self._parse_window(lines[start:end])
            if entry is not None:
                entries.append(entry)
        logger.debug(f"Education entries found: {len(entries)}")
        return entries

    def _parse_window(self, window: List[str]) -> Optional[EducationEntry]:
        degree_line = window[0]
        school_at = None

        combined = _split_degree_and_school(degree_line) if _INSTITUTION.search(degree_line) else None
        if combined is not None:
            degree, school = combined
            school_at = 0
        else:
            school_at = next((i for i in range(1, len(window)) if _INSTITUTION.search(window[i])), None)
            if school_at is None:
                return None
            degree, school = degree_line, window[school_at]

        year = ''
        for line in window[school_at:]:
            years = _GRADUATION_YEAR.findall(line)
            if years:
                # "2014 - 2018" graduates in 2018
                year = years[-1]
                break
        if not year and school_at > 0:
            years = _GRADUATION_YEAR.findall(degree_line)
            year = years[-1] if years else ''

        gpa_match = _GPA.search(' '.join(window))
        gpa = (gpa_match.group(1) or gpa_match.group(2)) if gpa_match else None

        return EducationEntry(
            degree=_GRADUATION_YEAR.sub('', degree).strip(' ,|–-'),
            school=_GRADUATION_YEAR.sub('', school).strip(' ,|–-'),
            year=year,
            gpa=gpa,
        )
