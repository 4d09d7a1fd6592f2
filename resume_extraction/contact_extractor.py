import logging
import re
from typing import List, Optional, Tuple

from .config import DEFAULT_CONFIG, ExtractionConfig
from .models.resume import ContactInfo
from .normalizer import NormalizedText

logger = logging.getLogger(__name__)

US_STATES = frozenset([
    'AL', 'AK', 'AZ', 'AR', 'CA', 'CO', 'CT', 'DE', 'DC', 'FL', 'GA', 'HI', 'ID',
    'IL', 'IN', 'IA', 'KS', 'KY', 'LA', 'ME', 'MD', 'MA', 'MI', 'MN', 'MS', 'MO',
    'MT', 'NE', 'NV', 'NH', 'NJ', 'NM', 'NY', 'NC', 'ND', 'OH', 'OK', 'OR', 'PA',
    'RI', 'SC', 'SD', 'TN', 'TX', 'UT', 'VT', 'VA', 'WA', 'WV', 'WI', 'WY', 'PR',
])

# Matched case-sensitively so tokens such as "ASP.NET" are not taken for domains
WEBSITE_TLDS = ('com', 'net', 'org', 'io', 'dev', 'me', 'co', 'ai', 'app', 'info', 'tech', 'us', 'site', 'xyz')


class ContactExtractor:
    """Pull identity and contact fields out of the full resume text"""

    email_pattern = re.compile(r'[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}')

    # Tried in order; the first pattern with any match wins.
    phone_patterns = (
        re.compile(r'\+1[\s.-]?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b'),
        re.compile(r'\(\d{3}\)\s?\d{3}[\s.-]\d{4}\b'),
        re.compile(r'\b\d{3}[.-]\d{3}[.-]\d{4}\b'),
        re.compile(r'\b\d{3} \d{3} \d{4}\b'),
    )

    linkedin_pattern = re.compile(
        r'(?:https?://)?(?:[\w-]+\.)?linkedin\.com/(?:in|pub)/([A-Za-z0-9_%-]+)', re.IGNORECASE)

    website_pattern = re.compile(
        r'(?<![@\w./])(?:https?://)?(?:www\.)?(?:[A-Za-z0-9-]+\.)+(?:%s)\b(?:/[^\s,;|()]*)?'
        % '|'.join(WEBSITE_TLDS))

    location_pattern = re.compile(
        r"\b([A-Z][a-zA-Z.'-]*(?: [A-Z][a-zA-Z.'-]*){0,2}), ?([A-Z]{2})\b(?: (\d{5})(?:-\d{4})?\b)?")

    name_pattern = re.compile(r"^[A-Z][\w'.-]*(?: [A-Z][\w'.-]*)+$")

    def __init__(self, config: ExtractionConfig = DEFAULT_CONFIG):
        self.config = config

    def extract(self, text: NormalizedText) -> ContactInfo:
        email, email_spans = self._extract_email(text.collapsed)
        linkedin, linkedin_spans = self._extract_linkedin(text.collapsed)
        contact = ContactInfo(
            full_name=self._extract_name(text.lines),
            email=email,
            phone=self._extract_phone(text.collapsed),
            location=self._extract_location(text.lines),
            linkedin=linkedin,
            website=self._extract_website(text.collapsed, email_spans + linkedin_spans),
        )
        logger.debug(f"Contact fields found: {sorted(contact.to_dict())}")
        return contact

    def _extract_email(self, text: str) -> Tuple[Optional[str], List[Tuple[int, int]]]:
        matches = list(self.email_pattern.finditer(text))
        spans = [m.span() for m in matches]
        return (matches[0].group() if matches else None), spans

    def _extract_phone(self, text: str) -> Optional[str]:
        for pattern in self.phone_patterns:
            match = pattern.search(text)
            if match:
                return match.group().strip()
        return None

    def _extract_linkedin(self, text: str) -> Tuple[Optional[str], List[Tuple[int, int]]]:
        matches = list(self.linkedin_pattern.finditer(text))
        spans = [m.span() for m in matches]
        if not matches:
            return None, spans
        return f"https://linkedin.com/in/{matches[0].group(1)}", spans

    def _extract_website(self, text: str, taken: List[Tuple[int, int]]) -> Optional[str]:
        for match in self.website_pattern.finditer(text):
            start, end = match.span()
            if any(start < t_end and t_start < end for t_start, t_end in taken):
                continue
            url = match.group().rstrip('.')
            if 'linkedin.com' in url.lower():
                continue
            has_scheme = url.lower().startswith(('http://', 'https://'))
            # Bare capitalised tokens like "Socket.io" are library names, not sites
            if not has_scheme and not url.lower().startswith('www.') and '/' not in url and url[0].isupper():
                continue
            if not has_scheme:
                url = 'https://' + url
            return url
        return None

    def _extract_name(self, lines: List[str]) -> Optional[str]:
        cfg = self.config
        for line in lines[:cfg.name_scan_lines]:
            candidate = line.strip()
            if not cfg.name_min_length <= len(candidate) <= cfg.name_max_length:
                continue
            lowered = candidate.lower()
            if '@' in candidate or 'http' in lowered or 'resume' in lowered:
                continue
            if any(ch.isdigit() for ch in candidate):
                continue
            if self.name_pattern.match(candidate):
                return candidate
        return None

    def _extract_location(self, lines: List[str]) -> Optional[str]:
        for line in lines:
            for match in self.location_pattern.finditer(line):
                city, state, postal = match.groups()
                if state not in US_STATES:
                    continue
                location = f"{city}, {state}"
                return f"{location} {postal}" if postal else location
        return None
