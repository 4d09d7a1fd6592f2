import logging
import re
from typing import Dict, List

from .config import DEFAULT_CONFIG, ExtractionConfig

logger = logging.getLogger(__name__)

_DELIMITERS = re.compile(r'[,;|\n•●▪◦‣·]')
_NUMERIC = re.compile(r'^[\d\s.,%+/-]+$')
_SKILL_HEADINGS = frozenset(['skills', 'technical skills', 'technologies', 'competencies', 'core competencies'])


class SkillsExtractor:
    """Tokenize a skills zone into a deduplicated, capped list"""

    def __init__(self, config: ExtractionConfig = DEFAULT_CONFIG):
        self.config = config

    def extract(self, zone: str) -> List[str]:
        cfg = self.config
        # dict keeps first-occurrence order
        seen: Dict[str, None] = {}
        for token in _DELIMITERS.split(zone):
            skill = self._clean(token)
            if not cfg.skill_min_length <= len(skill) < cfg.skill_max_length:
                continue
            if _NUMERIC.match(skill) or skill.lower() in _SKILL_HEADINGS:
                continue
            if skill not in seen:
                seen[skill] = None
            if len(seen) >= cfg.max_skills:
                break
        skills = list(seen)[:cfg.max_skills]
        logger.debug(f"Skills found: {len(skills)}")
        return skills

    @staticmethod
    def _clean(token: str) -> str:
        token = token.strip().lstrip('-*– ').rstrip('. ')
        # "Languages: Python" -> "Python"; a bare "Skills:" label leaves nothing
        if ':' in token:
            token = token.rsplit(':', 1)[1].strip()
        return token
