import re
from dataclasses import dataclass
from typing import List

_HORIZONTAL_SPACE = re.compile(r'[^\S\n]+')
_BLANK_RUN = re.compile(r'\n{3,}')
_ANY_SPACE = re.compile(r'\s+')


@dataclass(frozen=True)
class NormalizedText:
    """Both canonical forms of one input text.

    `paragraphs` keeps line breaks and single blank lines between paragraphs,
    which the section segmenter relies on. `collapsed` is a single line with
    every whitespace run reduced to one space, for pattern matching.
    """
    paragraphs: str
    collapsed: str

    @property
    def lines(self) -> List[str]:
        return [line for line in self.paragraphs.split('\n') if line]


def normalize_line_endings(text: str) -> str:
    return text.replace('\r\n', '\n').replace('\r', '\n')


def to_paragraph_form(text: str) -> str:
    text = normalize_line_endings(text)
    lines = [_HORIZONTAL_SPACE.sub(' ', line).strip() for line in text.split('\n')]
    text = '\n'.join(lines)
    return _BLANK_RUN.sub('\n\n', text).strip('\n')


def collapse_whitespace(text: str) -> str:
    return _ANY_SPACE.sub(' ', text).strip()


def normalize(text: str) -> NormalizedText:
    paragraphs = to_paragraph_form(text)
    return NormalizedText(paragraphs=paragraphs, collapsed=collapse_whitespace(paragraphs))
