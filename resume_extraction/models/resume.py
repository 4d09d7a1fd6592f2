from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ContactInfo:
    """Identity and contact fields; every field is optional"""
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    website: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        values = {
            'fullName': self.full_name,
            'email': self.email,
            'phone': self.phone,
            'location': self.location,
            'linkedin': self.linkedin,
            'website': self.website,
        }
        return {key: value for key, value in values.items() if value is not None}


@dataclass(frozen=True)
class ExperienceEntry:
    """One job; `end_date` may be the literal "Present" """
    title: str
    company: str
    start_date: str = ""
    end_date: str = ""
    description: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            'title': self.title,
            'company': self.company,
            'startDate': self.start_date,
            'endDate': self.end_date,
            'description': self.description,
        }


@dataclass(frozen=True)
class EducationEntry:
    """One credential"""
    degree: str
    school: str
    year: str = ""
    gpa: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        data = {'degree': self.degree, 'school': self.school, 'year': self.year}
        if self.gpa is not None:
            data['gpa'] = self.gpa
        return data


@dataclass(frozen=True)
class ExtractedResumeData:
    """Structured representation of a resume"""
    contact: ContactInfo = field(default_factory=ContactInfo)
    summary: str = ""
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[str, ...] = ()
    raw_text: str = ""

    @property
    def word_count(self) -> int:
        return len(self.raw_text.split())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'contact': self.contact.to_dict(),
            'summary': self.summary,
            'experience': [entry.to_dict() for entry in self.experience],
            'education': [entry.to_dict() for entry in self.education],
            'skills': list(self.skills),
            'rawText': self.raw_text,
        }
