import pytest

SAMPLE_RESUME = """Jane Smith
jane.smith@example.com | (555) 123-4567
Austin, TX 78701
linkedin.com/in/janesmith | janesmith.dev

PROFESSIONAL SUMMARY
Backend engineer with eight years building payment platforms and data pipelines.

WORK EXPERIENCE
Senior Software Engineer
Acme Technologies Inc
2019 - Present
Led the migration of billing services to Kubernetes.
Mentored four engineers.
Software Developer
Beta Systems LLC
2015 - 2019
Built reporting APIs in Python.

EDUCATION
Bachelor of Science in Computer Science
University of Texas
2015
GPA: 3.7

SKILLS
Python, Go, PostgreSQL, Docker, Kubernetes, Python
"""


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def windows_resume():
    return SAMPLE_RESUME.replace("\n", "\r\n")
