import pytest

from resume_extraction.experience_parser import ExperienceParser, resolve_date_range
from resume_extraction.models import ExperienceEntry

TWO_JOBS = """Senior Engineer
Acme Inc
2020 - 2022
Built the billing platform.

Junior Developer
Beta LLC
2018 - 2020
Fixed production bugs.
"""


@pytest.mark.parametrize("fragment, expected", [
    ("2019 - Present", ("2019", "Present")),
    ("2015", ("2015", "2015")),
    ("Spring semester", ("", "")),
    ("Jan 2016 - Dec 2018", ("2016", "2018")),
    ("2010 - 2012 - 2014", ("2010", "2014")),
    ("Current", ("", "Present")),
    ("March 2021 to now", ("2021", "Present")),
])
def test_resolve_date_range(fragment, expected):
    assert resolve_date_range(fragment) == expected


def test_entries_keep_source_order():
    entries = ExperienceParser().parse(TWO_JOBS)
    assert entries == [
        ExperienceEntry("Senior Engineer", "Acme Inc", "2020", "2022", "Built the billing platform."),
        ExperienceEntry("Junior Developer", "Beta LLC", "2018", "2020", "Fixed production bugs."),
    ]


def test_sample_zone(sample_resume):
    zone = sample_resume.split("\n\n")[2]
    first, second = ExperienceParser().parse(zone)
    assert first.title == "Senior Software Engineer"
    assert first.company == "Acme Technologies Inc"
    assert (first.start_date, first.end_date) == ("2019", "Present")
    assert first.description == "Led the migration of billing services to Kubernetes. Mentored four engineers."
    assert second.company == "Beta Systems LLC"


def test_title_without_company_is_skipped():
    assert ExperienceParser().parse("Senior Engineer\nFreelance work\n2019\nVarious clients") == []


def test_company_search_stops_at_next_title():
    zone = "Lead Developer\nself-employed\nJunior Analyst\nGamma Corp\n2012"
    entries = ExperienceParser().parse(zone)
    assert [(e.title, e.company) for e in entries] == [("Junior Analyst", "Gamma Corp")]


def test_missing_date_line_leaves_dates_empty():
    entry, = ExperienceParser().parse("Data Analyst\nDelta Company\nBuilt dashboards")
    assert (entry.start_date, entry.end_date) == ("", "")
    assert entry.description == "Built dashboards"


def test_date_on_company_line():
    entry, = ExperienceParser().parse("Project Manager\nOmega Systems | 2017 - 2019\nShipped releases")
    assert (entry.start_date, entry.end_date) == ("2017", "2019")
    assert entry.description == "Shipped releases"


def test_title_and_company_on_one_line():
    zone = ("Senior Software Engineer - ABC Inc. (Jan 2020 - Present)\n"
            "• Developed web applications\n"
            "Junior Developer - XYZ Corp (2018 - 2020)\n"
            "• Built APIs")
    first, second = ExperienceParser().parse(zone)
    assert first == ExperienceEntry("Senior Software Engineer", "ABC Inc.", "2020", "Present",
                                     "Developed web applications")
    assert second == ExperienceEntry("Junior Developer", "XYZ Corp", "2018", "2020", "Built APIs")


def test_failed_title_candidate_stays_in_description():
    zone = TWO_JOBS.replace("Built the billing platform.", "Built the billing platform.\nSenior staff mentor")
    entries = ExperienceParser().parse(zone)
    assert len(entries) == 2
    assert entries[0].description == "Built the billing platform. Senior staff mentor"


def test_lowercase_prose_is_not_a_title():
    zone = "worked with the senior engineer on inc reports\nAcme Inc\n2019"
    assert ExperienceParser().parse(zone) == []


def test_empty_zone():
    assert ExperienceParser().parse("") == []
