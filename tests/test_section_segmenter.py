from resume_extraction.config import ExtractionConfig
from resume_extraction.section_segmenter import (
    EDUCATION, EXPERIENCE, OTHER, SECTION_NAMES, SKILLS, SUMMARY, SectionRule, SectionSegmenter,
    split_paragraphs,
)

SUMMARY_PARAGRAPH = "Seasoned backend engineer focused on payments, reliability and mentoring."
SECOND_UNLABELED = "Volunteer coach for a youth robotics team on weekends during the school year."


def test_split_paragraphs_on_blank_lines():
    assert split_paragraphs("a\nb\n\nc\n \n\nd") == ["a\nb", "c", "d"]


def test_every_zone_is_present_for_empty_text():
    zones = SectionSegmenter().segment("")
    assert set(zones) == set(SECTION_NAMES)
    assert all(value == "" for value in zones.values())


def test_keyword_paragraphs_are_classified(sample_resume):
    zones = SectionSegmenter().segment(sample_resume)
    assert zones[EXPERIENCE].startswith("WORK EXPERIENCE\nSenior Software Engineer")
    assert zones[EDUCATION].startswith("EDUCATION\nBachelor of Science")
    assert zones[SKILLS].startswith("SKILLS\nPython")


def test_experience_wins_over_education():
    segmenter = SectionSegmenter()
    paragraph = "Experience and Education highlights"
    assert segmenter.classify(paragraph) == EXPERIENCE
    assert segmenter.segment(paragraph)[EXPERIENCE] == paragraph
    assert segmenter.segment(paragraph)[EDUCATION] == ""


def test_education_wins_over_skills():
    assert SectionSegmenter().classify("Skills learned at college") == EDUCATION


def test_keywords_match_whole_words_only():
    assert SectionSegmenter().classify("Experienced leader of distributed teams") == OTHER


def test_first_moderate_unlabeled_paragraph_becomes_summary():
    zones = SectionSegmenter().segment(SUMMARY_PARAGRAPH + "\n\n" + SECOND_UNLABELED)
    assert zones[SUMMARY] == SUMMARY_PARAGRAPH
    assert zones[OTHER] == SECOND_UNLABELED


def test_short_and_long_unlabeled_paragraphs_go_to_other():
    long_paragraph = "word " * 120
    zones = SectionSegmenter().segment("Hobbies: chess\n\n" + long_paragraph)
    assert zones[SUMMARY] == ""
    assert zones[OTHER] == "Hobbies: chess\n\n" + long_paragraph.strip()


def test_summary_length_bounds_come_from_config():
    segmenter = SectionSegmenter(config=ExtractionConfig(summary_zone_min_length=5))
    assert segmenter.segment("Hobbies: chess")[SUMMARY] == "Hobbies: chess"


def test_injected_rules_replace_defaults():
    segmenter = SectionSegmenter(rules=[SectionRule(SKILLS, ("toolbox",))])
    zones = segmenter.segment("My Toolbox\nPython\n\nExperience here")
    assert zones[SKILLS] == "My Toolbox\nPython"
    assert zones[OTHER] == "Experience here"
    assert zones[EXPERIENCE] == ""


def test_custom_section_names_get_their_own_zone():
    segmenter = SectionSegmenter(rules=[SectionRule("projects", ("projects",))])
    assert segmenter.segment("PROJECTS\nCompiler")["projects"] == "PROJECTS\nCompiler"


def test_rule_without_keywords_never_matches():
    assert not SectionRule(SKILLS, ()).matches("anything at all")
