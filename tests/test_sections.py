from services.parser import extract_section, section_lines
from services.parser.vocabulary import EXPERIENCE_HEADERS, SKILLS_HEADERS


def test_section_body_stops_at_next_header():
    text = "Skills\nPython, SQL\nDocker\nEducation\nMIT"
    assert extract_section(text, SKILLS_HEADERS) == "Python, SQL\nDocker"


def test_header_match_ignores_case_and_trailing_colon():
    text = "TECHNICAL SKILLS:\nPython\nProjects\nChess bot"
    assert extract_section(text, SKILLS_HEADERS) == "Python"


def test_absent_section_is_empty():
    assert extract_section("Jane Doe\nBuilt things at Acme", EXPERIENCE_HEADERS) == ""
    assert extract_section("", EXPERIENCE_HEADERS) == ""
    assert section_lines("no headers anywhere", SKILLS_HEADERS) == []


def test_header_inside_a_sentence_does_not_open_section():
    text = "My experience includes Python\nSkills\nGo"
    assert extract_section(text, EXPERIENCE_HEADERS) == ""


def test_section_lines_drop_blank_lines():
    text = "Experience\n\n  Engineer | Acme  \n\n- shipped\nSkills\nGo"
    assert section_lines(text, EXPERIENCE_HEADERS) == ["Engineer | Acme", "- shipped"]


def test_second_header_of_same_kind_closes_the_section():
    text = "Experience\nA\nWork Experience\nB"
    assert extract_section(text, EXPERIENCE_HEADERS) == "A"
