from services.parser import extract_skills
from services.parser.skills import find_vocabulary_skills


def test_no_vocabulary_and_no_section():
    assert extract_skills("I enjoy long walks and cooking.") == []


def test_vocabulary_and_section_union(sample_resume):
    skills = extract_skills(sample_resume)
    assert {"Python", "TypeScript", "Docker", "Go", "Terraform"} <= set(skills)
    assert "Languages" not in skills
    assert len(skills) == len(set(skills))


def test_whole_word_matching():
    assert find_vocabulary_skills("JavaScript and PostgreSQL") == ["JavaScript", "PostgreSQL"]
    assert find_vocabulary_skills("C++ and C# on github") == ["C++", "C#"]


def test_section_tokens_split_and_label_stripped():
    assert extract_skills("Skills\nFrameworks: Spring Boot | Rails") == ["Spring Boot", "Rails"]


def test_dedup_is_case_sensitive():
    assert extract_skills("Skills\npython") == ["Python", "python"]


def test_skills_capped():
    text = "Skills\n" + ", ".join(f"Tool{n}" for n in range(30))
    assert len(extract_skills(text)) == 15
