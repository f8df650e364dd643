from services.parser import ParsedProfile, ResumeParser, parse_resume_text


def test_full_profile(sample_resume):
    data = parse_resume_text(sample_resume)
    assert list(data) == [
        "name", "email", "phone", "location", "headline", "summary", "skills",
        "experience", "education", "projects", "certifications", "social_links",
    ]
    assert data["name"] == "Jane Doe"
    assert data["email"] == "jane.doe@example.com"
    assert data["phone"] == "+1 415-555-0132"
    assert data["social_links"]["github"] == "https://github.com/janedoe"
    assert data["experience"][0] == {
        "title": "Senior Engineer",
        "company": "Acme Corp",
        "from": "Jan 2020",
        "to": "Present",
        "current": True,
        "description": "Led migration of the matching service to Python and PostgreSQL\nCut p95 latency by 40%",
    }
    assert data["education"][0]["school"] == "Stanford University"


def test_empty_input_gives_empty_profile():
    profile = ResumeParser().parse_text("   \n ")
    assert profile == ParsedProfile()
    assert profile.is_empty()


def test_every_list_respects_its_cap():
    lines = ["Experience"]
    lines += [f"Engineer | Company {n} | 20{10 + n} - 20{11 + n}" for n in range(9)]
    lines += ["Education"] + [f"Example University {n}" for n in range(6)]
    lines += ["Projects"] + [f"Project {n}: built with Python" for n in range(8)]
    lines += ["Certifications"] + [f"Certificate in Topic {n}" for n in range(8)]
    lines += ["Skills", ", ".join(f"Tool{n}" for n in range(40))]

    profile = ResumeParser().parse_text("\n".join(lines))
    assert len(profile.skills) == 15
    assert len(profile.experience) == 5
    assert len(profile.education) == 3
    assert len(profile.projects) == 5
    assert len(profile.certifications) == 5
