from services.parser import extract_certifications, extract_education, extract_projects
from services.parser.certifications import parse_certification_lines
from services.parser.education import parse_education_lines
from services.parser.projects import parse_project_lines


def test_education_degree_above_institution(sample_resume):
    entries = extract_education(sample_resume)
    assert len(entries) == 1
    entry = entries[0]
    assert entry.school == "Stanford University"
    assert entry.degree == "Bachelor of Science"
    assert entry.field == "Computer Science"
    assert (entry.from_date, entry.to_date) == ("2012", "2016")


def test_education_lone_year_is_graduation():
    entries = parse_education_lines(["Springfield College", "B.A. in History", "2011"])
    assert entries[0].degree == "B.A."
    assert entries[0].field == "History"
    assert (entries[0].from_date, entries[0].to_date) == ("", "2011")


def test_education_notes_go_to_description():
    entries = parse_education_lines(["Springfield College", "Dean's list, chess club"])
    assert entries[0].description == "Dean's list, chess club"


def test_education_cap():
    entries = parse_education_lines([f"Example University {n}" for n in range(6)])
    assert len(entries) == 3


def test_education_without_institution():
    assert extract_education("Education\nSelf taught") == []


def test_project_with_link_and_technologies(sample_resume):
    projects = extract_projects(sample_resume)
    assert len(projects) == 1
    project = projects[0]
    assert project.name == "Job Tracker"
    assert project.link == "https://github.com/janedoe/job-tracker"
    assert {"React", "Node.js"} <= set(project.technologies)
    assert project.description.startswith("Full-stack job tracker")


def test_project_description_on_name_line():
    projects = parse_project_lines(["1. Portfolio Site | Personal website built with Flask"])
    assert projects[0].name == "Portfolio Site"
    assert projects[0].description == "Personal website built with Flask"
    assert projects[0].technologies == ["Flask"]


def test_projects_cap():
    lines = [f"Project {n}: does things" for n in range(8)]
    assert len(parse_project_lines(lines)) == 5


def test_certification_on_one_line(sample_resume):
    certs = extract_certifications(sample_resume)
    assert len(certs) == 1
    cert = certs[0]
    assert cert.name == "AWS Certified Solutions Architect"
    assert cert.issuer == "Amazon Web Services"
    assert cert.date == "Mar 2023"


def test_certification_detail_lines():
    certs = parse_certification_lines([
        "Certified Kubernetes Administrator",
        "Issued by Linux Foundation",
        "Credential ID: CKA-1234",
    ])
    assert len(certs) == 1
    assert certs[0].issuer == "Linux Foundation"
    assert certs[0].credential_id == "CKA-1234"


def test_certification_outside_a_section():
    text = (
        "Experience\nEngineer | Acme | 2019 - 2020\n"
        "Google Cloud Certified Professional Data Engineer, 2022"
    )
    certs = extract_certifications(text)
    assert len(certs) == 1
    assert certs[0].name == "Google Cloud Certified Professional Data Engineer"
    assert certs[0].issuer == "Google Cloud"
    assert certs[0].date == "2022"


def test_certifications_cap():
    lines = [f"Certificate in Topic {n}" for n in range(8)]
    assert len(parse_certification_lines(lines)) == 5


def test_known_issuer_outside_a_section():
    text = (
        "Experience\nEngineer | Acme | 2019 - 2020\n"
        "Microsoft Azure Fundamentals (AZ-900), 2021"
    )
    certs = extract_certifications(text)
    assert len(certs) == 1
    assert certs[0].name == "Microsoft Azure Fundamentals"
    assert certs[0].issuer == "Microsoft"
    assert certs[0].date == "2021"


def test_issuer_in_a_bullet_does_not_anchor_outside_a_section():
    text = "Experience\nEngineer | Acme | 2019 - 2020\n- Migrated services to Microsoft Azure"
    assert extract_certifications(text) == []
