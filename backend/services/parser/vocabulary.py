"""Data tables used by the resume parser.

Section header labels and keyword lists live here so they can be extended
without touching the extraction functions. All header labels are lowercase.
"""

# Section header labels
EXPERIENCE_HEADERS = (
    "experience",
    "work experience",
    "professional experience",
    "employment",
    "employment history",
    "work history",
    "internships",
    "internship experience",
)

EDUCATION_HEADERS = (
    "education",
    "academic background",
    "academics",
    "education & training",
    "education and training",
)

SKILLS_HEADERS = (
    "skills",
    "technical skills",
    "key skills",
    "core skills",
    "core competencies",
    "skills & tools",
    "skills and tools",
)

PROJECTS_HEADERS = (
    "projects",
    "personal projects",
    "academic projects",
    "key projects",
    "side projects",
    "selected projects",
)

CERTIFICATION_HEADERS = (
    "certifications",
    "certification",
    "certificates",
    "licenses & certifications",
    "licenses and certifications",
    "courses & certifications",
    "courses and certifications",
)

SUMMARY_HEADERS = (
    "summary",
    "professional summary",
    "career summary",
    "profile",
    "professional profile",
    "objective",
    "career objective",
    "about",
    "about me",
)

# Any line equal to one of these closes the section being collected.
NEXT_SECTION_HEADERS = frozenset(
    EXPERIENCE_HEADERS
    + EDUCATION_HEADERS
    + SKILLS_HEADERS
    + PROJECTS_HEADERS
    + CERTIFICATION_HEADERS
    + SUMMARY_HEADERS
    + (
        "contact",
        "contact information",
        "languages",
        "interests",
        "hobbies",
        "awards",
        "achievements",
        "honors",
        "honors & awards",
        "publications",
        "references",
        "volunteer",
        "volunteering",
        "volunteer experience",
        "leadership",
        "activities",
        "extracurricular activities",
    )
)

# Lines that title the document rather than name the candidate
DOCUMENT_TITLES = ("resume", "résumé", "cv", "curriculum vitae")

# Fixed skills vocabulary (canonical spelling is what gets reported)
SKILLS_VOCABULARY = (
    "JavaScript",
    "TypeScript",
    "Python",
    "Java",
    "C++",
    "C#",
    "PHP",
    "Ruby",
    "SQL",
    "HTML",
    "CSS",
    "React",
    "Angular",
    "Vue.js",
    "Node.js",
    "Express.js",
    "Django",
    "Flask",
    "MongoDB",
    "PostgreSQL",
    "MySQL",
    "Redis",
    "GraphQL",
    "Docker",
    "Kubernetes",
    "AWS",
    "Azure",
    "Git",
    "Firebase",
)

# Words that mark a line as naming an educational institution
INSTITUTION_HINTS = (
    "university",
    "college",
    "institute",
    "school",
    "academy",
    "polytechnic",
)

# Certification issuers recognised on their own
KNOWN_ISSUERS = (
    "Amazon Web Services",
    "AWS",
    "Google Cloud",
    "Google",
    "Microsoft",
    "Oracle",
    "Cisco",
    "CompTIA",
    "Red Hat",
    "Salesforce",
    "IBM",
    "Meta",
    "Coursera",
    "Udemy",
    "edX",
    "Udacity",
    "LinkedIn Learning",
    "HashiCorp",
    "Scrum Alliance",
    "PMI",
    "ISC2",
    "Linux Foundation",
)

# Per-section output caps
MAX_SKILLS = 15
MAX_EXPERIENCE = 5
MAX_EDUCATION = 3
MAX_PROJECTS = 5
MAX_CERTIFICATIONS = 5
MAX_DESCRIPTION_LINES = 8
