from __future__ import annotations

# Matching against these lists is plain substring search on lowercased text,
# so "java" also hits "javascript" and "go" hits "google".

SECTION_KEYS: tuple[str, ...] = (
    "summary",
    "experience",
    "education",
    "skills",
    "certifications",
    "projects",
    "achievements",
    "contact",
)

SECTION_HEADERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("summary", ("summary", "objective", "profile")),
    ("experience", ("experience", "work experience", "professional experience", "employment history")),
    ("education", ("education", "academics", "qualification")),
    ("skills", ("skills", "technical skills", "skills & tools", "core skills")),
    ("certifications", ("certifications", "certificates", "licenses")),
    ("projects", ("projects", "personal projects")),
    ("achievements", ("achievements", "awards", "accomplishments")),
    ("contact", ("contact", "contact information")),
)

FLAT_SECTION_TERMS: tuple[str, ...] = ("education", "experience", "skills", "projects", "contact")
CRITICAL_FLAT_SECTIONS: tuple[str, ...] = ("education", "experience", "skills")

# Sections that count toward the presence bonus and completion rate.
SCORED_SECTIONS: tuple[str, ...] = (
    "summary",
    "experience",
    "education",
    "skills",
    "certifications",
    "achievements",
)

PHONE_WORDS: tuple[str, ...] = ("phone", "mobile", "contact")
LINKEDIN_MARKERS: tuple[str, ...] = ("linkedin.com",)
PORTFOLIO_MARKERS: tuple[str, ...] = ("github.com", "gitlab.com", "behance.net", "portfolio")

ACTION_VERBS: tuple[str, ...] = (
    "managed",
    "developed",
    "created",
    "led",
    "designed",
    "implemented",
    "optimized",
    "achieved",
    "built",
    "analyzed",
    "collaborated",
    "initiated",
    "resolved",
    "improved",
    "spearheaded",
)

TECH_SKILLS: tuple[str, ...] = (
    "python",
    "java",
    "javascript",
    "typescript",
    "react",
    "node",
    "sql",
    "html",
    "css",
    "c++",
    "aws",
    "docker",
    "git",
    "excel",
    "spring",
    "django",
    "flask",
    "go",
    "kubernetes",
    "terraform",
    "power bi",
    "tableau",
)

FIRST_PERSON_PRONOUNS: tuple[str, ...] = (" i ", " me ", " my ", " we ", " our ")
PASSIVE_PHRASES: tuple[str, ...] = ("responsible for", "duties included", "worked on", "helped with")
CLICHES: tuple[str, ...] = ("hardworking", "team player", "go-getter", "synergy", "motivated", "passionate")
VAGUE_TERMS: tuple[str, ...] = ("etc", "various", "responsible for")

INDUSTRY_KEYWORDS: tuple[str, ...] = (
    "api",
    "microservices",
    "cloud",
    "aws",
    "azure",
    "gcp",
    "docker",
    "kubernetes",
    "ci/cd",
    "unit testing",
    "integration testing",
    "agile",
    "scrum",
    "rest",
    "graphql",
    "c++",
    "go",
)

# Missing keywords shown to the user (suggestions, recommendations, result payload).
MISSING_KEYWORDS_DISPLAY = 8
