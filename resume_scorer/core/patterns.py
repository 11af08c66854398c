"""
Static pattern library for résumé analysis.

Keyword vocabularies (technical skills, action verbs, degree keywords) and the
regular expressions used by the section detector and signal extractors.
Everything here is built once at import time and never mutated afterwards.
"""

import re
from typing import Dict, Iterable, Pattern, Tuple


# ============================================================================
# Technical skills (grouped by domain, flattened below)
# ============================================================================

TECHNICAL_SKILLS: Dict[str, Tuple[str, ...]] = {
    "languages": (
        "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "golang",
        "rust", "php", "swift", "kotlin", "scala", "perl", "matlab", "sql", "bash",
        "dart", "elixir", "haskell", "lua", "objective-c", "groovy", "powershell",
        "assembly", "vb.net", "fortran", "cobol", "clojure", "f#", "erlang", "html", "css",
        "julia", "ocaml", "solidity",
    ),
    "frontend": (
        "react", "angular", "vue", "svelte", "next.js", "nuxt", "gatsby", "remix",
        "ember", "backbone", "jquery", "redux", "mobx", "recoil", "zustand",
        "react native", "ionic", "cordova", "electron", "flutter", "xamarin",
        "alpine.js", "htmx", "astro", "solid.js", "preact", "polymer", "webassembly",
    ),
    "backend": (
        "express", "fastapi", "django", "flask", "spring boot", "laravel",
        "rails", "ruby on rails", "asp.net", "node.js", "nest.js", "fastify", "koa",
        "gin", "actix", "phoenix", "ktor", "strapi", "adonis", "loopback", "hapi",
        "celery", "rabbitmq", "kafka", "nginx", "apache",
    ),
    "datascience": (
        "tensorflow", "pytorch", "keras", "scikit-learn", "pandas", "numpy", "scipy",
        "matplotlib", "seaborn", "plotly", "jupyter", "anaconda", "spark", "pyspark",
        "hadoop", "tableau", "power bi", "r studio", "stata", "spss", "sas",
        "opencv", "nltk", "spacy", "hugging face", "langchain", "xgboost", "lightgbm",
        "airflow", "dbt", "snowflake", "databricks", "bigquery",
    ),
    "cloud": (
        "aws", "azure", "gcp", "google cloud", "heroku", "vercel", "netlify", "digitalocean",
        "docker", "kubernetes", "k8s", "jenkins", "git", "gitlab", "github", "bitbucket",
        "terraform", "ansible", "puppet", "vagrant", "cloudformation", "helm",
        "circleci", "travis ci", "github actions", "azure devops", "bamboo",
        "prometheus", "grafana", "datadog", "new relic", "splunk", "elk stack",
        "linux", "unix",
    ),
    "buildtools": (
        "webpack", "vite", "rollup", "parcel", "esbuild", "turbopack", "babel",
        "gulp", "grunt", "browserify", "swc", "npm", "yarn", "pnpm", "maven", "gradle",
    ),
    "testing": (
        "jest", "mocha", "chai", "jasmine", "vitest", "cypress", "playwright",
        "selenium", "puppeteer", "testcafe", "webdriver", "karma", "protractor",
        "pytest", "unittest", "junit", "testng", "rspec", "minitest", "phpunit",
        "enzyme", "react testing library", "vue test utils", "storybook", "chromatic",
    ),
    "databases": (
        "mysql", "postgresql", "postgres", "mongodb", "redis", "elasticsearch",
        "cassandra", "oracle", "sql server", "sqlite", "dynamodb", "firebase",
        "supabase", "mariadb", "couchdb", "neo4j", "influxdb", "timescaledb",
        "cockroachdb", "planetscale", "prisma", "typeorm", "sequelize", "sqlalchemy",
        "mongoose", "knex", "drizzle", "graphql", "apollo", "hasura", "postgraphile",
    ),
    "api": (
        "rest api", "graphql", "grpc", "soap", "websocket", "webhooks",
        "postman", "insomnia", "swagger", "openapi", "kong",
        "apollo server", "apollo client", "urql", "axios",
    ),
    "design": (
        "figma", "adobe xd", "invision", "zeplin", "framer",
        "photoshop", "illustrator", "canva", "affinity designer", "blender",
    ),
    "projectmgmt": (
        "jira", "confluence", "trello", "asana", "clickup",
        "basecamp", "slack", "microsoft teams",
    ),
    "css": (
        "tailwind", "tailwind css", "bootstrap", "material ui", "mui", "chakra ui",
        "sass", "scss", "stylus", "postcss", "css modules", "styled components",
        "bulma", "semantic ui", "ant design", "mantine",
    ),
    "mobile": (
        "react native", "flutter", "swift", "swiftui", "kotlin", "android",
        "ios", "xcode", "android studio", "expo", "ionic", "capacitor",
    ),
    "concepts": (
        "agile", "scrum", "kanban", "devops", "ci/cd", "tdd", "bdd", "ddd",
        "microservices", "monolith", "serverless", "jamstack", "headless cms",
        "cloud computing", "machine learning", "deep learning", "data science",
        "big data", "blockchain", "web3", "cybersecurity", "penetration testing",
        "ethical hacking", "responsive design", "accessibility", "wcag", "a11y",
        "performance optimization", "seo", "ui/ux", "user experience", "user interface",
        "api design", "restful", "solid principles", "design patterns", "clean code",
        "refactoring", "pair programming", "code review", "version control", "git flow",
        "oauth", "etl", "nlp", "computer vision",
    ),
    "softskills": (
        "leadership", "team lead", "mentoring", "coaching", "communication",
        "collaboration", "problem solving", "critical thinking", "analytical",
        "time management", "project management", "stakeholder management",
        "presentation", "documentation", "technical writing", "cross-functional",
    ),
}


# ============================================================================
# Action verbs (grouped by what they convey)
# ============================================================================

ACTION_VERBS: Dict[str, Tuple[str, ...]] = {
    "achievement": (
        "achieved", "accomplished", "attained", "surpassed", "exceeded", "delivered",
        "earned", "won", "secured", "obtained", "gained",
    ),
    "leadership": (
        "led", "managed", "directed", "supervised", "coordinated", "orchestrated",
        "oversaw", "governed", "administered", "headed", "chaired", "presided",
    ),
    "creation": (
        "developed", "created", "built", "designed", "engineered", "architected",
        "constructed", "established", "founded", "formulated", "generated", "produced",
        "crafted", "authored", "composed", "invented", "pioneered",
    ),
    "implementation": (
        "implemented", "executed", "deployed", "launched", "released",
        "rolled out", "initiated", "introduced", "installed", "integrated", "shipped",
    ),
    "improvement": (
        "improved", "enhanced", "optimized", "streamlined", "upgraded", "modernized",
        "refined", "strengthened", "boosted", "accelerated", "maximized",
        "revitalized", "transformed", "revolutionized", "overhauled",
    ),
    "growth": (
        "increased", "expanded", "grew", "scaled", "amplified", "multiplied",
        "broadened", "extended", "widened", "elevated",
    ),
    "reduction": (
        "reduced", "decreased", "minimized", "eliminated", "cut", "slashed",
        "trimmed", "lowered", "diminished", "compressed",
    ),
    "analysis": (
        "analyzed", "evaluated", "assessed", "examined", "investigated", "researched",
        "studied", "reviewed", "audited", "diagnosed", "measured", "quantified",
        "surveyed", "tested", "validated", "verified", "forecasted", "modeled",
    ),
    "collaboration": (
        "collaborated", "partnered", "cooperated", "liaised",
        "communicated", "presented", "reported", "briefed", "consulted",
        "advised", "counseled", "negotiated", "mediated", "facilitated",
    ),
    "training": (
        "trained", "mentored", "coached", "educated", "taught", "instructed",
        "guided", "cultivated", "nurtured", "onboarded",
    ),
    "organization": (
        "organized", "planned", "scheduled", "prioritized", "allocated",
        "arranged", "structured", "systematized", "standardized",
    ),
    "problem_solving": (
        "resolved", "solved", "fixed", "debugged", "troubleshot", "addressed",
        "rectified", "remedied", "corrected", "repaired",
    ),
    "innovation": (
        "automated", "innovated", "spearheaded", "championed",
        "drove", "propelled", "catalyzed",
    ),
    "migration": (
        "migrated", "converted", "transitioned", "refactored",
        "redesigned", "reengineered", "rebuilt",
    ),
    "maintenance": (
        "maintained", "supported", "monitored", "operated", "serviced", "updated",
    ),
    "documentation": (
        "documented", "recorded", "cataloged", "compiled", "drafted", "wrote",
        "published",
    ),
}


def _flatten(groups: Dict[str, Tuple[str, ...]]) -> Tuple[str, ...]:
    """Flatten grouped keywords, dropping duplicates while keeping first-seen order."""
    seen: Dict[str, None] = {}
    for words in groups.values():
        for w in words:
            seen.setdefault(w.lower(), None)
    return tuple(seen)


ALL_TECHNICAL_SKILLS: Tuple[str, ...] = _flatten(TECHNICAL_SKILLS)
ALL_ACTION_VERBS: Tuple[str, ...] = _flatten(ACTION_VERBS)

DEGREE_KEYWORDS: Tuple[str, ...] = (
    "bachelor", "bachelors", "master", "masters", "phd", "ph.d", "doctorate", "degree",
    "diploma", "certification", "certificate", "associate", "mba", "b.sc", "m.sc",
    "b.s.", "m.s.", "b.a.", "m.a.", "b.tech", "m.tech",
)

LOCATION_KEYWORDS: Tuple[str, ...] = ("location", "address", "city", "state", "country", "remote")

US_STATE_CODES = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA", "HI", "ID", "IL", "IN",
    "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV",
    "NH", "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC", "SD", "TN",
    "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY", "DC",
)


# ============================================================================
# Keyword pattern compilation
# ============================================================================

def keyword_pattern(keyword: str) -> Pattern[str]:
    """
    Compile a case-insensitive, whole-word pattern for a keyword.

    Plain \\b does not work for keywords that start or end with a symbol
    ("c++", "c#", "ci/cd"), so the keyword must instead not touch a word
    character on either side. Inner spaces match any run of whitespace.

    Examples:
        keyword_pattern("c++").search("C++, Rust")        -> match
        keyword_pattern("java").search("JavaScript")      -> None
        keyword_pattern("react native").search("React  Native") -> match
    """
    body = r"\s+".join(re.escape(part) for part in keyword.split())
    return re.compile(rf"(?<!\w){body}(?!\w)", re.IGNORECASE)


def compile_keywords(keywords: Iterable[str]) -> Tuple[Tuple[str, Pattern[str]], ...]:
    return tuple((kw, keyword_pattern(kw)) for kw in keywords)


SKILL_PATTERNS = compile_keywords(ALL_TECHNICAL_SKILLS)
VERB_PATTERNS = compile_keywords(ALL_ACTION_VERBS)
DEGREE_PATTERNS = compile_keywords(DEGREE_KEYWORDS)
LOCATION_KEYWORD_RE = re.compile(r"\b(?:" + "|".join(LOCATION_KEYWORDS) + r")\b", re.IGNORECASE)


# ============================================================================
# Section headers
# ============================================================================

# Enumeration order doubles as the tie-break order: the first matching entry wins.
SECTION_HEADERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("contact", (
        "contact", "contact info", "contact information", "contact details",
        "personal information", "personal details", "get in touch",
    )),
    ("summary", (
        "summary", "professional summary", "career summary", "executive summary",
        "profile", "professional profile", "about me", "objective", "career objective",
        "personal statement",
    )),
    ("experience", (
        "experience", "work experience", "professional experience", "relevant experience",
        "employment", "employment history", "work history", "career history",
        "professional background",
    )),
    ("education", (
        "education", "academic background", "educational background",
        "academic qualifications", "qualifications", "education & training",
        "education and training",
    )),
    ("skills", (
        "skills", "technical skills", "key skills", "core skills", "professional skills",
        "core competencies", "competencies", "expertise", "technical expertise",
        "areas of expertise", "technologies",
    )),
    ("projects", (
        "projects", "personal projects", "key projects", "notable projects",
        "side projects", "portfolio", "open source", "contributions",
    )),
    ("certifications", (
        "certifications", "certificates", "licenses", "credentials",
        "professional certifications", "licenses & certifications",
        "licenses and certifications",
    )),
    ("awards", (
        "awards", "honors", "honors and awards", "honors & awards", "achievements",
        "recognition", "accomplishments",
    )),
    ("languages", (
        "languages", "language skills", "language proficiency", "spoken languages",
    )),
    ("volunteer", (
        "volunteer", "volunteering", "volunteer work", "volunteer experience",
        "community service",
    )),
    ("publications", (
        "publications", "papers", "articles", "research", "research publications",
        "published work",
    )),
    ("interests", (
        "interests", "hobbies", "personal interests", "hobbies and interests",
        "hobbies & interests",
    )),
    ("references", (
        "references", "professional references", "references available upon request",
        "references available on request",
    )),
)


def _header_pattern(phrases: Tuple[str, ...]) -> Pattern[str]:
    # Longest phrase first so alternation never stops at a shorter prefix
    ordered = sorted(phrases, key=len, reverse=True)
    alternation = "|".join(r"\s+".join(re.escape(p) for p in phrase.split()) for phrase in ordered)
    return re.compile(rf"^(?:{alternation})\s*:?$", re.IGNORECASE)


SECTION_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = tuple(
    (name, _header_pattern(phrases)) for name, phrases in SECTION_HEADERS
)


# ============================================================================
# Contact and social profiles
# ============================================================================

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")

# "Austin, TX" on a line of its own
CITY_STATE_RE = re.compile(
    r"^[A-Z][A-Za-z .'-]+,\s*(?:" + "|".join(US_STATE_CODES) + r")\b",
    re.MULTILINE,
)

# Display name -> pattern, in reporting order
SOCIAL_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("LinkedIn", re.compile(r"linkedin\.com/in/[A-Za-z0-9_-]+", re.IGNORECASE)),
    ("GitHub", re.compile(r"github\.com/[A-Za-z0-9_-]+", re.IGNORECASE)),
    ("GitLab", re.compile(r"gitlab\.com/[A-Za-z0-9_-]+", re.IGNORECASE)),
    ("Portfolio", re.compile(r"\b(?:portfolio|website|personal\s+site)\b", re.IGNORECASE)),
    ("Twitter", re.compile(r"(?:twitter\.com|x\.com)/[A-Za-z0-9_]+", re.IGNORECASE)),
    ("Medium", re.compile(r"medium\.com/@?[A-Za-z0-9_-]+", re.IGNORECASE)),
    ("Stack Overflow", re.compile(r"stackoverflow\.com/users/\d+", re.IGNORECASE)),
)


# ============================================================================
# Dates, bullets, quantification
# ============================================================================

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

# Glyph at the start of a line followed by horizontal whitespace
BULLET_RE = re.compile(r"^[^\S\n]*[•▪▸→\-*][^\S\n]+", re.MULTILINE)

# Applied in this order; the examples list keeps the same order
QUANTIFICATION_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("percentage", re.compile(r"\d+(?:\.\d+)?%")),
    ("currency", re.compile(r"\$\d+(?:,\d{3})*(?:\.\d+)?[KMB]?", re.IGNORECASE)),
    ("timeframe", re.compile(r"\b\d+\s+(?:year|month|week|day|hour)s?\b", re.IGNORECASE)),
    ("scale", re.compile(
        r"\b\d+\+?\s+(?:people|persons|developers|engineers|employees|members|staff|"
        r"clients|customers|users|projects|teams|students|stakeholders|countries|"
        r"markets|stores|locations|servers|applications|services)\b",
        re.IGNORECASE,
    )),
)

YEARS_OF_EXPERIENCE_RE = re.compile(
    r"\b(\d{1,2})\+?\s*(?:years?|yrs?)(?:\s+of\s+(?:experience|exp))?\b",
    re.IGNORECASE,
)
