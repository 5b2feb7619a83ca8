"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def _env_list(name: str, default: str) -> list:
    raw = os.getenv(name, default)
    return [item.strip().lower() for item in raw.split(",") if item.strip()]


# API keys – never hardcode
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")
SERPAPI_KEY: str = os.getenv("SERPAPI_KEY", "")

# Completion endpoint settings (single attempt; the heuristic parser is the fallback, not a retry)
AI_TIMEOUT_SECONDS: float = float(os.getenv("AI_TIMEOUT_SECONDS", "30"))
AI_TEMPERATURE: float = 0.1
AI_MAX_OUTPUT_TOKENS: int = 4096
AI_MAX_INPUT_CHARS: int = 12000
AI_PARSING_CONFIDENCE: float = 0.8

# HTTP settings for external job sources
HTTP_TIMEOUT_SECONDS: float = 30.0

# Fallback parser
FALLBACK_PARSER_MODEL: str = "basic_parser"
FALLBACK_PARSING_CONFIDENCE: float = 0.3
NAME_SCAN_LINES: int = 5

# Profile cleaning
MAX_SKILLS: int = 50
MAX_EXPERIENCE_YEARS: int = 50
# Rough years-per-entry multiplier when no total is provided; not calendar accurate
YEARS_PER_EXPERIENCE_ENTRY: float = 1.5
LANGUAGE_PROFICIENCIES: tuple = ("basic", "intermediate", "advanced", "native", "fluent")
DEFAULT_LANGUAGE_PROFICIENCY: str = "intermediate"

# Fixed skill vocabulary used by the fallback parser and job adaptation (lowercase key -> display name)
SKILL_VOCABULARY: dict = {
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "python": "Python",
    "java": "Java",
    "react": "React",
    "angular": "Angular",
    "vue": "Vue",
    "node.js": "Node.js",
    "sql": "SQL",
    "mysql": "MySQL",
    "mongodb": "MongoDB",
    "html": "HTML",
    "css": "CSS",
    "aws": "AWS",
    "docker": "Docker",
    "kubernetes": "Kubernetes",
    "git": "Git",
    "machine learning": "Machine Learning",
    "data analysis": "Data Analysis",
    "project management": "Project Management",
    "agile": "Agile",
    "scrum": "Scrum",
    "leadership": "Leadership",
    "communication": "Communication",
}

# Scoring weights, scoped per mode. The two modes are intentionally separate.
LIST_RANKING_WEIGHTS: dict = {
    "skills": 0.5,
    "experience_match": 30,
    "experience_gap_penalty": 5,
    "experience_unknown": 15,
    "location_match": 20,
    "location_same_state": 10,
}

SINGLE_JOB_WEIGHTS: dict = {
    "skills": 0.7,
    "experience_match": 30,
    "experience_miss": 15,
}

# (minimum score, rating) checked top-down; anything lower is "Poor"
RATING_THRESHOLDS: list = [
    (80, "Excellent"),
    (60, "Good"),
    (40, "Fair"),
]
RATING_FLOOR: str = "Poor"

# Ranking
MIN_RECOMMENDATION_SCORE: int = 40
PREFILTER_OVERFETCH: int = 3
DEFAULT_RECOMMENDATION_LIMIT: int = 20
SKILLS_GAP_SAMPLE_SIZE: int = 20
EXPERIENCE_DEFAULT_MIN: float = 0
EXPERIENCE_DEFAULT_MAX: float = 100

# Location: soft regional preference for jobs that mention these keywords
REGIONAL_AFFINITY_KEYWORDS: list = _env_list("REGIONAL_AFFINITY_KEYWORDS", "karnataka")
DEFAULT_LOCATION: str = os.getenv("DEFAULT_LOCATION", "Karnataka")

# Resume text validation
RESUME_MIN_CHARS: int = 100
RESUME_MAX_CHARS: int = 50000
RESUME_MIN_INDICATORS: int = 2
RESUME_INDICATORS: tuple = (
    "experience",
    "education",
    "skills",
    "work",
    "job",
    "position",
    "responsibilities",
    "achievements",
    "projects",
    "university",
    "college",
)

# Preference derivation
DEFAULT_ROLE: str = "Software Engineer"
DEFAULT_INDUSTRY: str = "Technology"
DEFAULT_EXPERIENCE_YEARS: int = 2
DEFAULT_EXPERIENCE_LEVEL: str = "mid"
PREFERENCE_SKILL_COUNT: int = 5
KEYWORD_SKILL_COUNT: int = 3

# (upper bound in years inclusive, level); anything higher is "executive"
EXPERIENCE_LEVELS: list = [
    (2, "entry"),
    (4, "junior"),
    (7, "mid"),
    (10, "senior"),
    (15, "lead"),
]
EXPERIENCE_LEVEL_TOP: str = "executive"

# Experience range each level implies when an external job only states a level
LEVEL_EXPERIENCE_RANGES: dict = {
    "entry": (0, 2),
    "junior": (2, 4),
    "mid": (4, 7),
    "senior": (7, 10),
    "lead": (10, 15),
    "executive": (15, None),
}

# Ordered: first keyword hit wins
INDUSTRY_KEYWORDS: list = [
    ("Marketing", ("marketing",)),
    ("Finance", ("finance", "accounting")),
    ("Healthcare", ("healthcare", "medical")),
    ("Education", ("teaching", "teacher", "edtech")),
]

# External job sources (extensible: add new entry for each source)
RECOMMENDATION_JOB_LIMIT: int = 10
AVAILABLE_SOURCES: dict = {
    "linkedin_job": {
        "label": "LinkedIn Jobs",
        "query_pattern": 'site:linkedin.com/jobs "{job_title}" "{location}"',
    },
    "indeed": {
        "label": "Indeed",
        "query_pattern": 'site:indeed.com "{job_title}" "{location}"',
    },
    "glassdoor": {
        "label": "Glassdoor",
        "query_pattern": 'site:glassdoor.com/Job "{job_title}" "{location}"',
    },
}
