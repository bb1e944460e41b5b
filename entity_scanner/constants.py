"""
Constants for entity_scanner package.

Centralizes magic numbers and configuration defaults.
"""

# Scoring: every scan starts at full confidence and checks deduct from it
STARTING_CONFIDENCE = 100
MIN_CONFIDENCE = 0

# Deduction weights per heuristic check
NAME_RECOGNITION_DEDUCTION = 50
CONTENT_OVERLAP_DEDUCTION = 30
UNCERTAINTY_DEDUCTION = 20
PRICING_MISMATCH_DEDUCTION = 25

# Verdict cutoffs (inclusive lower bounds)
ACCURATE_MIN_CONFIDENCE = 70
UNCERTAIN_MIN_CONFIDENCE = 40

# Content-overlap check
KEYWORD_MIN_LENGTH = 5  # tokens must be strictly longer than this
MAX_DESCRIPTION_KEYWORDS = 10
MIN_KEYWORD_MATCH_RATE = 0.2

# Company names like "Acme | Home" are cut at the first delimiter
COMPANY_NAME_DELIMITER = "|"

# Hedging phrases that signal the model does not actually know the company
UNCERTAINTY_PHRASES = (
    "i don't have",
    "i cannot",
    "i'm not sure",
    "i don't know",
    "no information",
    "unable to find",
)

# Issue messages
ISSUE_NAME_NOT_RECOGNIZED = "AI does not recognize your company name"
ISSUE_CONTENT_MISMATCH = "AI description does not match your website content"
ISSUE_EXPRESSES_UNCERTAINTY = "AI expresses uncertainty about your company"
ISSUE_PRICING_MISMATCH = "AI pricing information may be inaccurate"
NO_ISSUES_SENTINEL = "No significant issues detected"

# Web fact extraction
FETCH_TIMEOUT_SECONDS = 7.0
DEFAULT_USER_AGENT = "EntityScanner/1.0 (Hallucination Detection Bot)"
MAX_COMPANY_NAME_LENGTH = 100
MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 300
UNKNOWN_COMPANY_NAME = "Unknown Company"
NO_DESCRIPTION_FOUND = "No description found"

# Ordered: the first pattern that matches the lower-cased body text wins
PRICING_PATTERNS = (
    r"\$\d+/mo",
    r"\$\d+\s*per\s*month",
    r"\$\d+\s*monthly",
    r"starting at \$\d+",
    r"from \$\d+",
)

# URL validation
ALLOWED_URL_SCHEMES = ("http", "https")
BLOCKED_HOSTS = ("localhost", "127.0.0.1")
# Any name under the reserved .localhost TLD resolves to loopback
BLOCKED_HOST_SUFFIXES = (".localhost",)
BLOCKED_HOST_PREFIXES = ("192.168.", "10.", "172.16.")

# Model query defaults
LLM_MODEL = "gpt-4o-mini"
LLM_TEMPERATURE = 0.3
LLM_MAX_TOKENS = 1024
LLM_TIMEOUT_SECONDS = 30.0
