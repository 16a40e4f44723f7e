"""Fixed tunables shared across the knowledge base."""

DOCUMENT_EXTENSION = ".md"

# Frontmatter block delimiter
FRONTMATTER_MARKER = "---"

# Key always recomputed on processing
LAST_UPDATED_KEY = "lastUpdated"

EXCERPT_LENGTH = 200

# Readability check: more than LONG_LINE_LIMIT lines over LONG_LINE_LENGTH chars
LONG_LINE_LENGTH = 120
LONG_LINE_LIMIT = 5

MAX_TOPICS = 5

CODE_FENCE = "```"
