"""Topic detection - candidate tags from domain vocabulary."""

import re

from knowledge.constants import MAX_TOPICS

# Declaration order decides which topics survive the MAX_TOPICS cap.
TOPIC_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        # web frameworks
        r"\b(javascript|js|typescript|ts|react|vue|angular|node|express|nextjs|next\.js)\b",
        # backend frameworks
        r"\b(python|django|flask|fastapi)\b",
        # styling
        r"\b(css|sass|scss|tailwind|bootstrap)\b",
        # markup
        r"\b(html|html5|dom)\b",
        # data stores
        r"\b(mongodb|mysql|postgresql|sql|database)\b",
        # version control
        r"\b(git|github|gitlab|version control)\b",
        # containers and orchestration
        r"\b(docker|kubernetes|k8s|devops)\b",
        # API styles
        r"\b(api|rest|graphql|websocket)\b",
        # test frameworks
        r"\b(testing|jest|mocha|cypress|playwright)\b",
        # build tooling
        r"\b(webpack|vite|rollup|bundler)\b",
    )
)


def detect_all_topics(content: str) -> list[str]:
    """All distinct case-folded matches, in pattern then text order."""
    topics: dict[str, None] = {}

    for pattern in TOPIC_PATTERNS:
        for match in pattern.finditer(content):
            topics.setdefault(match.group(0).lower(), None)

    return list(topics)


def detect_topics(content: str, limit: int = MAX_TOPICS) -> list[str]:
    """
    Candidate tags found in content.

    The cap truncates insertion order; it is not a relevance ranking.
    """
    return detect_all_topics(content)[:limit]


__all__ = ["TOPIC_PATTERNS", "detect_all_topics", "detect_topics"]
