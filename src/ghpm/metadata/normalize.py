"""Option-name normalization into a small canonical vocabulary."""

from __future__ import annotations

# Evaluated top to bottom; the first rule whose spellings contain the key wins.
OPTION_KEY_RULES: tuple[tuple[str, frozenset[str]], ...] = (
    ("todo", frozenset({"to_do", "todo", "backlog"})),
    ("in_progress", frozenset({"in_progress", "doing", "in_development"})),
    ("in_review", frozenset({"in_review", "reviewing", "review"})),
    ("done", frozenset({"done", "completed", "complete", "closed"})),
    ("low", frozenset({"low", "p3", "p4"})),
    ("medium", frozenset({"medium", "normal", "p2"})),
    ("high", frozenset({"high", "p1"})),
    ("critical", frozenset({"critical", "urgent", "p0"})),
)

STATUS_KEYS = ("todo", "in_progress", "in_review", "done")
PRIORITY_KEYS = ("low", "medium", "high", "critical")


def normalize_option_key(name: str) -> str:
    """Map an option display name to its canonical key.

    ``"In-Progress"``, ``"in progress"`` and ``"Doing"`` all become
    ``"in_progress"``. Names outside the vocabulary are returned lowercased with
    spaces and hyphens replaced by underscores.
    """
    key = name.lower().replace(" ", "_").replace("-", "_")
    for canonical, spellings in OPTION_KEY_RULES:
        if key in spellings:
            return canonical
    return key
