"""
Helpers for presenting answers.
"""

from typing import Any, Tuple

PLACEHOLDER = "{answer}"


def render_display(template: str, answer: Any) -> str:
    """Substitute the literal {answer} token; no other templating is supported."""
    return template.replace(PLACEHOLDER, str(answer))


def render_pair(display: Tuple[str, str], answers: Tuple[Any, Any]) -> Tuple[str, str]:
    return render_display(display[0], answers[0]), render_display(display[1], answers[1])
