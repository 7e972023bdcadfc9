"""Default prompt templates.

Loads Markdown prompt templates from the prompts/ directory and renders
them with Jinja2 variable substitution. Tasks that enable
``default_prompts`` use them to fill prompts the user left empty.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, Environment

from codeassist.schemas.context import TaskContext
from codeassist.schemas.profile import LanguageProfile

# Directory containing the .md prompt template files
_PROMPTS_DIR = Path(__file__).parent


def render_prompt(template_name: str, **variables: object) -> str:
    """Load a prompt template and render it with Jinja2 variables.

    Args:
        template_name: Name of the template file (without .md extension).
        **variables: Template variables to inject (language, libraries, ...).

    Returns:
        The rendered prompt string.

    Raises:
        FileNotFoundError: If the template file does not exist.
    """
    path = _PROMPTS_DIR / f"{template_name}.md"
    if not path.exists():
        raise FileNotFoundError(f"Prompt template not found: {path}")

    template_text = path.read_text(encoding="utf-8")

    # Undefined variables render as empty strings, so {% if %} blocks drop out
    env = Environment(loader=BaseLoader(), keep_trailing_newline=True)
    template = env.from_string(template_text)
    return template.render(**variables)


def default_positive_prompt(profile: LanguageProfile) -> str:
    return render_prompt(
        "tests_positive", language=profile.language.value, **profile.prompt_variables
    )


def default_negative_prompt(profile: LanguageProfile) -> str:
    return render_prompt(
        "tests_negative", language=profile.language.value, **profile.prompt_variables
    )


def apply_default_prompts(context: TaskContext, profile: LanguageProfile) -> TaskContext:
    """Fill positive/negative prompts that are absent or empty; keep user text."""
    update: dict[str, str] = {}
    if not context.positive_prompt:
        update["positive_prompt"] = default_positive_prompt(profile)
    if not context.negative_prompt:
        update["negative_prompt"] = default_negative_prompt(profile)
    if not update:
        return context
    return context.model_copy(update=update)
