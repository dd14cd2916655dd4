"""Prompt template loading and plan prompt assembly."""

from pathlib import Path
from typing import Optional

PROMPTS_DIR = Path(__file__).parent


def load_prompt(name: str) -> str:
    """Load a prompt template by name."""
    path = PROMPTS_DIR / f"{name}.txt"
    if not path.exists():
        raise ValueError(f"Prompt not found: {name}")
    return path.read_text(encoding="utf-8")


def build_plan_prompt(
    project_name: str,
    requirements: str,
    constraints: Optional[str] = None,
    reference_docs: Optional[str] = None,
) -> str:
    """
    Assemble the plan-generation instruction.

    Constraints and reference documentation are included only when present.
    """
    constraints_section = f"CONSTRAINTS: {constraints}\n" if constraints else ""
    reference_section = f"\nREFERENCE DOCUMENTATION:\n{reference_docs}\n" if reference_docs else ""

    return load_prompt("plan").format(
        project_name=project_name,
        requirements=requirements,
        constraints_section=constraints_section,
        reference_section=reference_section,
    )
