"""Render a plan as a Markdown checklist.

Plans come from model output, so every field is optional and sections
with nothing to show are left out.
"""

from typing import Dict, List

from .store import ProjectContext

UNPHASED = "other"


def _as_list(value) -> list:
    return value if isinstance(value, list) else []


def _format_dependency(dep: dict) -> str:
    line = str(dep.get("name") or "")
    if dep.get("version"):
        line += f"@{dep['version']}"
    if dep.get("purpose"):
        line += f" - {dep['purpose']}"
    return line


def _group_by_phase(steps: list) -> Dict[str, List[dict]]:
    # dicts keep insertion order, so phases stay in first-seen order
    phases: Dict[str, List[dict]] = {}
    for step in steps:
        phase = str(step.get("phase") or UNPHASED)
        phases.setdefault(phase, []).append(step)
    return phases


def render_checklist(context: ProjectContext, plan: dict) -> str:
    """Render the plan for a context as a Markdown checklist."""
    lines = [f"# {context.project_name}", ""]

    overview = plan.get("overview")
    if overview:
        lines += ["## Overview", str(overview), ""]

    dependencies = [d for d in _as_list(plan.get("dependencies")) if isinstance(d, dict) and d.get("name")]
    if dependencies:
        lines.append("## Dependencies")
        lines += [f"- [ ] {_format_dependency(dep)}" for dep in dependencies]
        lines.append("")

    steps = [s for s in _as_list(plan.get("implementation_steps")) if isinstance(s, dict)]
    if steps:
        lines.append("## Implementation Steps")
        for phase, phase_steps in _group_by_phase(steps).items():
            lines += ["", f"### {phase}"]
            for step in phase_steps:
                description = step.get("description")
                lines.append(f"- [ ] {description}" if description else "- [ ]")
                for path in _as_list(step.get("files_to_create")):
                    lines.append(f"  - Create: {path}")
        lines.append("")

    return "\n".join(lines)
