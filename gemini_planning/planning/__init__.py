"""Project planning: context store, prompts, plan extraction, checklists."""

from .store import ContextStore, PlanRecord, ProjectContext, slugify
from .extractor import extract_plan
from .checklist import render_checklist
from .prompts import build_plan_prompt

__all__ = [
    "ContextStore",
    "PlanRecord",
    "ProjectContext",
    "slugify",
    "extract_plan",
    "render_checklist",
    "build_plan_prompt",
]
