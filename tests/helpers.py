from __future__ import annotations

from typing import List, Optional

from taskboard.state.form import FormDraft


def make_draft(title: str, description: str = "", responsible: Optional[List[str]] = None) -> FormDraft:
    return FormDraft(title=title, description=description, responsible=list(responsible or []))
