from dataclasses import dataclass, field
from datetime import date, timedelta
from itertools import count
from typing import NewType, Optional

ClassId = NewType("ClassId", int)
AssignmentId = NewType("AssignmentId", int)

UNKNOWN_CLASS = "Unknown Class"


@dataclass
class Class:
    id: ClassId
    name: str


@dataclass
class Assignment:
    id: AssignmentId
    name: str
    due_date: date
    class_id: ClassId
    completed: bool = False


@dataclass
class ClassSummary:
    cls: Class
    total: int
    pending: int


# ---------------------- DATE HELPERS ----------------------
def format_date(due_date, today=None):
    today = today or date.today()
    if due_date == today:
        return "Today"
    if due_date == today + timedelta(days=1):
        return "Tomorrow"
    return due_date.strftime("%x")


def is_overdue(due_date, today=None):
    today = today or date.today()
    return due_date < today


def parse_due_date(value):
    """Date picker value (YYYY-MM-DD) -> date, or None when missing/invalid."""
    value = (value or "").strip()
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def can_add_assignment(name, due_date, class_id):
    return bool((name or "").strip()) and bool(due_date) and bool(class_id)


# ---------------------- PLANNER STATE ----------------------
@dataclass
class PlannerState:
    """Everything the planner page shows, owned by one app instance.

    Only the command methods below mutate it; the views are derived fresh
    on every call.
    """
    classes: list = field(default_factory=list)
    assignments: list = field(default_factory=list)
    selected_class_id: Optional[ClassId] = None
    show_add_class: bool = False
    draft_name: str = ""
    draft_due_date: str = ""
    _class_ids: count = field(default_factory=lambda: count(1), repr=False)
    _assignment_ids: count = field(default_factory=lambda: count(1), repr=False)

    # ---------- Classes ----------
    def add_class(self, name):
        name = (name or "").strip()
        if not name:
            return None
        new_class = Class(id=ClassId(next(self._class_ids)), name=name)
        self.classes.append(new_class)
        self.show_add_class = False
        return new_class

    def delete_class(self, class_id):
        cls = self.get_class(class_id)
        if cls is None:
            return None
        # cascade: an assignment never outlives its class
        self.classes = [c for c in self.classes if c.id != class_id]
        self.assignments = [a for a in self.assignments if a.class_id != class_id]
        if self.selected_class_id == class_id:
            self.selected_class_id = None
        return cls

    def get_class(self, class_id):
        return next((c for c in self.classes if c.id == class_id), None)

    def class_name(self, class_id):
        cls = self.get_class(class_id)
        return cls.name if cls else UNKNOWN_CLASS

    def select_class(self, class_id):
        self.selected_class_id = class_id if self.get_class(class_id) else None

    def show_add_class_form(self):
        self.show_add_class = True

    def hide_add_class_form(self):
        self.show_add_class = False

    # ---------- Assignments ----------
    def add_assignment(self, name, due_date, class_id):
        if not can_add_assignment(name, due_date, class_id):
            return None
        if self.get_class(class_id) is None:
            return None
        assignment = Assignment(
            id=AssignmentId(next(self._assignment_ids)),
            name=name.strip(),
            due_date=due_date,
            class_id=class_id,
        )
        self.assignments.append(assignment)
        self.keep_assignment_draft("", "")
        return assignment

    def keep_assignment_draft(self, name, due_date_text):
        self.draft_name = name or ""
        self.draft_due_date = due_date_text or ""

    def get_assignment(self, assignment_id):
        return next((a for a in self.assignments if a.id == assignment_id), None)

    def toggle_assignment(self, assignment_id):
        assignment = self.get_assignment(assignment_id)
        if assignment is not None:
            assignment.completed = not assignment.completed
        return assignment

    def delete_assignment(self, assignment_id):
        assignment = self.get_assignment(assignment_id)
        if assignment is not None:
            self.assignments = [a for a in self.assignments if a.id != assignment_id]
        return assignment

    # ---------- Views ----------
    def pending_sorted(self):
        # sorted() is stable, so equal due dates keep insertion order
        pending = [a for a in self.assignments if not a.completed]
        return sorted(pending, key=lambda a: a.due_date)

    def completed_list(self):
        return [a for a in self.assignments if a.completed]

    def class_summaries(self):
        summaries = []
        for cls in self.classes:
            class_assignments = [a for a in self.assignments if a.class_id == cls.id]
            pending = sum(1 for a in class_assignments if not a.completed)
            summaries.append(ClassSummary(cls=cls, total=len(class_assignments), pending=pending))
        return summaries
