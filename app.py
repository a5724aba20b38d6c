from flask import (
    Flask, render_template, request, redirect,
    url_for, flash, current_app
)
from werkzeug.exceptions import NotFound
from datetime import date

from models import (
    PlannerState, ClassId, AssignmentId,
    format_date, is_overdue, parse_due_date, can_add_assignment
)

# ---------------------- APP CONFIG ----------------------
app = Flask(__name__)
app.config.from_mapping(SECRET_KEY="dev-secret-key", LOG_LEVEL="INFO")
# e.g. STUDY_PLANNER_SECRET_KEY, STUDY_PLANNER_DEBUG, STUDY_PLANNER_LOG_LEVEL
app.config.from_prefixed_env("STUDY_PLANNER")

# Flask leaves app.logger at WARNING outside debug mode
app.logger.setLevel(app.config["LOG_LEVEL"])

app.extensions["planner"] = PlannerState()


# ---------------------- HELPERS ----------------------
def get_planner():
    return current_app.extensions["planner"]


def back_to_planner():
    return redirect(url_for('index'))


# ✅ Date helpers for every template
@app.context_processor
def inject_helpers():
    today = date.today()
    return dict(
        today=today,
        format_date=lambda d: format_date(d, today),
        is_overdue=lambda d: is_overdue(d, today),
    )


# ---------------------- PLANNER PAGE ----------------------
@app.route('/')
def index():
    planner = get_planner()
    return render_template(
        'index.html',
        planner=planner,
        pending=planner.pending_sorted(),
        completed=planner.completed_list(),
        class_cards=planner.class_summaries(),
        can_submit=can_add_assignment(
            planner.draft_name,
            parse_due_date(planner.draft_due_date),
            planner.selected_class_id,
        ),
    )


# ---------- CLASSES: Show / Hide Add Form ----------
@app.route('/classes/new', methods=['POST'])
def show_add_class():
    get_planner().show_add_class_form()
    return back_to_planner()


@app.route('/classes/cancel', methods=['POST'])
def cancel_add_class():
    get_planner().hide_add_class_form()
    return back_to_planner()


# ---------- CLASSES: Create ----------
@app.route('/classes', methods=['POST'])
def create_class():
    class_name = request.form.get('class_name', '')

    new_class = get_planner().add_class(class_name)
    if new_class is None:
        app.logger.debug("Ignored blank class name")
        return back_to_planner()

    app.logger.info("Added class %s (%r)", new_class.id, new_class.name)
    flash(f"Class '{new_class.name}' added.", "success")
    return back_to_planner()


# ---------- CLASSES: Delete (cascades to its assignments) ----------
@app.route('/classes/<int:class_id>/delete', methods=['POST'])
def delete_class(class_id):
    planner = get_planner()
    before = len(planner.assignments)

    removed = planner.delete_class(ClassId(class_id))
    if removed is None:
        app.logger.debug("Delete of unknown class %s ignored", class_id)
        return back_to_planner()

    dropped = before - len(planner.assignments)
    app.logger.info("Deleted class %s with %d assignment(s)", class_id, dropped)
    flash(f"Class '{removed.name}' deleted.", "success")
    return back_to_planner()


# ---------- ASSIGNMENTS: Create ----------
@app.route('/assignments', methods=['POST'])
def create_assignment():
    planner = get_planner()
    name = request.form.get('assignment_name', '')
    due_text = request.form.get('due_date', '')
    due_date = parse_due_date(due_text)
    class_id = request.form.get('class_id', type=int)

    # the chosen class sticks around for the next entry; name and date
    # stay filled in until the assignment is actually added
    planner.select_class(ClassId(class_id) if class_id else None)
    planner.keep_assignment_draft(name, due_text)

    assignment = planner.add_assignment(
        name, due_date, ClassId(class_id) if class_id else None
    )
    if assignment is None:
        app.logger.debug("Incomplete assignment submission dropped")
        return back_to_planner()

    app.logger.info(
        "Added assignment %s to class %s, due %s",
        assignment.id, assignment.class_id, assignment.due_date.isoformat()
    )
    flash(f"Assignment '{assignment.name}' added.", "success")
    return back_to_planner()


# ---------- ASSIGNMENTS: Toggle Complete ----------
@app.route('/assignments/<int:assignment_id>/toggle', methods=['POST'])
def toggle_assignment(assignment_id):
    assignment = get_planner().toggle_assignment(AssignmentId(assignment_id))
    if assignment is not None:
        app.logger.info(
            "Assignment %s marked %s", assignment_id,
            "completed" if assignment.completed else "pending"
        )
    return back_to_planner()


# ---------- ASSIGNMENTS: Delete ----------
@app.route('/assignments/<int:assignment_id>/delete', methods=['POST'])
def delete_assignment(assignment_id):
    removed = get_planner().delete_assignment(AssignmentId(assignment_id))
    if removed is not None:
        app.logger.info("Deleted assignment %s", assignment_id)
        flash("Assignment deleted.", "info")
    return back_to_planner()


# ---------------------- ERRORS ----------------------
@app.errorhandler(NotFound)
def page_not_found(error):
    if request.method != 'GET':
        return error
    return back_to_planner()


if __name__ == '__main__':
    app.run(debug=app.config.get("DEBUG", False))
