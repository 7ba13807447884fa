from __future__ import annotations

import csv
import io

from flask import Flask, g, jsonify, request

from ..common.web import actor_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .model import (
    AttendanceRecord,
    AttendanceSession,
    AttendanceSummary,
    ClassAttendanceSummary,
    RosterAttendanceSummary,
)
from .sheet import AttendanceSheet


def summary_to_json(s: AttendanceSummary) -> dict:
    return {
        "present_days": s.present_days,
        "absent_days": s.absent_days,
        "total_days": s.total_days,
        "attendance_percentage": s.attendance_percentage,
    }


def session_to_json(s: AttendanceSession) -> dict:
    return {"date": s.date_key, "students": dict(s.students), "present": s.present_count}


def record_to_json(r: AttendanceRecord) -> dict:
    return {"date": r.date_key, "status": r.status.value, "class_id": r.class_id}


def class_summary_to_json(c: ClassAttendanceSummary) -> dict:
    return {"class_id": c.class_id, "class_name": c.class_name, **summary_to_json(c.summary)}


def roster_summary_to_json(r: RosterAttendanceSummary) -> dict:
    return {"student_id": r.student_id, "name": r.name, **summary_to_json(r.summary)}


def sheet_to_json(sheet: AttendanceSheet) -> dict:
    return {
        "class_id": sheet.class_id,
        "state": sheet.state.value,
        "students": [{"id": e.student_id, "name": e.name, "present": e.present} for e in sheet.entries],
    }


def register(app: Flask, container: Container) -> None:
    teacher_required = actor_required(container, Role.TEACHER)
    student_required = actor_required(container, Role.STUDENT)

    def _owned(class_id: str):
        return container.class_service.get_owned_class(g.actor, class_id)

    @app.route("/teacher/classes/<class_id>/roster", methods=["GET"], endpoint="class_roster")
    @teacher_required
    def class_roster(class_id: str):
        sheet = container.attendance_service.load_roster(g.actor, class_id)
        return jsonify(sheet_to_json(sheet))

    @app.route("/teacher/classes/<class_id>/attendance", methods=["POST"], endpoint="save_attendance")
    @teacher_required
    def save_attendance(class_id: str):
        """Save today's attendance; body ``{"present": [studentId, ...]}``.

        Everyone on the roster not listed is saved as absent.
        """

        data = request.get_json(silent=True) or {}
        present_ids = data.get("present", [])
        if not isinstance(present_ids, list):
            raise ValidationError("'present' must be a list of student ids")

        sheet = container.attendance_service.load_roster(g.actor, class_id)
        for student_id in present_ids:
            sheet.mark(str(student_id), True)

        result = container.attendance_service.save_session(g.actor, sheet)
        return jsonify(
            {
                "success": True,
                "message": "Attendance saved successfully!",
                "session": session_to_json(result.session),
                "history": [session_to_json(s) for s in result.history],
            }
        )

    @app.route("/teacher/classes/<class_id>/history", methods=["GET"], endpoint="class_history")
    @teacher_required
    def class_history(class_id: str):
        classroom = _owned(class_id)
        sessions = container.history_service.list_sessions(classroom.class_id)
        counts = container.history_service.present_counts(classroom.class_id)
        return jsonify(
            {
                "sessions": [session_to_json(s) for s in sessions],
                "chart": {
                    "labels": [c.date_key for c in counts],
                    "present": [c.present for c in counts],
                },
            }
        )

    @app.route("/teacher/classes/<class_id>/history.csv", methods=["GET"], endpoint="class_history_csv")
    @teacher_required
    def class_history_csv(class_id: str):
        classroom = _owned(class_id)
        rows = container.history_service.export_rows(classroom.class_id)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["date", "student_id", "student_name", "status"])
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        filename = f"attendance_{classroom.class_id}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/teacher/classes/<class_id>/summary", methods=["GET"], endpoint="class_summary")
    @teacher_required
    def class_summary(class_id: str):
        classroom = _owned(class_id)
        summaries = container.aggregator.class_student_summaries(classroom.class_id)
        return jsonify([roster_summary_to_json(s) for s in summaries])

    @app.route("/student/overview", methods=["GET"], endpoint="student_overview")
    @student_required
    def student_overview():
        overview = container.aggregator.student_overview(g.actor.user_id)
        return jsonify(
            {
                "display_name": g.actor.display_name,
                "summary": summary_to_json(overview.summary),
                "recent": [record_to_json(r) for r in overview.recent],
                "classes": [class_summary_to_json(c) for c in overview.classes],
            }
        )
