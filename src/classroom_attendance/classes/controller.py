from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.web import actor_required
from ..container import Container
from ..core.enums import Role
from .model import AvailableClass, Classroom, JoinedClass


def class_to_json(c: Classroom) -> dict:
    return {"id": c.class_id, "name": c.name, "description": c.description, "teacher_id": c.teacher_id}


def available_to_json(a: AvailableClass) -> dict:
    return {**class_to_json(a.classroom), "already_joined": a.already_joined}


def joined_to_json(j: JoinedClass) -> dict:
    return {"class_id": j.class_id, "class_name": j.class_name}


def register(app: Flask, container: Container) -> None:
    teacher_required = actor_required(container, Role.TEACHER)
    student_required = actor_required(container, Role.STUDENT)

    @app.route("/teacher/classes", methods=["GET"], endpoint="teacher_classes")
    @teacher_required
    def teacher_classes():
        classes = container.class_service.list_classes_for_teacher(g.actor.user_id)
        return jsonify([class_to_json(c) for c in classes])

    @app.route("/teacher/classes", methods=["POST"], endpoint="create_class")
    @teacher_required
    def create_class():
        data = request.get_json(silent=True) or {}
        classroom = container.class_service.create_class(
            g.actor,
            name=data.get("name", ""),
            description=data.get("description", ""),
        )
        return jsonify({"success": True, "class": class_to_json(classroom)}), 201

    @app.route("/student/classes", methods=["GET"], endpoint="available_classes")
    @student_required
    def available_classes():
        available = container.class_service.list_available_classes(g.actor.user_id)
        return jsonify([available_to_json(a) for a in available])

    @app.route("/student/classes/joined", methods=["GET"], endpoint="joined_classes")
    @student_required
    def joined_classes():
        joined = container.class_service.list_joined_classes(g.actor.user_id)
        return jsonify([joined_to_json(j) for j in joined])

    @app.route("/student/classes/<class_id>/join", methods=["POST"], endpoint="join_class")
    @student_required
    def join_class(class_id: str):
        joined = container.class_service.join_class(g.actor, class_id)
        message = "Successfully joined the class!" if joined else "Already joined"
        return jsonify({"success": True, "joined": joined, "message": message})
