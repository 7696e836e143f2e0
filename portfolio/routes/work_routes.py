from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from portfolio.services.content import WorkService
from portfolio.validators import get_json_payload

work_bp = Blueprint("work", __name__)


@work_bp.route("", methods=["GET"])
def list_works():
    return jsonify([work.to_dict() for work in WorkService.list()])


@work_bp.route("/<work_id>", methods=["GET"])
def get_work(work_id):
    return jsonify(WorkService.get(work_id).to_dict())


@work_bp.route("", methods=["POST"])
@jwt_required()
def create_work():
    work = WorkService.create(get_json_payload(request))
    return jsonify(work.to_dict()), 201


@work_bp.route("/<work_id>", methods=["PUT"])
@jwt_required()
def update_work(work_id):
    work = WorkService.update(work_id, get_json_payload(request))
    return jsonify(work.to_dict())


@work_bp.route("/<work_id>", methods=["DELETE"])
@jwt_required()
def delete_work(work_id):
    return jsonify(WorkService.delete(work_id))
