# portfolio/routes/skill_routes.py
from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from portfolio.services.content import SkillService
from portfolio.validators import get_json_payload

skills_bp = Blueprint("skills", __name__)


@skills_bp.route("", methods=["GET"])
def list_skills():
    # optional exact-match filter: ?type=design|development|tools
    skill_type = request.args.get("type", "").strip()
    return jsonify([skill.to_dict() for skill in SkillService.list(skill_type or None)])


@skills_bp.route("/<skill_id>", methods=["GET"])
def get_skill(skill_id):
    return jsonify(SkillService.get(skill_id).to_dict())


@skills_bp.route("", methods=["POST"])
@jwt_required()
def create_skill():
    skill = SkillService.create(get_json_payload(request))
    return jsonify(skill.to_dict()), 201


@skills_bp.route("/<skill_id>", methods=["PUT"])
@jwt_required()
def update_skill(skill_id):
    skill = SkillService.update(skill_id, get_json_payload(request))
    return jsonify(skill.to_dict())


@skills_bp.route("/<skill_id>", methods=["DELETE"])
@jwt_required()
def delete_skill(skill_id):
    return jsonify(SkillService.delete(skill_id))
