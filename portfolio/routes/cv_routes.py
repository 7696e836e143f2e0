from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from portfolio.services.cv_storage import CVService

cv_bp = Blueprint("cv", __name__)


# === Current CV metadata (null when none uploaded) ===
@cv_bp.route("", methods=["GET"])
def get_cv():
    return jsonify(CVService.get())


# === Upload a CV, replacing the current one ===
@cv_bp.route("/upload", methods=["POST"])
@jwt_required()
def upload_cv():
    cv = CVService.upload(request.files.get("cv"))
    return jsonify(cv), 201


@cv_bp.route("", methods=["DELETE"])
@jwt_required()
def delete_cv():
    return jsonify(CVService.delete())
