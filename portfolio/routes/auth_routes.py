from flask import Blueprint, request, jsonify
from portfolio.services.auth import AuthService
from portfolio.validators import get_json_payload

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["POST"])
def login():
    data = get_json_payload(request)
    result = AuthService.login(data.get("email"), data.get("password"))
    return jsonify(result), 200


@auth_bp.route("/register", methods=["POST"])
def register():
    data = get_json_payload(request)
    admin = AuthService.register(data.get("email"), data.get("password"))
    return jsonify({"message": "Admin registered successfully", "admin": admin}), 201


# initial setup of the first admin account
@auth_bp.route("/setup", methods=["POST"])
def setup():
    data = get_json_payload(request)
    admin = AuthService.register(data.get("email"), data.get("password"))
    return jsonify({"message": "Admin created successfully", "admin": admin}), 201
