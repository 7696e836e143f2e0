from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from portfolio.services.contact import ContactService
from portfolio.validators import get_json_payload

contact_bp = Blueprint("contact", __name__)


@contact_bp.route("", methods=["POST"])
def send_message():
    result = ContactService.send(get_json_payload(request))
    return jsonify(result), 200


# admin only: contact messages carry visitors' personal data
@contact_bp.route("", methods=["GET"])
@jwt_required()
def list_messages():
    return jsonify([contact.to_dict() for contact in ContactService.list()])
