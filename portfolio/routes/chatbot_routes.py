from flask import Blueprint, request, jsonify, current_app
from portfolio.validators import get_json_payload

chatbot_bp = Blueprint("chatbot", __name__)


def get_responder():
    return current_app.extensions["portfolio_chat_responder"]


@chatbot_bp.route("", methods=["POST"])
def chat():
    data = get_json_payload(request)
    result = get_responder().respond(
        data.get("message"),
        data.get("conversationHistory") or [],
    )
    return jsonify(result), 200


@chatbot_bp.route("/status", methods=["GET"])
def chat_status():
    """Report whether the OpenAI path is configured and the circuit state."""
    return jsonify(get_responder().status())
