from flask import Blueprint, jsonify, current_app, send_from_directory

site_bp = Blueprint("site", __name__)


@site_bp.route("/", methods=["GET"])
def root():
    return jsonify({
        "status": "OK",
        "message": "Portfolio API is running. Try /api/health or other /api/* endpoints.",
    })


@site_bp.route("/api/health", methods=["GET"])
def health():
    return jsonify({"status": "OK", "message": "Server is running"})


# uploaded CV files
@site_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)
