from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from portfolio.services.content import BlogService
from portfolio.validators import get_json_payload

blog_bp = Blueprint("blog", __name__)


@blog_bp.route("", methods=["GET"])
def list_blogs():
    return jsonify([blog.to_dict() for blog in BlogService.list()])


@blog_bp.route("/<blog_id>", methods=["GET"])
def get_blog(blog_id):
    return jsonify(BlogService.get(blog_id).to_dict())


@blog_bp.route("", methods=["POST"])
@jwt_required()
def create_blog():
    blog = BlogService.create(get_json_payload(request))
    return jsonify(blog.to_dict()), 201


@blog_bp.route("/<blog_id>", methods=["PUT"])
@jwt_required()
def update_blog(blog_id):
    blog = BlogService.update(blog_id, get_json_payload(request))
    return jsonify(blog.to_dict())


@blog_bp.route("/<blog_id>", methods=["DELETE"])
@jwt_required()
def delete_blog(blog_id):
    return jsonify(BlogService.delete(blog_id))
