import logging

from flask import Blueprint, jsonify, request

from pwguard.exceptions.validation import InvalidRequestBodyException, MissingFieldException
from pwguard.services.password_service import PasswordService

logger = logging.getLogger(__name__)

password_bp = Blueprint("password", __name__)

password_service = PasswordService()


def _payload() -> dict:
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise InvalidRequestBodyException(content_type=request.content_type)
        return data
    return request.form.to_dict()


@password_bp.route("/validate", methods=["POST"])
def validate():
    data = _payload()
    if "password" not in data:
        raise MissingFieldException(field="password")

    logger.debug("POST /password/validate")
    result = password_service.check(data["password"])
    return jsonify(result.to_dict()), 200


# Signup-form style check: confirmation must match, rules must pass
@password_bp.route("/register-check", methods=["POST"])
def register_check():
    data = _payload()
    result = password_service.validate_new_password(
        data.get("password"), data.get("confirm_password")
    )
    return jsonify(result.to_dict()), 200


@password_bp.route("/requirements", methods=["GET"])
def requirements():
    return jsonify(password_service.requirements()), 200
