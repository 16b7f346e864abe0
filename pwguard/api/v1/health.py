import logging
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

from pwguard.utils.validators import is_valid_password

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__)

# Must always pass. If it does not, the rule set is broken
_CANARY_PASSWORD = "Abcdef1!"


@health_bp.route("/")
def overall_health():
    validator_ok = is_valid_password(_CANARY_PASSWORD)
    if not validator_ok:
        logger.error("Validator canary check failed")

    status = "healthy" if validator_ok else "unhealthy"
    response = {
        "status": status,
        "service": current_app.config.get("PWGUARD_APP_NAME", "pwguard"),
        "checks": {
            "validator": status,
        },
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }
    return jsonify(response), 200 if validator_ok else 503
