from flask import Blueprint, request, jsonify, current_app

from tabela.schemas import (
    FixtureSchema,
    GenerateScheduleSchema,
    PreviewScheduleSchema,
    WizardConfigSchema,
)
from tabela.services.scheduler_service import generate_schedule_for_roster, round_count
from tabela.services.wizard_service import default_config, preview, valid_group_counts

api_bp = Blueprint("api", __name__)

wizard_config_schema = WizardConfigSchema()
generate_schedule_schema = GenerateScheduleSchema()
preview_schedule_schema = PreviewScheduleSchema()
fixtures_schema = FixtureSchema(many=True)


# ─── Wizard ───────────────────────────────────────────────────────────────────

@api_bp.route("/schedule/defaults", methods=["GET"])
def get_schedule_defaults():
    club_count = request.args.get("club_count", type=int)
    if club_count is None or club_count < 0:
        return jsonify({"error": "club_count must be a non-negative integer"}), 400

    return jsonify({
        "config": wizard_config_schema.dump(default_config(club_count)),
        "valid_group_counts": valid_group_counts(club_count),
    }), 200


@api_bp.route("/schedule/preview", methods=["POST"])
def preview_schedule_route():
    data = preview_schedule_schema.load(request.get_json(silent=True))
    return jsonify({"preview": preview(data["club_count"], data["config"])}), 200


# ─── Scheduling ───────────────────────────────────────────────────────────────

@api_bp.route("/schedule/generate", methods=["POST"])
def generate_schedule_route():
    data = generate_schedule_schema.load(request.get_json(silent=True))
    interval_days = data["interval_days"] or current_app.config["SCHEDULE_INTERVAL_DAYS"]

    result, error = generate_schedule_for_roster(
        data["clubs"], data["config"], data["start_date"], interval_days
    )
    if error:
        return jsonify({"error": error}), 400
    return jsonify({
        "message": "Schedule generated",
        "match_count": len(result),
        "round_count": round_count(result),
        "matches": fixtures_schema.dump(result),
    }), 200
