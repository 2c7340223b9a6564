from flask import current_app
from marshmallow import Schema, ValidationError, fields, validate, validates

from tabela.extensions import ma
from tabela.schemas.competition import WizardConfigSchema
from tabela.schemas.team import ClubSchema, TeamRefSchema


class FixtureSchema(ma.Schema):
    id = fields.String(dump_only=True)
    round = fields.Integer(dump_only=True)
    home_team = fields.Nested(TeamRefSchema, attribute="home", dump_only=True)
    away_team = fields.Nested(TeamRefSchema, attribute="away", dump_only=True)
    home_score = fields.Integer(dump_only=True, allow_none=True)
    away_score = fields.Integer(dump_only=True, allow_none=True)
    status = fields.Function(lambda obj: obj.status.value if obj.status else None)
    location = fields.String(dump_only=True)
    date = fields.DateTime(dump_only=True)
    events = fields.List(fields.Raw(), dump_only=True)
    stage = fields.String(dump_only=True, allow_none=True)
    group_name = fields.String(dump_only=True, allow_none=True)


class GenerateScheduleSchema(Schema):
    clubs = fields.List(fields.Nested(ClubSchema), required=True)
    config = fields.Nested(WizardConfigSchema, required=True)
    start_date = fields.Date(load_default=None)
    interval_days = fields.Integer(load_default=None, validate=validate.Range(min=1))

    @validates("clubs")
    def validate_roster_size(self, value, **kwargs):
        limit = current_app.config["MAX_ROSTER_SIZE"]
        if len(value) > limit:
            raise ValidationError(f"A roster can hold at most {limit} clubs.")


class PreviewScheduleSchema(Schema):
    club_count = fields.Integer(required=True, validate=validate.Range(min=0))
    config = fields.Nested(WizardConfigSchema, required=True)
