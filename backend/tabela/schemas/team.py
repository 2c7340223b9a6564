from tabela.extensions import ma
from tabela.models.team import Club, is_placeholder
from marshmallow import Schema, fields, post_load, validate


class ClubSchema(Schema):
    """Roster entry as handed over by the club registry."""

    id = fields.String(required=True, validate=validate.Length(min=1, max=100))
    name = fields.String(required=True, validate=validate.Length(min=1, max=200))
    abbreviation = fields.String(load_default="", validate=validate.Length(max=10))
    logo_url = fields.String(
        data_key="logoUrl", load_default="", allow_none=True, validate=validate.Length(max=500)
    )

    @post_load
    def make_club(self, data, **kwargs):
        return Club(
            id=data["id"],
            name=data["name"],
            abbreviation=data["abbreviation"],
            logo_url=data["logo_url"] or "",
        )


class TeamRefSchema(ma.Schema):
    id = fields.String(dump_only=True)
    name = fields.String(dump_only=True)
    abbreviation = fields.String(dump_only=True)
    logo_url = fields.String(data_key="logoUrl", dump_only=True)
    placeholder = fields.Function(lambda obj: is_placeholder(obj), dump_only=True)
