from tabela.models.competition import GroupPlayType, TournamentFormat, WizardConfig
from marshmallow import Schema, fields, post_load, validate


class WizardConfigSchema(Schema):
    format = fields.Enum(TournamentFormat, required=True)
    turns = fields.Integer(load_default=1, validate=validate.OneOf([1, 2]))
    playoffs = fields.Boolean(load_default=False)
    num_groups = fields.Integer(
        data_key="numGroups", load_default=1, validate=validate.Range(min=1)
    )
    playoff_teams_per_group = fields.Integer(
        data_key="playoffTeamsPerGroup", load_default=0, validate=validate.Range(min=0)
    )
    group_play_type = fields.Enum(
        GroupPlayType, data_key="groupPlayType", load_default=GroupPlayType.WITHIN_GROUP
    )

    @post_load
    def make_config(self, data, **kwargs):
        return WizardConfig(**data)
