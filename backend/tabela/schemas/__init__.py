from tabela.schemas.team import ClubSchema, TeamRefSchema
from tabela.schemas.competition import WizardConfigSchema
from tabela.schemas.match import (
    FixtureSchema,
    GenerateScheduleSchema,
    PreviewScheduleSchema,
)

__all__ = [
    "ClubSchema",
    "TeamRefSchema",
    "WizardConfigSchema",
    "FixtureSchema",
    "GenerateScheduleSchema",
    "PreviewScheduleSchema",
]
