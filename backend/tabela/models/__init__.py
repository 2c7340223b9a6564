from tabela.models.team import (
    BYE,
    Club,
    Placeholder,
    PlaceholderOrigin,
    is_placeholder,
)
from tabela.models.match import Fixture, MatchStatus, LOCATION_TBD
from tabela.models.competition import WizardConfig, TournamentFormat, GroupPlayType

__all__ = [
    "BYE",
    "Club",
    "Placeholder",
    "PlaceholderOrigin",
    "is_placeholder",
    "Fixture",
    "MatchStatus",
    "LOCATION_TBD",
    "WizardConfig",
    "TournamentFormat",
    "GroupPlayType",
]
