import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from tabela.models.team import Club, Placeholder

LOCATION_TBD = "A definir"


class MatchStatus(enum.Enum):
    SCHEDULED = "scheduled"


@dataclass(frozen=True)
class Fixture:
    """A match draft produced by the generator, before persistence.

    ``id`` is a temporary token minted by the assembler; the persistence
    layer replaces it with a durable identifier.
    """

    round: int
    home: Union[Club, Placeholder]
    away: Union[Club, Placeholder]
    status: MatchStatus = MatchStatus.SCHEDULED
    location: str = LOCATION_TBD
    date: Optional[datetime] = None
    events: tuple = field(default_factory=tuple)
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    id: Optional[str] = None
    stage: Optional[str] = None
    group_name: Optional[str] = None

    def pair_key(self):
        """Unordered identity of the two teams, for counting meetings."""
        return frozenset((self.home.id, self.away.id))

    def __repr__(self):
        return f"<Fixture R{self.round} {self.home.name} vs {self.away.name}>"
