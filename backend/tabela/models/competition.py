import enum
from dataclasses import dataclass


class TournamentFormat(enum.Enum):
    ROUND_ROBIN = "ROUND_ROBIN"
    GROUP_STAGE = "GROUP_STAGE"


class GroupPlayType(enum.Enum):
    WITHIN_GROUP = "WITHIN_GROUP"
    CROSS_GROUP_SEQUENTIAL = "CROSS_GROUP_SEQUENTIAL"
    CROSS_GROUP_REVERSE = "CROSS_GROUP_REVERSE"


@dataclass(frozen=True)
class WizardConfig:
    """Structural choices made in the championship wizard.

    ``playoff_teams_per_group`` is the per-group qualifier count for a group
    stage and the total qualifier count for a single round-robin.
    """

    format: TournamentFormat = TournamentFormat.ROUND_ROBIN
    turns: int = 1
    playoffs: bool = False
    num_groups: int = 1
    playoff_teams_per_group: int = 0
    group_play_type: GroupPlayType = GroupPlayType.WITHIN_GROUP

    @property
    def is_group_stage(self):
        return self.format == TournamentFormat.GROUP_STAGE

    @property
    def is_cross_group(self):
        return self.is_group_stage and self.group_play_type != GroupPlayType.WITHIN_GROUP

    @property
    def total_qualifiers(self):
        if self.is_group_stage:
            return self.num_groups * self.playoff_teams_per_group
        return self.playoff_teams_per_group
