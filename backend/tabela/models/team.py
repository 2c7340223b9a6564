import enum
import re
from dataclasses import dataclass

PLACEHOLDER_ABBREVIATION = "TBD"
PLACEHOLDER_ID_PREFIX = "ph-"


class PlaceholderOrigin(enum.Enum):
    BYE = "bye"
    STANDING = "standing"
    BRACKET = "bracket"


@dataclass(frozen=True)
class Club:
    """A real club taken from the championship roster."""

    id: str
    name: str
    abbreviation: str = ""
    logo_url: str = ""

    def __repr__(self):
        return f"<Club {self.name}>"


@dataclass(frozen=True)
class Placeholder:
    """A bracket slot or bye that has no concrete club yet.

    Never persisted as a club; an admin assigns the real club later.
    """

    label: str
    origin: PlaceholderOrigin

    @property
    def id(self):
        slug = re.sub(r"[^a-z0-9]+", "-", self.label.lower()).strip("-")
        return f"{PLACEHOLDER_ID_PREFIX}{slug}"

    @property
    def name(self):
        return self.label

    @property
    def abbreviation(self):
        return PLACEHOLDER_ABBREVIATION

    @property
    def logo_url(self):
        return ""

    def __repr__(self):
        return f"<Placeholder {self.label}>"


BYE = Placeholder(label="Bye", origin=PlaceholderOrigin.BYE)


def is_placeholder(team):
    return isinstance(team, Placeholder)
