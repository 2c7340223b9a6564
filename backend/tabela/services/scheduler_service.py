"""Fixture generation for a championship.

Pipeline, run from scratch on every "generate" action:

    roster -> groups -> round-robin / cross-group pairings -> playoff bracket
           -> assembled fixture list (temporary ids, placeholder dates)

Every step returns a new list; nothing here touches persistence.
"""
import logging
from dataclasses import replace
from datetime import date, datetime, timedelta, timezone

from tabela.errors import ConfigurationError
from tabela.models.competition import GroupPlayType
from tabela.models.match import Fixture
from tabela.models.team import BYE, Placeholder, PlaceholderOrigin

logger = logging.getLogger(__name__)

GROUP_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
VALID_TURNS = (1, 2)
DEFAULT_INTERVAL_DAYS = 7


# ── Group Partition ──────────────────────────────────────────────────────────

def group_letter(index):
    """0 → "A", 25 → "Z", 26 → "AA" (spreadsheet-style)."""
    letters = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, len(GROUP_LETTERS))
        letters = GROUP_LETTERS[rem] + letters
    return letters


def partition_groups(teams, num_groups):
    """Deal the roster into ``num_groups`` groups by index modulo.

    Team *i* goes to group ``i % num_groups``, so group sizes differ by at
    most one and roster order is preserved inside each group.
    """
    if num_groups < 1:
        raise ConfigurationError("Number of groups must be at least 1")

    groups = [[] for _ in range(num_groups)]
    for i, team in enumerate(teams):
        groups[i % num_groups].append(team)
    return groups


# ── Round-Robin ──────────────────────────────────────────────────────────────

def _round_pairings(order):
    """Pairings for one round: position i hosts the mirrored position n-1-i."""
    n = len(order)
    return [(order[i], order[n - 1 - i]) for i in range(n // 2)]


def _rotate(order):
    """Keep position 0 fixed and move every other team one step clockwise."""
    return [order[0], order[-1]] + order[1:-1]


def _ensure_distinct(teams):
    ids = [t.id for t in teams]
    if len(set(ids)) != len(ids):
        raise ConfigurationError("Roster contains the same club more than once")


def round_robin(teams, turns=1, start_round=1, group_name=None):
    """Full round-robin using the circle method.

    An odd roster gets a bye appended; fixtures against the bye are dropped.
    With ``turns=2`` the first turn is repeated with home/away swapped,
    starting right after the last first-turn round.
    """
    if turns not in VALID_TURNS:
        raise ConfigurationError("Turns must be 1 or 2")

    order = list(teams)
    if len(order) < 2:
        logger.info(
            "Group %s has %d club(s); no fixtures to generate",
            group_name or "-", len(order),
        )
        return []

    _ensure_distinct(order)
    if len(order) % 2 != 0:
        order.append(BYE)

    rounds_per_turn = len(order) - 1
    first_turn = []
    for r in range(rounds_per_turn):
        for home, away in _round_pairings(order):
            if home is BYE or away is BYE:
                continue
            first_turn.append(Fixture(
                round=start_round + r,
                home=home,
                away=away,
                group_name=group_name,
            ))
        order = _rotate(order)

    if turns == 1:
        return first_turn

    second_turn = [
        replace(f, round=f.round + rounds_per_turn, home=f.away, away=f.home)
        for f in first_turn
    ]
    return first_turn + second_turn


def _in_round_order(fixtures):
    # sorted() is stable, so group order is kept inside a round
    return sorted(fixtures, key=lambda f: f.round)


def schedule_groups(groups, turns=1):
    """Independent round-robin inside each group, all groups in parallel."""
    fixtures = []
    for index, group in enumerate(groups):
        fixtures.extend(round_robin(group, turns, start_round=1, group_name=group_letter(index)))
    return _in_round_order(fixtures)


# ── Cross-Group Pairing ──────────────────────────────────────────────────────

def cross_group_pairs(num_groups, strategy):
    """Index pairs of groups that play each other.

    Sequential: (0,1), (2,3), ...  Reverse: (0,n-1), (1,n-2), ... with the
    middle group skipped when the group count is odd.
    """
    if num_groups < 2:
        raise ConfigurationError("Cross-group pairing requires at least 2 groups")

    if strategy == GroupPlayType.CROSS_GROUP_SEQUENTIAL:
        if num_groups % 2 != 0:
            raise ConfigurationError(
                "Sequential cross-group pairing requires an even number of groups"
            )
        return [(i, i + 1) for i in range(0, num_groups, 2)]

    if strategy == GroupPlayType.CROSS_GROUP_REVERSE:
        pairs = []
        for i in range((num_groups + 1) // 2):
            j = num_groups - 1 - i
            if i == j:
                logger.info(
                    "Group %s has no opposing group under reverse pairing; skipped",
                    group_letter(i),
                )
                continue
            pairs.append((i, j))
        return pairs

    raise ConfigurationError(f"{strategy.value} is not a cross-group pairing strategy")


def pair_cross_groups(groups, strategy, turns=1):
    """Fixtures between paired groups only.

    Each pair's combined roster goes through the round-robin, then
    intra-group fixtures are filtered out. Pairs run in parallel, so every
    pair keeps its own round numbers starting from 1.
    """
    fixtures = []
    for a, b in cross_group_pairs(len(groups), strategy):
        first, second = groups[a], groups[b]
        first_ids = {t.id for t in first}
        second_ids = {t.id for t in second}
        label = f"{group_letter(a)} x {group_letter(b)}"

        pair_fixtures = [
            f for f in round_robin(first + second, turns, start_round=1, group_name=label)
            if (f.home.id in first_ids and f.away.id in second_ids)
            or (f.home.id in second_ids and f.away.id in first_ids)
        ]
        logger.debug("Cross-group pair %s: %d fixtures", label, len(pair_fixtures))
        fixtures.extend(pair_fixtures)

    return _in_round_order(fixtures)


# ── Playoff Bracket ──────────────────────────────────────────────────────────

_STAGE_NAMES = {
    2: "Final",
    4: "Semifinal",
    8: "Quartas",
}


def stage_name(team_count):
    return _STAGE_NAMES.get(team_count, f"Fase de {team_count}")


def ordinal(n):
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def is_power_of_two(n):
    return n > 0 and n & (n - 1) == 0


def qualifier_placeholders(qualifier_count, config):
    """Symbolic entrants for the bracket, best-placed first.

    Group stage: 1st of every group, then 2nd of every group, and so on.
    """
    if config.is_group_stage:
        num_groups = config.num_groups
        return [
            Placeholder(
                label=f"{ordinal(i // num_groups + 1)} Place Group {group_letter(i % num_groups)}",
                origin=PlaceholderOrigin.STANDING,
            )
            for i in range(qualifier_count)
        ]
    return [
        Placeholder(label=f"{ordinal(i + 1)} Place", origin=PlaceholderOrigin.STANDING)
        for i in range(qualifier_count)
    ]


def build_playoff_bracket(qualifier_count, start_round, config):
    """Single-elimination bracket seeded with placeholders.

    Top seed meets bottom seed in every stage; one round per stage.
    8 qualifiers → 4 Quartas + 2 Semifinal + 1 Final.
    """
    if qualifier_count <= 1:
        return []
    if not is_power_of_two(qualifier_count):
        raise ConfigurationError(
            f"Playoff bracket needs a power-of-two number of qualifiers, got {qualifier_count}"
        )

    stage_teams = qualifier_placeholders(qualifier_count, config)
    round_number = start_round
    fixtures = []

    while len(stage_teams) > 1:
        count = len(stage_teams)
        name = stage_name(count)
        winners = []
        for i in range(count // 2):
            fixtures.append(Fixture(
                round=round_number,
                home=stage_teams[i],
                away=stage_teams[count - 1 - i],
                stage=name,
            ))
            winners.append(Placeholder(
                label=f"Winner {name} {i + 1}",
                origin=PlaceholderOrigin.BRACKET,
            ))
        stage_teams = winners
        round_number += 1

    return fixtures


# ── Assembly ─────────────────────────────────────────────────────────────────

def _as_datetime(reference):
    """Kick-off instants are UTC-aware; naive inputs are read as UTC."""
    if isinstance(reference, datetime):
        if reference.tzinfo is None:
            return reference.replace(tzinfo=timezone.utc)
        return reference
    if isinstance(reference, date):
        return datetime(reference.year, reference.month, reference.day, tzinfo=timezone.utc)
    raise ConfigurationError("Reference date must be a date or datetime")


def assemble_schedule(initial, playoff, reference_date, interval_days=DEFAULT_INTERVAL_DAYS):
    """Concatenate both phases and stamp temporary ids and placeholder dates.

    Dates advance one interval per fixture position in the final list; admins
    set real dates afterwards.
    """
    if interval_days < 1:
        raise ConfigurationError("Interval between fixtures must be at least 1 day")

    initial = list(initial)
    playoff = list(playoff)
    if initial and playoff:
        last_initial = max(f.round for f in initial)
        first_playoff = min(f.round for f in playoff)
        if first_playoff <= last_initial:
            raise ConfigurationError(
                f"Playoff starts at round {first_playoff} but the initial phase "
                f"runs until round {last_initial}"
            )

    start = _as_datetime(reference_date)
    return [
        replace(
            f,
            id=f"tmp-{position + 1}",
            date=start + timedelta(days=position * interval_days),
        )
        for position, f in enumerate(initial + playoff)
    ]


# ── Validation ───────────────────────────────────────────────────────────────

def validate_config(clubs, config):
    """Reject a configuration before any fixture is produced."""
    club_count = len(clubs)
    if club_count < 2:
        raise ConfigurationError("A championship needs at least 2 clubs")
    _ensure_distinct(clubs)

    if config.turns not in VALID_TURNS:
        raise ConfigurationError("Turns must be 1 or 2")
    if config.num_groups < 1:
        raise ConfigurationError("Number of groups must be at least 1")
    if config.playoff_teams_per_group < 0:
        raise ConfigurationError("Playoff qualifiers cannot be negative")

    if config.is_group_stage:
        if club_count < config.num_groups:
            raise ConfigurationError(
                f"Group stage requires at least {config.num_groups} clubs"
            )
        if config.is_cross_group:
            # raises for an unusable group count / strategy combination
            cross_group_pairs(config.num_groups, config.group_play_type)

    if config.playoffs:
        if config.is_group_stage:
            available = club_count // config.num_groups
            if config.playoff_teams_per_group > available:
                raise ConfigurationError(
                    f"Only {available} clubs per group available for "
                    f"{config.playoff_teams_per_group} playoff places per group"
                )
        elif config.playoff_teams_per_group > club_count:
            raise ConfigurationError(
                f"Only {club_count} clubs available for "
                f"{config.playoff_teams_per_group} playoff places"
            )

        qualifiers = config.total_qualifiers
        if qualifiers > 1 and not is_power_of_two(qualifiers):
            raise ConfigurationError(
                f"Playoff bracket needs a power-of-two number of qualifiers, got {qualifiers}"
            )


# ── Pipeline ─────────────────────────────────────────────────────────────────

def generate_initial_phase(clubs, config):
    if not config.is_group_stage:
        return round_robin(clubs, config.turns)

    groups = partition_groups(clubs, config.num_groups)
    if config.is_cross_group:
        return pair_cross_groups(groups, config.group_play_type, config.turns)
    return schedule_groups(groups, config.turns)


def generate_schedule(clubs, config, reference_date=None, interval_days=DEFAULT_INTERVAL_DAYS):
    """Validate, then build the complete fixture list for a championship."""
    clubs = list(clubs)
    validate_config(clubs, config)

    initial = generate_initial_phase(clubs, config)

    playoff = []
    if config.playoffs:
        start_round = max((f.round for f in initial), default=0) + 1
        playoff = build_playoff_bracket(config.total_qualifiers, start_round, config)

    if reference_date is None:
        reference_date = datetime.now(timezone.utc)

    logger.debug(
        "Generated %d initial and %d playoff fixtures for %d clubs",
        len(initial), len(playoff), len(clubs),
    )
    return assemble_schedule(initial, playoff, reference_date, interval_days)


def generate_schedule_for_roster(clubs, config, start_date=None, interval_days=DEFAULT_INTERVAL_DAYS):
    """Service entry point: returns ``(fixtures, None)`` or ``(None, error)``."""
    try:
        fixtures = generate_schedule(clubs, config, start_date, interval_days)
    except ConfigurationError as e:
        return None, str(e)
    return fixtures, None


def round_count(fixtures):
    return max((f.round for f in fixtures), default=0)
