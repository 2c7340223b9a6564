"""Championship wizard helpers: defaults, coupling rules and a live preview.

The preview counts fixtures arithmetically; it agrees with what
``generate_schedule`` produces for the same roster size and configuration.
"""
from dataclasses import replace

from tabela.errors import ConfigurationError
from tabela.models.competition import GroupPlayType, TournamentFormat, WizardConfig
from tabela.services.scheduler_service import cross_group_pairs, is_power_of_two, stage_name


def default_config(club_count):
    """Starting configuration the wizard offers for a roster of this size."""
    default_playoff_teams = 4 if club_count >= 6 else (2 if club_count >= 4 else 0)
    is_group_stage = club_count >= 4

    return WizardConfig(
        format=TournamentFormat.GROUP_STAGE if is_group_stage else TournamentFormat.ROUND_ROBIN,
        turns=1,
        playoffs=default_playoff_teams > 0,
        num_groups=2 if is_group_stage else 1,
        playoff_teams_per_group=(
            default_playoff_teams // 2 if is_group_stage else default_playoff_teams
        ),
        group_play_type=GroupPlayType.WITHIN_GROUP,
    )


def valid_group_counts(club_count):
    """Even group counts that leave at least two clubs per group."""
    if club_count < 4:
        return [1]
    return [
        g for g in range(2, club_count // 2 + 1)
        if club_count / g >= 2 and g % 2 == 0
    ]


def normalize_config(config, club_count):
    """Apply the wizard's coupling rules between fields."""
    if config.format == TournamentFormat.ROUND_ROBIN:
        config = replace(config, num_groups=1, group_play_type=GroupPlayType.WITHIN_GROUP)
    elif config.num_groups < 2:
        config = replace(config, group_play_type=GroupPlayType.WITHIN_GROUP)

    if not config.playoffs:
        config = replace(config, playoff_teams_per_group=0)

    # Every group must fill its places, so the smallest group sets the cap.
    teams_per_group = club_count // max(config.num_groups, 1)
    per_group = min(config.playoff_teams_per_group, teams_per_group)
    while per_group > 0 and not is_power_of_two(per_group * max(config.num_groups, 1)):
        per_group -= 1
    if per_group != config.playoff_teams_per_group:
        config = replace(config, playoff_teams_per_group=per_group)
    if config.playoffs and per_group == 0:
        config = replace(config, playoffs=False)

    return config


def _pairs(n):
    return n * (n - 1) // 2


def _group_sizes(club_count, num_groups):
    base, extra = divmod(club_count, num_groups)
    return [base + (1 if i < extra else 0) for i in range(num_groups)]


def count_initial_fixtures(club_count, config):
    if not config.is_group_stage:
        return _pairs(club_count) * config.turns

    sizes = _group_sizes(club_count, config.num_groups)
    if config.is_cross_group:
        return sum(
            sizes[a] * sizes[b]
            for a, b in cross_group_pairs(config.num_groups, config.group_play_type)
        ) * config.turns
    return sum(_pairs(size) for size in sizes) * config.turns


def preview(club_count, config):
    """Summary of the championship structure without generating fixtures."""
    if config.is_group_stage:
        format_text = f"{config.num_groups} Grupos"
    else:
        format_text = "Pontos Corridos"

    initial_games = count_initial_fixtures(club_count, config)

    qualifiers = config.total_qualifiers
    if config.playoffs and qualifiers > 1:
        if not is_power_of_two(qualifiers):
            raise ConfigurationError(
                f"Playoff bracket needs a power-of-two number of qualifiers, got {qualifiers}"
            )
        playoff_games = qualifiers - 1
        playoff_description = f"{qualifiers} classificados para {stage_name(qualifiers)}"
    else:
        playoff_games = 0
        playoff_description = "Sem mata-mata"

    return {
        "format_text": format_text,
        "turns_text": "1 Turno (Ida)" if config.turns == 1 else "2 Turnos (Ida e Volta)",
        "initial_phase_games": initial_games,
        "playoff_description": playoff_description,
        "playoff_phase_games": playoff_games,
        "total_games": initial_games + playoff_games,
    }
