import json
from itertools import groupby

import click
from flask.cli import AppGroup
from marshmallow import ValidationError

from tabela.data import DEMO_CLUBS
from tabela.errors import ConfigurationError
from tabela.models.team import Club
from tabela.schemas import ClubSchema, WizardConfigSchema
from tabela.services.scheduler_service import generate_schedule_for_roster, round_count
from tabela.services.wizard_service import preview

schedule_cli = AppGroup("schedule", help="Fixture generation commands.")


def _config_options(fn):
    """Wizard options shared by every schedule command."""
    options = [
        click.option("--format", "fmt", default="ROUND_ROBIN",
                     type=click.Choice(["ROUND_ROBIN", "GROUP_STAGE"]),
                     help="Initial phase format."),
        click.option("--turns", default=1, type=click.IntRange(1, 2),
                     help="1 = single round-robin, 2 = home and away."),
        click.option("--groups", default=1, type=int, help="Number of groups."),
        click.option("--group-play", default="WITHIN_GROUP",
                     type=click.Choice(["WITHIN_GROUP", "CROSS_GROUP_SEQUENTIAL",
                                        "CROSS_GROUP_REVERSE"]),
                     help="How groups are paired."),
        click.option("--playoff-teams", default=0, type=int,
                     help="Qualifiers per group (total for round-robin). 0 = no playoffs."),
    ]
    for option in reversed(options):
        fn = option(fn)
    return fn


def _load_config(fmt, turns, groups, group_play, playoff_teams):
    try:
        return WizardConfigSchema().load({
            "format": fmt,
            "turns": turns,
            "playoffs": playoff_teams > 0,
            "numGroups": groups,
            "playoffTeamsPerGroup": playoff_teams,
            "groupPlayType": group_play,
        })
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e.messages}")


def _load_roster(roster, clubs):
    if roster is None:
        if clubs > len(DEMO_CLUBS):
            raise click.ClickException(f"The demo roster has only {len(DEMO_CLUBS)} clubs")
        return [Club(id=cid, name=name, abbreviation=abbr) for cid, name, abbr in DEMO_CLUBS[:clubs]]

    with open(roster, encoding="utf-8") as f:
        raw = json.load(f)
    try:
        return ClubSchema(many=True).load(raw)
    except ValidationError as e:
        raise click.ClickException(f"Invalid roster: {e.messages}")


@schedule_cli.command("generate")
@click.option("--clubs", default=8, type=click.IntRange(0), help="Clubs taken from the demo roster.")
@click.option("--roster", type=click.Path(exists=True, dir_okay=False),
              help="JSON file with a list of {id, name, abbreviation, logoUrl}.")
@click.option("--start-date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Date of the first fixture (defaults to now).")
@_config_options
def generate(clubs, roster, start_date, fmt, turns, groups, group_play, playoff_teams):
    """Generate and print a full fixture list."""
    roster_clubs = _load_roster(roster, clubs)
    config = _load_config(fmt, turns, groups, group_play, playoff_teams)

    fixtures, error = generate_schedule_for_roster(roster_clubs, config, start_date)
    if error:
        raise click.ClickException(error)

    for round_number, round_fixtures in groupby(fixtures, key=lambda f: f.round):
        round_fixtures = list(round_fixtures)
        stage = round_fixtures[0].stage
        click.echo(f"Round {round_number}" + (f" ({stage})" if stage else ""))
        for f in round_fixtures:
            group = f" [{f.group_name}]" if f.group_name else ""
            click.echo(f"  {f.home.name} vs {f.away.name}{group}")

    click.echo(f"{len(fixtures)} matches across {round_count(fixtures)} rounds.")


@schedule_cli.command("preview")
@click.option("--clubs", default=8, type=click.IntRange(0), help="Number of clubs in the roster.")
@_config_options
def preview_command(clubs, fmt, turns, groups, group_play, playoff_teams):
    """Print fixture counts for a configuration without generating it."""
    config = _load_config(fmt, turns, groups, group_play, playoff_teams)
    try:
        summary = preview(clubs, config)
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    click.echo(f"Format: {summary['format_text']}")
    click.echo(f"Turns: {summary['turns_text']}")
    click.echo(f"Initial phase: {summary['initial_phase_games']} games")
    click.echo(f"Playoffs: {summary['playoff_description']} ({summary['playoff_phase_games']} games)")
    click.echo(f"Total: {summary['total_games']} games")
