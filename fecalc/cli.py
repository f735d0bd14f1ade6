"""
Command-line entry point for the combat forecast calculator.

Usage:
  fecalc -uf units.yaml -wf weapons.yaml -ft 0 -et 20 Marth Cain Abel
"""
import argparse
import sys
from typing import Optional, Sequence

from .core.config import CalculatorConfig
from .core.errors import (
    CombatCalcError,
    InvalidArguments,
    UnresolvedEntity,
    UnresolvedWeapon,
)
from .core.log_manager import LogLevel, LogManager
from .game.combat.combat_resolver import CombatResolver
from .game.data_loader import DataLoader
from .renderers.text_renderer import TextRenderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fecalc",
        description="Forecast damage, accuracy and double attacks between units",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fecalc Marth Cain                       # Marth attacks Cain
  fecalc -et 20 Marth Cain Abel           # Defenders stand on a forest
  fecalc --skip-missing-weapons Marth Cain Jagen
        """
    )

    parser.add_argument(
        "-uf", "--unitsFile",
        dest="units_file",
        default="units.yaml",
        help="File containing units to load"
    )
    parser.add_argument(
        "-wf", "--weaponsFile",
        dest="weapons_file",
        default="weapons.yaml",
        help="File containing weapons to load"
    )
    parser.add_argument(
        "-ft",
        dest="attacker_terrain_bonus",
        type=int,
        default=0,
        help="Attacker terrain bonus"
    )
    parser.add_argument(
        "-et",
        dest="defender_terrain_bonus",
        type=int,
        default=0,
        help="Attackee terrain bonus"
    )
    parser.add_argument(
        "--skip-missing-weapons",
        action="store_true",
        help="Skip defenders without a usable weapon instead of stopping"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show loading and resolution messages"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show per-weapon formula details"
    )
    parser.add_argument(
        "--log-file",
        help="Save the full run log to this file"
    )
    parser.add_argument(
        "units",
        nargs="*",
        metavar="UNIT",
        help="Attacker name followed by one or more defender names"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> CalculatorConfig:
    """Build the run configuration from parsed arguments."""
    if args.debug:
        log_level = LogLevel.DEBUG
    elif args.verbose:
        log_level = LogLevel.INFO
    else:
        log_level = LogLevel.WARNING

    return CalculatorConfig(
        units_file=args.units_file,
        weapons_file=args.weapons_file,
        attacker_terrain_bonus=args.attacker_terrain_bonus,
        defender_terrain_bonus=args.defender_terrain_bonus,
        unit_names=list(args.units),
        abort_on_missing_weapon=not args.skip_missing_weapons,
        log_level=log_level,
        log_file=args.log_file,
    )


def run(config: CalculatorConfig, log_manager: LogManager, renderer: TextRenderer) -> int:
    """Load the data files, resolve the forecasts and print them."""
    if len(config.unit_names) < 2:
        raise InvalidArguments("An attacker and at least one defender are required")

    loader = DataLoader(log_manager)
    roster = loader.load_units(config.units_file)
    armory = loader.load_armory(config.weapons_file)

    resolver = CombatResolver(roster, armory, config, log_manager)
    report = resolver.resolve(config.unit_names)
    renderer.write(renderer.render_report(report))

    if not report.complete:
        log_manager.warning(f"{len(report.skipped)} defender(s) skipped without a usable weapon")
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, run once, and map errors to exit codes."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = config_from_args(args)

    log_manager = LogManager(default_level=config.log_level)
    renderer = TextRenderer()
    log_manager.system(
        f"Terrain bonus: attacker {config.attacker_terrain_bonus}, "
        f"defender {config.defender_terrain_bonus}"
    )

    try:
        exit_code = run(config, log_manager, renderer)
    except InvalidArguments as e:
        log_manager.error(str(e))
        parser.print_usage()
        exit_code = e.exit_code
    except UnresolvedEntity as e:
        log_manager.error(str(e))
        renderer.write(renderer.render_unresolved_entity(e))
        exit_code = e.exit_code
    except UnresolvedWeapon as e:
        log_manager.error(str(e))
        renderer.write(renderer.render_unresolved_weapon(e))
        exit_code = e.exit_code
    except CombatCalcError as e:
        log_manager.error(str(e))
        exit_code = e.exit_code

    if config.log_file:
        log_manager.save_log_to_file(config.log_file)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
