"""Command-line interface for Monobattle Mixer.

Run a full mix from the shell, or start an interactive session with
autocomplete.
"""

# Monobattle Mixer
# Copyright (C) 2025  Monobattle Mixer developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import sys
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from monobattlemixer.constants import PAIRING_SYSTEMS
from monobattlemixer.exceptions import MixerException
from monobattlemixer.mixer import run_mixer
from monobattlemixer.models.mixer_config import MixerConfig, load_config
from monobattlemixer.roster import load_participants
from monobattlemixer.utils import setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Options shared by every command that builds a configuration
CONFIG_OPTIONS = {
    "--config": "JSON configuration file",
    "--players": "Roster file, one participant per line (default: players.txt)",
    "--rounds": "Number of rounds (default: 16)",
    "--matchups": "Matchups per round (default: 2)",
    "--matchup-size": "Participants per matchup (default: 8)",
    "--team-size": "Participants per team (default: 4)",
    "--pairing-system": "Pairing system (exhaustive/greedy)",
    "--seed": "Random seed for reproducibility",
}

# Command definitions with their options
COMMANDS = {
    "mix": {
        "description": "Schedule every round and write the teams report",
        "options": {
            **CONFIG_OPTIONS,
            "--output": "Text report path (default: teams.txt)",
            "--json": "Also write a JSON report to this path",
            "--debug": "Log candidate counts and score improvements",
        },
    },
    "validate": {
        "description": "Check a roster against the configuration",
        "options": dict(CONFIG_OPTIONS),
    },
    "help": {
        "description": "Show help for specific command",
        "options": {
            "<command>": "Command name to get help for",
        },
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                    MONOBATTLE MIXER - CLI                     ║
║                                                               ║
║              [Fresh teams, every single round]                ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    # Support both "/command" and "command" formats
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/help"] = None
    completions["/list"] = None

    return NestedCompleter.from_nested_dict(completions)


def build_config(args: argparse.Namespace) -> MixerConfig:
    """Build a configuration from an optional file plus command-line overrides."""
    config = load_config(args.config) if args.config else MixerConfig()

    overrides = {
        "player_file": args.players,
        "num_rounds": args.rounds,
        "matchups_per_round": args.matchups,
        "participants_per_matchup": args.matchup_size,
        "participants_per_team": args.team_size,
        "pairing_system": args.pairing_system,
        "seed": args.seed,
        "output_file": getattr(args, "output", None),
        "json_output": getattr(args, "json", None),
    }
    for attr, value in overrides.items():
        if value is not None:
            setattr(config, attr, value)
    if getattr(args, "debug", False):
        config.debug = True
    return config


def run_mix_command(args: argparse.Namespace) -> int:
    """Run the mix command."""
    try:
        config = build_config(args)
        print(f"\n{Colors.BOLD}Mixing {config.num_rounds} rounds...{Colors.ENDC}")
        manager = run_mixer(config)
    except MixerException as e:
        logger.error(f"Mix failed: {e}")
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1

    total_score = sum(r.total_score for r in manager.rounds)
    print(f"\n{Colors.BOLD}Mix complete:{Colors.ENDC}")
    print(f"  Participants: {len(manager.ledger.names)}")
    print(f"  Rounds: {len(manager.rounds)}")
    print(f"  Total familiarity: {total_score}")
    print(f"{Colors.OKGREEN}Teams saved to: {config.output_file}{Colors.ENDC}")
    if config.json_output:
        print(f"{Colors.OKGREEN}JSON saved to: {config.json_output}{Colors.ENDC}")
    return 0


def run_validate_command(args: argparse.Namespace) -> int:
    """Run the validate command."""
    try:
        config = build_config(args)
        participants = load_participants(config.player_file)
        config.validate(len(participants))
    except MixerException as e:
        print(f"{Colors.FAIL}Invalid: {e}{Colors.ENDC}")
        return 1

    print(f"\n{Colors.BOLD}Validation Results:{Colors.ENDC}")
    print(f"  Participants: {len(participants)}")
    print(
        f"  Per round: {config.matchups_per_round} x {config.participants_per_matchup} "
        f"({config.participants_per_round} playing, "
        f"{len(participants) - config.participants_per_round} sitting out)"
    )
    print(f"{Colors.OKGREEN}Configuration is valid{Colors.ENDC}")
    return 0


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the options shared by every configuration-building command."""
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--players", help="Roster file")
    parser.add_argument("--rounds", type=int, help="Number of rounds")
    parser.add_argument("--matchups", type=int, help="Matchups per round")
    parser.add_argument("--matchup-size", type=int, help="Participants per matchup")
    parser.add_argument("--team-size", type=int, help="Participants per team")
    parser.add_argument(
        "--pairing-system", choices=list(PAIRING_SYSTEMS), help="Pairing system"
    )
    parser.add_argument("--seed", type=int, help="Random seed")


def add_mix_arguments(parser: argparse.ArgumentParser) -> None:
    add_config_arguments(parser)
    parser.add_argument("--output", help="Text report path")
    parser.add_argument("--json", help="JSON report path")
    parser.add_argument("--debug", action="store_true", help="Debug logging")


def create_mix_parser() -> argparse.ArgumentParser:
    """Create parser for mix subcommand."""
    parser = argparse.ArgumentParser(prog="mix", description="Schedule all rounds")
    add_mix_arguments(parser)
    return parser


def create_validate_parser() -> argparse.ArgumentParser:
    """Create parser for validate subcommand."""
    parser = argparse.ArgumentParser(
        prog="validate", description="Check a roster against the configuration"
    )
    add_config_arguments(parser)
    return parser


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="monobattle-mixer",
        description="Balanced team matchups with as few repeat teammates as possible",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  monobattle-mixer

  # Mix with the defaults (players.txt -> teams.txt)
  monobattle-mixer mix

  # Reproducible mix of 3v3 games
  monobattle-mixer mix --matchup-size 6 --team-size 3 --seed 7

  # Check a roster before the event
  monobattle-mixer validate --players roster.txt
        """,
    )

    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    mix_parser = subparsers.add_parser("mix", help="Schedule all rounds")
    add_mix_arguments(mix_parser)
    mix_parser.set_defaults(func=run_mix_command)

    val_parser = subparsers.add_parser("validate", help="Validate roster and config")
    add_config_arguments(val_parser)
    val_parser.set_defaults(func=run_validate_command)

    return parser


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = session.prompt("mixer> ").strip()

            if not user_input:
                continue

            if user_input in ["exit", "quit", "q"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if user_input in ["/help", "help", "?", "/list"]:
                print_commands_list()
                continue

            if user_input.startswith("/help ") or user_input.startswith("help "):
                cmd = user_input.split()[1].lstrip("/")
                print_command_help(cmd)
                continue

            parts = user_input.split()
            # Strip leading "/" if present (support both "/command" and "command")
            command = parts[0].lstrip("/")

            if command not in COMMANDS:
                print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
                print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
                continue

            args_list = parts[1:]

            try:
                if command == "mix":
                    run_mix_command(create_mix_parser().parse_args(args_list))
                elif command == "validate":
                    run_validate_command(create_validate_parser().parse_args(args_list))
                elif command == "exit":
                    print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                    break
            except SystemExit:
                # argparse calls sys.exit on error, catch it
                continue

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

    return 0


def run_standard_mode(argv: Optional[List[str]] = None) -> int:
    """Run in standard CLI mode (non-interactive)."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        return run_interactive_mode()

    if hasattr(args, "func"):
        return args.func(args)
    parser.print_help()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the monobattle-mixer CLI."""
    if argv is None:
        argv = sys.argv[1:]

    # If no arguments, start interactive mode
    if not argv or "--interactive" in argv or "-i" in argv:
        return run_interactive_mode()

    return run_standard_mode(argv)


if __name__ == "__main__":
    sys.exit(main())
