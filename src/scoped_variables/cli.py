import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .config_loader import default_variables_file, load_store
from .exceptions import ConfigurationError
from .feature_flags import FeatureManager, FlagRegistry
from .scope import SecretScope
from .store import VariableStore

logger = logging.getLogger(__name__)


def _scope_arg(text: str) -> SecretScope:
    try:
        return SecretScope.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scoped-variables",
        description="Inspect a scoped variables snapshot file.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level. Default: WARNING.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("show", "List variables; secret values are hidden."),
        ("secrets", "List the names exposed through the secrets context."),
        ("features", "Show feature flag state for this snapshot and environment."),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument(
            "file",
            nargs="?",
            default=None,
            help="YAML snapshot file. Defaults to $SCOPED_VARIABLES_FILE.",
        )
        if command != "features":
            sub.add_argument(
                "--scope",
                type=_scope_arg,
                default=None if command == "show" else SecretScope.FINAL,
                help="Scope to read (org, repo, final).",
            )
    return parser


def _show(console: Console, variables: VariableStore, scope: Optional[SecretScope]) -> None:
    table = Table(title="Variables")
    table.add_column("Scope", style="cyan")
    table.add_column("Name")
    table.add_column("Value")
    table.add_column("Secret", justify="center")

    scopes = [scope] if scope is not None else list(SecretScope)
    for current in scopes:
        for variable in sorted(variables.scope_variables(current), key=lambda v: v.name.casefold()):
            table.add_row(
                current.value,
                variable.name,
                "***" if variable.secret else variable.value,
                "yes" if variable.secret else "",
            )
    console.print(table)


def _secrets(console: Console, variables: VariableStore, scope: SecretScope) -> None:
    for name in sorted(variables.to_secrets_context(scope), key=str.casefold):
        console.print(name)


def _features(console: Console, variables: VariableStore) -> None:
    for flag_name, flag_value in FlagRegistry.get_all_flags(variables).items():
        console.print(f"{flag_name}: {flag_value}")
    enabled = FeatureManager.is_container_hooks_enabled(variables)
    console.print(f"container hooks enabled: {enabled}")


def main(args: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    if args is None:
        args = sys.argv[1:]

    parser = _create_parser()
    parsed_args = parser.parse_args(args)

    log_level = getattr(logging, parsed_args.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(levelname)s - %(message)s", force=True
    )

    console = console or Console()
    path = parsed_args.file or default_variables_file()
    if path is None:
        parser.error("a snapshot file is required (argument or $SCOPED_VARIABLES_FILE)")

    try:
        variables = load_store(path)
    except ConfigurationError as e:
        logger.error(f"Failed to load variables: {e}")
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if parsed_args.command == "show":
        _show(console, variables, parsed_args.scope)
    elif parsed_args.command == "secrets":
        _secrets(console, variables, parsed_args.scope)
    else:
        _features(console, variables)
    return 0
