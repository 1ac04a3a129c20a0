# exported_headers/cli/interface.py
import sys
from pathlib import Path
from typing import Any, Dict

import click
from click_option_group import optgroup
import structlog

from exported_headers import __version__ as app_version
from exported_headers.cli.console_output import print_collection_summary
from exported_headers.config.loader import load_project_config, resolve_config_options
from exported_headers.config.settings import (
    CollectorConfig, OutputFormat, DEFAULT_OUTPUT_FORMAT, DEFAULT_SHOW_SUMMARY,
)
from exported_headers.core.discovery import collect_all_exported_headers
from exported_headers.core.output import render_json, render_text, write_to_stdout
from exported_headers.exceptions import HeaderCheckerError
from exported_headers.logging_setup import configure_logging

log = structlog.get_logger(__name__)

def _build_effective_config(cli_params: Dict[str, Any]) -> CollectorConfig:
    # layers dataclass defaults < config file < profile < command line.
    raw_config = load_project_config()
    effective_options = resolve_config_options(raw_config, cli_params.get("active_config_profile_name"))

    if cli_params.get("header_dirs"):
        effective_options["header_dirs"] = list(cli_params["header_dirs"])
    if cli_params.get("root_dir") is not None:
        effective_options["root_dir"] = cli_params["root_dir"]
    if cli_params.get("output_format_str") is not None:
        effective_options["output_format"] = OutputFormat.from_string(cli_params["output_format_str"])
    if cli_params.get("show_summary") is not None:
        effective_options["show_summary"] = cli_params["show_summary"]

    return CollectorConfig(**effective_options)

def _run_collection_flow(config: CollectorConfig):
    log.info("collection_orchestration_started", header_dirs=[str(d) for d in config.header_dirs], root_dir=config.resolved_root_dir)
    exported_headers = collect_all_exported_headers(config.header_dirs, config.resolved_root_dir)

    if config.output_format == OutputFormat.JSON:
        write_to_stdout(render_json(exported_headers, config.resolved_root_dir))
    else:
        write_to_stdout(render_text(exported_headers))

    if config.show_summary:
        print_collection_summary(config.header_dirs, config.resolved_root_dir, exported_headers)


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@optgroup.group("Input Options", help="Where to look for exported headers.")
@optgroup.option("-d", "--header-dir", "header_dirs", multiple=True, type=click.Path(file_okay=False, path_type=Path), help="Directory to scan for exported headers. Repeatable.")
@optgroup.option("-r", "--root-dir", "root_dir", type=click.Path(file_okay=False, path_type=Path), default=None, help="Directory that collected paths are made relative to. Default: current directory.")
@optgroup.group("Output Options", help="Control how the header inventory is printed.")
@optgroup.option("-F", "--output-format", "output_format_str", type=click.Choice([f.value for f in OutputFormat]), default=None, help=f"Output format. Default: {DEFAULT_OUTPUT_FORMAT.value}.")
@optgroup.option("--summary/--no-summary", "show_summary", default=None, help=f"Show a collection summary on stderr. Default: {'on' if DEFAULT_SHOW_SUMMARY else 'off'}.")
@optgroup.group("Application Behavior", help="Configuration profiles and logging.")
@optgroup.option("--config-profile", "active_config_profile_name", default=None, help="Load a profile from the project config file.")
@optgroup.option("--verbose", "-v", "verbosity_level", count=True, help="Verbosity: -v info, -vv debug.")
@optgroup.option("--force-json-logs", "force_json_logs_cli", is_flag=True, default=False, help="Force JSON logs.")
@click.version_option(version=app_version, package_name="exported-headers", prog_name="exported-headers", help="Show version and exit.")
@click.pass_context
def main_cli(ctx: click.Context, **cli_params: Any):
    """exported-headers: list the public header files beneath one or more
    directories, relative to a root directory."""

    configure_logging(verbosity=cli_params.get("verbosity_level", 0), force_json_logs=cli_params.get("force_json_logs_cli", False))

    log.debug("cli_command_invoked", params=cli_params)

    try:
        config = _build_effective_config(cli_params)
        if not config.header_dirs:
            raise click.UsageError("no header directories given; use -d/--header-dir or 'header_dirs' in the config file.", ctx=ctx)
        _run_collection_flow(config)

    except click.exceptions.Exit as e: raise e
    except HeaderCheckerError as e:
        # an incomplete inventory is worse than none: always fatal here.
        log.error("handled_application_error_in_cli", error_type=type(e).__name__, message=str(e))
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)
    except click.ClickException as e:
        log.error("click_exception_in_cli", error_type=type(e).__name__, message=str(e))
        e.show(); sys.exit(e.exit_code)
    except Exception as e:
        log.critical("unexpected_critical_error_in_cli", message=str(e), exc_info=True)
        click.secho(f"Unexpected critical error: {e}. Please report this.", fg="red", err=True)
        sys.exit(1)
