# propreport/cli/properties_cmd.py
"""
'properties' command - print a property report.

Sources are YAML property files (--source, repeatable) and/or the process
environment (--env [PREFIX]). With no source given the environment is used.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

from propreport.config import load_config, validate_config
from propreport.core.errors import ReportError
from propreport.core.task import PropertyReportTask
from propreport.infra.diagnostics import get_report_logger
from propreport.infra.renderers import create_renderer
from propreport.infra.sources import ChainPropertySource, EnvironPropertySource, YamlPropertySource

logger = logging.getLogger(__name__)


def register_command(subparsers):
    """Register the 'properties' command"""
    props_p = subparsers.add_parser("properties", help="Display the properties of a source")
    props_p.add_argument("--property", dest="property_name", default=None,
                         help="A specific property to output")
    props_p.add_argument("--source", "-s", dest="sources", action="append", default=[],
                         help="YAML property file (can be repeated, later files win)")
    props_p.add_argument("--env", nargs="?", const="", default=None, metavar="PREFIX",
                         help="Include environment variables, optionally only those starting with PREFIX")
    props_p.add_argument("--format", "-f", dest="output_format", choices=["text", "json"], default=None,
                         help="Output format (default: from config, else text)")
    props_p.add_argument("--output", "-o", default=None,
                         help="Write the report to this file instead of stdout")
    props_p.add_argument("--title", default=None,
                         help="Header line for text output")
    props_p.add_argument("--config", default=None,
                         help="Path to config YAML (default: ~/.propreport/config.yml if present)")
    props_p.add_argument("--verbose", "-v", action="store_true",
                         help="Debug logging")
    props_p.set_defaults(func=show_properties)
    return props_p


def _build_source(args, config):
    sources = [
        YamlPropertySource.from_file(path, reserved_name=config.reserved_name)
        for path in args.sources
    ]
    if args.env is not None or not sources:
        sources.append(EnvironPropertySource(prefix=args.env or "", reserved_name=config.reserved_name))
    if len(sources) == 1:
        return sources[0]
    return ChainPropertySource(*sources)


def show_properties(args) -> int:
    """Run one property report; returns the process exit code"""
    try:
        config = load_config(Path(args.config) if args.config else None)
        if args.output_format:
            config = replace(config, output_format=args.output_format)
        if args.title is not None:
            config = replace(config, title=args.title)
        for issue in validate_config(config):
            logger.warning(str(issue))
        source = _build_source(args, config)
    except ReportError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    task = PropertyReportTask(
        source,
        args.property_name,
        diagnostics=get_report_logger(),
        config=config,
    )

    try:
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                task.renderer = create_renderer(config.output_format, f, title=config.title)
                task.run()
        else:
            task.run()
    except OSError as e:
        error = ReportError.sink_failed(f"Could not write report: {e}", cause=e)
        print(f"Error: {error.message}", file=sys.stderr)
        return 1

    return 0
