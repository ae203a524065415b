# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""'rmqjms resolve' and friends — inspect resources defined in a config file."""

from __future__ import annotations

import dataclasses
import json
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import click
from rich.markup import escape
from rich.table import Table

from rmqjms.admin.connection_factory import RMQConnectionFactory
from rmqjms.admin.destination import RMQDestination
from rmqjms.cli.console import console, err_console
from rmqjms.config.properties.naming import NamingProperties
from rmqjms.core.config import Config
from rmqjms.kernel.exceptions import NamingException
from rmqjms.kernel.types import ObjectKind
from rmqjms.logging.port import LoggingPort
from rmqjms.logging.structlog_adapter import StructlogAdapter
from rmqjms.naming.kinds import CONNECTION_FACTORY_CLASS_NAMES, RMQ_DESTINATION, SUPPORTED_CLASS_NAMES, TOPIC
from rmqjms.naming.object_factory import resolve

_MASK = "******"

logging_port: LoggingPort = StructlogAdapter()

_config_argument = click.argument(
    "config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
_profile_option = click.option(
    "--profile", "profiles", multiple=True, help="Profile overlay to merge on top of CONFIG_FILE."
)


def _load(config_file: Path, profiles: tuple[str, ...]) -> Config:
    config = Config.from_file(config_file, active_profiles=list(profiles))
    logging_port.configure(config)
    return config


def _resource_fields(obj: RMQConnectionFactory | RMQDestination) -> dict[str, Any]:
    fields = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj) if f.compare}
    if isinstance(obj, RMQConnectionFactory):
        fields["password"] = _MASK
        fields["kind"] = ObjectKind.CONNECTION_FACTORY.value
    else:
        fields["kind"] = obj.kind.value
    return fields


def _class_kind(class_name: str) -> str:
    if class_name in CONNECTION_FACTORY_CLASS_NAMES:
        return ObjectKind.CONNECTION_FACTORY.value
    if class_name == RMQ_DESTINATION:
        return "queue or topic (isQueue)"
    return ObjectKind.TOPIC.value if class_name == TOPIC else ObjectKind.QUEUE.value


@click.command()
def classes_command() -> None:
    """List the class names a resource may declare."""
    table = Table(title="Supported classes", border_style="dim")
    table.add_column("Class name", style="info")
    table.add_column("Builds")
    for class_name in SUPPORTED_CLASS_NAMES:
        table.add_row(class_name, _class_kind(class_name))
    console.print(table)


@click.command()
@_config_argument
@_profile_option
def resources_command(config_file: Path, profiles: tuple[str, ...]) -> None:
    """List the resources defined under rmqjms.naming.resources."""
    config = _load(config_file, profiles)
    for source in config.loaded_sources:
        console.print(f"[dim]Loaded {escape(source)}[/dim]")
    props = config.bind(NamingProperties)
    if not props.resources:
        console.print("[warning]No resources defined.[/warning]")
        return
    table = Table(title="Resources", border_style="dim")
    table.add_column("Name", style="info")
    table.add_column("Class name")
    for name, environment in props.resources.items():
        class_name = environment.get("className", "") if isinstance(environment, Mapping) else "(not a mapping)"
        table.add_row(escape(name), escape(str(class_name)))
    console.print(table)


@click.command()
@_config_argument
@click.argument("name")
@_profile_option
@click.option("--json", "as_json", is_flag=True, help="Print the resolved fields as JSON.")
def resolve_command(config_file: Path, name: str, profiles: tuple[str, ...], as_json: bool) -> None:
    """Resolve resource NAME from CONFIG_FILE and print its configuration."""
    config = _load(config_file, profiles)
    try:
        resources = config.resolve_section("rmqjms.naming.resources")
    except ValueError as exc:
        err_console.print(f"[error]Invalid configuration:[/error] {escape(str(exc))}")
        sys.exit(1)
    if name not in resources:
        err_console.print(f"[error]Unknown resource:[/error] {escape(name)}")
        sys.exit(1)
    if not isinstance(resources[name], Mapping):
        err_console.print(f"[error]Resource {escape(name)} is not a mapping of properties[/error]")
        sys.exit(1)

    try:
        obj = resolve(None, name, resources[name])
    except NamingException as exc:
        err_console.print(f"[error]{exc.code}:[/error] {escape(str(exc))}")
        sys.exit(1)

    fields = _resource_fields(obj)
    if as_json:
        click.echo(json.dumps(fields, indent=2, sort_keys=True))
        return

    table = Table(title=name, show_header=False, border_style="dim")
    table.add_column("Field", style="info")
    table.add_column("Value")
    for key, value in fields.items():
        table.add_row(key, escape(str(value)))
    console.print(table)
