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
"""rmqjms CLI — inspect and resolve naming resources."""

from __future__ import annotations

import click

from rmqjms.cli.console import print_banner


class RmqJmsCLI(click.Group):
    """Custom Click group that shows the rmqjms banner on help."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        print_banner()
        super().format_help(ctx, formatter)


@click.group(cls=RmqJmsCLI)
@click.version_option(package_name="rmqjms")
def cli() -> None:
    """rmqjms — RabbitMQ JMS object factory CLI."""


from rmqjms.cli.resolve import classes_command, resolve_command, resources_command  # noqa: E402

cli.add_command(classes_command, name="classes")
cli.add_command(resources_command, name="resources")
cli.add_command(resolve_command, name="resolve")
