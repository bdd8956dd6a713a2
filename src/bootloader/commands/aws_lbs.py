"""Report the load balancers attached to an AWS environment."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import click

from bootloader.lib.errors import NoLBsFoundError
from bootloader.lib.logging_config import get_logger
from bootloader.models.state import State
from bootloader.terraform.output_provider import TerraformManager

logger = get_logger(__name__)


class AWSLBs:
    """Print load balancer names and URLs from the environment's terraform state."""

    def __init__(
        self,
        terraform_manager: TerraformManager,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        """Initialize the command.

        Args:
            terraform_manager: Source of raw terraform outputs
            echo: Line printer, defaults to ``click.echo``
        """
        self._terraform_manager = terraform_manager
        self._echo = echo

    def execute(self, state: State, json_output: bool = False) -> None:
        """Print the load balancers for ``state``.

        Args:
            state: Environment state
            json_output: Print a single JSON document instead of text lines

        Raises:
            NoLBsFoundError: If the LB type is neither cf nor concourse
        """
        outputs = self._terraform_manager.get_outputs(state.tf_state)

        if state.lb.type == "cf":
            report = _cf_report(outputs, include_dns=bool(state.lb.domain))
        elif state.lb.type == "concourse":
            report = {
                "concourse_lb": outputs.get("concourse_load_balancer", ""),
                "concourse_lb_url": outputs.get("concourse_load_balancer_url", ""),
            }
        else:
            raise NoLBsFoundError()

        logger.debug("Reporting %d lb values for type %s", len(report), state.lb.type)

        if json_output:
            self._echo(json.dumps(report, indent=2))
            return

        for line in _text_lines(report):
            self._echo(line)


def _cf_report(outputs: dict[str, Any], include_dns: bool) -> dict[str, Any]:
    report: dict[str, Any] = {
        "cf_router_lb": outputs.get("cf_router_load_balancer", ""),
        "cf_router_lb_url": outputs.get("cf_router_load_balancer_url", ""),
        "cf_ssh_proxy_lb": outputs.get("cf_ssh_proxy_load_balancer", ""),
        "cf_ssh_proxy_lb_url": outputs.get("cf_ssh_proxy_load_balancer_url", ""),
        "cf_tcp_lb": outputs.get("cf_tcp_router_load_balancer", ""),
        "cf_tcp_lb_url": outputs.get("cf_tcp_router_load_balancer_url", ""),
    }
    if include_dns:
        report["env_dns_zone_name_servers"] = list(
            outputs.get("cf_system_domain_dns_servers") or []
        )
    return report


def _text_lines(report: dict[str, Any]) -> list[str]:
    if "concourse_lb" in report:
        return [
            f"Concourse LB: {report['concourse_lb']} [{report['concourse_lb_url']}]"
        ]

    lines = [
        f"CF Router LB: {report['cf_router_lb']} [{report['cf_router_lb_url']}]",
        f"CF SSH Proxy LB: {report['cf_ssh_proxy_lb']} "
        f"[{report['cf_ssh_proxy_lb_url']}]",
        f"CF TCP Router LB: {report['cf_tcp_lb']} [{report['cf_tcp_lb_url']}]",
    ]
    if "env_dns_zone_name_servers" in report:
        servers = " ".join(report["env_dns_zone_name_servers"])
        lines.append(f"CF System Domain DNS servers: {servers}")
    return lines
