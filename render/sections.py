# render/sections.py
"""
#cloud-config document builder.

Each section function takes a ConfigRecord and returns its lines, or None when
the section is left out. render_main_document() joins the present sections in
SECTIONS order, one blank line before each.
"""
from __future__ import annotations
from typing import Callable, List, Optional, Sequence

from state import ConfigRecord, DEFAULT_LOCALE, DEFAULT_TIMEZONE
from render.network import INTERFACE, interface_lines

HEADER = "#cloud-config"

Section = Callable[[ConfigRecord], Optional[List[str]]]


def _yaml_bool(value: bool) -> str:
    return "true" if value else "false"


def _yaml_list(key: str, items: Sequence[str], indent: int = 0) -> List[str]:
    pad = " " * indent
    return [f"{pad}{key}:"] + [f"{pad}  - {item}" for item in items]


def user_section(record: ConfigRecord) -> Optional[List[str]]:
    if not record.username:
        return None
    lines = [
        "# User Configuration",
        "users:",
        f"  - name: {record.username}",
        "    sudo: ALL=(ALL) NOPASSWD:ALL",
        "    groups: sudo",
        "    shell: /bin/bash",
    ]
    if record.password:
        # plaintext, cloud-init accepts it as-is
        lines.append(f"    passwd: {record.password}")
        lines.append("    lock_passwd: false")
    if record.ssh_key:
        lines += _yaml_list("ssh_authorized_keys", [record.ssh_key], indent=4)
    return lines


def domain_section(record: ConfigRecord) -> Optional[List[str]]:
    if not record.domain:
        return None
    # Fires on domain alone; an empty username yields "-host.<domain>".
    return [
        "# Domain Configuration",
        "manage_etc_hosts: true",
        f"fqdn: {record.username}-host.{record.domain}",
    ]


def dns_section(record: ConfigRecord) -> Optional[List[str]]:
    if not record.dns_servers:
        return None
    return [
        "# DNS Configuration",
        "manage_resolv_conf: true",
        "resolv_conf:",
    ] + _yaml_list("nameservers", record.dns_servers, indent=2)


def network_section(record: ConfigRecord) -> Optional[List[str]]:
    return [
        "# Network Configuration",
        "network:",
        "  version: 2",
        "  ethernets:",
        f"    {INTERFACE}:",
    ] + interface_lines(record, indent=6)


def package_section(record: ConfigRecord) -> Optional[List[str]]:
    flag = _yaml_bool(record.upgrade_packages)
    return [
        "# Package Configuration",
        f"package_update: {flag}",
        f"package_upgrade: {flag}",
    ]


def _custom_timezone(record: ConfigRecord) -> bool:
    return bool(record.timezone) and record.timezone != DEFAULT_TIMEZONE


def _custom_locale(record: ConfigRecord) -> bool:
    return bool(record.locale) and record.locale != DEFAULT_LOCALE


def advanced_section(record: ConfigRecord) -> Optional[List[str]]:
    body: List[str] = []
    if record.machine_name:
        body.append(f"hostname: {record.machine_name}")
    if _custom_timezone(record):
        body.append(f"timezone: {record.timezone}")
    if _custom_locale(record):
        body.append(f"locale: {record.locale}")
    for key, items in (
        ("packages", record.packages),
        ("runcmd", record.run_cmd),
        ("bootcmd", record.boot_cmd),
    ):
        if items:
            body += _yaml_list(key, items)
    if not body:
        return None
    return ["# Advanced Configuration"] + body


SECTIONS: List[Section] = [
    user_section,
    domain_section,
    dns_section,
    network_section,
    package_section,
    advanced_section,
]


def render_main_document(record: ConfigRecord) -> str:
    out = [HEADER]
    for section in SECTIONS:
        lines = section(record)
        if lines is None:
            continue
        out.append("")
        out += lines
    return "\n".join(out) + "\n"


def render_user_data(record: ConfigRecord) -> str:
    """user-data is the combined document."""
    return render_main_document(record)
