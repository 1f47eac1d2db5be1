# state.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

DEFAULT_TIMEZONE = "UTC"
DEFAULT_LOCALE = "en_US.UTF-8"
DEFAULT_IPV6_PREFIX = "64"

IP_CONFIG_TYPES = ("dhcp", "static", "pattern")
IPV6_TYPES = ("slaac", "static")


def split_csv(text: str) -> Tuple[str, ...]:
    """'8.8.8.8, 1.1.1.1' -> ('8.8.8.8', '1.1.1.1'). Empty entries are dropped."""
    return tuple(s.strip() for s in text.split(",") if s.strip())


def split_lines(text: str) -> Tuple[str, ...]:
    """One item per non-blank line, trimmed, order preserved."""
    return tuple(line.strip() for line in text.split("\n") if line.strip())


@dataclass(frozen=True)
class ConfigRecord:
    # User
    username: str = ""
    password: str = ""
    ssh_key: str = ""

    # System
    domain: str = ""
    dns_servers: Tuple[str, ...] = ()

    # IPv4
    ip_config_type: str = "dhcp"
    ip_address: str = ""
    subnet_mask: str = ""
    gateway: str = ""
    ip_pattern: str = ""
    vm_id: str = ""

    # IPv6
    enable_ipv6: bool = False
    ipv6_type: str = "slaac"
    ipv6_address: str = ""
    ipv6_gateway: str = ""
    ipv6_prefix_length: str = DEFAULT_IPV6_PREFIX

    upgrade_packages: bool = True

    # Advanced
    machine_name: str = ""
    timezone: str = DEFAULT_TIMEZONE
    locale: str = DEFAULT_LOCALE
    packages: Tuple[str, ...] = ()
    run_cmd: Tuple[str, ...] = ()
    boot_cmd: Tuple[str, ...] = ()


@dataclass
class FormState:
    """Raw form values as typed; the app owns one instance."""

    username: str = ""
    password: str = ""
    ssh_key: str = ""
    domain: str = ""
    dns: str = ""                    # comma-separated

    ip_config_type: str = "dhcp"
    ip_address: str = ""
    subnet_mask: str = ""
    gateway: str = ""
    ip_pattern: str = ""
    vm_id: str = ""

    enable_ipv6: bool = False
    ipv6_type: str = "slaac"
    ipv6_address: str = ""
    ipv6_gateway: str = ""
    ipv6_prefix_length: str = ""     # blank -> 64

    upgrade_packages: bool = True

    machine_name: str = ""
    timezone: str = DEFAULT_TIMEZONE
    locale: str = DEFAULT_LOCALE
    packages: str = ""               # one per line
    run_cmd: str = ""
    boot_cmd: str = ""

    def snapshot(self) -> ConfigRecord:
        return ConfigRecord(
            username=self.username,
            password=self.password,
            ssh_key=self.ssh_key,
            domain=self.domain,
            dns_servers=split_csv(self.dns),
            ip_config_type=self.ip_config_type,
            ip_address=self.ip_address,
            subnet_mask=self.subnet_mask,
            gateway=self.gateway,
            ip_pattern=self.ip_pattern,
            vm_id=self.vm_id,
            enable_ipv6=self.enable_ipv6,
            ipv6_type=self.ipv6_type,
            ipv6_address=self.ipv6_address,
            ipv6_gateway=self.ipv6_gateway,
            ipv6_prefix_length=self.ipv6_prefix_length or DEFAULT_IPV6_PREFIX,
            upgrade_packages=self.upgrade_packages,
            machine_name=self.machine_name,
            timezone=self.timezone,
            locale=self.locale,
            packages=split_lines(self.packages),
            run_cmd=split_lines(self.run_cmd),
            boot_cmd=split_lines(self.boot_cmd),
        )
