# render/network.py
from __future__ import annotations
from typing import Dict, List, Union

from state import ConfigRecord

INTERFACE = "eth0"
PLACEHOLDER_CIDR = "/24"   # dotted masks are not converted

Route = Dict[str, str]
Value = Union[str, List[Union[str, Route]]]


def _cidr_suffix(subnet_mask: str) -> str:
    if "." in subnet_mask:
        return PLACEHOLDER_CIDR
    return subnet_mask


def _append(body: Dict[str, Value], key: str, item: Union[str, Route]) -> None:
    body.setdefault(key, [])
    body[key].append(item)


def _ipv4(record: ConfigRecord, body: Dict[str, Value]) -> None:
    kind = record.ip_config_type
    if kind == "dhcp":
        body["dhcp4"] = "true"
    elif kind == "static":
        if record.ip_address and record.subnet_mask:
            body["dhcp4"] = "false"
            _append(body, "addresses",
                    f"{record.ip_address}{_cidr_suffix(record.subnet_mask)}")
            if record.gateway:
                _append(body, "routes", {"to": "default", "via": record.gateway})
    elif kind == "pattern":
        if record.ip_pattern and record.vm_id:
            body["dhcp4"] = "false"
            _append(body, "addresses",
                    f"{record.ip_pattern}{record.vm_id[-3:]}{PLACEHOLDER_CIDR}")


def _ipv6(record: ConfigRecord, body: Dict[str, Value]) -> None:
    if not record.enable_ipv6:
        return
    if record.ipv6_type == "slaac":
        body["dhcp6"] = "false"
        body["accept-ra"] = "true"
    elif record.ipv6_type == "static" and record.ipv6_address:
        body["dhcp6"] = "false"
        body["accept-ra"] = "false"
        _append(body, "addresses",
                f"{record.ipv6_address}/{record.ipv6_prefix_length}")
        if record.ipv6_gateway:
            _append(body, "routes", {"to": "::/0", "via": record.ipv6_gateway})


def interface_body(record: ConfigRecord) -> Dict[str, Value]:
    """
    Ordered mapping of the eth0 settings. Scalars are rendered YAML text;
    `addresses` and `routes` collect items from both the IPv4 and IPv6 branches
    so the key is written once.
    """
    body: Dict[str, Value] = {}
    _ipv4(record, body)
    _ipv6(record, body)
    return body


def interface_lines(record: ConfigRecord, indent: int) -> List[str]:
    pad = " " * indent
    lines: List[str] = []
    for key, value in interface_body(record).items():
        if not isinstance(value, list):
            lines.append(f"{pad}{key}: {value}")
            continue
        lines.append(f"{pad}{key}:")
        for item in value:
            if isinstance(item, dict):
                for i, (k, v) in enumerate(item.items()):
                    marker = "- " if i == 0 else "  "
                    lines.append(f"{pad}  {marker}{k}: {v}")
            else:
                lines.append(f"{pad}  - {item}")
    return lines


def render_network_config(record: ConfigRecord) -> str:
    """Standalone network-config document (netplan v2 shape)."""
    lines = ["version: 2", "ethernets:", f"  {INTERFACE}:"]
    lines += interface_lines(record, indent=4)
    return "\n".join(lines) + "\n"
