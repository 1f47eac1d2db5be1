# render/components.py
from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from state import ConfigRecord
from render.network import render_network_config
from render.sections import render_user_data

VENDOR_DATA = "#cloud-config\n\n# Vendor provided configuration\n"


def render_meta_data(record: ConfigRecord, timestamp: Optional[int] = None) -> str:
    """
    instance-id + local-hostname. `timestamp` is epoch milliseconds and
    defaults to now, so pass it explicitly for reproducible output.
    """
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    hostname = record.machine_name or f"{record.username}-host"
    return (
        f"instance-id: cloud-init-{timestamp}\n"
        f"local-hostname: {hostname}\n"
    )


def render_vendor_data() -> str:
    return VENDOR_DATA


@dataclass(frozen=True)
class Component:
    kind: str
    filename: str
    render: Callable[[ConfigRecord], str]


COMPONENTS: Dict[str, Component] = {
    "user": Component("user", "user-data", render_user_data),
    "meta": Component("meta", "meta-data", render_meta_data),
    "network": Component("network", "network-config", render_network_config),
    "vendor": Component("vendor", "vendor-data", lambda record: render_vendor_data()),
}


def get_component(kind: str) -> Component:
    try:
        return COMPONENTS[kind]
    except KeyError:
        raise ValueError(f"Invalid component type: {kind!r}") from None


def render_component(kind: str, record: ConfigRecord) -> str:
    return get_component(kind).render(record)
