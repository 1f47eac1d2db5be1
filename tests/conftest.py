# tests/conftest.py
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from state import ConfigRecord, FormState

@pytest.fixture
def state():
    return FormState()

@pytest.fixture
def full_record():
    """A record touching every section of the main document."""
    return ConfigRecord(
        username="alice",
        password="s3cr3t",
        ssh_key="ssh-ed25519 AAAAC3NzaC1lZDI1NTE5 alice@laptop",
        domain="example.com",
        dns_servers=("8.8.8.8", "1.1.1.1"),
        ip_config_type="static",
        ip_address="10.0.0.5",
        subnet_mask="255.255.255.0",
        gateway="10.0.0.1",
        upgrade_packages=True,
        machine_name="web-01",
        timezone="America/New_York",
        packages=("vim", "curl"),
    )
