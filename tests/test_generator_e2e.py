# tests/test_generator_e2e.py
"""
End-to-end headless Pilot tests for the cloud-init generator.

Files are written into pytest's tmp_path; the debounce delay is shortened so
the tests do not wait half a second per keystroke.
"""
from __future__ import annotations

import pytest
from textual.widgets import Button, Checkbox, Input, Select, TextArea

DELAY = 0.05
SETTLE = 0.3


def _app(tmp_path=None):
    from app import CloudInitGenerator
    if tmp_path is None:
        return CloudInitGenerator(debounce_delay=DELAY)
    return CloudInitGenerator(debounce_delay=DELAY, output_dir=str(tmp_path))


async def _to_basic(pilot):
    await pilot.pause(0.3)
    await pilot.click("#btn_next")
    await pilot.pause(0.3)


async def _to_output(pilot):
    await _to_basic(pilot)
    await pilot.click("#btn_next")   # s02 → s03
    await pilot.pause(0.3)
    await pilot.click("#btn_next")   # s03 → s04
    await pilot.pause(0.3)


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_s01_next_pushes_basic_config():
    app = _app()
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await pilot.pause(0.3)
        assert type(pilot.app.screen).__name__ == "WelcomeScreen"
        await pilot.click("#btn_next")
        await pilot.pause(0.3)
        assert type(pilot.app.screen).__name__ == "BasicConfigScreen", (
            f"Expected BasicConfigScreen, got {type(pilot.app.screen).__name__}"
        )


@pytest.mark.asyncio
async def test_back_returns_to_welcome():
    app = _app()
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_basic(pilot)
        await pilot.click("#btn_back")
        await pilot.pause(0.3)
        assert type(pilot.app.screen).__name__ == "WelcomeScreen"


@pytest.mark.asyncio
async def test_walk_to_output_screen():
    app = _app()
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_output(pilot)
        assert type(pilot.app.screen).__name__ == "OutputScreen", (
            f"Expected OutputScreen, got {type(pilot.app.screen).__name__}"
        )


# ---------------------------------------------------------------------------
# Live rendering
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_initial_render_on_startup():
    app = _app()
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await pilot.pause(SETTLE)
        assert pilot.app.yaml_config.startswith("#cloud-config\n")
        assert "      dhcp4: true\n" in pilot.app.yaml_config


@pytest.mark.asyncio
async def test_typing_username_updates_yaml_pane():
    from widgets.yaml_pane import YamlPane

    app = _app()
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_basic(pilot)
        screen = pilot.app.screen
        screen.query_one("#inp_username", Input).value = "alice"
        await pilot.pause(SETTLE)

        assert pilot.app.state.username == "alice"
        assert "  - name: alice\n" in pilot.app.yaml_config
        pane = screen.query_one("#yaml_output", YamlPane)
        assert pane.text == pilot.app.yaml_config


@pytest.mark.asyncio
async def test_rapid_changes_render_latest_state():
    app = _app()
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_basic(pilot)
        inp = pilot.app.screen.query_one("#inp_domain", Input)
        for value in ("e", "ex", "example.org"):
            inp.value = value
        await pilot.pause(SETTLE)
        assert "fqdn: -host.example.org\n" in pilot.app.yaml_config


@pytest.mark.asyncio
async def test_ip_type_select_toggles_sections():
    app = _app()
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_basic(pilot)
        screen = pilot.app.screen
        static_fields = screen.query_one("#static_fields")
        pattern_fields = screen.query_one("#pattern_fields")
        assert static_fields.display is False
        assert pattern_fields.display is False

        screen.query_one("#sel_ip_type", Select).value = "static"
        await pilot.pause(0.2)
        assert static_fields.display is True
        assert pattern_fields.display is False

        screen.query_one("#sel_ip_type", Select).value = "pattern"
        await pilot.pause(0.2)
        assert static_fields.display is False
        assert pattern_fields.display is True


@pytest.mark.asyncio
async def test_static_ip_rendered():
    app = _app()
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_basic(pilot)
        screen = pilot.app.screen
        screen.query_one("#sel_ip_type", Select).value = "static"
        await pilot.pause(0.1)
        screen.query_one("#inp_ip", Input).value = "10.0.0.5"
        screen.query_one("#inp_mask", Input).value = "255.255.255.0"
        screen.query_one("#inp_gw", Input).value = "10.0.0.1"
        await pilot.pause(SETTLE)
        yaml_text = pilot.app.yaml_config
        assert "        - 10.0.0.5/24\n" in yaml_text
        assert "          via: 10.0.0.1\n" in yaml_text


@pytest.mark.asyncio
async def test_ipv6_checkbox_shows_ipv6_fields():
    app = _app()
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_basic(pilot)
        screen = pilot.app.screen
        ipv6_fields = screen.query_one("#ipv6_fields")
        assert ipv6_fields.display is False

        screen.query_one("#chk_ipv6", Checkbox).value = True
        await pilot.pause(SETTLE)
        assert ipv6_fields.display is True
        assert pilot.app.state.enable_ipv6 is True
        assert "      accept-ra: true\n" in pilot.app.yaml_config


@pytest.mark.asyncio
async def test_load_ssh_key_file(tmp_path):
    key_file = tmp_path / "id_ed25519.pub"
    key_file.write_text("ssh-ed25519 AAAAC3Nza alice@laptop\n")

    app = _app()
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_basic(pilot)
        screen = pilot.app.screen
        screen.query_one("#inp_username", Input).value = "alice"
        screen.query_one("#inp_ssh_key_file", Input).value = str(key_file)
        screen.query_one("#btn_load_key", Button).press()
        await pilot.pause(SETTLE)

        assert screen.query_one("#inp_ssh_key", Input).value == (
            "ssh-ed25519 AAAAC3Nza alice@laptop"
        )
        assert "      - ssh-ed25519 AAAAC3Nza alice@laptop\n" in pilot.app.yaml_config


@pytest.mark.asyncio
async def test_advanced_fields_reach_output(tmp_path):
    app = _app(tmp_path)
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_basic(pilot)
        await pilot.click("#btn_next")   # s02 → s03
        await pilot.pause(0.3)
        assert type(pilot.app.screen).__name__ == "AdvancedConfigScreen"

        screen = pilot.app.screen
        screen.query_one("#inp_timezone", Input).value = "America/New_York"
        screen.query_one("#ta_packages", TextArea).text = "vim\n\ncurl\n"
        await pilot.click("#btn_next")   # s03 → s04
        await pilot.pause(0.3)

        out = pilot.app.screen
        assert type(out).__name__ == "OutputScreen"
        assert "timezone: America/New_York\n" in out.yaml_config
        assert "packages:\n  - vim\n  - curl\n" in out.yaml_config


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_save_combined_document(tmp_path):
    app = _app(tmp_path)
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_output(pilot)
        pilot.app.screen.query_one("#btn_download_yaml", Button).press()
        await pilot.pause(0.3)

        saved = tmp_path / "cloud-init.yaml"
        assert saved.exists()
        assert saved.read_text() == pilot.app.screen.yaml_config
        assert "Saved" in pilot.app.screen.status_text


@pytest.mark.asyncio
async def test_save_all_components(tmp_path):
    app = _app(tmp_path)
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_output(pilot)
        pilot.app.screen.query_one("#btn_all", Button).press()
        await pilot.pause(0.3)

        names = sorted(p.name for p in tmp_path.iterdir())
        assert names == ["meta-data", "network-config", "user-data", "vendor-data"]


@pytest.mark.asyncio
async def test_save_single_component(tmp_path):
    app = _app(tmp_path)
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_output(pilot)
        pilot.app.screen.query_one("#btn_vendor", Button).press()
        await pilot.pause(0.3)
        assert (tmp_path / "vendor-data").read_text() == (
            "#cloud-config\n\n# Vendor provided configuration\n"
        )


@pytest.mark.asyncio
async def test_save_failure_is_reported(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    app = _app(blocker)
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_output(pilot)
        pilot.app.screen.query_one("#btn_download_yaml", Button).press()
        await pilot.pause(0.3)
        assert "Failed" in pilot.app.screen.status_text


@pytest.mark.asyncio
async def test_save_with_no_content_is_refused(tmp_path):
    app = _app(tmp_path)
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_output(pilot)
        screen = pilot.app.screen
        screen.yaml_config = ""
        screen.query_one("#btn_download_yaml", Button).press()
        await pilot.pause(0.3)

        assert "No configuration generated" in screen.status_text
        assert not (tmp_path / "cloud-init.yaml").exists()
        assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_single_line_fields_are_trimmed():
    """Stray spaces around username, key and domain do not reach the document."""
    app = _app()
    async with app.run_test(headless=True, size=(140, 50)) as pilot:
        await _to_basic(pilot)
        screen = pilot.app.screen
        screen.query_one("#inp_username", Input).value = "  alice "
        screen.query_one("#inp_ssh_key", Input).value = "ssh-ed25519 AAAA alice@laptop  "
        screen.query_one("#inp_domain", Input).value = " example.com"
        await pilot.pause(SETTLE)

        assert pilot.app.state.username == "alice"
        assert pilot.app.state.domain == "example.com"
        assert "  - name: alice\n" in pilot.app.yaml_config
        assert "      - ssh-ed25519 AAAA alice@laptop\n" in pilot.app.yaml_config
        assert "fqdn: alice-host.example.com\n" in pilot.app.yaml_config
