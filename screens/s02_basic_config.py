# screens/s02_basic_config.py
from __future__ import annotations
from rich.text import Text
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import (
    Footer, Button, Static, Select, Input,
    Checkbox, Label, RadioSet, RadioButton
)
from textual.containers import Vertical, Horizontal, VerticalScroll
from widgets.app_header import AppHeader
from widgets.yaml_pane import YamlPane
from export import read_ssh_key
from logger import log

IP_TYPE_OPTIONS = [
    ("DHCP", "dhcp"),
    ("Static IP", "static"),
    ("Pattern (prefix + last 3 characters of VM ID)", "pattern"),
]


class BasicConfigScreen(Screen):
    """Step 2: User, domain, DNS and network settings."""

    BINDINGS = [
        ("escape", "go_back", "Back"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self._ready = False

    def compose(self) -> ComposeResult:
        state = self.app.state

        yield AppHeader()
        with Horizontal(id="workspace"):
            with VerticalScroll(id="form"):
                yield Static("Step 2: Basic Configuration", classes="title")
                yield Label("Username:")
                yield Input(state.username, placeholder="e.g. ubuntu", id="inp_username")
                yield Label("Password:")
                yield Input(state.password, id="inp_password", password=True)
                yield Label("SSH Public Key:")
                yield Input(state.ssh_key, placeholder="ssh-ed25519 AAAA…", id="inp_ssh_key")
                with Horizontal(id="ssh_key_file_row"):
                    yield Input(placeholder="~/.ssh/id_ed25519.pub", id="inp_ssh_key_file")
                    yield Button("Load key file", id="btn_load_key", variant="default")
                yield Label("Domain:")
                yield Input(state.domain, placeholder="example.com", id="inp_domain")
                yield Label("DNS Servers (comma-separated):")
                yield Input(state.dns, placeholder="8.8.8.8, 1.1.1.1", id="inp_dns")

                yield Label("IPv4 Configuration:")
                yield Select(
                    IP_TYPE_OPTIONS, id="sel_ip_type",
                    value=state.ip_config_type, allow_blank=False,
                )
                with Vertical(id="static_fields"):
                    yield Label("IP Address:")
                    yield Input(state.ip_address, placeholder="e.g. 192.168.1.100", id="inp_ip")
                    yield Label("Subnet Mask:")
                    yield Input(state.subnet_mask, placeholder="255.255.255.0", id="inp_mask")
                    yield Label("Gateway:")
                    yield Input(state.gateway, placeholder="e.g. 192.168.1.1", id="inp_gw")
                with Vertical(id="pattern_fields"):
                    yield Label("IP Pattern:")
                    yield Input(state.ip_pattern, placeholder="e.g. 10.0.0.", id="inp_ip_pattern")
                    yield Label("VM ID:")
                    yield Input(state.vm_id, placeholder="e.g. 100123", id="inp_vm_id")

                yield Checkbox("Enable IPv6", id="chk_ipv6", value=state.enable_ipv6)
                with Vertical(id="ipv6_fields"):
                    with RadioSet(id="rs_ipv6_type"):
                        yield RadioButton(
                            "SLAAC", id="rb_slaac", value=state.ipv6_type == "slaac"
                        )
                        yield RadioButton(
                            "Static", id="rb_ipv6_static", value=state.ipv6_type == "static"
                        )
                    with Vertical(id="ipv6_static_fields"):
                        yield Label("IPv6 Address:")
                        yield Input(state.ipv6_address, placeholder="2001:db8::10", id="inp_ipv6")
                        yield Label("Prefix Length:")
                        yield Input(state.ipv6_prefix_length, placeholder="64", id="inp_ipv6_prefix")
                        yield Label("IPv6 Gateway:")
                        yield Input(state.ipv6_gateway, placeholder="2001:db8::1", id="inp_ipv6_gw")

                yield Checkbox(
                    "Update & upgrade packages on first boot",
                    id="chk_upgrade", value=state.upgrade_packages,
                )
                yield Static("", id="err_msg")
            with VerticalScroll(id="yaml_scroll"):
                yield YamlPane(id="yaml_output")
        with Horizontal(id="nav_buttons"):
            yield Button("← Back", id="btn_back", variant="default")
            yield Button("Advanced →", id="btn_next", variant="primary")
        yield Footer()

    def on_mount(self) -> None:
        self._sync_sections()
        self._ready = True

    # -- Form binding --------------------------------------------------------

    def _sync_sections(self) -> None:
        state = self.app.state
        self.query_one("#static_fields").display = state.ip_config_type == "static"
        self.query_one("#pattern_fields").display = state.ip_config_type == "pattern"
        self.query_one("#ipv6_fields").display = state.enable_ipv6
        self.query_one("#ipv6_static_fields").display = state.ipv6_type == "static"

    def _value(self, widget_id: str) -> str:
        return self.query_one(f"#{widget_id}", Input).value.strip()

    def _collect(self) -> None:
        state = self.app.state
        state.username = self._value("inp_username")
        # passwords are taken verbatim
        state.password = self.query_one("#inp_password", Input).value
        state.ssh_key = self._value("inp_ssh_key")
        state.domain = self._value("inp_domain")
        state.dns = self._value("inp_dns")

        ip_type = self.query_one("#sel_ip_type", Select).value
        if ip_type is not Select.BLANK:
            state.ip_config_type = str(ip_type)
        state.ip_address = self._value("inp_ip")
        state.subnet_mask = self._value("inp_mask")
        state.gateway = self._value("inp_gw")
        state.ip_pattern = self._value("inp_ip_pattern")
        state.vm_id = self._value("inp_vm_id")

        state.enable_ipv6 = self.query_one("#chk_ipv6", Checkbox).value
        pressed = self.query_one("#rs_ipv6_type", RadioSet).pressed_button
        state.ipv6_type = "static" if pressed is not None and pressed.id == "rb_ipv6_static" else "slaac"
        state.ipv6_address = self._value("inp_ipv6")
        state.ipv6_prefix_length = self._value("inp_ipv6_prefix")
        state.ipv6_gateway = self._value("inp_ipv6_gw")

        state.upgrade_packages = self.query_one("#chk_upgrade", Checkbox).value

    def _form_changed(self) -> None:
        if not self._ready:
            return
        self._collect()
        self._sync_sections()
        self.app.trigger_config_update()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "inp_ssh_key_file":
            self._form_changed()

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        self._form_changed()

    def on_select_changed(self, event: Select.Changed) -> None:
        self._form_changed()

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        self._form_changed()

    # -- SSH key file --------------------------------------------------------

    def _load_key_file(self) -> None:
        path = self._value("inp_ssh_key_file")
        if not path:
            self._show_error("Please enter a key file path first.")
            return
        try:
            key = read_ssh_key(path)
        except OSError as e:
            log.warning("Could not read SSH key file %s: %s", path, e)
            self._show_error(f"Could not read {path}: {e.strerror or e}")
            return
        self._show_error("")
        # posts Input.Changed, which collects and re-renders
        self.query_one("#inp_ssh_key", Input).value = key

    def _show_error(self, msg: str) -> None:
        self.query_one("#err_msg", Static).update(Text(f"Error: {msg}") if msg else "")

    # -- Navigation ------------------------------------------------------------

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn_back":
            self.app.pop_screen()
        elif event.button.id == "btn_load_key":
            self._load_key_file()
        elif event.button.id == "btn_next":
            self._collect()
            log.info(
                "Step 2: user=%s domain=%s network=%s ipv6=%s",
                self.app.state.username or "-", self.app.state.domain or "-",
                self.app.state.ip_config_type, self.app.state.enable_ipv6,
            )
            from screens.s03_advanced_config import AdvancedConfigScreen
            self.app.push_screen(AdvancedConfigScreen())

    def action_go_back(self) -> None:
        self.app.pop_screen()
