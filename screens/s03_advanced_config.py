# screens/s03_advanced_config.py
from __future__ import annotations
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Button, Static, Input, Label, TextArea
from textual.containers import Horizontal, VerticalScroll
from widgets.app_header import AppHeader
from widgets.yaml_pane import YamlPane
from logger import log


class AdvancedConfigScreen(Screen):
    """Step 3: Hostname, timezone, locale, packages and commands."""

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
                yield Static("Step 3: Advanced Configuration", classes="title")
                yield Label("Machine Name:")
                yield Input(state.machine_name, placeholder="e.g. web-01", id="inp_machine_name")
                yield Label("Timezone:")
                yield Input(state.timezone, placeholder="UTC", id="inp_timezone")
                yield Label("Locale:")
                yield Input(state.locale, placeholder="en_US.UTF-8", id="inp_locale")
                yield Label("Packages (one per line):")
                yield TextArea(state.packages, id="ta_packages")
                yield Label("Run Commands (one per line, run once on first boot):")
                yield TextArea(state.run_cmd, id="ta_run_cmd")
                yield Label("Boot Commands (one per line, run on every boot):")
                yield TextArea(state.boot_cmd, id="ta_boot_cmd")
                yield Static(
                    "Blank lines are ignored. Leave timezone and locale at their "
                    "defaults to omit them.",
                    classes="hint",
                )
            with VerticalScroll(id="yaml_scroll"):
                yield YamlPane(id="yaml_output")
        with Horizontal(id="nav_buttons"):
            yield Button("← Back", id="btn_back", variant="default")
            yield Button("Generate →", id="btn_next", variant="primary")
        yield Footer()

    def on_mount(self) -> None:
        self._ready = True

    def _collect(self) -> None:
        state = self.app.state
        state.machine_name = self.query_one("#inp_machine_name", Input).value.strip()
        state.timezone = self.query_one("#inp_timezone", Input).value.strip()
        state.locale = self.query_one("#inp_locale", Input).value.strip()
        state.packages = self.query_one("#ta_packages", TextArea).text
        state.run_cmd = self.query_one("#ta_run_cmd", TextArea).text
        state.boot_cmd = self.query_one("#ta_boot_cmd", TextArea).text

    def _form_changed(self) -> None:
        if not self._ready:
            return
        self._collect()
        self.app.trigger_config_update()

    def on_input_changed(self, event: Input.Changed) -> None:
        self._form_changed()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._form_changed()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn_back":
            self.app.pop_screen()
        elif event.button.id == "btn_next":
            self._collect()
            log.info(
                "Step 3: hostname=%s timezone=%s locale=%s",
                self.app.state.machine_name or "-",
                self.app.state.timezone, self.app.state.locale,
            )
            from screens.s04_output import OutputScreen
            self.app.push_screen(OutputScreen())

    def action_go_back(self) -> None:
        self.app.pop_screen()
