# screens/s04_output.py
from __future__ import annotations
from rich.text import Text
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import (
    Button, Footer, Input, Label, Static, TabbedContent, TabPane
)
from textual.containers import Horizontal, Vertical, VerticalScroll
from widgets.app_header import AppHeader
from export import DocumentWriter, COMBINED_FILENAME, DEFAULT_OUTPUT_DIR
from render.components import get_component
from render.preview import format_preview
from render.sections import render_main_document
from logger import log

COMPONENT_BUTTONS = {
    "btn_user": "user",
    "btn_meta": "meta",
    "btn_network": "network",
    "btn_vendor": "vendor",
}


class OutputScreen(Screen):
    """Step 4: Generated document, preview and file export."""

    BINDINGS = [
        ("escape", "go_back", "Back"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.record = None
        self.yaml_config = ""
        self.status_text = ""

    def compose(self) -> ComposeResult:
        yield AppHeader()
        with Vertical(id="content"):
            yield Static("Step 4: Generated Configuration", classes="title")
            with TabbedContent(id="output_tabs"):
                with TabPane("YAML", id="tab_yaml"):
                    with VerticalScroll():
                        yield Static("", id="yaml_output")
                with TabPane("Preview", id="tab_preview"):
                    with VerticalScroll():
                        yield Static("", id="preview_output")
            yield Label("Output directory:")
            yield Input(self.app.output_dir, placeholder=DEFAULT_OUTPUT_DIR, id="inp_output_dir")
            with Horizontal(id="download_buttons"):
                yield Button("Save cloud-init.yaml", id="btn_download_yaml", variant="success")
                yield Button("user-data", id="btn_user")
                yield Button("meta-data", id="btn_meta")
                yield Button("network-config", id="btn_network")
                yield Button("vendor-data", id="btn_vendor")
                yield Button("All components", id="btn_all", variant="primary")
            yield Static("", id="status_msg")
        with Horizontal(id="nav_buttons"):
            yield Button("← Back", id="btn_back", variant="default")
            yield Button("Exit", id="btn_exit", variant="error")
        yield Footer()

    def on_mount(self) -> None:
        self.record = self.app.state.snapshot()
        self.yaml_config = render_main_document(self.record)
        self.app.yaml_config = self.yaml_config
        self.query_one("#yaml_output", Static).update(Text(self.yaml_config))
        self.query_one("#preview_output", Static).update(format_preview(self.yaml_config))

    # -- Export ----------------------------------------------------------------

    def _writer(self) -> DocumentWriter:
        output_dir = self.query_one("#inp_output_dir", Input).value.strip() or DEFAULT_OUTPUT_DIR
        self.app.output_dir = output_dir
        return DocumentWriter(output_dir)

    def _report(self, msg: str, error: bool = False) -> None:
        self.status_text = msg
        self.query_one("#status_msg", Static).update(
            Text(msg, style="red" if error else "green")
        )
        self.notify(msg, severity="error" if error else "information")

    def _download_yaml(self) -> None:
        if not self.yaml_config.strip():
            log.warning("Download requested with no generated configuration")
            self._report("Failed to download YAML: No configuration generated", error=True)
            return
        writer = self._writer()
        if writer.download_file(COMBINED_FILENAME, self.yaml_config):
            self._report(f"Saved {writer.last_path}")
        else:
            self._report(f"Failed to save {COMBINED_FILENAME} to {writer.output_dir}", error=True)

    def _download_component(self, kind: str) -> None:
        writer = self._writer()
        filename = get_component(kind).filename
        if writer.download_component(kind, self.record):
            self._report(f"Saved {writer.last_path}")
        else:
            self._report(f"Failed to save {filename} to {writer.output_dir}", error=True)

    def _download_all(self) -> None:
        writer = self._writer()
        if writer.download_all_components(self.record):
            self._report(f"Saved user-data, meta-data, network-config, vendor-data to {writer.output_dir}")
        else:
            self._report(f"Failed to save all components to {writer.output_dir}", error=True)

    # -- Navigation ------------------------------------------------------------

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "btn_back":
            self.app.pop_screen()
        elif button_id == "btn_exit":
            log.info("Generator closed by user")
            self.app.exit()
        elif button_id == "btn_download_yaml":
            self._download_yaml()
        elif button_id == "btn_all":
            self._download_all()
        elif button_id in COMPONENT_BUTTONS:
            self._download_component(COMPONENT_BUTTONS[button_id])

    def action_go_back(self) -> None:
        self.app.pop_screen()
