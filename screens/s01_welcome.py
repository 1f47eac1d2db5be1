# screens/s01_welcome.py
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Header, Footer, Button, Static
from textual.containers import Container, VerticalScroll
from widgets.app_header import AppHeader
from logger import log

COMPONENTS_INFO = """\
This tool writes a [bold]#cloud-config[/bold] document and the four cloud-init components:

  [bold]user-data[/bold]       users, packages and commands
  [bold]meta-data[/bold]       instance id and hostname
  [bold]network-config[/bold]  network configuration
  [bold]vendor-data[/bold]     vendor-specific configuration

For Proxmox:
  1. Save the individual components (or all of them at once) on the last step.
  2. Upload the files to your Proxmox server.
  3. Use them with the Proxmox cloud-init drive.

To build a seed ISO by hand:
  genisoimage -output cloud-init.iso -volid cidata -joliet -rock user-data meta-data network-config vendor-data
"""


class WelcomeScreen(Screen):
    """Step 1: What gets generated and how to use it."""

    BINDINGS = [("n", "next_step", "Next")]

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with VerticalScroll(id="content"):
            yield AppHeader()
            yield Static("cloud-init Configuration Generator", classes="title")
            yield Static(COMPONENTS_INFO)
            yield Static(
                "Press [bold]N[/bold] or click [bold]Next[/bold] to continue."
            )
        with Container(id="footer_buttons"):
            yield Button("Next →", id="btn_next", variant="primary")
        yield Footer()

    def action_next_step(self) -> None:
        log.info("Step 1: continuing to basic configuration")
        from screens.s02_basic_config import BasicConfigScreen
        self.app.push_screen(BasicConfigScreen())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn_next":
            self.action_next_step()
