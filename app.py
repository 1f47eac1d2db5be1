# app.py
from textual.app import App
from state import FormState
from debounce import Debouncer, DEBOUNCE_DELAY
from export import DEFAULT_OUTPUT_DIR
from render.sections import render_main_document
from widgets.yaml_pane import YamlPane
from logger import log


class CloudInitGenerator(App):
    """cloud-init configuration generator."""

    TITLE = "cloud-init generator"

    CSS = """
    Screen {
        background: $surface;
    }
    .title {
        text-style: bold;
        color: $accent;
        margin-bottom: 1;
    }
    .hint {
        color: $text-muted;
    }
    #content {
        margin: 1 2;
    }
    #workspace {
        height: 1fr;
    }
    #form {
        width: 3fr;
        margin: 1 2;
    }
    #yaml_scroll {
        width: 2fr;
        border: solid $primary;
        margin: 1 1;
    }
    #nav_buttons {
        dock: bottom;
        height: 3;
        align: center middle;
        margin: 1 2;
    }
    #footer_buttons {
        dock: bottom;
        height: 3;
        align: center middle;
    }
    #ssh_key_file_row {
        height: auto;
    }
    #ssh_key_file_row Input {
        width: 1fr;
    }
    #download_buttons {
        height: 3;
        margin-top: 1;
    }
    Button {
        margin: 0 1;
    }
    #err_msg, #status_msg {
        margin-top: 1;
    }
    #err_msg {
        color: $error;
    }
    Input {
        margin-bottom: 1;
    }
    TextArea {
        height: 6;
        margin-bottom: 1;
    }
    RadioSet {
        margin-bottom: 1;
    }
    TabbedContent {
        height: 1fr;
    }
    """

    def __init__(
        self,
        debounce_delay: float = DEBOUNCE_DELAY,
        output_dir: str = DEFAULT_OUTPUT_DIR,
    ) -> None:
        super().__init__()
        self.state = FormState()
        self.output_dir = output_dir
        self.yaml_config = ""
        self._debouncer = Debouncer(debounce_delay)
        log.info("CloudInitGenerator started")

    async def on_mount(self) -> None:
        from screens.s01_welcome import WelcomeScreen
        await self.push_screen(WelcomeScreen())
        self.trigger_config_update()

    def trigger_config_update(self) -> None:
        """Schedule a re-render; repeated calls within the delay collapse to one."""
        self._debouncer.trigger(self.update_config)

    def update_config(self) -> None:
        self.yaml_config = render_main_document(self.state.snapshot())
        for screen in self.screen_stack:
            for pane in screen.query(YamlPane):
                pane.show(self.yaml_config)
        log.debug("Rendered configuration (%d lines)", self.yaml_config.count("\n"))
