# widgets/yaml_pane.py
from __future__ import annotations
from rich.text import Text
from textual.widgets import Static


class YamlPane(Static):
    """Read-only view of the generated #cloud-config document."""

    DEFAULT_CSS = """
    YamlPane {
        width: 100%;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self.text = ""

    def on_mount(self) -> None:
        self.show(self.app.yaml_config)

    def show(self, text: str) -> None:
        self.text = text
        # Text() so user input containing [brackets] is not read as markup
        self.update(Text(text))
