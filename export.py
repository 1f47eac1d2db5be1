# export.py
from __future__ import annotations
from pathlib import Path
from typing import Optional

from logger import log
from state import ConfigRecord
from render.components import COMPONENTS, get_component

DEFAULT_OUTPUT_DIR = "cloud-init-output"
COMBINED_FILENAME = "cloud-init.yaml"
YAML_SUFFIX = ".yaml"


def normalize_filename(filename: str) -> str:
    """'cloud-init' -> 'cloud-init.yaml'; names already ending in .yaml are kept."""
    if not filename.endswith(YAML_SUFFIX):
        filename += YAML_SUFFIX
    return filename


def read_ssh_key(path: str) -> str:
    """Return the contents of a public key file. Raises OSError."""
    key_path = Path(path).expanduser()
    content = key_path.read_text(encoding="utf-8").strip()
    log.info("Loaded SSH key from %s", key_path)
    return content


class DocumentWriter:
    def __init__(self, output_dir: str = DEFAULT_OUTPUT_DIR):
        self.output_dir = Path(output_dir).expanduser()
        self.last_path: Optional[Path] = None

    # -- Write -------------------------------------------------------------

    def _write(self, filename: str, content: str) -> bool:
        path = self.output_dir / filename
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            log.error("Failed to write %s: %s", path, e)
            return False
        self.last_path = path
        log.info("Wrote %s (%d bytes)", path, len(content.encode("utf-8")))
        return True

    def download_file(self, filename: str, content: str) -> bool:
        """Save `content` under `filename`, with .yaml appended if missing."""
        return self._write(normalize_filename(filename), content)

    # -- Components --------------------------------------------------------

    def download_component(self, kind: str, record: ConfigRecord) -> bool:
        """
        Write one cloud-init component under its exact name (user-data,
        meta-data, ...). NoCloud seeds need these names without a suffix.
        Raises ValueError for an unknown component type.
        """
        component = get_component(kind)
        return self._write(component.filename, component.render(record))

    def download_all_components(self, record: ConfigRecord) -> bool:
        results = [self.download_component(kind, record) for kind in COMPONENTS]
        if not all(results):
            log.warning("Only %d of %d components written", sum(results), len(results))
            return False
        return True
