# render/preview.py
from __future__ import annotations
import re
from typing import List

from rich.markup import escape

TITLE = "[bold]Configuration Preview[/bold]"
_COMMENT_MARKER = re.compile(r"^#\s*")


def format_preview(text: str) -> str:
    """Simplified line-by-line rendition of a rendered document as Rich markup."""
    out: List[str] = [TITLE, ""]
    for line in text.split("\n"):
        if not line.strip():
            continue
        if line.strip().startswith("#"):
            out.append(f"[dim]{escape(_COMMENT_MARKER.sub('', line.strip()))}[/dim]")
        elif ":" in line:
            key, _, value = line.partition(":")
            key, value = key.strip(), value.strip()
            if value:
                out.append(f"[bold]{escape(key)}:[/bold] {escape(value)}")
            else:
                out.append(f"[bold]{escape(key)}:[/bold]")
        else:
            out.append(f"    {escape(line.strip())}")
    return "\n".join(out)
