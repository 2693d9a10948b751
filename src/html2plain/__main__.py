"""Allow ``python -m html2plain``."""

from .cli import app

app(prog_name="html2plain")
