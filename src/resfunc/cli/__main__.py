"""Allow ``python -m resfunc.cli``."""

from resfunc.cli.app import app

app()
