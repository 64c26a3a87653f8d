"""oracle-cmdref - curated Oracle command reference with lookup and templating."""

__version__ = "0.1.0"
