"""Command-line scripts (run with python -m ctf_engine.scripts.<name>)."""
