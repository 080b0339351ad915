"""Command-line tools for musicmap.

- ``python -m musicmap.cli`` (or the ``musicmap`` console script) — print
  artists similar to a list of known artists.
"""
