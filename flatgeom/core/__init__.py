"""Implementation modules of flatgeom; import from ``flatgeom`` for the stable API."""
