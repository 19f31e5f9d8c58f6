"""
Transforms sub-package for gridcsv.

Contains the per-field steps that turn typed cells into text lines and
back.  Each step lives in its own module so it can be tested alone:

  - numbers.py: Exact positional decimal text for numeric cells.
  - values.py: Canonical text for every cell kind (the value formatter).
  - escape.py: Reversible escaping of line breaks, tabs and the marker.
  - padding.py: Repair of ragged grids by padding short rows.
  - pipeline.py: Orchestrates pad -> format -> escape -> join.
"""
