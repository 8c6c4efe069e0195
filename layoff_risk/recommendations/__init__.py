"""
Recommendation stage: derives remediation suggestions from a
``PredictionResult``.

Modules
-------
rules : ordered rule table + ``recommend()``: pure, no randomness, no I/O.
"""
