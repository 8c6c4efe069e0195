"""
Scoring stage: converts an ``EmployeeProfile`` into a ``PredictionResult``.

Modules
-------
scorer : per-attribute factor functions, lookup tables, ``score()`` and
         ``rank_factors()``: pure functions apart from one random draw.
"""
