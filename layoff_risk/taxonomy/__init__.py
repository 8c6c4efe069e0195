"""Closed vocabularies shared by the models, scorer, and recommendation rules."""
