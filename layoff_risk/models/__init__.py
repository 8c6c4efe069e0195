"""Pydantic value objects: the employee profile input and assessment outputs."""
