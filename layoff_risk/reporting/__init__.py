"""Plain-text rendering of risk assessments for the CLI."""
