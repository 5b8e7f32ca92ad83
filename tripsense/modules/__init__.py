"""modules — pipeline stages: input, planning, recommendation."""
