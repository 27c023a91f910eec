"""Source, report and sample-file helpers around the analysis core."""
