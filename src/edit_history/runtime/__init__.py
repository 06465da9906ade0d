"""Runtime services shared by the history engine (telemetry, configuration)."""
