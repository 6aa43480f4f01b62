"""Runtime wiring — logging setup and data-file location."""
