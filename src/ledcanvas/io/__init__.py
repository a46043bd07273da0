"""Preview and export helpers."""
