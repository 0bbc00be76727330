"""Helper modules for the printer admin pages."""

__all__ = [
    "defaults_view",
    "form_mapper",
    "job_rows",
    "localize",
    "media_chooser",
    "media_sizes",
    "printer_profiles",
    "status_view",
]
