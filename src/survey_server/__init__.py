"""survey_server — FastAPI REST adapter for the survey form engine.

Exposes one in-memory form session per session id: read the current view,
change fields, submit, and read the latest summary.
"""
