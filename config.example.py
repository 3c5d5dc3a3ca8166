# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting.
"""

ENV_VARS = {
    # App / logging
    "TASKMANAGER_APP_NAME": "App display name used in logs (default: taskmanager).",
    "TASKMANAGER_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKMANAGER_LOG_DIR": "Directory for taskmanager.log (default: .local/taskmanager).",
    # Task lists
    "TASKMANAGER_DATA_DIR": "Where task lists are saved and loaded (default: current directory).",
    # Switches
    "TASKMANAGER_DUE_DATES": (
        "Due date prompts and the 4-field file schema (true/false, default: true). "
        "When off, files use title|description|status."
    ),
    "TASKMANAGER_LOAD_ENABLED": "Show menu option 6, Load Tasks (true/false, default: true).",
}
