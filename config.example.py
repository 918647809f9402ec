# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TKIT_APP_NAME": "App display name, also written in the save header (default: tkit).",
    "TKIT_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TKIT_LOG_DIR": "Directory for tkit.log (default: .local/tkit).",
    "TKIT_LOG_TO_FILE": "Write a debug log file (true/false, default: true).",
    # Paths
    "TKIT_DATA_DIR": "Local data directory (default: data).",
    "TKIT_TASKS_FILE": "Task file path (default: <data_dir>/tkit.txt).",
}
