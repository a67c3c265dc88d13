# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKS_APP_NAME": "App display name (default: tasks).",
    "TASKS_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKS_LOG_TO_FILE": "Also write DEBUG logs to <data_dir>/tasks.log (default: true).",
    # Front end
    "TASKS_CONSOLE_ENABLED": "Run the console REPL (default: true).",
    "TASKS_SEED_DEMO": "Create a few demo tasks on startup (default: false).",
    # Paths (gitignored)
    "TASKS_DATA_DIR": "Local data directory, used for logs only (default: .local/tasks).",
}
