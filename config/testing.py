import os

from .config import env_db_config, env_flag

SECRET_KEY = "test-secret"

DB_CONFIG = env_db_config(default_database="attendance_system_test")

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
