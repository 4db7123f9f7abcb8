import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


def env_db_config(*, default_password: str = "", default_database: str = "attendance_system") -> dict:
    """Connection + pool settings shared by every environment."""

    return {
        "host": os.getenv("DB_HOST", "127.0.0.1"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", default_database),
        "pool_name": os.getenv("DB_POOL_NAME", "school_attendance"),
        "pool_size": int(os.getenv("DB_POOL_SIZE", "5")),
    }
