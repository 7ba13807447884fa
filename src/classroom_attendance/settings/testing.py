SECRET_KEY = "test-secret"

STORE_BACKEND = "memory"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "classroom_attendance_test",
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

RECENT_ACTIVITY_LIMIT = 5

AUTO_INIT_DB = False
