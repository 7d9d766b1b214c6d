"""
Gamelearn Configuration
Database, server and progression settings
"""

import os

# MongoDB
MONGO_URL = os.getenv("MONGO_URL", "mongodb://localhost:27017")
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "gamelearn_db")
MONGO_SERVER_SELECTION_TIMEOUT_MS = int(os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000"))

# Server
APP_ENV = os.getenv("APP_ENV", "development")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Progression: compare-and-swap attempts before an XP update gives up
XP_UPDATE_MAX_ATTEMPTS = int(os.getenv("XP_UPDATE_MAX_ATTEMPTS", "5"))
