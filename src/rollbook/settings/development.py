import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Folder holding one JSON file per stored key
DATA_DIR = os.getenv("DATA_DIR", "data")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
