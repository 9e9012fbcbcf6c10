import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_DIR = os.getenv("DATA_DIR", "data")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
