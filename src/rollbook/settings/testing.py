import os
import tempfile

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("DATA_DIR", os.path.join(tempfile.gettempdir(), "rollbook-test-data"))

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
