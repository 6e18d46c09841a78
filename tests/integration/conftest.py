"""Point integration tests at the database configured in .env.test."""
import os

from dotenv import load_dotenv

TEST_ENV_PATH = os.path.join(os.path.dirname(__file__), "..", "..", ".env.test")

if os.path.exists(TEST_ENV_PATH):
    load_dotenv(TEST_ENV_PATH, override=True)
