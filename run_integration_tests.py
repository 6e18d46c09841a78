#!/usr/bin/env python3
"""
Integration Test Runner for the Biblia API

Creates a throwaway PostgreSQL database from .env.test, runs the
integration tests against it and drops it afterwards.
"""

import os
import sys
import subprocess
import psycopg2
from dotenv import load_dotenv


def load_test_env():
    """Load test environment variables."""
    test_env_path = ".env.test"
    if not os.path.exists(test_env_path):
        print("❌ .env.test file not found!")
        print("Please ensure .env.test exists with test database configuration.")
        sys.exit(1)

    load_dotenv(test_env_path, override=True)
    return {
        'DB_NAME': os.getenv('DB_NAME'),
        'DB_USER': os.getenv('DB_USER'),
        'DB_PASSWORD': os.getenv('DB_PASSWORD'),
        'DB_HOST': os.getenv('DB_HOST'),
        'DB_PORT': os.getenv('DB_PORT', '5432')
    }


def _admin_connection(db_config):
    return psycopg2.connect(
        dbname="postgres",
        user=db_config['DB_USER'],
        password=db_config['DB_PASSWORD'],
        host=db_config['DB_HOST'],
        port=db_config['DB_PORT']
    )


def check_postgresql(db_config):
    """Check if PostgreSQL is accessible."""
    try:
        conn = _admin_connection(db_config)
        conn.close()
        return True
    except psycopg2.Error as e:
        print(f"❌ PostgreSQL connection failed: {e}")
        print(f"Please ensure PostgreSQL is running on {db_config['DB_HOST']}:{db_config['DB_PORT']}")
        return False


def setup_test_database(db_config):
    """Create an empty test database; the tests load their own corpus."""
    try:
        conn = _admin_connection(db_config)
        conn.autocommit = True
        cur = conn.cursor()

        print(f"🗃️  Setting up test database: {db_config['DB_NAME']}")
        cur.execute(f"DROP DATABASE IF EXISTS {db_config['DB_NAME']}")
        cur.execute(f"CREATE DATABASE {db_config['DB_NAME']} ENCODING 'UTF8'")

        cur.close()
        conn.close()
        print("✅ Test database setup complete")
        return True

    except psycopg2.Error as e:
        print(f"❌ Database setup failed: {e}")
        return False


def cleanup_test_database(db_config):
    """Clean up the test database."""
    try:
        conn = _admin_connection(db_config)
        conn.autocommit = True
        cur = conn.cursor()

        print("🧹 Cleaning up test database...")
        cur.execute(f"DROP DATABASE IF EXISTS {db_config['DB_NAME']}")

        cur.close()
        conn.close()
        print("✅ Test database cleaned up")

    except psycopg2.Error as e:
        print(f"⚠️  Cleanup warning: {e}")


def run_integration_tests():
    """Run the integration tests."""
    print("🧪 Running integration tests...")

    cmd = [
        sys.executable, "-m", "pytest",
        "tests/integration/",
        "-v",
        "--tb=short",
        "-m", "integration",
    ]

    result = subprocess.run(cmd)
    return result.returncode == 0


def main():
    """Main function to orchestrate integration test setup and execution."""
    print("🚀 Biblia API Integration Test Runner")
    print("=" * 50)

    print("🔧 Loading test environment...")
    db_config = load_test_env()

    print("🔍 Checking PostgreSQL connectivity...")
    if not check_postgresql(db_config):
        sys.exit(1)

    print("✅ PostgreSQL is accessible")

    if not setup_test_database(db_config):
        sys.exit(1)

    try:
        test_success = run_integration_tests()

        if test_success:
            print("\n🎉 All integration tests passed!")
        else:
            print("\n❌ Some integration tests failed")

    finally:
        cleanup_test_database(db_config)

    sys.exit(0 if test_success else 1)


if __name__ == "__main__":
    main()
