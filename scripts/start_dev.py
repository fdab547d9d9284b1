#!/usr/bin/env python3
"""
Development startup script.

Runs pre-flight checks, then starts the storefront API in development mode.
"""

import sys
import shutil
import subprocess
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def check_dependencies():
    """Check if required dependencies are installed."""
    try:
        import fastapi
        import uvicorn
        import pydantic_settings
        import dotenv
        print("✓ All core dependencies installed")
        return True
    except ImportError as e:
        print(f"✗ Missing dependency: {e.name}")
        print("\nRun: pip install -e .")
        return False


def check_env():
    """Check if .env file exists."""
    env_file = PROJECT_ROOT / "config" / ".env"
    env_example = PROJECT_ROOT / "config" / ".env.example"

    if env_file.exists():
        print("✓ Configuration file found")
        return True
    elif env_example.exists():
        print("! Configuration file not found, copying from example...")
        shutil.copy(env_example, env_file)
        print("✓ Created config/.env from example")
        print("  Please edit config/.env with your settings")
        return True
    else:
        print("✗ No configuration file found")
        return False


def load_settings():
    """Load config/.env into the environment and read storefront settings."""
    from dotenv import load_dotenv
    from storefront.core.config import Settings

    load_dotenv(PROJECT_ROOT / "config" / ".env")
    return Settings()


def check_storage(settings):
    """Create the storage directory if one is configured."""
    storage_dir = settings.storage_dir
    if not storage_dir:
        print("! STOREFRONT_STORAGE_DIR not set, state will not survive restarts")
        return True

    path = Path(storage_dir)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    path.mkdir(parents=True, exist_ok=True)
    print(f"✓ Storage directory ready: {path}")
    return True


def start_service(settings):
    """Start the storefront in development mode."""
    port = str(settings.port)
    print(f"\n🛍  Starting Storefront on http://localhost:{port} ...")
    process = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "storefront.main:app",
            "--reload",
            "--host", settings.host,
            "--port", port,
        ],
        cwd=PROJECT_ROOT,
    )

    print("\n" + "=" * 60)
    print("Storefront started successfully!")
    print("=" * 60)
    print(f"\n📍 Storefront API: http://localhost:{port}")
    print(f"📍 API docs:       http://localhost:{port}/docs")
    print("\nPress Ctrl+C to stop")
    print("=" * 60)

    try:
        process.wait()
    except KeyboardInterrupt:
        print("\n\nShutting down...")
        process.terminate()
        process.wait()
        print("Storefront stopped.")


def main():
    print("=" * 60)
    print("Storefront - Development Server")
    print("=" * 60)

    # Pre-flight checks
    print("\nRunning pre-flight checks...")

    if not check_dependencies():
        sys.exit(1)

    if not check_env():
        sys.exit(1)

    settings = load_settings()
    check_storage(settings)

    print("\n✓ All checks passed!")

    start_service(settings)


if __name__ == "__main__":
    main()
