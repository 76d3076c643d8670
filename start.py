#!/usr/bin/env python3
"""
Convenience script to start the Course Reviews API
"""

import os
import sys
import subprocess


def main():
    print("🚀 Starting Course Reviews API...")

    if not os.path.exists('.env'):
        print("⚠️  Warning: .env file not found!")
        print("📋 Defaults will be used. Override with a .env file, e.g.:")
        print("   MONGO_URI=mongodb://your-connection-string")
        print("   DB_NAME=course_reviews")

    host = os.getenv("HOST", "0.0.0.0")
    port = os.getenv("PORT", "8000")

    try:
        print("🌐 Starting FastAPI server...")
        print(f"📖 API Documentation will be available at: http://localhost:{port}/docs")
        print(f"💚 Health check at: http://localhost:{port}/health")
        print("\n📝 Press Ctrl+C to stop the server\n")

        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "course_reviews.main:app",
            "--reload",
            "--host", host,
            "--port", port
        ], check=True)

    except KeyboardInterrupt:
        print("\n🛑 Server stopped by user")
    except subprocess.CalledProcessError as e:
        print(f"❌ Server exited with status {e.returncode}")
        sys.exit(e.returncode)


if __name__ == "__main__":
    main()
