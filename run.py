import subprocess
import time
import sys
import logging

from app.core.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

def run():
    logger.info("🚀 Starting Recipe Matcher...")

    # 1. Start Backend
    logger.info("➡️  Starting Backend API (Uvicorn)...")
    backend = subprocess.Popen(
        ["uvicorn", "app.main:app", "--reload", "--port", "8000"],
        stdout=sys.stdout,
        stderr=sys.stderr
    )

    # Give the API a head start so the first form submit does not hit a closed port
    time.sleep(2)

    # 2. Start Frontend
    logger.info("➡️  Starting Frontend UI (Streamlit)...")
    frontend = subprocess.Popen(
        ["streamlit", "run", "app/frontend.py", "--server.port", "8501"],
        stdout=sys.stdout,
        stderr=sys.stderr
    )

    logger.info("✅ Recipe Matcher is up:")
    logger.info("   👉 UI:  http://localhost:8501")
    logger.info("   👉 API: http://localhost:8000")
    logger.info("Press Ctrl+C to stop everything.")

    try:
        backend.wait()
        frontend.wait()
    except KeyboardInterrupt:
        logger.info("🛑 Stopping...")
        backend.terminate()
        frontend.terminate()
        logger.info("Done.")

if __name__ == "__main__":
    run()
