"""
Notification Worker Runner
Run this as a separate process: python run_worker.py
"""

import logging
import sys

from arq import run_worker

from schedule_service.worker import WorkerSettings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info("🚀 Starting notification worker...")
    try:
        run_worker(WorkerSettings)
    except KeyboardInterrupt:
        logger.info("👋 Notification worker stopped by user")
    except Exception as e:
        logger.error(f"❌ Notification worker crashed: {e}")
        sys.exit(1)
