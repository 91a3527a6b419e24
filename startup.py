import logging
import os
import sys
import traceback

import uvicorn

# Configure logging to stdout
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

# Add the src directory to Python path
current_dir = os.path.dirname(os.path.abspath(__file__))
src_path = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

logger.info("=" * 60)
logger.info("Discharge-AI Startup")
logger.info("=" * 60)
logger.info(f"Python version: {sys.version.split()[0]}")

# Log critical environment variables (without exposing secrets)
logger.info("Environment Configuration:")
for name in ("PORT", "APP_ENV", "STORAGE_BACKEND", "MONGO_DB_NAME", "OPENAI_MODEL", "AZURE_OPENAI_DEPLOYMENT_NAME"):
    logger.info(f"  {name}: {os.environ.get(name, 'not set')}")
for name in ("MONGO_URI", "OPENAI_API_KEY", "AZURE_OPENAI_ENDPOINT", "AZURE_OPENAI_API_KEY"):
    logger.info(f"  {name}: {'set' if os.environ.get(name) else 'not set'}")

if __name__ == "__main__":
    try:
        from dischargeai.core.config import get_settings

        try:
            settings = get_settings()
        except ValueError as ve:
            logger.error(f"Configuration validation failed: {ve}")
            logger.error("Common configuration issues:")
            logger.error("  1. MONGO_URI must start with mongodb:// or mongodb+srv://")
            logger.error("  2. STORAGE_BACKEND must be mongo or memory")
            logger.error("  3. AZURE_OPENAI_ENDPOINT must look like https://xxx.openai.azure.com/")
            sys.exit(1)

        port = int(os.environ.get("PORT", settings.port))
        host = os.environ.get("HOST", settings.host)
        logger.info(f"Starting {settings.app_name} v{settings.app_version} ({settings.app_env}) on {host}:{port}")

        uvicorn.run(
            "dischargeai.app:app",
            host=host,
            port=port,
            workers=1,
            log_level=settings.logging.level.lower(),
            access_log=True,
            timeout_keep_alive=75,
            timeout_graceful_shutdown=30,
        )
    except KeyboardInterrupt:
        logger.info("Shutting down due to keyboard interrupt")
        sys.exit(0)
    except Exception as e:
        logger.error(f"CRITICAL: Failed to start application: {type(e).__name__}: {e}")
        logger.error(traceback.format_exc())
        sys.exit(1)
