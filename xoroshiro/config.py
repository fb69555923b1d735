"""
Configuration settings for the xoroshiro command-line runner.
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Generator settings
DEFAULT_SEED = int(os.getenv("XORO_SEED", "0"), 0)  # 0 = seed from OS entropy
DEFAULT_COUNT = int(os.getenv("XORO_COUNT", "10"))
STRICT_RANGE = os.getenv("XORO_STRICT_RANGE", "0").lower() in ("1", "true", "yes")

# Logging level
LOG_LEVEL = os.getenv("XORO_LOG_LEVEL", "INFO")
