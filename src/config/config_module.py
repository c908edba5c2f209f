"""
Configuration loading for the Google Maps client.

Reads values from the process environment, optionally seeded from a .env
file, so that credentials never have to be hard-coded.
"""

import os
import logging
from typing import Any
from dotenv import load_dotenv


def load_config(env_path: str = ".env") -> bool:
    """
    Load environment variables from a .env file.
    
    Values from the file override variables already present in the
    environment.
    
    Args:
        env_path: Path to the .env file (default: ".env")
        
    Returns:
        True if the file was found and loaded, False otherwise
    """
    logger = logging.getLogger(__name__)
    
    if not os.path.exists(env_path):
        logger.warning(f"Configuration file {env_path} not found, using system environment variables only")
        return False
    
    load_dotenv(env_path, override=True)
    logger.info(f"Loaded configuration from {env_path}")
    return True


def get_config(key: str, default: Any = None) -> Any:
    """
    Get a configuration value from environment variables.
    
    Empty values are treated as missing.
    
    Args:
        key: Environment variable key
        default: Default value if key not found
        
    Returns:
        Configuration value or default
    """
    logger = logging.getLogger(__name__)
    
    value = os.getenv(key)
    if value is None or value.strip() == "":
        if default is None:
            logger.debug(f"Configuration key '{key}' not set")
        else:
            logger.debug(f"Configuration key '{key}' not set, using default value: {default}")
        return default
    
    return value.strip()
