import json
import logging
import uuid
from pathlib import Path
from typing import Dict, Any


logger = logging.getLogger(__name__)


def load_settings(config_file: Path | None, required: bool = True) -> Dict[str, Any]:
    try:
        if config_file:
            with open(config_file, 'r') as config_handle:
                return json.load(config_handle)
    except Exception as e:
        if required:
            logger.error(f"Error loading config file {config_file}: {e}")
        return {}

    return {}


def generate_id() -> str:
    """Generate a globally unique document id"""
    return str(uuid.uuid4())


def validate_id(id: Any) -> bool:
    """Validate if a value is a usable document id"""
    return bool(id and isinstance(id, str) and len(id.strip()) > 0)
