from constants import *
import copy
import yaml
import os

import logging

# Retrieve main logger
logger = logging.getLogger("main")


# Cache variable
_cached_settings = None


def load_settings(force=False, config_file=None):
    global _cached_settings

    if _cached_settings and not force:
        return _cached_settings

    config_file = config_file or CONFIG_FILE
    if os.path.exists(config_file):
        logger.debug(f"Reading configuration file: {config_file}")
        with open(config_file, "r") as yaml_file:
            settings = yaml.safe_load(yaml_file) or {}

        # Deep merge with defaults so sections missing from the file are still present
        merged_settings = copy.deepcopy(DEFAULT_SETTINGS)
        for section, values in settings.items():
            if isinstance(values, dict) and section in merged_settings and isinstance(merged_settings[section], dict):
                merged_settings[section].update(values)
            else:
                merged_settings[section] = values
        settings = merged_settings

    else:
        settings = copy.deepcopy(DEFAULT_SETTINGS)
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        with open(config_file, "w") as yaml_file:
            yaml.dump(settings, yaml_file)
        logger.info(f"Default configuration written to {config_file}")

    _cached_settings = settings
    return settings


def verify_settings(section, data):
    success = True
    errors = []
    if section == "server":
        port = data.get("port")
        if not isinstance(port, int) or not 0 < port < 65536:
            success = False
            errors.append({"path": "server/port", "error": f"Port {port} is not a valid TCP port."})
    elif section == "cors":
        hosts = data.get("allowed_hosts")
        if not isinstance(hosts, list) or not all(isinstance(h, str) for h in hosts):
            success = False
            errors.append({"path": "cors/allowed_hosts", "error": "allowed_hosts must be a list of host names."})
    return success, errors


def get_database_uri(settings=None):
    settings = settings or load_settings()
    db_path = settings["database"]["path"]
    return "sqlite:///" + os.path.abspath(db_path)


def reload_conf():
    """Reload application settings cache"""
    global _cached_settings
    _cached_settings = None
    return load_settings(force=True)
