# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
import logging
from dataclasses import fields, replace
from typing import Any

from jar_copyright.adaptors.os import open_file
from jar_copyright.config.cli_configs import Config, default_config

logger = logging.getLogger("jar_copyright")


class JsonConfigParser:
    """Parser for JSON configuration files used by jar-copyright."""

    @staticmethod
    def parse_config(
        config_dict: dict[str, Any], base_config: Config = default_config
    ) -> Config:
        """Build a Config from a JSON object.

        Keys must be Config field names; fields that are not present keep
        the value they have in base_config.

        Args:
            config_dict: Dictionary loaded from the JSON configuration file
            base_config: Config providing the values of the missing fields

        Returns:
            A new Config instance

        Raises:
            ValueError: If a key is unknown or a value has the wrong type
        """
        if not isinstance(config_dict, dict):
            raise ValueError("Configuration must be a JSON object")

        known_fields = {f.name: f for f in fields(Config)}
        overrides: dict[str, Any] = {}
        for key, value in config_dict.items():
            if key not in known_fields:
                raise ValueError(
                    f"Unknown configuration key: {key}. Valid keys: {sorted(known_fields)}"
                )
            expected = type(getattr(base_config, key))
            if not isinstance(value, expected):
                raise ValueError(
                    f"Invalid value for {key}: expected {expected.__name__}, got {type(value).__name__}"
                )
            if isinstance(value, list) and not all(isinstance(v, str) for v in value):
                raise ValueError(f"Invalid value for {key}: expected a list of strings")
            if isinstance(value, dict) and not all(
                isinstance(k, str) and isinstance(v, str) for k, v in value.items()
            ):
                raise ValueError(
                    f"Invalid value for {key}: expected a mapping of strings"
                )
            overrides[key] = value

        return replace(base_config, **overrides)

    @staticmethod
    def load_config(config_file_path: str) -> Config:
        """Load a Config from a JSON file.

        Raises:
            FileNotFoundError: If the configuration file is not found
            json.JSONDecodeError: If the JSON file is invalid
            ValueError: If the configuration format is invalid
        """
        try:
            config_dict = json.loads(open_file(config_file_path))
            return JsonConfigParser.parse_config(config_dict)
        except FileNotFoundError:
            logger.error(f"Configuration file not found: {config_file_path}")
            raise
        except json.JSONDecodeError:
            logger.error(f"Invalid JSON in configuration file: {config_file_path}")
            raise
        except Exception as e:
            logger.error(f"Failed to load configuration: {str(e)}")
            raise
