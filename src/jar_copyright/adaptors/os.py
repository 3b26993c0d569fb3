# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Here we collect a set of OS wrappers and adaptors to be easily replaced during testing and debugging."""

import os
from importlib import resources


def is_file(file_path: str) -> bool:
    return os.path.isfile(file_path)


def path_join(path: str, *paths: str) -> str:
    return os.path.join(path, *paths)


def expand_user(path: str) -> str:
    return os.path.expanduser(path)


def open_file(file_path: str) -> str:
    try:
        with open(file_path, "r", encoding="utf-8") as file:
            return file.read()
    except UnicodeDecodeError:
        try:
            with open(file_path, "r", encoding="utf-16") as file:
                return file.read()
        except UnicodeDecodeError:
            with open(file_path, "r", encoding=None) as file:
                return file.read()


def read_package_resource(package: str, resource_name: str) -> str:
    return resources.files(package).joinpath(resource_name).read_text(encoding="utf-8")
