# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from collections.abc import Iterable


def unique_in_order(items: Iterable[str]) -> list[str]:
    """
    Collapse exact duplicates while keeping the position of the first
    occurrence, so joined results are stable across runs.
    """
    return list(dict.fromkeys(items))
