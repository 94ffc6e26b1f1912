# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import functools
import os
import pathlib
import sys


SAMPLE_SCRIPT_NAME = "cmdline_sample"


@functools.cache
def is_unit_test() -> bool:
    """Whether we are running under pytest, or ``UNIT_TEST`` is set to a truthy value."""
    if os.environ.get("PYTEST_VERSION") is not None:
        return True
    env = os.environ.get("UNIT_TEST", "").strip().lower()
    return bool(env) and env not in ("false", "0", "no")


def get_script_name() -> str:
    """Name shown in the exit summary: ``sys.argv[0]`` without directory or ``.py`` suffix."""
    if is_unit_test() or not sys.argv or not sys.argv[0]:
        return SAMPLE_SCRIPT_NAME
    path = pathlib.Path(sys.argv[0])
    return path.stem if path.suffix.lower() == ".py" else path.name
