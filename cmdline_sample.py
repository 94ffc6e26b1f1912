# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Main entry point for the command line sample.

Declares the sample's commands, reads them from ``sys.argv`` and exits with the sample's status.
"""

from cmdline_utils.sample import run


if __name__ == "__main__":
    run()
