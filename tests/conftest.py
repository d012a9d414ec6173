"""Pytest configuration for lawful tests.

Registers hypothesis profiles; select one with HYPOTHESIS_PROFILE.
"""

import os

from hypothesis import settings

settings.register_profile("default", print_blob=True)
settings.register_profile("ci", print_blob=True, max_examples=500)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
