"""
Import checks run in a fresh interpreter.

DRF resolves DEFAULT_AUTHENTICATION_CLASSES while ``rest_framework.views``
is loading, so module-level imports in the authentication class can form a
cycle that an already-warm test process never sees.
"""
import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[3]


@pytest.mark.parametrize('module', [
    'config.urls',
    'apps.core.exceptions',
    'apps.core.authentication',
])
def test_module_imports_after_setup(module):
    env = {**os.environ, 'DJANGO_SETTINGS_MODULE': 'config.settings'}

    result = subprocess.run(
        [sys.executable, '-c', f'import django; django.setup(); import {module}'],
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
        timeout=120,
    )

    assert result.returncode == 0, result.stderr
