# topmark:header:start
#
#   project      : Goldie
#   file         : __init__.py
#   file_relpath : src/goldie/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Goldie: golden file assertions for tests.

```python
import goldie

def test_report():
    goldie.assert_golden(build_report())
```

The expected output lives in ``testdata/<module>/test_report.golden`` next to the
test module. Run once with ``GOLDIE_UPDATE=true`` (or ``pytest --goldie-update``)
to record it, review the file, and commit it.
"""

from __future__ import annotations

from goldie.callsite import CallSite, current_test
from goldie.constants import GOLDIE_VERSION
from goldie.engine import Goldie, assert_golden, assert_template
from goldie.errors import (
    CallSiteError,
    ContentMismatchError,
    GoldenAssertionError,
    GoldenFileWriteError,
    GoldenPathError,
    GoldieError,
    MissingGoldenFileError,
    TemplateRenderError,
)
from goldie.paths import resolve

__version__: str = GOLDIE_VERSION

__all__ = [
    "CallSite",
    "CallSiteError",
    "ContentMismatchError",
    "GoldenAssertionError",
    "GoldenFileWriteError",
    "GoldenPathError",
    "Goldie",
    "GoldieError",
    "MissingGoldenFileError",
    "TemplateRenderError",
    "__version__",
    "assert_golden",
    "assert_template",
    "current_test",
    "resolve",
]
