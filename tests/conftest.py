"""
Global test fixtures for UIStrings collector tests.

Provides temporary project trees laid out like the real checkout
(``lighthouse-core/...`` sources under a project root) and matching
collector configurations.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from uistrings.config import CollectorConfig


AUDIT_SOURCE = """\
'use strict';

const Audit = require('./audit.js');
const i18n = require('../lib/i18n/i18n.js');

const UIStrings = {
  /** Title of a diagnostic audit that provides detail on large network resources required during page load. */
  title: 'Avoids enormous network payloads',
  /** Title of a diagnostic audit that provides detail on large network resources required during page load. This imperative title is shown to users when there is a significant amount of execution time that could be reduced. */
  failureTitle: 'Avoid enormous network payloads',
  // Description of a Lighthouse audit that tells the user why they should reduce the size of the network resources required by the page.
  description: 'Large network payloads cost users real money and are highly correlated with ' +
    'long load times.',
  displayValue: `Total size was {totalBytes, number, bytes}\xa0KB`,
};

const str_ = i18n.createMessageInstanceIdFn(__filename, UIStrings);

class TotalByteWeight extends Audit {}

module.exports = TotalByteWeight;
module.exports.UIStrings = UIStrings;
"""

METRIC_SOURCE = """\
'use strict';

const UIStrings = {
  /** The name of the metric that marks the time at which the first text or image is painted by the browser. */
  title: 'First Contentful Paint',
  failureTitle: 'First Contentful Paint is slow',
};

module.exports = {UIStrings};
"""

PLAIN_SOURCE = """\
'use strict';

function add(a, b) {
  return a + b;
}

module.exports = add;
"""

UNEXPORTED_SOURCE = """\
'use strict';

const UIStrings = {
  /** Label shown next to the score. */
  scoreLabel: 'Score',
};

module.exports = {};
"""


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """
    Create an empty project root with a ``lighthouse-core`` source directory.

    Returns:
        Path: The project root
    """
    root = tmp_path / "project"
    (root / "lighthouse-core").mkdir(parents=True)
    return root


@pytest.fixture
def write_source(project_root: Path) -> Callable[[str, str], Path]:
    """
    Return a helper writing a file relative to the project root.

    Returns:
        Callable[[str, str], Path]: ``write(relative_path, content) -> path``
    """

    def write(relative_path: str, content: str) -> Path:
        path = project_root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def collector_config(project_root: Path) -> CollectorConfig:
    """
    Create a collector configuration rooted at the temporary project.

    Returns:
        CollectorConfig: Default settings with ``project_root`` replaced
    """
    return CollectorConfig(project_root=project_root)


@pytest.fixture
def config_file(project_root: Path) -> Path:
    """
    Write a YAML configuration pointing the collector at the temporary project.

    Returns:
        Path: The configuration file
    """
    path = project_root / "i18n.yml"
    _ = path.write_text(f"project_root: {project_root.as_posix()}\n", encoding="utf-8")
    return path


@pytest.fixture
def audit_source() -> str:
    """Audit module with documented, default-described and concatenated messages."""
    return AUDIT_SOURCE


@pytest.fixture
def metric_source() -> str:
    """Metric module exporting UIStrings through an object literal."""
    return METRIC_SOURCE


@pytest.fixture
def plain_source() -> str:
    """Module without a UIStrings declaration."""
    return PLAIN_SOURCE


@pytest.fixture
def unexported_source() -> str:
    """Module declaring UIStrings without exporting it."""
    return UNEXPORTED_SOURCE
